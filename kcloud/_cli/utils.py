"""CLI utils."""

from __future__ import annotations

import os
from typing import Any, Optional


class CliContext:
    """CLI context object."""

    def __init__(
        self,
        *,
        debug: int = 0,
        no_color: bool = False,
        verbose: bool = False,
        **_: Any,
    ) -> None:
        """Instantiate class.

        Args:
            debug: Debug level
            no_color: Whether color is disabled in logs.
            verbose: Whether to display verbose logs.

        """
        self.debug = debug
        self.no_color = no_color
        self.verbose = verbose

    @property
    def metro(self) -> Optional[str]:
        """Default metro from the environment."""
        return os.getenv("KRAFTCLOUD_METRO") or None

    def __str__(self) -> str:
        """Return string representation of the object."""
        return f"CliContext({self.__dict__})"
