"""kcloud logging."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from enum import IntEnum
from typing import Any


class LogLevels(IntEnum):
    """Log levels used by kcloud."""

    NOTSET = 0
    DEBUG = 10
    VERBOSE = 15
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class PrefixAdaptor(logging.LoggerAdapter):  # type: ignore[type-arg]
    """LoggerAdapter that prefixes messages, e.g. with the metro of a request.

    Example:
        >>> logger = PrefixAdaptor("fra0", logging.getLogger("example"), "({prefix}) {msg}")
        ... logger.debug("GET /images/list")

    """

    def __init__(
        self,
        prefix: str,
        logger: logging.Logger,
        prefix_template: str = "{prefix}:{msg}",
    ) -> None:
        """Instantiate class.

        Args:
            prefix: Message prefix.
            logger: Logger where the prefixed messages will be sent.
            prefix_template: Formatted with ``prefix`` and ``msg``.

        """
        super().__init__(logger, {})
        self.prefix = prefix
        self.prefix_template = prefix_template

    def process(
        self, msg: Exception | str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Prefix the message."""
        return self.prefix_template.format(prefix=self.prefix, msg=msg), kwargs


class KCloudLogger(logging.Logger):
    """Logger with an additional ``VERBOSE`` level between debug and info."""

    def __init__(self, name: str, level: int | str = logging.NOTSET) -> None:
        """Instantiate the class.

        Args:
            name: Logger name.
            level: Log level.

        """
        super().__init__(name, level)
        logging.addLevelName(LogLevels.VERBOSE, LogLevels.VERBOSE.name)

    def verbose(self, msg: Exception | str, *args: Any, **kwargs: Any) -> None:
        """Log 'msg % args' with severity `VERBOSE`."""
        if self.isEnabledFor(LogLevels.VERBOSE):
            self._log(LogLevels.VERBOSE, msg, args, **kwargs)
