"""KraftCloud image models."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from .....utils import BaseModel


class Image(BaseModel):
    """An image stored in the KraftCloud image registry.

    Only ``digest`` is guaranteed to be returned by the API.

    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    args: str | list[str] | None = None
    digest: str
    env: dict[str, Any] = {}
    initrd: bool = False
    size_in_bytes: int | None = None
    tags: list[str] = Field(default_factory=list)

    def __str__(self) -> str:
        """Return the digest of the image."""
        return self.digest
