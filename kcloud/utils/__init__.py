"""Utility functions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel as _BaseModel


class BaseModel(_BaseModel):
    """Base class for kcloud models."""


def str_to_bool(value: Any) -> bool:
    """Convert a string (e.g. from an environment variable) to a boolean.

    ``None`` and anything that is not recognized as truthy is ``False``.

    """
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        return False
    return value.strip().lower() in ("1", "on", "t", "true", "y", "yes")
