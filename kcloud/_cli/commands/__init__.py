"""kcloud command import aggregation."""

from ._img import img

__all__ = ["img"]
