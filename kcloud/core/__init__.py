"""Core kcloud logic."""

from ._image_remover import ImageRemover, RemoveOptions

__all__ = ["ImageRemover", "RemoveOptions"]
