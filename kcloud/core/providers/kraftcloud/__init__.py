"""kcloud KraftCloud provider.

Thin client for the parts of the KraftCloud API used by kcloud.

"""

from .client import ImagesClient
from .models import Image

__all__ = ["Image", "ImagesClient"]
