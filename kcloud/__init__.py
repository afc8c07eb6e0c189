"""Set package version."""

from __future__ import annotations

import logging

from ._logging import KCloudLogger

logging.setLoggerClass(KCloudLogger)

__version__: str = "0.1.0"
"""Version of the Python package presented as a :class:`string`."""
