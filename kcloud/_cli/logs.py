"""kcloud CLI logging setup."""

from __future__ import annotations

import logging
import sys
from functools import cached_property
from typing import Any, TextIO

import coloredlogs
from humanfriendly.terminal import terminal_supports_colors  # type: ignore

from .._logging import LogLevels

LOGGER = logging.getLogger("kcloud")

LOG_FORMAT = "[kcloud] %(message)s"
LOG_FORMAT_VERBOSE = logging.BASIC_FORMAT
LOG_LEVEL_STYLES: dict[str, dict[str, Any]] = {
    "critical": {"color": "red", "bold": True},
    "debug": {"color": "green"},
    "error": {"color": "red"},
    "info": {},
    "verbose": {"color": "cyan"},
    "warning": {"color": 214},
}

DEPENDENCY_LOGGERS = ("urllib3",)
"""Loggers of libraries that only log at ``--debug --debug``."""


class LogSettings:
    """CLI log settings."""

    def __init__(self, *, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
        """Instantiate class.

        Args:
            debug: Debug level.
            no_color: Disable color in kcloud's logs.
            verbose: Whether to display verbose logs.

        """
        self.debug = debug
        self.no_color = no_color
        self.verbose = verbose

    @property
    def coloredlogs(self) -> dict[str, Any]:
        """Return settings for coloredlogs."""
        return {
            "fmt": self.fmt,
            "isatty": self.colors,
            "level_styles": self.level_styles,
            "stream": self.stream,
        }

    @cached_property
    def colors(self) -> bool:
        """Whether log records are colored."""
        return not self.no_color and bool(terminal_supports_colors(self.stream))

    @cached_property
    def fmt(self) -> str:
        """Return log record format.

        Records include the level and logger name when debugging, in verbose
        mode or without color.

        """
        if self.debug or self.no_color or self.verbose:
            return LOG_FORMAT_VERBOSE
        return LOG_FORMAT

    @cached_property
    def level_styles(self) -> dict[str, Any]:
        """Return log level styles."""
        if self.no_color:
            return {}
        return LOG_LEVEL_STYLES.copy()

    @cached_property
    def log_level(self) -> LogLevels:
        """Return log level to use."""
        if self.debug:
            return LogLevels.DEBUG
        if self.verbose:
            return LogLevels.VERBOSE
        return LogLevels.INFO

    @property
    def stream(self) -> TextIO:
        """Stream that will be logged to."""
        return sys.stdout


def setup_logging(*, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
    """Configure log settings for kcloud CLI.

    Keyword Args:
        debug: Debug level (0-2). At 2, HTTP connection logs of ``urllib3``
            are shown as well.
        no_color: Whether to use colorized logs.
        verbose: Use verbose logging.

    """
    settings = LogSettings(debug=debug, no_color=no_color, verbose=verbose)

    coloredlogs.install(settings.log_level, logger=LOGGER, **settings.coloredlogs)
    LOGGER.debug("kcloud log level: %s", LOGGER.getEffectiveLevel())

    if settings.debug > 1:
        for name in DEPENDENCY_LOGGERS:
            coloredlogs.install(
                settings.log_level, logger=logging.getLogger(name), **settings.coloredlogs
            )
        LOGGER.debug("set dependency log level to debug")
    LOGGER.debug("initialized logging for kcloud")
