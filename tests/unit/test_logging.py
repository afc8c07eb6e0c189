"""Test kcloud._logging."""

from __future__ import annotations

import logging

import pytest

from kcloud._logging import KCloudLogger, LogLevels, PrefixAdaptor


def test_kcloud_logger_verbose(caplog: pytest.LogCaptureFixture) -> None:
    """Test KCloudLogger.verbose."""
    logger = KCloudLogger("kcloud.test.logger")
    logger.addHandler(caplog.handler)
    caplog.set_level(LogLevels.DEBUG)
    logger.verbose("test %s", "verbose")
    assert caplog.records[-1].levelno == LogLevels.VERBOSE
    assert caplog.records[-1].getMessage() == "test verbose"
    assert caplog.records[-1].levelname == "VERBOSE"


def test_kcloud_logger_verbose_disabled(caplog: pytest.LogCaptureFixture) -> None:
    """Test KCloudLogger.verbose is not logged at info level."""
    logger = KCloudLogger("kcloud.test.logger_info")
    logger.addHandler(caplog.handler)
    logger.setLevel(LogLevels.INFO)
    logger.verbose("hidden")
    assert not caplog.records


def test_logger_class() -> None:
    """Test kcloud loggers use KCloudLogger."""
    assert isinstance(logging.getLogger("kcloud.test.logger_class"), KCloudLogger)


def test_prefix_adaptor(caplog: pytest.LogCaptureFixture) -> None:
    """Test PrefixAdaptor."""
    caplog.set_level(LogLevels.DEBUG, logger="kcloud.test.prefix")
    logger = PrefixAdaptor("fra0", logging.getLogger("kcloud.test.prefix"), "({prefix}) {msg}")
    logger.debug("GET %s", "/images/list")
    logger.error("boom")
    assert caplog.messages == ["(fra0) GET /images/list", "(fra0) boom"]


def test_prefix_adaptor_default_template(caplog: pytest.LogCaptureFixture) -> None:
    """Test PrefixAdaptor default template."""
    caplog.set_level(LogLevels.INFO, logger="kcloud.test.prefix_default")
    PrefixAdaptor("was1", logging.getLogger("kcloud.test.prefix_default")).info("message")
    assert caplog.messages == ["was1:message"]
