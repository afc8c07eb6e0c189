"""Pytest configuration, fixtures, and plugins."""

from __future__ import annotations

import base64
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from collections.abc import Iterator

    from _pytest.config import Config
    from _pytest.fixtures import SubRequest

TEST_USER = "robot$abc123.users.kraftcloud"
TEST_SECRET = "secret"


def pytest_configure(config: Config) -> None:
    """Configure pytest."""
    config.addinivalue_line(  # cspell:ignore addinivalue
        "markers",
        "cli_runner(charset:='utf-8', env=None, echo_stdin=False): "
        "Pass kwargs to `click.testing.CliRunner` initialization.",
    )


@pytest.fixture()
def cli_runner(request: SubRequest) -> CliRunner:
    """Initialize instance of `click.testing.CliRunner`."""
    kwargs: dict[str, Any] = {"env": {"KCLOUD_NO_COLOR": "1"}}
    mark = cast("pytest.Function", request.node).get_closest_marker("cli_runner")
    if mark:
        kwargs.update(cast("dict[str, Any]", mark.kwargs))
    return CliRunner(**kwargs)


@pytest.fixture()
def cd_tmp_path(tmp_path: Path) -> Iterator[Path]:
    """Change directory to a temporary path.

    Returns:
        Path: Temporary path object.

    """
    prev_dir = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(prev_dir)


@pytest.fixture()
def kraftcloud_token() -> str:
    """Value of ``KRAFTCLOUD_TOKEN`` for the test user."""
    return base64.b64encode(f"{TEST_USER}:{TEST_SECRET}".encode()).decode()


@pytest.fixture(autouse=True)
def sanitize_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove variables from the environment that could interfere with tests."""
    for var in [
        "DEBUG",
        "KCLOUD_NO_COLOR",
        "KRAFTCLOUD_METRO",
        "KRAFTCLOUD_TIMEOUT",
        "KRAFTCLOUD_TOKEN",
        "KRAFTCLOUD_USER",
        "VERBOSE",
    ]:
        monkeypatch.delenv(var, raising=False)
    # never read the config file of the user running the tests
    monkeypatch.setenv("KRAFTCLOUD_CONFIG", str(tmp_path / "missing-config.yaml"))
