"""Pytest fixtures and plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from kcloud.config import AuthConfig
from kcloud.core.providers.kraftcloud import ImagesClient

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture()
def auth_config() -> AuthConfig:
    """Credentials of the test user."""
    return AuthConfig(user="robot$abc123.users.kraftcloud", token="secret")


@pytest.fixture()
def images_client(mocker: MockerFixture) -> MagicMock:
    """Mock images client.

    ``with_metro`` returns the client itself so calls can be asserted on
    a single object.

    """
    client = mocker.MagicMock(spec=ImagesClient)
    client.with_metro.return_value = client
    client.list.return_value = []
    return client
