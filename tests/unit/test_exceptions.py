"""Test kcloud.exceptions."""

from __future__ import annotations

from pathlib import Path

import pytest

from kcloud.exceptions import (
    ConfigError,
    CredentialsNotFoundError,
    CredentialsUnavailableError,
    ImageDeleteError,
    ImageListError,
    ImageNotSpecifiedError,
    InvalidOptionsError,
    KraftCloudAPIError,
    KraftCloudError,
    MetroNotSetError,
)


@pytest.mark.parametrize("exc_class", [ImageNotSpecifiedError, MetroNotSetError])
def test_invalid_options_error(exc_class: type[KraftCloudError]) -> None:
    """Test InvalidOptionsError subclasses."""
    err = exc_class()
    assert isinstance(err, InvalidOptionsError)
    assert str(err) == err.message


def test_config_error() -> None:
    """Test ConfigError."""
    err = ConfigError(Path("config.yaml"), "bad")
    assert err.message == "invalid config file config.yaml: bad"
    assert str(err) == err.message


@pytest.mark.parametrize(
    "status_code, expected", [(None, "boom"), (0, "boom"), (500, "[500] boom")]
)
def test_kraftcloud_api_error(expected: str, status_code: int | None) -> None:
    """Test KraftCloudAPIError."""
    err = KraftCloudAPIError("boom", status_code=status_code)
    assert err.message == expected
    assert err.status_code == status_code


def test_credentials_unavailable_error() -> None:
    """Test CredentialsUnavailableError."""
    cause = CredentialsNotFoundError()
    err = CredentialsUnavailableError(cause)
    assert err.cause is cause
    assert err.message == f"could not retrieve credentials: {cause.message}"


def test_image_delete_error() -> None:
    """Test ImageDeleteError."""
    err = ImageDeleteError("img", ValueError("boom"))
    assert err.name == "img"
    assert err.message == "could not delete image img: boom"


def test_image_list_error() -> None:
    """Test ImageListError."""
    err = ImageListError(KraftCloudAPIError("boom", status_code=503))
    assert err.message == "could not get list of all images: [503] boom"
