"""Resolve KraftCloud credentials."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, cast

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError, CredentialsNotFoundError
from .models import AuthConfig, ConfigFileModel

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .._logging import KCloudLogger

LOGGER = cast("KCloudLogger", logging.getLogger(__name__.replace("._", ".")))

DEFAULT_AUTH_ENDPOINT = "index.unikraft.io"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "kraftcloud" / "config.yaml"
USER_PREFIX = "robot$"
USER_SUFFIX = ".users.kraftcloud"


def get_auth_config(
    environ: Mapping[str, str] | None = None, config_path: Path | None = None
) -> AuthConfig:
    """Get KraftCloud credentials.

    Sources are checked in the following order:

    1. ``KRAFTCLOUD_TOKEN`` environment variable, base64 encoded
       ``<user>:<token>``. If the value is not in that form,
       ``KRAFTCLOUD_USER`` must provide the user and the value is used
       as the token.
    2. The ``index.unikraft.io`` entry of the ``auth`` section of the
       config file (``KRAFTCLOUD_CONFIG`` or ``~/.config/kraftcloud/config.yaml``).

    Args:
        environ: Environment variables to read. Defaults to ``os.environ``.
        config_path: Path to the config file. Overrides ``KRAFTCLOUD_CONFIG``.

    Raises:
        ConfigError: The config file exists but could not be parsed.
        CredentialsNotFoundError: No credentials were found.

    """
    environ = os.environ if environ is None else environ
    token = environ.get("KRAFTCLOUD_TOKEN")
    if token:
        LOGGER.debug("using credentials from KRAFTCLOUD_TOKEN")
        return _parse_token(token, environ.get("KRAFTCLOUD_USER"))

    if not config_path:
        config_path = (
            Path(environ["KRAFTCLOUD_CONFIG"])
            if environ.get("KRAFTCLOUD_CONFIG")
            else DEFAULT_CONFIG_PATH
        )
    if config_path.is_file():
        config = load_config_file(config_path)
        if DEFAULT_AUTH_ENDPOINT in config.auth:
            LOGGER.debug("using credentials from %s", config_path)
            return config.auth[DEFAULT_AUTH_ENDPOINT]
        LOGGER.debug("no %s entry in %s", DEFAULT_AUTH_ENDPOINT, config_path)
    raise CredentialsNotFoundError


def get_token_auth(auth: AuthConfig) -> str:
    """Derive the API token from credentials."""
    return base64.b64encode(f"{auth.user}:{auth.token}".encode()).decode()


def load_config_file(path: Path) -> ConfigFileModel:
    """Parse the kcloud config file.

    Raises:
        ConfigError: The file can't be read, is not valid YAML or has invalid entries.

    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as err:
        raise ConfigError(path, str(err)) from err
    if not isinstance(data, dict):
        raise ConfigError(path, "expected a mapping at the top level")
    auth = data.get("auth") or {}
    if not isinstance(auth, dict):
        raise ConfigError(path, "expected a mapping of endpoints under 'auth'")
    # the endpoint of an entry is its key
    for endpoint, entry in auth.items():
        if isinstance(entry, dict):
            entry.setdefault("endpoint", endpoint)
    try:
        return ConfigFileModel.model_validate(data)
    except ValidationError as err:
        raise ConfigError(path, str(err)) from err


def owner_id(user: str) -> str:
    """Derive the owner id used to match image digests from a user.

    Example:
        >>> owner_id("robot$abc123.users.kraftcloud")
        'abc123'

    """
    return user.removeprefix(USER_PREFIX).removesuffix(USER_SUFFIX)


def _parse_token(token: str, user: str | None) -> AuthConfig:
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        decoded = ""
    if ":" in decoded:
        decoded_user, secret = decoded.split(":", 1)
        if decoded_user and secret:
            return AuthConfig(user=decoded_user, token=secret)
    if user:
        return AuthConfig(user=user, token=token)
    LOGGER.debug("KRAFTCLOUD_TOKEN is not a base64 encoded <user>:<token> pair")
    raise CredentialsNotFoundError
