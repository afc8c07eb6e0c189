"""kcloud configuration & credentials."""

from ._auth import (
    DEFAULT_AUTH_ENDPOINT,
    DEFAULT_CONFIG_PATH,
    get_auth_config,
    get_token_auth,
    load_config_file,
    owner_id,
)
from .models import AuthConfig, ConfigFileModel

__all__ = [
    "DEFAULT_AUTH_ENDPOINT",
    "DEFAULT_CONFIG_PATH",
    "AuthConfig",
    "ConfigFileModel",
    "get_auth_config",
    "get_token_auth",
    "load_config_file",
    "owner_id",
]
