"""kcloud config file models."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from ..utils import BaseModel


class ConfigProperty(BaseModel):
    """Base class for kcloud configuration properties."""

    model_config = ConfigDict(
        extra="ignore",
        validate_default=True,
        validate_assignment=True,
    )


class AuthConfig(ConfigProperty):
    """KraftCloud credentials."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = "index.unikraft.io"
    """Endpoint the credentials belong to."""

    token: str = Field(min_length=1)
    """Secret half of the credentials."""

    user: str = Field(min_length=1)
    """User the credentials belong to (e.g. ``robot$<id>.users.kraftcloud``)."""

    verify_ssl: bool = True
    """Whether to verify the TLS certificate of the endpoint."""

    def __repr__(self) -> str:
        """Return object representation without the secret."""
        return f"AuthConfig(endpoint={self.endpoint!r}, user={self.user!r})"


class ConfigFileModel(ConfigProperty):
    """Model of the kcloud config file.

    Example:
        .. code-block:: yaml

            auth:
              index.unikraft.io:
                user: robot$abc123.users.kraftcloud
                token: my-secret

    """

    auth: dict[str, AuthConfig] = {}
    """Credentials keyed by endpoint."""
