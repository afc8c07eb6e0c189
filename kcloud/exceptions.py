"""kcloud exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class KraftCloudError(Exception):
    """Base class for custom exceptions raised by kcloud."""

    message: str = ""
    """Error message."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Instantiate class."""
        if self.message:
            super().__init__(self.message, *args, **kwargs)
        else:
            super().__init__(*args, **kwargs)


class InvalidOptionsError(KraftCloudError):
    """The options provided to a command are invalid."""


class ImageNotSpecifiedError(InvalidOptionsError):
    """Neither an image name nor ``--all`` was provided."""

    message = "either specify an image name, or use the --all flag"


class MetroNotSetError(InvalidOptionsError):
    """No metro was provided by option or environment."""

    message = "kraftcloud metro is unset"


class ConfigError(KraftCloudError):
    """The kcloud config file could not be used."""

    path: Path

    def __init__(self, path: Path, reason: str) -> None:
        """Instantiate class.

        Args:
            path: Path to the config file.
            reason: Why the config file could not be used.

        """
        self.path = path
        self.message = f"invalid config file {path}: {reason}"
        super().__init__()


class CredentialsNotFoundError(KraftCloudError):
    """No KraftCloud credentials could be found."""

    message = (
        "no credentials found; set KRAFTCLOUD_TOKEN or add an auth entry "
        "to the config file"
    )


class CredentialsUnavailableError(KraftCloudError):
    """Credentials could not be retrieved from the auth provider."""

    cause: Exception

    def __init__(self, cause: Exception) -> None:
        """Instantiate class.

        Args:
            cause: Error raised by the auth provider.

        """
        self.cause = cause
        self.message = f"could not retrieve credentials: {_describe(cause)}"
        super().__init__()


class KraftCloudAPIError(KraftCloudError):
    """The KraftCloud API returned an error or could not be reached."""

    status_code: int | None
    """HTTP status code of the response, if a response was received."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Instantiate class.

        Args:
            message: Error message returned by the API or the transport.
            status_code: HTTP status code of the response.

        """
        self.status_code = status_code
        if status_code:
            self.message = f"[{status_code}] {message}"
        else:
            self.message = message
        super().__init__()


class ImageListError(KraftCloudError):
    """The list of images could not be retrieved."""

    cause: Exception

    def __init__(self, cause: Exception) -> None:
        """Instantiate class.

        Args:
            cause: Error raised by the images client.

        """
        self.cause = cause
        self.message = f"could not get list of all images: {_describe(cause)}"
        super().__init__()


class ImageDeleteError(KraftCloudError):
    """An image could not be deleted."""

    cause: Exception
    name: str

    def __init__(self, name: str, cause: Exception) -> None:
        """Instantiate class.

        Args:
            name: Name or digest of the image.
            cause: Error raised by the images client.

        """
        self.cause = cause
        self.name = name
        self.message = f"could not delete image {name}: {_describe(cause)}"
        super().__init__()


def _describe(err: Exception) -> str:
    return getattr(err, "message", None) or str(err)
