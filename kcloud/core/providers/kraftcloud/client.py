"""KraftCloud images client."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, List, cast
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ...._logging import PrefixAdaptor
from ....config import get_token_auth
from ....exceptions import KraftCloudAPIError, MetroNotSetError
from .models import Image

if TYPE_CHECKING:
    from types import TracebackType

    from ....config import AuthConfig

ROOT_LOGGER = logging.getLogger(__name__.replace("._", "."))

DEFAULT_BASE_URL_TEMPLATE = "https://api.{metro}.kraft.cloud/v1"
DEFAULT_TIMEOUT = 30.0


class ImagesClient:
    """A client for the images service of the KraftCloud API.

    Every request is scoped to a metro. A client without a metro can be
    scoped using :meth:`with_metro`; scoped clients share the same
    :class:`requests.Session`.

    Example:
        >>> from kcloud.core.providers.kraftcloud import ImagesClient
        >>> client = ImagesClient(token).with_metro("fra0")
        >>> images = client.list()

    """

    def __init__(
        self,
        token: str,
        *,
        base_url_template: str = DEFAULT_BASE_URL_TEMPLATE,
        metro: str | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
    ) -> None:
        """Instantiate class.

        Args:
            token: API token (see :func:`kcloud.config.get_token_auth`).
            base_url_template: Template of the API base URL. ``{metro}`` is
                replaced by the metro of the client.
            metro: Metro to scope requests to.
            session: Session used to send requests.
            timeout: Timeout of each request, in seconds.
            verify_ssl: Whether to verify the TLS certificate of the API.

        """
        self.base_url_template = base_url_template
        self.metro = metro
        self.timeout = timeout
        self.token = token
        self.verify_ssl = verify_ssl
        self._session = session or requests.Session()

    @classmethod
    def from_auth(cls, auth: AuthConfig, **kwargs: Any) -> ImagesClient:
        """Create a client from credentials.

        Args:
            auth: KraftCloud credentials.
            **kwargs: Passed to the class on instantiation.

        """
        kwargs.setdefault("timeout", _timeout_from_env())
        kwargs.setdefault("verify_ssl", auth.verify_ssl)
        return cls(get_token_auth(auth), **kwargs)

    @property
    def base_url(self) -> str:
        """Base URL of the API for the metro of this client.

        Raises:
            MetroNotSetError: The client is not scoped to a metro.

        """
        if not self.metro:
            raise MetroNotSetError
        return self.base_url_template.format(metro=self.metro).rstrip("/")

    def with_metro(self, metro: str) -> ImagesClient:
        """Return a copy of the client scoped to a metro."""
        return self.__class__(
            self.token,
            base_url_template=self.base_url_template,
            metro=metro,
            session=self._session,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
        )

    def list(self) -> List[Image]:
        """List all images visible to the user.

        Raises:
            KraftCloudAPIError: The API returned an error, could not be reached
                or returned a response that is not a list of images.

        """
        data = self._request("GET", "/images/list")
        images = data.get("images") or []
        if not isinstance(images, list):
            raise KraftCloudAPIError(
                f"invalid response: expected a list of images, got {type(images).__name__}"
            )
        try:
            return [Image.model_validate(image) for image in images]
        except ValidationError as err:
            raise KraftCloudAPIError(f"invalid response: {err}") from err

    def delete_by_name(self, name: str) -> None:
        """Delete an image.

        Args:
            name: Name (``name``, ``name:tag``, ``name@sha256:...``) or
                digest of the image.

        Raises:
            KraftCloudAPIError: The API returned an error or could not be reached.

        """
        self._request("DELETE", "/images/" + quote(name, safe="/:@"))

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def _request(self, method: str, path: str) -> dict[str, Any]:
        """Send a request and unwrap the ``data`` of the response envelope."""
        url = self.base_url + path
        logger = PrefixAdaptor(cast(str, self.metro), ROOT_LOGGER, "({prefix}) {msg}")
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method,
                url,
                headers={
                    "Accept": "application/json",
                    "Authorization": f"Bearer {self.token}",
                },
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as err:
            raise KraftCloudAPIError(str(err)) from err
        logger.debug("%s %s returned %s", method, url, response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        if response.status_code >= 400 or body.get("status") == "error":
            raise KraftCloudAPIError(
                body.get("message") or response.reason or "unknown error",
                status_code=response.status_code,
            )
        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise KraftCloudAPIError(
                f"invalid response: expected an object, got {type(data).__name__}"
            )
        return data

    def __enter__(self) -> ImagesClient:
        """Enter the context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session."""
        self.close()


def _timeout_from_env() -> float:
    """Request timeout from ``KRAFTCLOUD_TIMEOUT``."""
    value = os.getenv("KRAFTCLOUD_TIMEOUT")
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        ROOT_LOGGER.warning(
            "invalid KRAFTCLOUD_TIMEOUT %r; using %s seconds", value, DEFAULT_TIMEOUT
        )
        return DEFAULT_TIMEOUT
