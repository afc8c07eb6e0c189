"""Remove images from the KraftCloud image registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional, cast

from pydantic import ConfigDict, Field

from ..config import get_auth_config, owner_id
from ..exceptions import (
    CredentialsUnavailableError,
    ImageDeleteError,
    ImageListError,
    ImageNotSpecifiedError,
    KraftCloudAPIError,
    KraftCloudError,
    MetroNotSetError,
)
from ..utils import BaseModel
from .providers.kraftcloud import ImagesClient

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .._logging import KCloudLogger
    from ..config import AuthConfig

LOGGER = cast("KCloudLogger", logging.getLogger(__name__.replace("._", ".")))


class RemoveOptions(BaseModel):
    """Resolved options of an image removal."""

    model_config = ConfigDict(frozen=True)

    all_images: bool = False
    """Remove all images owned by the user."""

    metro: str = Field(min_length=1)
    """Metro the images are removed from."""

    names: tuple[str, ...] = ()
    """Names or digests of images to remove."""

    @classmethod
    def resolve(
        cls,
        *,
        all_images: bool = False,
        names: Sequence[str] = (),
        metro: Optional[str] = None,
        metro_env: Optional[str] = None,
    ) -> RemoveOptions:
        """Validate user input and resolve defaults.

        Args:
            all_images: Value of the ``--all`` option.
            names: Image names passed as arguments.
            metro: Value of the ``--metro`` option.
            metro_env: Value of the ``KRAFTCLOUD_METRO`` environment variable.

        Raises:
            ImageNotSpecifiedError: No image name was provided without ``--all``.
            MetroNotSetError: No metro was provided by option or environment.

        """
        if not all_images and not names:
            raise ImageNotSpecifiedError
        metro = metro or metro_env
        if not metro:
            raise MetroNotSetError
        LOGGER.debug("using metro: %s", metro)
        return cls(all_images=all_images, metro=metro, names=tuple(names))


class ImageRemover:
    """Remove images from the KraftCloud image registry.

    Credentials and the client are only created when not provided.

    """

    def __init__(
        self,
        options: RemoveOptions,
        *,
        auth: Optional[AuthConfig] = None,
        auth_provider: Callable[[], AuthConfig] = get_auth_config,
        client: Optional[ImagesClient] = None,
        client_factory: Callable[[AuthConfig], ImagesClient] = ImagesClient.from_auth,
    ) -> None:
        """Instantiate class.

        Args:
            options: Resolved options.
            auth: KraftCloud credentials.
            auth_provider: Called to retrieve credentials when ``auth`` is not provided.
            client: Images client.
            client_factory: Called with credentials to create a client when
                ``client`` is not provided.

        """
        self.auth = auth
        self.auth_provider = auth_provider
        self.client = client
        self.client_factory = client_factory
        self.options = options

    def run(self) -> None:
        """Remove the selected images.

        Images selected by ``--all`` are removed first. Failure to remove
        one of them is logged and does not stop the removal of the others.
        Failure to remove an image selected by name stops the run.

        Raises:
            CredentialsUnavailableError: Credentials could not be retrieved.
            ImageDeleteError: An image selected by name could not be removed.
            ImageListError: The list of images could not be retrieved.

        """
        if self.auth is None:
            try:
                self.auth = self.auth_provider()
            except KraftCloudError as err:
                raise CredentialsUnavailableError(err) from err
        owns_client = self.client is None
        if self.client is None:
            self.client = self.client_factory(self.auth)
        client = self.client.with_metro(self.options.metro)

        try:
            if self.options.all_images:
                self._remove_all(client, self.auth)

            for name in self.options.names:
                try:
                    client.delete_by_name(name)
                except KraftCloudAPIError as err:
                    raise ImageDeleteError(name, err) from err
                LOGGER.info("removing %s", name)
        finally:
            if owns_client:
                self.client.close()

    def _remove_all(self, client: ImagesClient, auth: AuthConfig) -> None:
        """Remove every image owned by the user, continuing on error."""
        try:
            images = client.list()
        except KraftCloudAPIError as err:
            raise ImageListError(err) from err

        owner = owner_id(auth.user)
        for image in images:
            if not image.digest.startswith(owner):
                LOGGER.debug("skipping %s; not owned by %s", image.digest, owner)
                continue
            LOGGER.info("removing %s", image.digest)
            try:
                client.delete_by_name(image.digest)
            except KraftCloudAPIError as err:
                LOGGER.error(ImageDeleteError(image.digest, err).message)
