"""Delete images from the KraftCloud image registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, cast

import click

from ....core import ImageRemover, RemoveOptions
from ....exceptions import KraftCloudError
from ... import options

if TYPE_CHECKING:
    from ...._logging import KCloudLogger

LOGGER = cast("KCloudLogger", logging.getLogger(__name__.replace("._", ".")))


@click.command("rm", short_help="delete an image")
@click.argument("names", metavar="[NAME[:latest|@sha256:...]]...", nargs=-1, required=False)
@options.all_images
@options.debug
@options.metro
@options.no_color
@options.verbose
@click.pass_context
def rm(
    ctx: click.Context,
    *,
    all_images: bool = False,
    debug: int = 0,
    metro: Optional[str] = None,
    names: tuple[str, ...] = (),
    **_: Any,
) -> None:
    """Delete one or more images.

    Images can be referenced by name (e.g. "my-image", "my-image:latest")
    or digest (e.g. "my-image@sha256:...").

    When "--all" is provided, every image owned by the current user is
    deleted. Failure to delete one of them does not stop the others from
    being deleted.

    """
    try:
        remove_options = RemoveOptions.resolve(
            all_images=all_images, names=names, metro=metro, metro_env=ctx.obj.metro
        )
        ImageRemover(remove_options).run()
    except KraftCloudError as err:
        LOGGER.error(err.message, exc_info=bool(debug))
        ctx.exit(1)
