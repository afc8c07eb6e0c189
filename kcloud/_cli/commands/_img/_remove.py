"""``kcloud img remove`` command."""

import logging
from typing import TYPE_CHECKING, Any, cast

import click

from ... import options
from ._rm import rm

if TYPE_CHECKING:
    from ...._logging import KCloudLogger

LOGGER = cast("KCloudLogger", logging.getLogger(__name__.replace("._", ".")))


@click.command("remove", short_help="alias of rm")
@click.argument("names", metavar="[NAME[:latest|@sha256:...]]...", nargs=-1, required=False)
@options.all_images
@options.debug
@options.metro
@options.no_color
@options.verbose
@click.pass_context
def remove(ctx: click.Context, **kwargs: Any) -> None:
    """Alias of "kcloud img rm".

    For more information, refer to the output of "kcloud img rm --help".

    """
    LOGGER.verbose("forwarding to rm...")
    ctx.forward(rm, **kwargs)
