"""``kcloud img`` command group."""

from typing import Any

import click

from ... import options
from ._del import del_
from ._delete import delete
from ._remove import remove
from ._rm import rm

__all__ = ["del_", "delete", "remove", "rm"]

COMMANDS: list[click.Command] = [del_, delete, remove, rm]


@click.group("img", short_help="manage images")
@options.debug
@options.no_color
@options.verbose
def img(**_: Any) -> None:
    """Manage images stored in the KraftCloud image registry."""


for cmd in COMMANDS:  # register commands
    img.add_command(cmd)
