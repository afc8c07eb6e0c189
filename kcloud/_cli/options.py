"""Click options."""

import click

all_images = click.option(
    "--all",
    "all_images",
    default=False,
    help="Remove all images owned by the current user.",
    is_flag=True,
    show_default=True,
)

debug = click.option(
    "--debug",
    count=True,
    envvar="DEBUG",
    help="Supply once to display kcloud debug logs. Supply twice to display all debug logs.",
)

metro = click.option(
    "--metro",
    default=None,
    metavar="<metro>",
    help='KraftCloud metro (e.g. "fra0"). '
    'Falls back to the "KRAFTCLOUD_METRO" environment variable.',
)

no_color = click.option(
    "--no-color",
    default=False,
    envvar="KCLOUD_NO_COLOR",
    is_flag=True,
    help="Disable color in kcloud's logs.",
)

verbose = click.option(
    "--verbose",
    default=False,
    envvar="VERBOSE",
    is_flag=True,
    help="Display kcloud verbose logs.",
)
