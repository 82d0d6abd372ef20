"""``buildproducts platform`` -- Show a platform's binary naming rules.

Without arguments, describes the running host; ``--platform`` describes
any other target, which is handy when checking a cross-compiled tree.

Exit Codes:
    0 -- Platform described.
    2 -- The host or requested platform is not recognised.
"""

from __future__ import annotations

import sys

import click

from buildproducts.cli.common import EXIT_BAD_INPUT, platform_option_value
from buildproducts.cli.output import print_platform
from buildproducts.core.platforms import Platform, current_platform
from buildproducts.exceptions import PlatformError


@click.command("platform")
@click.option(
    "--platform", "platform",
    callback=platform_option_value,
    default=None,
    help="Platform triplet to describe (default: host).",
)
def platform_command(platform: Platform | None) -> None:
    """Print a platform triplet with its library and executable conventions."""
    if platform is None:
        try:
            platform = current_platform()
        except PlatformError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(EXIT_BAD_INPUT)
    print_platform(platform)
