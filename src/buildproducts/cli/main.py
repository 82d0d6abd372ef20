"""buildproducts CLI -- Verify installed build products.

Entry point for the ``buildproducts`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    verify     -- Check every product in a declaration file.
    write-deps -- Generate a deps.py manifest for satisfied products.
    platform   -- Show library/executable naming rules for a platform.

Usage::

    buildproducts verify products.yaml
    buildproducts verify products.yaml --platform aarch64-linux-gnu
    buildproducts write-deps products.yaml -o mypkg/deps/deps.py
    buildproducts platform
"""

from __future__ import annotations

import click

from buildproducts import __version__
from buildproducts.cli.platform_cmd import platform_command
from buildproducts.cli.verify import verify_command
from buildproducts.cli.write_deps import write_deps_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """buildproducts: Verify installed build products.

    Check that the libraries, executables and files a build promised
    exist (and that libraries load), then record their locations in a
    generated deps.py module.
    """


# Register all subcommands
cli.add_command(verify_command)
cli.add_command(write_deps_command)
cli.add_command(platform_command)
