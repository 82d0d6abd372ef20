"""``buildproducts write-deps <declarations>`` -- Generate a deps.py manifest.

Locates every declared product and writes a Python module binding each
variable name to its path, with a ``check_deps()`` self-check.

Exit Codes:
    0 -- Manifest written.
    1 -- A product is unsatisfied, or a variable name is duplicated or reserved.
    2 -- The declaration file could not be loaded or the manifest written.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from buildproducts.cli.common import EXIT_BAD_INPUT, load_or_exit, platform_option_value
from buildproducts.cli.output import configure_logging
from buildproducts.core.manifest import write_deps_file
from buildproducts.core.platforms import Platform
from buildproducts.exceptions import (
    DuplicateVariableError,
    ManifestWriteError,
    ReservedVariableError,
    UnsatisfiedProductError,
)


@click.command("write-deps")
@click.argument("declarations", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output path for the manifest (default: <declarations dir>/deps.py).",
)
@click.option(
    "--platform", "platform",
    callback=platform_option_value,
    default=None,
    help="Target platform triplet (default: from file, else host).",
)
@click.option(
    "--package-name",
    default=None,
    help="Package named in the rebuild message (default: inferred from path).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log search diagnostics.")
def write_deps_command(
    declarations: str,
    output: str | None,
    platform: Platform | None,
    package_name: str | None,
    verbose: bool,
) -> None:
    """Write a deps.py manifest for the products declared in DECLARATIONS.

    Refuses to write anything unless every product is satisfied.
    """
    configure_logging(verbose)
    decl = load_or_exit(declarations, platform)
    out_path = Path(output) if output else decl.source_path.parent / "deps.py"

    try:
        written = write_deps_file(
            out_path,
            decl.products,
            verbose=verbose,
            platform=decl.platform,
            package_name=package_name,
        )
    except (UnsatisfiedProductError, DuplicateVariableError, ReservedVariableError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except ManifestWriteError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_BAD_INPUT)

    click.echo(f"Manifest written to: {written}")
    sys.exit(0)
