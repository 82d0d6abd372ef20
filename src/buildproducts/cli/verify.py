"""``buildproducts verify <declarations>`` -- Check that declared products exist.

Locates every product listed in a YAML declaration file and reports
which are satisfied and where they were found.

Exit Codes:
    0 -- All products are satisfied.
    1 -- One or more products could not be located.
    2 -- The declaration file could not be loaded.
"""

from __future__ import annotations

import json
import sys

import click

from buildproducts.cli.common import load_or_exit, platform_option_value
from buildproducts.cli.output import (
    configure_logging,
    print_verification_results,
    results_to_json,
)
from buildproducts.core.platforms import Platform


@click.command("verify")
@click.argument("declarations", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--platform", "platform",
    callback=platform_option_value,
    default=None,
    help="Target platform triplet (default: from file, else host).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log search diagnostics.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def verify_command(
    declarations: str,
    platform: Platform | None,
    verbose: bool,
    output_format: str,
) -> None:
    """Verify the build products declared in DECLARATIONS.

    Exit code 0 if every product is satisfied, 1 otherwise.
    """
    configure_logging(verbose)
    decl = load_or_exit(declarations, platform)

    results = [
        (product, product.locate(platform=decl.platform, verbose=verbose))
        for product in decl.products
    ]

    if output_format == "json":
        click.echo(json.dumps(results_to_json(results, decl.platform), indent=2))
    else:
        print_verification_results(results, decl.platform)

    sys.exit(0 if all(path is not None for _, path in results) else 1)
