"""Rich output formatting helpers for the buildproducts CLI.

Provides consistent terminal output for product verification results
and a logging setup that routes ``--verbose`` diagnostics through Rich.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from buildproducts.core.platforms import Platform, dlext, executable_suffix
from buildproducts.core.products import ExecutableProduct, LibraryProduct, Product

console = Console()


def configure_logging(verbose: bool) -> None:
    """Send buildproducts log records to the console via Rich.

    Args:
        verbose: Show INFO diagnostics; otherwise only warnings.
    """
    logger = logging.getLogger("buildproducts")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def product_kind(product: Product) -> str:
    """Return a short label for a product's variant."""
    if isinstance(product, LibraryProduct):
        return "library"
    if isinstance(product, ExecutableProduct):
        return "executable"
    return "file"


def results_to_json(
    results: list[tuple[Product, Path | None]], platform: Platform
) -> dict[str, Any]:
    """Convert verification results to a JSON-serializable dict."""
    return {
        "platform": platform.triplet(),
        "satisfied": all(path is not None for _, path in results),
        "products": [
            {
                "variable": product.variable_name,
                "kind": product_kind(product),
                "satisfied": path is not None,
                "path": str(path) if path is not None else None,
            }
            for product, path in results
        ],
    }


def print_verification_results(
    results: list[tuple[Product, Path | None]], platform: Platform
) -> None:
    """Print a table of located products and a one-line summary.

    Args:
        results: ``(product, located path or None)`` pairs.
        platform: Platform the products were checked against.
    """
    table = Table(
        title=f"Build Products ({platform.triplet()})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Variable", style="bold")
    table.add_column("Kind", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Path")

    for product, path in results:
        if path is not None:
            status = Text("OK", style="bold green")
            where = str(path)
        else:
            status = Text("MISSING", style="bold red")
            where = "-"
        table.add_row(product.variable_name, product_kind(product), status, where)

    console.print(table)
    total = len(results)
    missing = sum(1 for _, path in results if path is None)
    parts = [f"[bold]{total}[/bold] products checked"]
    if total - missing > 0:
        parts.append(f"[green]{total - missing} satisfied[/green]")
    if missing > 0:
        parts.append(f"[red]{missing} unsatisfied[/red]")
    console.print(" | ".join(parts))


def print_platform(platform: Platform) -> None:
    """Print a platform's triplet and binary naming conventions."""
    suffix = executable_suffix(platform) or "(none)"
    console.print(f"  Platform:          [bold]{platform.triplet()}[/bold]")
    console.print(f"  Library extension: .{dlext(platform)}")
    console.print(f"  Executable suffix: {suffix}")
