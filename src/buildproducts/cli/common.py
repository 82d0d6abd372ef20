"""Shared helpers for buildproducts CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from buildproducts.core.platforms import Platform, parse_platform
from buildproducts.core.products import Declarations, load_declarations
from buildproducts.exceptions import DeclarationError, PlatformError

# Exit code for unreadable input, matching Click's own usage errors.
EXIT_BAD_INPUT = 2


def platform_option_value(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> Platform | None:
    """Click callback turning ``--platform`` text into a ``Platform``."""
    if value is None:
        return None
    try:
        return parse_platform(value)
    except PlatformError as exc:
        raise click.BadParameter(str(exc)) from exc


def load_or_exit(path: str, platform: Platform | None) -> Declarations:
    """Load a declaration file, exiting with code 2 if it is invalid."""
    try:
        return load_declarations(Path(path), platform=platform)
    except DeclarationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_BAD_INPUT)
