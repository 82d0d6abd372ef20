"""Shared fixtures for CLI tests.

Provides a small installed prefix (one library, one executable, one data
file) and YAML declaration files describing it. Declarations target a
Linux platform that is never the test host, so the stub library is
accepted on its name without being loaded.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from buildproducts.core.platforms import Platform


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def installed_prefix(tmp_path: Path, make_file, executable_mode: int) -> Path:
    """Create ``<tmp>/foopkg/deps/usr`` with one product of each kind."""
    usr = tmp_path / "foopkg" / "deps" / "usr"
    make_file(usr / "lib" / "libfoo.so.1", "cross-compiled")
    make_file(usr / "bin" / "fooifier", "#!/bin/sh\n", mode=executable_mode)
    make_file(usr / "share" / "foo.dat", "payload")
    return usr


def _declarations(platform: Platform, extra: str = "") -> str:
    return (
        "prefix: usr\n"
        f"platform: {platform.triplet()}\n"
        "products:\n"
        "  - type: library\n"
        "    names: [libfoo]\n"
        "    variable: libfoo\n"
        "  - type: executable\n"
        "    name: fooifier\n"
        "    variable: fooifier\n"
        "  - type: file\n"
        "    path: share/foo.dat\n"
        "    variable: foo_data\n"
    ) + extra


@pytest.fixture
def satisfied_decl(installed_prefix: Path, linux_cross: Platform) -> Path:
    """Declaration file whose products are all installed."""
    path = installed_prefix.parent / "products.yaml"
    path.write_text(_declarations(linux_cross))
    return path


@pytest.fixture
def unsatisfied_decl(installed_prefix: Path, linux_cross: Platform) -> Path:
    """Declaration file with one product that was never installed."""
    path = installed_prefix.parent / "products.yaml"
    path.write_text(
        _declarations(
            linux_cross,
            "  - type: file\n"
            "    path: share/missing.dat\n"
            "    variable: missing_data\n",
        )
    )
    return path


@pytest.fixture
def duplicate_decl(installed_prefix: Path, linux_cross: Platform) -> Path:
    """Declaration file where two products share a variable name."""
    path = installed_prefix.parent / "products.yaml"
    path.write_text(
        _declarations(
            linux_cross,
            "  - type: file\n"
            "    path: share/foo.dat\n"
            "    variable: libfoo\n",
        )
    )
    return path


@pytest.fixture
def broken_decl(tmp_path: Path) -> Path:
    """Declaration file that is not valid YAML."""
    path = tmp_path / "broken.yaml"
    path.write_text("products: [\n")
    return path
