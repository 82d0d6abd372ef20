"""Installation prefix --- the root a package's binaries are installed under.

Only the canonical subdirectory layout is modelled here; populating the
prefix (downloading, unpacking, installing) happens elsewhere.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from buildproducts.core.platforms import OS, Platform, current_platform


@dataclass(frozen=True)
class Prefix:
    """An installation root such as ``<pkg>/deps/usr``.

    Attributes:
        path: Absolute path of the prefix root.
    """

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(os.fspath(self.path)).absolute())

    def __truediv__(self, other: str) -> Path:
        return self.path / other


def binary_dir(prefix: Prefix) -> Path:
    """Return the directory executables are installed to (``<prefix>/bin``)."""
    return prefix / "bin"


def library_dir(prefix: Prefix, platform: Platform | None = None) -> Path:
    """Return the directory shared libraries are installed to.

    Windows has no rpath equivalent, so DLLs live next to the executables
    in ``bin``; every other platform uses ``<prefix>/lib``.
    """
    if platform is None:
        platform = current_platform()
    if platform.os is OS.WINDOWS:
        return binary_dir(prefix)
    return prefix / "lib"
