"""Product data models --- LibraryProduct, ExecutableProduct, FileProduct.

A ``Product`` is an expected result after building or installing a
package. Every product knows where to look for itself and which variable
name it is bound to in a generated ``deps.py`` manifest.

These are pure data holders (frozen dataclasses). The per-variant
``locate`` algorithms live in ``search.py`` and are attached to the
classes at import time (in ``__init__.py``), keeping the models free of
filesystem and dynamic-loader concerns.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from buildproducts.core.platforms import Platform
from buildproducts.core.prefix import Prefix, binary_dir, library_dir
from buildproducts.exceptions import ProductError

Loader = Callable[[Path], bool]

# Characters that often appear in file names but cannot appear in identifiers.
_VARNAME_CUT_RE = re.compile(r"[-.]")


class Product:
    """Base class for all build products.

    Subclasses provide ``locate``; ``satisfied`` is derived from it.
    """

    variable_name: str

    def locate(
        self,
        platform: Platform | None = None,
        verbose: bool = False,
        loader: Loader | None = None,
    ) -> Path | None:
        """Return the on-disk location of this product, or None."""
        raise NotImplementedError

    def satisfied(
        self,
        platform: Platform | None = None,
        verbose: bool = False,
        loader: Loader | None = None,
    ) -> bool:
        """Return True if this product can currently be located.

        Args:
            platform: Target platform; defaults to the running host.
            verbose: Log search diagnostics at INFO instead of DEBUG.
            loader: Load-test override for library products.
        """
        return self.locate(platform=platform, verbose=verbose, loader=loader) is not None


@dataclass(frozen=True)
class LibraryProduct(Product):
    """A shared library that must exist *and* be loadable.

    ``dir_path`` is the directory the library is installed to and
    ``libnames`` the name prefixes it may carry; several are allowed since
    some projects change the library name with their build configuration.
    Given ``dir_path="usr/lib"`` and ``libnames=("libnettle",)`` any of::

        usr/lib/libnettle.so
        usr/lib/libnettle.so.6
        usr/lib/libnettle.6.dylib
        usr/lib/libnettle-6.dll

    satisfies the product on the matching platform.

    Attributes:
        dir_path: Directory scanned (non-recursively) for the library.
        libnames: Candidate name prefixes, tried in order. Never empty.
        variable_name: Manifest variable bound to the located path.
    """

    dir_path: Path
    libnames: tuple[str, ...]
    variable_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "dir_path", Path(os.fspath(self.dir_path)))
        libnames = self.libnames
        if isinstance(libnames, str):
            libnames = (libnames,)
        libnames = tuple(libnames)
        if not libnames:
            raise ProductError(
                f"LibraryProduct {self.variable_name!r} needs at least one libname"
            )
        object.__setattr__(self, "libnames", libnames)

    @classmethod
    def from_prefix(
        cls,
        prefix: Prefix,
        libnames: str | Sequence[str],
        variable_name: str,
        platform: Platform | None = None,
    ) -> LibraryProduct:
        """Declare a library installed to ``library_dir(prefix)``."""
        return cls(library_dir(prefix, platform), libnames, variable_name)


@dataclass(frozen=True)
class ExecutableProduct(Product):
    """An executable file.

    On every platform the file must exist. On Windows targets ``.exe`` is
    appended when missing; elsewhere the owner-execute bit must be set.

    Attributes:
        path: Expected location, without the platform's executable suffix.
        variable_name: Manifest variable bound to the located path.
    """

    path: Path
    variable_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(os.fspath(self.path)))

    @classmethod
    def from_prefix(
        cls, prefix: Prefix, binname: str, variable_name: str
    ) -> ExecutableProduct:
        """Declare an executable named ``binname`` inside ``binary_dir(prefix)``."""
        return cls(binary_dir(prefix) / binname, variable_name)


@dataclass(frozen=True)
class FileProduct(Product):
    """A file that simply must exist."""

    path: Path
    variable_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(os.fspath(self.path)))


def guess_variable_name(path: str | os.PathLike[str]) -> str:
    """Guess a manifest variable name from a file path or library name.

    Takes the basename and cuts it at the first ``-`` or ``.``, e.g.
    ``"usr/lib/libfoo-1.2.so"`` becomes ``"libfoo"``.
    """
    name = os.path.basename(os.fspath(path))
    match = _VARNAME_CUT_RE.search(name)
    if match is not None:
        name = name[: match.start()]
    return name
