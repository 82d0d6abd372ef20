"""buildproducts: Verification of installed build artifacts.

Checks that the libraries, executables and files a build step promised
actually exist (and, for libraries, actually load), and writes a
``deps.py`` manifest binding variable names to their verified paths.

Public API::

    from buildproducts import LibraryProduct, ExecutableProduct, write_deps_file

    libfoo = LibraryProduct("usr/lib", ["libfoo"], "libfoo")
    fooifier = ExecutableProduct("usr/bin/fooifier", "fooifier")
    if libfoo.satisfied() and fooifier.satisfied():
        write_deps_file("deps/deps.py", [libfoo, fooifier])
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from buildproducts.core.manifest import render_deps_file, write_deps_file
from buildproducts.core.platforms import OS, Platform, current_platform, parse_platform
from buildproducts.core.prefix import Prefix, binary_dir, library_dir
from buildproducts.core.products import (
    ExecutableProduct,
    FileProduct,
    LibraryProduct,
    Product,
    locate,
    satisfied,
    variable_name,
)

__all__ = [
    "ExecutableProduct",
    "FileProduct",
    "LibraryProduct",
    "OS",
    "Platform",
    "Prefix",
    "Product",
    "binary_dir",
    "current_platform",
    "library_dir",
    "locate",
    "parse_platform",
    "render_deps_file",
    "satisfied",
    "variable_name",
    "write_deps_file",
]
