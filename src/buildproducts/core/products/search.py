"""Product location --- per-variant search algorithms.

This module provides the ``locate`` implementations for the three product
variants. They are attached to the classes at import time (in
``__init__.py``) so callers simply write ``product.locate()``.

Common behaviour:

- ``platform`` defaults to the running host, ``verbose`` raises search
  diagnostics from DEBUG to INFO.
- A product that cannot be found never raises: missing directories,
  unreadable directories, non-executable files and libraries that fail to
  load all reduce to a ``None`` result.

Library search order: directory entries are visited in lexical order so
that, when several files match, the result does not depend on the
filesystem's enumeration order.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path

from buildproducts.core.platforms import (
    Platform,
    current_platform,
    executable_suffix,
    valid_dl_path,
)
from buildproducts.core.products.loader import try_load
from buildproducts.core.products.models import (
    ExecutableProduct,
    FileProduct,
    LibraryProduct,
    Loader,
    Product,
)
from buildproducts.exceptions import PlatformError

logger = logging.getLogger(__name__)


def _reporter(verbose: bool) -> Callable[..., None]:
    return logger.info if verbose else logger.debug


def _is_host(platform: Platform) -> bool:
    """Return True if libraries built for ``platform`` can be loaded here."""
    try:
        return platform == current_platform()
    except PlatformError:
        # An unrecognised host cannot run anything we know how to build.
        return False


def locate_library(
    lp: LibraryProduct,
    platform: Platform | None = None,
    verbose: bool = False,
    loader: Loader | None = None,
) -> Path | None:
    """Locate a library by name prefix, load-testing it on the host platform.

    If the given library exists (under any reasonable name for
    ``platform``) and can be opened by the dynamic loader, return its
    absolute path. The load test only runs when ``platform`` is the
    running host; cross-compiled libraries cannot be loaded here and are
    accepted on name alone.

    Args:
        lp: Library to look for.
        platform: Target platform; defaults to the running host.
        verbose: Log search diagnostics at INFO.
        loader: Load test to apply; defaults to ``try_load``.

    Returns:
        Absolute path of the first matching library, or None.
    """
    log = _reporter(verbose)
    if platform is None:
        platform = current_platform()
    if loader is None:
        loader = try_load
    wanted = ", ".join(lp.libnames)

    if not lp.dir_path.is_dir():
        log("Directory %s does not exist!", lp.dir_path)
        return None
    try:
        entries = sorted(os.listdir(lp.dir_path))
    except OSError as exc:
        log("Cannot list %s: %s", lp.dir_path, exc)
        return None

    load_test = _is_host(platform)
    for entry in entries:
        # Skip names that aren't dynamic libraries on the target platform
        # (a `.so` built on macOS is ignored there).
        if not valid_dl_path(entry, platform):
            continue
        log("Found a valid dl path %s while looking for %s", entry, wanted)

        for libname in lp.libnames:
            if not entry.startswith(libname):
                continue
            dl_path = Path(os.path.abspath(lp.dir_path / entry))
            log("%s matches our search criteria of %s", dl_path, libname)

            if not load_test:
                return dl_path
            if loader(dl_path):
                return dl_path
            log("%s cannot be dlopen'ed", dl_path)

    log("Could not locate %s inside %s", wanted, lp.dir_path)
    return None


def locate_executable(
    ep: ExecutableProduct,
    platform: Platform | None = None,
    verbose: bool = False,
    loader: Loader | None = None,
) -> Path | None:
    """Return the executable's path if it exists and may be executed.

    On Windows targets ``.exe`` is appended unless already present and
    permission bits are not consulted. Elsewhere the owner-execute bit
    must be set.
    """
    log = _reporter(verbose)
    if platform is None:
        platform = current_platform()

    path = ep.path
    if not path.name:
        log("%s does not name a file, reporting unsatisfied", path)
        return None
    suffix = executable_suffix(platform)
    if suffix and not path.name.endswith(suffix):
        path = path.with_name(path.name + suffix)

    if not path.is_file():
        log("%s does not exist, reporting unsatisfied", path)
        return None

    # Windows filesystems don't honor permission bits
    if platform.is_windows or os.name == "nt":
        return path

    try:
        mode = path.stat().st_mode
    except OSError as exc:
        log("Cannot stat %s: %s", path, exc)
        return None
    if not mode & stat.S_IXUSR:
        log("%s is not executable, reporting unsatisfied", path)
        return None
    return path


def locate_file(
    fp: FileProduct,
    platform: Platform | None = None,
    verbose: bool = False,
    loader: Loader | None = None,
) -> Path | None:
    """Return the file's path if it exists.

    ``platform`` and ``loader`` are accepted for uniformity and ignored.
    """
    if fp.path.is_file():
        return fp.path
    _reporter(verbose)("FileProduct %s does not exist", fp.path)
    return None


def locate(
    product: Product,
    platform: Platform | None = None,
    verbose: bool = False,
    loader: Loader | None = None,
) -> Path | None:
    """Functional form of ``product.locate()``."""
    return product.locate(platform=platform, verbose=verbose, loader=loader)


def satisfied(
    product: Product,
    platform: Platform | None = None,
    verbose: bool = False,
    loader: Loader | None = None,
) -> bool:
    """Functional form of ``product.satisfied()``."""
    return product.satisfied(platform=platform, verbose=verbose, loader=loader)


def variable_name(product: Product) -> str:
    """Return the manifest variable name of a product as a string."""
    return str(product.variable_name)
