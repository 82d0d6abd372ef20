"""Source template for generated ``deps.py`` manifests.

The generated module is self-contained: it only imports the standard
library, so a package can import it at start-up without depending on
buildproducts. Placeholders:

    ``{{BINDINGS}}`` -- one ``name = 'path'`` line per product.
    ``{{REBUILD}}``  -- the rebuild instruction shown on failure.
    ``{{CHECKS}}``   -- the body of ``check_deps()``.

Product variables share the module namespace with the helpers below, so
none of ``RESERVED_NAMES`` may be used as a variable name.
"""

from __future__ import annotations

RESERVED_NAMES: frozenset[str] = frozenset({
    "DependencyError",
    "check_deps",
    "_REBUILD",
    "_can_open",
    "_ctypes",
    "_dlclose",
    "_os",
    "_sys",
})

DEPS_HEADER: str = """\
# This file is autogenerated by buildproducts.write_deps_file().
# Do not edit.
#
# Import this module from your package's top-level ``__init__`` and call
# ``check_deps()`` before using any of the paths defined below.
"""

DEPS_MODULE: str = """\
{{HEADER}}
import ctypes as _ctypes
import os as _os
import sys as _sys

if _sys.platform == "win32":
    from _ctypes import FreeLibrary as _dlclose
else:
    from _ctypes import dlclose as _dlclose

{{BINDINGS}}


class DependencyError(RuntimeError):
    \"\"\"Raised by check_deps() when an installed product is no longer usable.\"\"\"


_REBUILD = {{REBUILD}}


def _can_open(path):
    try:
        lib = _ctypes.CDLL(path)
    except OSError:
        return False
    _dlclose(lib._handle)
    return True


def check_deps():
{{CHECKS}}
"""

EXISTS_CHECK: str = """\
    if not _os.path.isfile({{NAME}}):
        raise DependencyError(f"{{NAME}} ({{{NAME}}}) does not exist, {_REBUILD}")
"""

OPEN_CHECK: str = """\
    if not _can_open({{NAME}}):
        raise DependencyError(f"{{NAME}} ({{{NAME}}}) cannot be opened, {_REBUILD}")
"""
