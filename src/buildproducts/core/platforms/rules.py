"""Per-platform naming conventions for shared libraries and executables.

Shared libraries are recognised by their extension, allowing the version
infixes or suffixes each platform uses:

    Linux/FreeBSD   libnettle.so, libnettle.so.6, libnettle.so.6.3.0
    macOS           libnettle.dylib, libnettle.6.3.dylib
    Windows         libnettle-6.dll

Versions are matched by pattern only, never parsed.
"""

from __future__ import annotations

import os
import re

from buildproducts.core.platforms.models import OS, Platform

_DLEXT_REGEXES: dict[str, re.Pattern[str]] = {
    "so": re.compile(r"^(.*)\.so(\.\d+){0,3}$"),
    "dylib": re.compile(r"^(.*)\.dylib$"),
    "dll": re.compile(r"^(.*)\.dll$"),
}


def dlext(platform: Platform) -> str:
    """Return the shared library extension (without dot) for a platform."""
    if platform.os is OS.WINDOWS:
        return "dll"
    if platform.os is OS.MACOS:
        return "dylib"
    return "so"


def valid_dl_path(path: str, platform: Platform) -> bool:
    """Return whether ``path`` names a dynamic library on ``platform``.

    Only the basename is inspected. A ``.so`` built on macOS is therefore
    not considered a library there.
    """
    return _DLEXT_REGEXES[dlext(platform)].match(os.path.basename(path)) is not None


def executable_suffix(platform: Platform) -> str:
    """Return the suffix executables must carry on ``platform``."""
    return ".exe" if platform.os is OS.WINDOWS else ""
