"""Platform values --- operating system and architecture of a build target.

A ``Platform`` identifies the system a set of build products was compiled
for. Two platforms are equal only when both the operating system and the
architecture agree; this is what decides whether a library may be
load-tested on the running host or must be trusted as a cross-compiled
artifact.

Platforms can be written as GNU-style triplets (``x86_64-linux-gnu``,
``aarch64-apple-darwin14``, ``i686-w64-mingw32``,
``x86_64-unknown-freebsd11.1``) or as short keys (``linux``,
``macos-aarch64``, ``windows-i686``).
"""

from __future__ import annotations

import logging
import platform as _host
from dataclasses import dataclass
from enum import Enum

from buildproducts.exceptions import PlatformError

logger = logging.getLogger(__name__)


class OS(str, Enum):
    """Operating system families with distinct binary naming rules."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    FREEBSD = "freebsd"


# Machine names reported by various hosts, mapped to canonical arch names.
_ARCH_ALIASES: dict[str, str] = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "i386": "i686",
    "i486": "i686",
    "i586": "i686",
    "i686": "i686",
    "x86": "i686",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "armv7l": "armv7l",
    "armv7": "armv7l",
    "arm": "armv7l",
    "ppc64le": "powerpc64le",
    "powerpc64le": "powerpc64le",
}

_OS_ALIASES: dict[str, OS] = {
    "linux": OS.LINUX,
    "macos": OS.MACOS,
    "darwin": OS.MACOS,
    "osx": OS.MACOS,
    "apple": OS.MACOS,
    "windows": OS.WINDOWS,
    "win": OS.WINDOWS,
    "mingw32": OS.WINDOWS,
    "freebsd": OS.FREEBSD,
}

_TRIPLET_TAILS: dict[OS, str] = {
    OS.LINUX: "linux-gnu",
    OS.MACOS: "apple-darwin14",
    OS.WINDOWS: "w64-mingw32",
    OS.FREEBSD: "unknown-freebsd11.1",
}


def normalize_arch(machine: str) -> str:
    """Map a machine name (``AMD64``, ``arm64``, ...) to its canonical form.

    Raises:
        PlatformError: If the architecture is not recognised.
    """
    arch = _ARCH_ALIASES.get(machine.strip().lower())
    if arch is None:
        raise PlatformError(f"Unknown architecture: {machine!r}")
    return arch


@dataclass(frozen=True)
class Platform:
    """A build target: operating system plus CPU architecture.

    Attributes:
        os: Operating system family.
        arch: Canonical architecture name (e.g. "x86_64", "aarch64").
    """

    os: OS
    arch: str = "x86_64"

    def triplet(self) -> str:
        """Render the GNU-style target triplet for this platform."""
        return f"{self.arch}-{_TRIPLET_TAILS[self.os]}"

    @property
    def is_windows(self) -> bool:
        return self.os is OS.WINDOWS

    def __str__(self) -> str:
        return self.triplet()


def parse_platform(text: str) -> Platform:
    """Parse a triplet or short platform key into a ``Platform``.

    Accepted forms::

        x86_64-linux-gnu        aarch64-apple-darwin14
        i686-w64-mingw32        x86_64-unknown-freebsd11.1
        linux                   macos-aarch64

    Args:
        text: Platform string.

    Returns:
        The parsed platform.

    Raises:
        PlatformError: If no operating system or architecture can be
            recognised in ``text``.
    """
    parts = [p for p in text.strip().lower().split("-") if p]
    if not parts:
        raise PlatformError(f"Empty platform string: {text!r}")

    # Short key: "<os>" or "<os>-<arch>"
    short_os = _OS_ALIASES.get(parts[0])
    if short_os is not None and len(parts) <= 2:
        arch = normalize_arch(parts[1]) if len(parts) == 2 else "x86_64"
        return Platform(short_os, arch)

    # Triplet: "<arch>-<vendor/os>-<os/abi>"
    arch = normalize_arch(parts[0])
    for part in parts[1:]:
        # "darwin14", "freebsd11.1" carry a version suffix
        found = _OS_ALIASES.get(part) or _OS_ALIASES.get(part.rstrip("0123456789."))
        if found is not None:
            return Platform(found, arch)
    raise PlatformError(f"Unrecognised platform: {text!r}")


def current_platform() -> Platform:
    """Detect the platform of the running host.

    An architecture without a known alias (``riscv64``, ``s390x``, ...)
    is kept as the lower-cased machine name; such a host simply never
    matches a parsed target.

    Raises:
        PlatformError: If the host operating system is not one of the
            supported families.
    """
    system = _host.system().lower()
    found = _OS_ALIASES.get(system)
    if found is None:
        raise PlatformError(f"Unsupported host system: {_host.system()!r}")
    machine = _host.machine().strip().lower()
    detected = Platform(found, _ARCH_ALIASES.get(machine, machine))
    logger.debug("Detected host platform %s", detected)
    return detected
