"""Native load test for shared libraries.

``try_load`` opens a library with the system dynamic loader and closes it
again straight away. A correctly named file that is truncated, built for
another architecture, or missing its own dependencies fails here.
"""

from __future__ import annotations

import ctypes
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

if sys.platform == "win32":
    from _ctypes import FreeLibrary as _dlclose
else:
    from _ctypes import dlclose as _dlclose

logger = logging.getLogger(__name__)


@contextmanager
def _dlopen(path: str | os.PathLike[str]) -> Iterator[ctypes.CDLL]:
    """Open a library handle and release it when the block exits.

    Raises:
        OSError: If the loader rejects the library.
    """
    lib = ctypes.CDLL(os.fspath(path))
    try:
        yield lib
    finally:
        _dlclose(lib._handle)


def try_load(path: Path) -> bool:
    """Return True if ``path`` can be opened by the dynamic loader."""
    try:
        with _dlopen(path):
            return True
    except OSError as exc:
        logger.debug("dlopen(%s) failed: %s", path, exc)
        return False
