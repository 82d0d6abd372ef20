"""Platform identification and binary naming rules.

- ``models``: ``OS``, ``Platform``, host detection and string parsing.
- ``rules``: pure functions mapping a platform to library and executable
  naming conventions.
"""

from buildproducts.core.platforms.models import (
    OS,
    Platform,
    current_platform,
    normalize_arch,
    parse_platform,
)
from buildproducts.core.platforms.rules import dlext, executable_suffix, valid_dl_path

__all__ = [
    "OS",
    "Platform",
    "current_platform",
    "dlext",
    "executable_suffix",
    "normalize_arch",
    "parse_platform",
    "valid_dl_path",
]
