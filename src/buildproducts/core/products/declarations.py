"""Product declaration files --- YAML lists of expected build products.

A declaration file lets a build script (or the ``buildproducts`` CLI)
describe its products without writing Python::

    prefix: usr
    platform: x86_64-linux-gnu
    products:
      - type: library
        names: [libfoo, libfoo2]
        variable: libfoo
      - type: executable
        name: fooifier
        variable: fooifier
      - type: file
        path: share/foo.dat
        variable: foo_data

Relative paths are resolved against the prefix when one is given (or the
file's directory otherwise). ``prefix`` itself is relative to the file.
Library and executable entries given by ``name`` live in
``library_dir(prefix)`` and ``binary_dir(prefix)``; entries may override
this with ``dir`` (libraries) or ``path`` (executables, files).

Entries without a ``variable`` get one guessed from their name, with a
warning.
"""

from __future__ import annotations

import keyword
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from buildproducts.core.platforms import Platform, current_platform, parse_platform
from buildproducts.core.prefix import Prefix, binary_dir, library_dir
from buildproducts.core.products.models import (
    ExecutableProduct,
    FileProduct,
    LibraryProduct,
    Product,
    guess_variable_name,
)
from buildproducts.exceptions import DeclarationError, PlatformError

logger = logging.getLogger(__name__)

_PRODUCT_TYPES = ("library", "executable", "file")


@dataclass
class Declarations:
    """Products loaded from a declaration file.

    Attributes:
        products: Declared products, in file order.
        platform: Target platform named in the file, or the host platform.
        prefix: Installation prefix, if the file declares one.
        source_path: The declaration file itself.
    """

    products: list[Product]
    platform: Platform
    prefix: Prefix | None
    source_path: Path


def _require(entry: dict[str, Any], index: int, *keys: str) -> Any:
    """Return the first present key of ``entry``, or raise."""
    for key in keys:
        if entry.get(key) is not None:
            return entry[key]
    raise DeclarationError(
        f"Product #{index} is missing {' or '.join(repr(k) for k in keys)}"
    )


def _variable(entry: dict[str, Any], index: int, fallback: str) -> str:
    name = entry.get("variable")
    if name is None:
        name = guess_variable_name(fallback)
        logger.warning(
            "Product #%d has no variable name! auto-choosing %s", index, name
        )
    name = str(name)
    if not name.isidentifier() or keyword.iskeyword(name):
        raise DeclarationError(
            f"Product #{index} variable {name!r} is not a valid Python identifier"
        )
    return name


def _product_from_entry(
    entry: Any, index: int, base: Path, prefix: Prefix | None, platform: Platform
) -> Product:
    if not isinstance(entry, dict):
        raise DeclarationError(f"Product #{index} must be a mapping, got {entry!r}")
    kind = entry.get("type")
    if kind not in _PRODUCT_TYPES:
        raise DeclarationError(
            f"Product #{index} has unknown type {kind!r}; "
            f"expected one of {', '.join(_PRODUCT_TYPES)}"
        )

    if kind == "library":
        names = _require(entry, index, "names", "name")
        if isinstance(names, str):
            names = [names]
        if (
            not isinstance(names, list)
            or not names
            or not all(isinstance(n, str) for n in names)
        ):
            raise DeclarationError(
                f"Product #{index} names must be a non-empty list of strings"
            )
        if entry.get("dir") is not None:
            dir_path = base / str(entry["dir"])
        elif prefix is not None:
            dir_path = library_dir(prefix, platform)
        else:
            raise DeclarationError(
                f"Product #{index} needs 'dir' when no prefix is declared"
            )
        return LibraryProduct(
            dir_path, names, _variable(entry, index, names[0])
        )

    if kind == "executable":
        if entry.get("path") is not None:
            path = base / str(entry["path"])
        elif prefix is not None:
            path = binary_dir(prefix) / str(_require(entry, index, "name"))
        else:
            path = base / str(_require(entry, index, "path", "name"))
        return ExecutableProduct(path, _variable(entry, index, path.name))

    path = base / str(_require(entry, index, "path"))
    return FileProduct(path, _variable(entry, index, path.name))


def parse_declarations(
    data: Any, source_path: Path, platform: Platform | None = None
) -> Declarations:
    """Build ``Declarations`` from already-parsed YAML data.

    Args:
        data: Result of ``yaml.safe_load`` on the declaration file.
        source_path: Path of the file, used to resolve relative paths.
        platform: Overrides the platform named in the file.

    Raises:
        DeclarationError: If the data does not describe valid products.
    """
    if not isinstance(data, dict):
        raise DeclarationError(f"{source_path}: top level must be a mapping")

    root = source_path.parent
    prefix = Prefix(root / str(data["prefix"])) if data.get("prefix") else None
    base = prefix.path if prefix is not None else root

    try:
        if platform is None:
            platform = (
                parse_platform(str(data["platform"]))
                if data.get("platform")
                else current_platform()
            )
    except PlatformError as exc:
        raise DeclarationError(f"{source_path}: {exc}") from exc

    entries = data.get("products")
    if not isinstance(entries, list) or not entries:
        raise DeclarationError(f"{source_path}: 'products' must be a non-empty list")

    products = [
        _product_from_entry(entry, index, base, prefix, platform)
        for index, entry in enumerate(entries, start=1)
    ]
    return Declarations(
        products=products, platform=platform, prefix=prefix, source_path=source_path
    )


def load_declarations(path: Path, platform: Platform | None = None) -> Declarations:
    """Read and parse a YAML declaration file.

    Args:
        path: The declaration file.
        platform: Overrides the platform named in the file.

    Raises:
        DeclarationError: If the file cannot be read, is not valid YAML,
            or declares invalid products.
    """
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except (OSError, UnicodeDecodeError) as exc:
        raise DeclarationError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DeclarationError(f"{path} is not valid YAML: {exc}") from exc
    return parse_declarations(data, path, platform)
