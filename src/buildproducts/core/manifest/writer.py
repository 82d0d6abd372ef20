"""Manifest writer --- generate a ``deps.py`` module for satisfied products.

``write_deps_file`` is the last step of a build script: once every
product has been installed, it records where each one ended up. Given::

    fooifier = ExecutableProduct(prefix / "bin" / "fooifier", "fooifier")
    libbar = LibraryProduct(prefix / "lib", "libbar", "libbar")
    write_deps_file(Path(__file__).parent / "deps.py", [fooifier, libbar])

the generated module contains::

    fooifier = '<pkg path>/deps/usr/bin/fooifier'
    libbar = '<pkg path>/deps/usr/lib/libbar.so'

plus a ``check_deps()`` function the package calls at import time. It
re-checks every path (and that libraries still load) and raises
``DependencyError`` asking the user to rebuild if anything is wrong.

Generation refuses to run if any product is unsatisfied, two products
share a variable name, or a variable name would shadow one of the
module's own helpers; nothing is written in those cases. Output is
deterministic: identical inputs produce byte-identical files.
"""

from __future__ import annotations

import logging
import os
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from buildproducts.core.manifest.template import (
    DEPS_HEADER,
    DEPS_MODULE,
    EXISTS_CHECK,
    OPEN_CHECK,
    RESERVED_NAMES,
)
from buildproducts.core.platforms import Platform, current_platform
from buildproducts.core.products import LibraryProduct, Loader, Product, variable_name
from buildproducts.exceptions import (
    DuplicateVariableError,
    ManifestWriteError,
    ReservedVariableError,
    UnsatisfiedProductError,
)

logger = logging.getLogger(__name__)


def path_literal(path: str | os.PathLike[str]) -> str:
    """Return a Python string literal that evaluates to ``path``.

    Backslashes, quotes, control characters and the surrogate escapes
    used for undecodable file names all come out as escape sequences, so
    the literal is safe to embed in UTF-8 source.
    """
    return repr(os.fspath(path))


def _default_package_name(output_path: Path) -> str:
    # <pkg>/deps/deps.py -> "pkg"
    return output_path.absolute().parent.parent.name


def render_deps_file(
    located: Sequence[tuple[Product, Path]], package_name: str
) -> str:
    """Render the source of a ``deps.py`` module.

    Args:
        located: ``(product, path)`` pairs in the order they should appear.
        package_name: Package named in the rebuild instruction.

    Returns:
        Python source text.
    """
    bindings = [
        f"{variable_name(product)} = {path_literal(path)}"
        for product, path in located
    ]

    checks: list[str] = []
    for product, _ in located:
        name = variable_name(product)
        checks.append(EXISTS_CHECK.replace("{{NAME}}", name))
        # Only libraries need to stay loadable
        if isinstance(product, LibraryProduct):
            checks.append(OPEN_CHECK.replace("{{NAME}}", name))
    if not checks:
        checks.append("    pass\n")

    rebuild = f'Please re-run the build for "{package_name}" and restart Python.'
    return (
        DEPS_MODULE.replace("{{HEADER}}", DEPS_HEADER)
        .replace("{{BINDINGS}}", "\n".join(bindings))
        .replace("{{REBUILD}}", repr(rebuild))
        .replace("{{CHECKS}}", "".join(checks).rstrip("\n"))
    )


def write_deps_file(
    output_path: str | os.PathLike[str],
    products: Sequence[Product],
    verbose: bool = False,
    platform: Platform | None = None,
    package_name: str | None = None,
    loader: Loader | None = None,
) -> Path:
    """Generate a ``deps.py`` module binding each product's variable to its path.

    Every product must be satisfied *now*; install the binaries before
    calling this.

    Args:
        output_path: Where to write the module (e.g. ``<pkg>/deps/deps.py``).
        products: Products to record, in output order.
        verbose: Log search diagnostics at INFO.
        platform: Target platform; defaults to the running host.
        package_name: Package named in the rebuild instruction. Defaults to
            the directory two levels above ``output_path``.
        loader: Load-test override passed to library products.

    Returns:
        The path written.

    Raises:
        DuplicateVariableError: If two products share a variable name.
        ReservedVariableError: If a variable name would shadow a name the
            generated module defines itself.
        UnsatisfiedProductError: If any product cannot be located.
        ManifestWriteError: If the file cannot be written.
    """
    output_path = Path(output_path)
    if platform is None:
        platform = current_platform()

    counts = Counter(variable_name(p) for p in products)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateVariableError(duplicates)
    reserved = sorted(name for name in counts if name in RESERVED_NAMES)
    if reserved:
        raise ReservedVariableError(reserved)

    located: list[tuple[Product, Path]] = []
    missing: list[Product] = []
    for product in products:
        path = product.locate(platform=platform, verbose=verbose, loader=loader)
        if path is None:
            missing.append(product)
        else:
            located.append((product, path))
    if missing:
        raise UnsatisfiedProductError(missing)

    if package_name is None:
        package_name = _default_package_name(output_path)
    source = render_deps_file(located, package_name)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise ManifestWriteError(f"Cannot write {output_path}: {exc}") from exc

    logger.info("Wrote %d product(s) to %s", len(located), output_path)
    return output_path
