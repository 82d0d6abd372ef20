"""Property-based tests for product naming and manifest determinism.

Verifies that:
- Library name recognition accepts exactly the versioned forms each platform uses.
- Guessed variable names never contain separators.
- FileProduct satisfaction tracks file existence.
- Manifest generation is byte-for-byte deterministic.
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from buildproducts.core.manifest import write_deps_file
from buildproducts.core.manifest.template import RESERVED_NAMES
from buildproducts.core.platforms import OS, Platform, valid_dl_path
from buildproducts.core.products import FileProduct, guess_variable_name


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

stems = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz_+0123456789"),
    min_size=1,
    max_size=16,
)

version_parts = st.lists(st.integers(min_value=0, max_value=999), max_size=3)

identifiers = st.from_regex(r"[a-z][a-z0-9_]{0,12}", fullmatch=True).filter(
    lambda s: s not in RESERVED_NAMES
)

LINUX = Platform(OS.LINUX, "x86_64")
MACOS = Platform(OS.MACOS, "aarch64")
WINDOWS = Platform(OS.WINDOWS, "x86_64")


# ---------------------------------------------------------------------------
# Naming rules
# ---------------------------------------------------------------------------


class TestLibraryNaming:
    """Shared object names with up to three numeric version parts."""

    @given(stem=stems, parts=version_parts)
    def test_versioned_so_accepted_on_linux(self, stem: str, parts: list[int]) -> None:
        name = f"lib{stem}.so" + "".join(f".{p}" for p in parts)
        assert valid_dl_path(name, LINUX)

    @given(stem=stems, parts=st.lists(st.integers(min_value=0, max_value=99), min_size=4, max_size=6))
    def test_too_many_version_parts_rejected(self, stem: str, parts: list[int]) -> None:
        name = f"lib{stem}.so" + "".join(f".{p}" for p in parts)
        assert not valid_dl_path(name, LINUX)

    @given(stem=stems, parts=version_parts)
    def test_so_never_a_library_on_macos_or_windows(self, stem: str, parts: list[int]) -> None:
        name = f"lib{stem}.so" + "".join(f".{p}" for p in parts)
        assert not valid_dl_path(name, MACOS)
        assert not valid_dl_path(name, WINDOWS)

    @given(stem=stems)
    def test_extension_matches_platform(self, stem: str) -> None:
        assert valid_dl_path(f"{stem}.dylib", MACOS)
        assert valid_dl_path(f"{stem}.dll", WINDOWS)
        assert not valid_dl_path(f"{stem}.dll", LINUX)


class TestGuessVariableName:
    @given(
        path=st.text(
            alphabet=st.sampled_from("abc-._/0123456789"), min_size=1, max_size=30
        )
    )
    def test_no_separators_in_result(self, path: str) -> None:
        name = guess_variable_name(path)
        assert "-" not in name
        assert "." not in name
        assert "/" not in name

    @given(name=identifiers)
    def test_identifiers_unchanged(self, name: str) -> None:
        assert guess_variable_name(f"some/dir/{name}") == name


# ---------------------------------------------------------------------------
# Products and manifests
# ---------------------------------------------------------------------------


class TestFileProductProperties:
    @given(name=identifiers, create=st.booleans())
    @settings(max_examples=30)
    def test_satisfied_iff_file_exists(self, name: str, create: bool) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / f"{name}.dat"
            if create:
                path.write_text("x")
            fp = FileProduct(path, name)
            assert fp.satisfied() == path.is_file()
            assert (fp.locate() == path) == create


class TestManifestDeterminism:
    @given(names=st.lists(identifiers, min_size=1, max_size=6, unique=True))
    @settings(max_examples=25)
    def test_same_products_same_bytes(self, names: list[str]) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            products = []
            for name in names:
                path = root / "share" / f"{name}.dat"
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(name)
                products.append(FileProduct(path, name))

            first = write_deps_file(root / "a" / "deps.py", products, package_name="pkg")
            second = write_deps_file(root / "b" / "deps.py", products, package_name="pkg")
            assert first.read_bytes() == second.read_bytes()

    @given(names=st.lists(identifiers, min_size=2, max_size=6, unique=True))
    @settings(max_examples=25)
    def test_bindings_follow_input_order(self, names: list[str]) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            products = []
            for name in names:
                path = root / f"{name}.dat"
                path.write_text(name)
                products.append(FileProduct(path, name))

            text = write_deps_file(root / "deps.py", products, package_name="pkg").read_text()
            positions = [text.index(f"\n{name} = '") for name in names]
            assert positions == sorted(positions)
