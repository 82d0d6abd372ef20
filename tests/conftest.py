"""Shared fixtures for buildproducts tests."""

from __future__ import annotations

import os
import pathlib
import stat

import pytest

from buildproducts.core.platforms import OS, Platform, current_platform, dlext


class RecordingLoader:
    """Fake load test that records every path it is asked about.

    Attributes:
        calls: Paths passed to the loader, in call order.
        loadable: File names (basenames) that "load" successfully.
    """

    def __init__(self, loadable: set[str] | None = None, accept_all: bool = False) -> None:
        self.calls: list[pathlib.Path] = []
        self.loadable = loadable or set()
        self.accept_all = accept_all

    def __call__(self, path: pathlib.Path) -> bool:
        self.calls.append(path)
        return self.accept_all or path.name in self.loadable


def touch(path: pathlib.Path, content: str = "", mode: int | None = None) -> pathlib.Path:
    """Create a file (and its parents) with optional permission bits."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    if mode is not None:
        os.chmod(path, mode)
    return path


@pytest.fixture
def host() -> Platform:
    """The running host platform."""
    return current_platform()


@pytest.fixture
def foreign(host: Platform) -> Platform:
    """A platform with the host's naming rules but a different architecture."""
    return Platform(host.os, "powerpc64le" if host.arch != "powerpc64le" else "x86_64")


@pytest.fixture
def host_ext(host: Platform) -> str:
    """Shared library extension of the host platform."""
    return dlext(host)


@pytest.fixture
def linux_cross(host: Platform) -> Platform:
    """A Linux target that is never the test host."""
    arch = "aarch64" if host == Platform(OS.LINUX, "powerpc64le") else "powerpc64le"
    return Platform(OS.LINUX, arch)


@pytest.fixture
def windows() -> Platform:
    return Platform(OS.WINDOWS, "x86_64")


@pytest.fixture
def executable_mode() -> int:
    return stat.S_IRUSR | stat.S_IWUSR | stat.S_IXUSR | stat.S_IRGRP | stat.S_IROTH


@pytest.fixture
def make_file():
    """Return the ``touch`` helper for building product trees."""
    return touch


@pytest.fixture
def make_loader():
    """Return the ``RecordingLoader`` class for fake load tests."""
    return RecordingLoader
