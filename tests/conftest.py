"""Pytest configuration for installer tests."""
from pathlib import Path

import pytest

from zen_installer.installer import InstallOptions

from .util import CopyFetcher, build_bundle


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def bundle_src(tmp_path: Path) -> Path:
    return build_bundle(tmp_path / "bundle-src")


@pytest.fixture
def fetcher(bundle_src: Path) -> CopyFetcher:
    return CopyFetcher(bundle_src)


@pytest.fixture
def tmp_root(tmp_path: Path) -> Path:
    return tmp_path / "tmp"


@pytest.fixture
def options(tmp_path: Path, tmp_root: Path) -> InstallOptions:
    return InstallOptions(profile_dir=tmp_path / "home" / ".claude", tmp_root=tmp_root)
