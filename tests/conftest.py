"""Shared pytest fixtures.

Every virtual root lives under tmp_path and is torn down after the test.
"""

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from installsim.database import PackageDatabase
from installsim.filesystem import VirtualRoot
from installsim.fixtures import bundled_fixtures_dir

FixtureWriter = Callable[..., Path]


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return bundled_fixtures_dir()


@pytest.fixture
def database(fixtures_dir: Path) -> PackageDatabase:
    return PackageDatabase.from_fixtures(fixtures_dir)


@pytest.fixture
def virtual_root(tmp_path: Path, database: PackageDatabase) -> Iterator[VirtualRoot]:
    vroot = VirtualRoot(tmp_path / "root", database=database)
    yield vroot
    vroot.cleanup()


@pytest.fixture
def write_fixtures(tmp_path: Path) -> FixtureWriter:
    """Factory writing a minimal fixture tree under tmp_path/fixtures.

    Both catalogs are always written (empty unless given); release files are
    only written when `releases` maps filenames to release documents.
    """

    def _write(
        *,
        packages: dict[str, Any] | None = None,
        repositories: dict[str, Any] | None = None,
        flatpaks: dict[str, Any] | None = None,
        remotes: dict[str, Any] | None = None,
        releases: dict[str, Any] | None = None,
    ) -> Path:
        root = tmp_path / "fixtures"
        _write_json(
            root / "packages" / "apt_cache" / "available_packages.json",
            {"packages": packages or {}, "repositories": repositories or {}},
        )
        _write_json(
            root / "packages" / "flatpak_info" / "available_flatpaks.json",
            {"flatpaks": flatpaks or {}, "remotes": remotes or {}},
        )
        for filename, release in (releases or {}).items():
            _write_json(root / "packages" / "github_releases" / filename, release)
        return root

    return _write
