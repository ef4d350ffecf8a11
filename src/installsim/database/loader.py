"""Fixture file I/O for the synthetic package database.

Fixtures are structured files (JSON or YAML). Everything is parsed with
PyYAML, which accepts JSON documents as well.
"""

from pathlib import Path
from typing import Any

import yaml

from installsim.database.types import (
    BundleInfo,
    PackageMetadata,
    ReleaseAsset,
    ReleaseInfo,
    RepositoryInfo,
)
from installsim.errors import FixtureLoadError

FIXTURE_EXTENSIONS = ("json", "yaml", "yml")

REPOSITORY_CATALOG_DIR = Path("packages") / "apt_cache"
REPOSITORY_CATALOG_STEM = "available_packages"
BUNDLE_CATALOG_DIR = Path("packages") / "flatpak_info"
BUNDLE_CATALOG_STEM = "available_flatpaks"
RELEASES_DIR = Path("packages") / "github_releases"
RELEASE_FILE_SUFFIX = "_latest"


def find_fixture(directory: Path, stem: str) -> Path | None:
    """Return the first existing `<stem>.<ext>` file in directory, or None."""
    for ext in FIXTURE_EXTENSIONS:
        candidate = directory / f"{stem}.{ext}"
        if candidate.is_file():
            return candidate
    return None


def read_structured_file(path: Path) -> dict[str, Any]:
    """Read a fixture file and return its top-level mapping.

    Raises:
        FixtureLoadError: If the file is unreadable, unparseable, or not a mapping
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise FixtureLoadError(path, str(e)) from e
    except yaml.YAMLError as e:
        raise FixtureLoadError(path, f"invalid structured data: {e}") from e

    if not isinstance(data, dict):
        raise FixtureLoadError(path, "top-level value must be a mapping")
    return data


def load_repository_catalog(
    path: Path,
) -> tuple[dict[str, PackageMetadata], dict[str, RepositoryInfo]]:
    """Load the repository-package catalog.

    Every package is tagged with the repository method and uses its own name
    as source, regardless of what the file says.
    """
    data = read_structured_file(path)
    packages: dict[str, PackageMetadata] = {}
    for name, entry in _mapping(data, "packages", path).items():
        entry = _entry(entry, path, name)
        packages[name] = PackageMetadata(
            name=name,
            version=str(entry.get("version", "")),
            method="repository",
            source=name,
            description=str(entry.get("description", "")),
            size=_int(entry.get("size", 0), path, name),
            architecture=str(entry.get("architecture", "")),
            section=str(entry.get("section", "")),
            priority=str(entry.get("priority", "")),
            maintainer=str(entry.get("maintainer", "")),
            dependencies=tuple(str(dep) for dep in entry.get("dependencies") or []),
            available=bool(entry.get("available", True)),
            extra_data=dict(entry.get("extra_data") or {}),
        )

    repositories = {
        name: _repository(name, entry, path)
        for name, entry in _mapping(data, "repositories", path).items()
    }
    return packages, repositories


def load_bundle_catalog(path: Path) -> tuple[dict[str, BundleInfo], dict[str, RepositoryInfo]]:
    """Load the bundle catalog (bundles keyed by ID plus their remotes)."""
    data = read_structured_file(path)
    bundles: dict[str, BundleInfo] = {}
    for bundle_id, entry in _mapping(data, "flatpaks", path).items():
        entry = _entry(entry, path, bundle_id)
        bundles[bundle_id] = BundleInfo(
            name=str(entry.get("name", bundle_id)),
            id=str(entry.get("id", bundle_id)),
            version=str(entry.get("version", "")),
            description=str(entry.get("description", "")),
            size=_int(entry.get("size", 0), path, bundle_id),
            runtime=str(entry.get("runtime", "")),
            runtime_version=str(entry.get("runtime_version", "")),
            sdk=str(entry.get("sdk", "")),
            permissions=tuple(str(p) for p in entry.get("permissions") or []),
            remote=str(entry.get("remote", "")),
            branch=str(entry.get("branch", "stable")),
            available=bool(entry.get("available", True)),
        )

    remotes = {
        name: _repository(name, entry, path)
        for name, entry in _mapping(data, "remotes", path).items()
    }
    return bundles, remotes


def load_release(path: Path) -> ReleaseInfo:
    """Load one release-metadata file."""
    data = read_structured_file(path)
    assets: list[ReleaseAsset] = []
    for raw in data.get("assets") or []:
        asset = _entry(raw, path, "asset")
        try:
            assets.append(
                ReleaseAsset(
                    id=int(asset.get("id", 0)),
                    name=str(asset["name"]),
                    size=int(asset.get("size", 0)),
                    download_count=int(asset.get("download_count", 0)),
                    browser_download_url=str(asset.get("browser_download_url", "")),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise FixtureLoadError(path, f"malformed asset entry: {e}") from e

    tag_name = data.get("tag_name")
    if not tag_name:
        raise FixtureLoadError(path, "missing 'tag_name'")

    return ReleaseInfo(
        tag_name=str(tag_name),
        name=str(data.get("name", tag_name)),
        draft=bool(data.get("draft", False)),
        prerelease=bool(data.get("prerelease", False)),
        created_at=str(data.get("created_at", "")),
        published_at=str(data.get("published_at", "")),
        body=str(data.get("body", "")),
        assets=tuple(assets),
    )


def repo_from_release_filename(filename: str) -> str | None:
    """Derive "owner/repo" from a `<owner>_<repo>_latest.<ext>` filename.

    Owner names cannot contain underscores, so the first underscore separates
    owner from repository; the repository part may contain underscores.

    Returns:
        "owner/repo", or None if the filename does not follow the convention
    """
    stem, _, ext = filename.rpartition(".")
    if ext not in FIXTURE_EXTENSIONS or not stem.endswith(RELEASE_FILE_SUFFIX):
        return None
    stem = stem.removesuffix(RELEASE_FILE_SUFFIX)
    owner, sep, repo = stem.partition("_")
    if not sep or not owner or not repo:
        return None
    return f"{owner}/{repo}"


def _mapping(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise FixtureLoadError(path, f"'{key}' must be a mapping")
    return value


def _entry(value: Any, path: Path, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise FixtureLoadError(path, f"entry '{name}' must be a mapping")
    return value


def _int(value: Any, path: Path, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise FixtureLoadError(path, f"entry '{name}' has a non-integer size") from e


def _repository(name: str, entry: Any, path: Path) -> RepositoryInfo:
    entry = _entry(entry, path, name)
    return RepositoryInfo(
        name=str(entry.get("name", name)),
        url=str(entry.get("url", "")),
        description=str(entry.get("description", "")),
        components=tuple(str(c) for c in entry.get("components") or []),
        enabled=bool(entry.get("enabled", True)),
        gpg_verify=bool(entry.get("gpg_verify", True)),
    )
