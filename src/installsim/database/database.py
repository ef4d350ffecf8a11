"""Synthetic package database backed by on-disk fixtures.

Four independent loaders (repository catalog, bundle catalog, release files,
built-in script registry) populate one package index keyed by name, so callers
can query packages uniformly regardless of installation method. Only the
database keeps method-specific structure (release assets, bundle runtimes,
script steps) for callers that need it.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from installsim.database.loader import (
    BUNDLE_CATALOG_DIR,
    BUNDLE_CATALOG_STEM,
    RELEASES_DIR,
    REPOSITORY_CATALOG_DIR,
    REPOSITORY_CATALOG_STEM,
    find_fixture,
    load_bundle_catalog,
    load_release,
    load_repository_catalog,
    repo_from_release_filename,
)
from installsim.database.scripts import CUSTOM_SCRIPTS
from installsim.database.types import (
    BundleInfo,
    PackageMetadata,
    ReleaseInfo,
    RepositoryInfo,
    ScriptInfo,
)
from installsim.errors import FixtureLoadError

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM = "linux"


class PackageDatabase:
    """In-memory indexes of packages, repositories, bundles, releases and scripts.

    Lookups never mutate state. Instances are not safe for concurrent mutation.

    Examples:
        >>> db = PackageDatabase.from_fixtures(fixtures_dir)
        >>> db.get_package("vim").method
        'repository'
        >>> db.validate()
        []
    """

    def __init__(self) -> None:
        self._packages: dict[str, PackageMetadata] = {}
        self._dependencies: dict[str, tuple[str, ...]] = {}
        self._repositories: dict[str, RepositoryInfo] = {}
        self._releases: dict[str, ReleaseInfo] = {}
        self._bundles: dict[str, BundleInfo] = {}
        self._scripts: dict[str, ScriptInfo] = {}

    @classmethod
    def from_fixtures(cls, fixture_root: Path) -> "PackageDatabase":
        """Create a database and load it from a fixture directory."""
        db = cls()
        db.load(fixture_root)
        return db

    def load(self, fixture_root: Path) -> None:
        """Populate every index from a fixture directory.

        Sources load in the order repository, bundle, release, script, and a
        later source replaces an earlier entry of the same name with a
        warning. A repository package named like a built-in script (such as
        `mise`) therefore ends up with method `script`.

        Args:
            fixture_root: Directory containing the `packages/` fixture tree

        Raises:
            FixtureLoadError: If a required catalog is missing, unreadable or
                malformed, or if a present release file cannot be parsed
        """
        self._load_repository_packages(fixture_root)
        self._load_bundles(fixture_root)
        self._load_releases(fixture_root)
        self._load_scripts()

        logger.debug(
            f"Loaded offline package database: {len(self._packages)} packages, "
            f"{len(self._bundles)} bundles, {len(self._releases)} releases"
        )

    def add_package(self, pkg: PackageMetadata) -> None:
        """Register a package record directly.

        Repository-method packages also contribute their dependency edges.
        """
        self._index(pkg)
        if pkg.method == "repository":
            self._dependencies[pkg.name] = pkg.dependencies

    def get_package(self, name: str) -> PackageMetadata | None:
        """Return the package indexed under name, or None."""
        return self._packages.get(name)

    def get_all_packages(self) -> dict[str, PackageMetadata]:
        """Return a copy of the package index."""
        return dict(self._packages)

    def get_release(self, repo: str) -> ReleaseInfo | None:
        """Return the release tracked for "owner/repo", or None."""
        return self._releases.get(repo)

    def get_bundle(self, bundle_id: str) -> BundleInfo | None:
        """Return the bundle with this ID, or None."""
        return self._bundles.get(bundle_id)

    def get_script(self, name: str) -> ScriptInfo | None:
        """Return the script registered under this registry key, or None."""
        return self._scripts.get(name)

    @property
    def repositories(self) -> dict[str, RepositoryInfo]:
        """Repositories and bundle remotes (remotes are prefixed with `flatpak-`)."""
        return dict(self._repositories)

    def get_packages_by_method(self, method: str) -> list[PackageMetadata]:
        """Return every package installed through the given method."""
        return [pkg for pkg in self._packages.values() if pkg.method == method]

    def get_dependencies(self, name: str) -> list[str]:
        """Return the dependency names of a repository package (empty if unknown)."""
        return list(self._dependencies.get(name, ()))

    def is_package_available(self, name: str) -> bool:
        """Check whether a package exists and is marked available."""
        pkg = self._packages.get(name)
        return pkg is not None and pkg.available

    def search_packages(self, query: str) -> list[PackageMetadata]:
        """Case-insensitive substring search over package names and descriptions."""
        needle = query.lower()
        return [
            pkg
            for pkg in self._packages.values()
            if needle in pkg.name.lower() or needle in pkg.description.lower()
        ]

    def validate(self, platform: str = DEFAULT_PLATFORM) -> list[str]:
        """Run consistency checks and return human-readable findings.

        Findings are advisory: partial fixture sets are expected to have gaps,
        and callers choose their own tolerance.

        Args:
            platform: Substring an asset name must contain to count as usable

        Returns:
            One finding per unavailable dependency edge and per release with
            no asset for the platform
        """
        findings: list[str] = []

        for pkg_name, deps in self._dependencies.items():
            for dep in deps:
                if not self.is_package_available(dep):
                    findings.append(f"Package {pkg_name} depends on missing package {dep}")

        for repo, release in self._releases.items():
            if release.find_asset(platform) is None:
                findings.append(f"Release {repo} has no {platform} assets")

        return findings

    def statistics(self) -> dict[str, Any]:
        """Return index sizes plus a package count per installation method."""
        by_method: dict[str, int] = {}
        for pkg in self._packages.values():
            by_method[pkg.method] = by_method.get(pkg.method, 0) + 1

        return {
            "total_packages": len(self._packages),
            "releases": len(self._releases),
            "bundles": len(self._bundles),
            "custom_scripts": len(self._scripts),
            "repositories": len(self._repositories),
            "by_method": by_method,
        }

    def export_json(self, path: Path) -> None:
        """Write every index plus statistics to a JSON file."""
        data = {
            "packages": {name: asdict(pkg) for name, pkg in self._packages.items()},
            "dependencies": {name: list(deps) for name, deps in self._dependencies.items()},
            "repositories": {name: asdict(repo) for name, repo in self._repositories.items()},
            "releases": {repo: asdict(rel) for repo, rel in self._releases.items()},
            "bundles": {bid: asdict(bundle) for bid, bundle in self._bundles.items()},
            "custom_scripts": {key: asdict(script) for key, script in self._scripts.items()},
            "statistics": self.statistics(),
        }
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")

    def _index(self, pkg: PackageMetadata) -> None:
        if not pkg.name:
            raise ValueError("Package name must not be empty")
        existing = self._packages.get(pkg.name)
        if existing is not None and existing.method != pkg.method:
            logger.warning(
                f"Package {pkg.name} ({existing.method}) replaced by {pkg.method} entry"
            )
        self._packages[pkg.name] = pkg

    def _load_repository_packages(self, fixture_root: Path) -> None:
        directory = fixture_root / REPOSITORY_CATALOG_DIR
        path = find_fixture(directory, REPOSITORY_CATALOG_STEM)
        if path is None:
            raise FixtureLoadError(
                directory / f"{REPOSITORY_CATALOG_STEM}.json", "repository catalog not found"
            )

        packages, repositories = load_repository_catalog(path)
        for pkg in packages.values():
            self.add_package(pkg)
        self._repositories.update(repositories)

    def _load_bundles(self, fixture_root: Path) -> None:
        directory = fixture_root / BUNDLE_CATALOG_DIR
        path = find_fixture(directory, BUNDLE_CATALOG_STEM)
        if path is None:
            raise FixtureLoadError(
                directory / f"{BUNDLE_CATALOG_STEM}.json", "bundle catalog not found"
            )

        bundles, remotes = load_bundle_catalog(path)
        for bundle_id, bundle in bundles.items():
            self._bundles[bundle_id] = bundle
            self._index(
                PackageMetadata(
                    name=bundle_id,
                    version=bundle.version,
                    method="bundle",
                    source=bundle.id,
                    description=bundle.description,
                    size=bundle.size,
                    available=bundle.available,
                )
            )
        for name, remote in remotes.items():
            self._repositories[f"flatpak-{name}"] = remote

    def _load_releases(self, fixture_root: Path) -> None:
        directory = fixture_root / RELEASES_DIR
        if not directory.is_dir():
            logger.debug(f"No release fixtures at {directory}")
            return

        for path in sorted(directory.iterdir()):
            repo = repo_from_release_filename(path.name)
            if repo is None or not path.is_file():
                continue

            release = load_release(path)
            self._releases[repo] = release

            asset = release.find_asset(DEFAULT_PLATFORM)
            self._index(
                PackageMetadata(
                    name=repo.split("/", 1)[1],
                    version=release.tag_name.removeprefix("v"),
                    method="release",
                    source=repo,
                    description=f"Release: {release.name}",
                    size=asset.size if asset is not None else 0,
                )
            )

    def _load_scripts(self) -> None:
        for key, script in CUSTOM_SCRIPTS.items():
            self._scripts[key] = script
            self._index(
                PackageMetadata(
                    name=script.name,
                    version="latest",
                    method="script",
                    source=key,
                    description=script.description,
                )
            )
