"""Data types for the synthetic package database."""

from dataclasses import dataclass, field
from typing import Any, Literal, cast

InstallMethod = Literal["repository", "bundle", "release", "script"]

INSTALL_METHODS: tuple[InstallMethod, ...] = ("repository", "bundle", "release", "script")


def validate_install_method(value: str) -> InstallMethod:
    """Validate and return an installation method tag.

    Args:
        value: String to validate

    Returns:
        Valid InstallMethod

    Raises:
        ValueError: If value is not a recognized installation method
    """
    if value not in INSTALL_METHODS:
        raise ValueError(f"Invalid installation method: {value}")
    return cast(InstallMethod, value)


@dataclass(frozen=True)
class PackageMetadata:
    """One installable unit in the unified package index.

    The meaning of `source` depends on `method`: the package name for
    repository packages, the bundle ID for bundles, "owner/repo" for releases
    and the script-registry key for scripts.

    `method` is kept as a plain string so records with an unrecognized tag can
    still be represented; the virtual root rejects them at install time.
    """

    name: str
    version: str
    method: str
    source: str
    description: str = ""
    size: int = 0
    architecture: str = ""
    section: str = ""
    priority: str = ""
    maintainer: str = ""
    dependencies: tuple[str, ...] = ()
    available: bool = True
    extra_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RepositoryInfo:
    """A package source (apt repository or bundle remote)."""

    name: str
    url: str
    description: str = ""
    components: tuple[str, ...] = ()
    enabled: bool = True
    gpg_verify: bool = True


@dataclass(frozen=True)
class ReleaseAsset:
    """A downloadable file attached to a release."""

    id: int
    name: str
    size: int
    download_count: int
    browser_download_url: str


@dataclass(frozen=True)
class ReleaseInfo:
    """A versioned release record as served by a code-hosting release API."""

    tag_name: str
    name: str
    draft: bool
    prerelease: bool
    created_at: str
    published_at: str
    body: str
    assets: tuple[ReleaseAsset, ...]

    def find_asset(self, platform: str) -> ReleaseAsset | None:
        """Return the first asset whose name mentions `platform` (case-insensitive)."""
        needle = platform.lower()
        for asset in self.assets:
            if needle in asset.name.lower():
                return asset
        return None


@dataclass(frozen=True)
class BundleInfo:
    """A sandboxed application bundle."""

    name: str
    id: str
    version: str
    description: str = ""
    size: int = 0
    runtime: str = ""
    runtime_version: str = ""
    sdk: str = ""
    permissions: tuple[str, ...] = ()
    remote: str = ""
    branch: str = "stable"
    available: bool = True


@dataclass(frozen=True)
class ScriptInfo:
    """A named custom install procedure.

    `name` is the binary the procedure installs; the registry key that
    PackageMetadata.source points at is a separate identifier.
    """

    name: str
    description: str
    commands: tuple[str, ...]
    pre_reqs: tuple[str, ...] = ()
    post_install: tuple[str, ...] = ()
    variables: dict[str, str] = field(default_factory=dict)
