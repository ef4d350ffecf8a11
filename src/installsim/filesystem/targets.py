"""Install targets: one variant per installation method.

A target carries exactly what its simulator needs. Resolving a package into a
target performs every lookup and rejection up front, so an unsupported or
unresolvable package never causes a filesystem write.
"""

from dataclasses import dataclass

from installsim.database import BundleInfo, PackageDatabase, PackageMetadata, ScriptInfo
from installsim.errors import DatabaseNotLoadedError, ScriptNotFoundError, UnsupportedMethodError


@dataclass(frozen=True)
class RepositoryTarget:
    """Repository package: stub plus a status-file block."""

    package: PackageMetadata


@dataclass(frozen=True)
class BundleTarget:
    """Sandboxed bundle: app directory, metadata and desktop entry.

    `bundle` is None when the package was registered without a bundle catalog
    entry; the simulator then falls back to default runtime values.
    """

    package: PackageMetadata
    bundle: BundleInfo | None


@dataclass(frozen=True)
class ReleaseTarget:
    """Release binary: stub plus a JSON installation record."""

    package: PackageMetadata


@dataclass(frozen=True)
class ScriptTarget:
    """Custom script: stub named after the script's binary plus post-install steps."""

    package: PackageMetadata
    script: ScriptInfo


InstallTarget = RepositoryTarget | BundleTarget | ReleaseTarget | ScriptTarget


def resolve_target(pkg: PackageMetadata, database: PackageDatabase | None) -> InstallTarget:
    """Build the install target for a package.

    Raises:
        UnsupportedMethodError: If pkg.method is not one of the four methods
        DatabaseNotLoadedError: If a script package is resolved without a database
        ScriptNotFoundError: If the script registry has no entry for pkg.source
    """
    match pkg.method:
        case "repository":
            return RepositoryTarget(package=pkg)
        case "bundle":
            bundle = database.get_bundle(pkg.source) if database is not None else None
            return BundleTarget(package=pkg, bundle=bundle)
        case "release":
            return ReleaseTarget(package=pkg)
        case "script":
            if database is None:
                raise DatabaseNotLoadedError("script simulation")
            script = database.get_script(pkg.source)
            if script is None:
                raise ScriptNotFoundError(pkg.source)
            return ScriptTarget(package=pkg, script=script)
        case _:
            raise UnsupportedMethodError(pkg.method, pkg.name)
