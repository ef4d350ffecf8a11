"""Per-method installation simulators.

Each simulator writes the artifacts a real installation through that method
would leave behind, so probes cannot tell a simulated install from a real one.
"""

import json
import logging

from installsim.database import BundleInfo, PackageMetadata
from installsim.filesystem.commands import run_post_install_command
from installsim.filesystem.layout import RootLayout
from installsim.filesystem.targets import (
    BundleTarget,
    InstallTarget,
    ReleaseTarget,
    RepositoryTarget,
    ScriptTarget,
)
from installsim.synthesizer import BinaryProfile, FakeBinarySynthesizer

logger = logging.getLogger(__name__)

# Fixed so installation records are byte-for-byte reproducible.
INSTALL_TIMESTAMP = "2024-03-15T10:30:00Z"

DEFAULT_RUNTIME = "org.freedesktop.Platform"
DEFAULT_SDK = "org.freedesktop.Sdk"
DEFAULT_RUNTIME_VERSION = "22.08"
DEFAULT_ARCH = "x86_64"

# flatpak finish-arg prefix -> metadata [Context] key
_CONTEXT_KEYS = {
    "share": "shared",
    "socket": "sockets",
    "device": "devices",
    "filesystem": "filesystems",
}


def simulate(layout: RootLayout, synthesizer: FakeBinarySynthesizer, target: InstallTarget) -> None:
    """Dispatch a resolved target to its method's simulator."""
    match target:
        case RepositoryTarget(package=pkg):
            simulate_repository_install(layout, synthesizer, pkg)
        case BundleTarget(package=pkg, bundle=bundle):
            simulate_bundle_install(layout, pkg, bundle)
        case ReleaseTarget(package=pkg):
            simulate_release_install(layout, synthesizer, pkg)
        case ScriptTarget():
            simulate_script_install(layout, synthesizer, target)


def simulate_repository_install(
    layout: RootLayout, synthesizer: FakeBinarySynthesizer, pkg: PackageMetadata
) -> None:
    """Write a stub and append a status block.

    The status file is appended to, never rewritten: installing the same
    package twice leaves two blocks, as a real status file can.
    """
    synthesizer.create_binary(
        BinaryProfile(
            name=pkg.name,
            version=pkg.version,
            help_text=f"{pkg.name} - {pkg.description}",
            flags={"--version": f"{pkg.name} {pkg.version}"},
        )
    )

    layout.status_path.parent.mkdir(parents=True, exist_ok=True)
    with open(layout.status_path, "a", encoding="ascii", errors="replace") as f:
        f.write(format_status_block(pkg))


def format_status_block(pkg: PackageMetadata) -> str:
    """Render one status-file record, terminated by a blank line."""
    return (
        f"Package: {pkg.name}\n"
        "Status: install ok installed\n"
        f"Priority: {pkg.priority}\n"
        f"Section: {pkg.section}\n"
        f"Maintainer: {pkg.maintainer}\n"
        f"Architecture: {pkg.architecture}\n"
        f"Version: {pkg.version}\n"
        f"Description: {pkg.description}\n"
        f" {pkg.description}\n"
        "\n"
    )


def simulate_bundle_install(
    layout: RootLayout, pkg: PackageMetadata, bundle: BundleInfo | None
) -> None:
    """Create the bundle's app directory, metadata file and desktop entry."""
    app_dir = layout.bundle_app_dir / pkg.source
    metadata_path = app_dir / "current" / "active" / "metadata"
    metadata_path.parent.mkdir(parents=True, exist_ok=True)
    metadata_path.write_text(format_bundle_metadata(pkg.source, bundle), encoding="utf-8")

    display_name = bundle.name if bundle is not None else pkg.name
    desktop_path = layout.desktop_dir / (pkg.source.replace(".", "_") + ".desktop")
    desktop_path.parent.mkdir(parents=True, exist_ok=True)
    desktop_path.write_text(
        "[Desktop Entry]\n"
        "Version=1.0\n"
        "Type=Application\n"
        f"Name={display_name}\n"
        f"Comment={pkg.description}\n"
        f"Exec=flatpak run {pkg.source}\n"
        f"Icon={pkg.source}\n"
        "Terminal=false\n"
        "Categories=Application;\n",
        encoding="utf-8",
    )


def format_bundle_metadata(bundle_id: str, bundle: BundleInfo | None) -> str:
    """Render the bundle metadata keyfile with its permission context."""
    runtime = DEFAULT_RUNTIME
    sdk = DEFAULT_SDK
    runtime_version = DEFAULT_RUNTIME_VERSION
    context = {"shared": ["ipc"], "sockets": ["x11", "wayland"]}

    if bundle is not None:
        runtime = bundle.runtime or runtime
        sdk = bundle.sdk or sdk
        runtime_version = bundle.runtime_version or runtime_version
        if bundle.permissions:
            context = _permission_context(bundle.permissions)

    lines = [
        "[Application]",
        f"name={bundle_id}",
        f"runtime={runtime}/{DEFAULT_ARCH}/{runtime_version}",
        f"sdk={sdk}/{DEFAULT_ARCH}/{runtime_version}",
        "",
        "[Context]",
    ]
    lines.extend(f"{key}={';'.join(values)};" for key, values in context.items())
    return "\n".join(lines) + "\n"


def _permission_context(permissions: tuple[str, ...]) -> dict[str, list[str]]:
    context: dict[str, list[str]] = {}
    for permission in permissions:
        prefix, sep, value = permission.lstrip("-").partition("=")
        key = _CONTEXT_KEYS.get(prefix)
        if not sep or key is None:
            logger.debug(f"Ignoring bundle permission without context mapping: {permission}")
            continue
        context.setdefault(key, []).append(value)
    return context


def simulate_release_install(
    layout: RootLayout, synthesizer: FakeBinarySynthesizer, pkg: PackageMetadata
) -> None:
    """Write a stub plus a JSON installation record."""
    synthesizer.create_binary(
        BinaryProfile(
            name=pkg.name,
            version=pkg.version,
            help_text=f"{pkg.name} - release binary",
            flags={"--version": f"{pkg.name} {pkg.version}"},
        )
    )

    record_path = layout.install_record_dir / f"{pkg.name}.json"
    record_path.parent.mkdir(parents=True, exist_ok=True)
    record = {
        "name": pkg.name,
        "version": pkg.version,
        "method": pkg.method,
        "source": pkg.source,
        "installed_at": INSTALL_TIMESTAMP,
    }
    record_path.write_text(json.dumps(record, indent=2) + "\n", encoding="utf-8")


def simulate_script_install(
    layout: RootLayout, synthesizer: FakeBinarySynthesizer, target: ScriptTarget
) -> None:
    """Write a stub named after the script's binary and run its post-install steps."""
    script = target.script
    synthesizer.create_binary(
        BinaryProfile(
            name=script.name,
            version="custom",
            help_text=f"{script.name} - {script.description}",
            flags={"--version": f"{script.name} custom"},
        )
    )

    for command in script.post_install:
        run_post_install_command(layout, command)
