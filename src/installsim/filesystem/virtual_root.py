"""Virtual root filesystem for offline installation tests.

A VirtualRoot owns one directory tree that stands in for `/`. Give every test
scenario its own root: the status file is append-only and nothing here locks,
so two scenarios sharing one instance will interleave their records.
"""

import logging
import shutil
from pathlib import Path
from types import TracebackType
from typing import Any

from installsim.database import PackageDatabase
from installsim.errors import (
    ConstructionError,
    DatabaseNotLoadedError,
    FixtureLoadError,
    NotExecutableError,
    NotInstalledError,
    PackageNotFoundError,
    RootCleanedUpError,
    SynthesisError,
)
from installsim.filesystem.layout import DEFAULT_HOME_USER, RootLayout
from installsim.filesystem.simulators import simulate
from installsim.filesystem.targets import resolve_target
from installsim.synthesizer import FakeBinarySynthesizer, is_executable

logger = logging.getLogger(__name__)

STATUS_HEADER = "Package: "


class VirtualRoot:
    """An isolated filesystem tree with simulated package installations.

    Lifecycle: constructing -> ready -> (simulate/query)* -> cleaned up.
    Construction is all-or-nothing from the caller's point of view: on failure
    ConstructionError is raised and no instance is returned, although
    directories created so far are left in place.

    "Installed" is never stored. It is derived by probing for the artifacts
    each method leaves behind, exactly as a real system would be inspected.

    Examples:
        >>> with VirtualRoot(tmp_path / "root", fixtures_dir=fixtures) as vroot:
        ...     vroot.simulate_install("vim")
        ...     vroot.is_installed("vim")
        True
    """

    def __init__(
        self,
        root: Path,
        *,
        create_binaries: bool = True,
        fixtures_dir: Path | None = None,
        database: PackageDatabase | None = None,
        home_user: str = DEFAULT_HOME_USER,
    ) -> None:
        """Create the directory skeleton and wire in collaborators.

        Args:
            root: Directory that acts as `/`; created if missing
            create_binaries: Pre-populate common and application binaries plus
                desktop entries
            fixtures_dir: Load a package database from this fixture directory
            database: Use an already-loaded database (ignored if fixtures_dir is set)
            home_user: Name of the home directory under `home/`

        Raises:
            ConstructionError: If directories, binaries or the database cannot
                be created
        """
        self._layout = RootLayout(root=root, home_user=home_user)
        self._cleaned_up = False

        try:
            for directory in self._layout.skeleton():
                directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConstructionError(root, f"directory structure: {e}") from e

        self._synthesizer = FakeBinarySynthesizer(self._layout.bin_dir)
        if create_binaries:
            try:
                self._synthesizer.create_common_binaries()
                self._synthesizer.create_application_binaries()
                self._synthesizer.create_desktop_entries(self._layout.desktop_dir)
            except SynthesisError as e:
                raise ConstructionError(root, f"binary synthesis: {e}") from e

        self._database = database
        if fixtures_dir is not None:
            try:
                self._database = PackageDatabase.from_fixtures(fixtures_dir)
            except FixtureLoadError as e:
                raise ConstructionError(root, f"package database: {e}") from e

        logger.debug(f"Created virtual root at: {root}")

    def __enter__(self) -> "VirtualRoot":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    @property
    def root(self) -> Path:
        return self._layout.root

    @property
    def layout(self) -> RootLayout:
        return self._layout

    @property
    def database(self) -> PackageDatabase | None:
        return self._database

    @property
    def synthesizer(self) -> FakeBinarySynthesizer:
        return self._synthesizer

    @property
    def is_cleaned_up(self) -> bool:
        return self._cleaned_up

    def binary_path(self, name: str) -> Path:
        return self._layout.bin_dir / name

    @property
    def config_path(self) -> Path:
        return self._layout.config_dir

    @property
    def data_path(self) -> Path:
        return self._layout.data_dir

    @property
    def temp_path(self) -> Path:
        return self._layout.temp_dir

    @property
    def home_path(self) -> Path:
        return self._layout.home_dir

    @property
    def status_path(self) -> Path:
        return self._layout.status_path

    def install_record_path(self, name: str) -> Path:
        """Where a release installation record for name is written."""
        return self._layout.install_record_dir / f"{name}.json"

    def simulate_install(self, package_name: str) -> None:
        """Simulate installing a package through its method.

        Raises:
            RootCleanedUpError: If cleanup() already ran
            DatabaseNotLoadedError: If no database is wired in
            PackageNotFoundError: If the database has no such package
            UnsupportedMethodError: If the package's method is unrecognized
                (raised before anything is written)
            ScriptNotFoundError: If a script package points at an unknown script
        """
        self._ensure_ready()
        if self._database is None:
            raise DatabaseNotLoadedError()

        pkg = self._database.get_package(package_name)
        if pkg is None:
            raise PackageNotFoundError(package_name)

        target = resolve_target(pkg, self._database)
        logger.debug(f"Simulating installation of {package_name} (method: {pkg.method})")
        simulate(self._layout, self._synthesizer, target)

    def is_installed(self, package_name: str) -> bool:
        """Probe for a binary, a status-file header, or a bundle directory.

        The probes are independent and may disagree after a partial failure;
        any one of them is enough.
        """
        self._ensure_ready()
        return (
            self._has_binary(package_name)
            or package_name in self._status_entries()
            or self._has_bundle_dir(package_name)
        )

    def get_installed_packages(self) -> list[str]:
        """Union of synthesized binaries and status-file entries, duplicates kept."""
        self._ensure_ready()
        return self._synthesizer.list_created_binaries() + self._status_entries()

    def validate_installation(self, package_name: str) -> None:
        """Check that a package looks installed and its binary, if any, is executable.

        Raises:
            NotInstalledError: If no probe finds the package
            NotExecutableError: If a same-named binary lacks the executable bit
        """
        if not self.is_installed(package_name):
            raise NotInstalledError(package_name)

        binary = self.binary_path(package_name)
        if binary.exists() and not is_executable(binary):
            raise NotExecutableError(binary)

    def filesystem_stats(self) -> dict[str, Any]:
        """Summary of the root for reports."""
        self._ensure_ready()
        installed = self.get_installed_packages()
        return {
            "root_dir": str(self.root),
            "installed_packages": len(installed),
            "package_list": installed,
            "fake_binaries": len(self._synthesizer.list_created_binaries()),
            "database_loaded": self._database is not None,
        }

    def cleanup(self) -> None:
        """Remove synthesized binaries and then the whole root.

        Safe to call repeatedly and after partial setup. The instance cannot be
        used afterwards.
        """
        self._synthesizer.cleanup()
        if self.root.exists():
            shutil.rmtree(self.root)
        if not self._cleaned_up:
            logger.debug(f"Cleaned up virtual root: {self.root}")
        self._cleaned_up = True

    def _ensure_ready(self) -> None:
        if self._cleaned_up:
            raise RootCleanedUpError(self.root)

    def _has_binary(self, name: str) -> bool:
        return self.binary_path(name).is_file()

    def _has_bundle_dir(self, name: str) -> bool:
        return (self._layout.bundle_app_dir / name).is_dir()

    def _status_entries(self) -> list[str]:
        path = self._layout.status_path
        if not path.exists():
            return []
        return [
            line.removeprefix(STATUS_HEADER).strip()
            for line in path.read_text(encoding="ascii", errors="replace").splitlines()
            if line.startswith(STATUS_HEADER)
        ]
