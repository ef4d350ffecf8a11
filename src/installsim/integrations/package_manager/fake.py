"""Fake package manager for component-level tests.

Unlike VirtualRoot, this double keeps an explicit installed set rather than
probing the filesystem, and it records every install attempt.
"""

import logging
from datetime import datetime
from pathlib import Path

from installsim.database.types import InstallMethod
from installsim.errors import NotInstalledError, PackageNotFoundError
from installsim.integrations.package_manager.abc import PackageManager
from installsim.integrations.package_manager.types import InstallRecord, PackageInfo
from installsim.integrations.time import RealTime, Time
from installsim.synthesizer import BinaryProfile, FakeBinarySynthesizer

logger = logging.getLogger(__name__)

COMMON_PACKAGES: dict[str, PackageInfo] = {
    "vim": PackageInfo("vim", "8.2.0", "Vi IMproved - enhanced vi editor", 2048000),
    "btop": PackageInfo("btop", "1.2.13", "Resource monitor", 1024000),
    "neovim": PackageInfo("neovim", "0.9.5", "Hyperextensible Vim-based text editor", 4096000),
    "git": PackageInfo("git", "2.34.1", "Fast, scalable, distributed revision control", 8192000),
    "curl": PackageInfo("curl", "7.81.0", "Command line tool for transferring data", 512000),
    "wget": PackageInfo("wget", "1.21.2", "Tool for retrieving files over HTTP(S) and FTP", 1024000),
    "fish": PackageInfo("fish", "3.3.1", "Friendly interactive shell", 2048000),
    "zellij": PackageInfo("zellij", "0.39.2", "Terminal multiplexer", 4096000),
    "lazygit": PackageInfo("lazygit", "0.40.2", "Simple terminal UI for git commands", 8192000),
    "fastfetch": PackageInfo("fastfetch", "2.8.10", "System information display tool", 1024000),
}


class FakePackageManager(PackageManager):
    """In-memory package manager that writes artifacts under a root directory.

    Constructor Injection:
    - Available packages and forced failures are provided via constructor
    - Installed set and install history change as install/uninstall run

    Examples:
        >>> pm = FakePackageManager(tmp_path, available=COMMON_PACKAGES)
        >>> pm.install("vim", "repository")
        >>> pm.is_installed("vim")
        True
        >>> (tmp_path / "usr/local/bin/vim").exists()
        True
    """

    def __init__(
        self,
        root: Path,
        *,
        available: dict[str, PackageInfo] | None = None,
        failures: dict[str, Exception] | None = None,
        time: Time | None = None,
    ) -> None:
        """Initialize fake with a catalog and failure injections.

        Args:
            root: Directory standing in for `/`
            available: Package name -> PackageInfo that may be installed
            failures: Package name -> exception raised by install() (checked first)
            time: Clock for history timestamps (default: RealTime)
        """
        self._root = root
        self._available = dict(available or {})
        self._failures = failures or {}
        self._time = time if time is not None else RealTime()
        self._installed: dict[str, PackageInfo] = {}
        self._history: list[InstallRecord] = []
        self._synthesizer = FakeBinarySynthesizer(root / "usr" / "local" / "bin")

    def install(self, package_name: str, method: InstallMethod) -> None:
        """Install a package and append an InstallRecord, whether or not it succeeds.

        Raises:
            Exception: The failure registered for this package
            PackageNotFoundError: If the package is unknown or not available
            SynthesisError, OSError: If artifacts cannot be written
        """
        timestamp = self._time.now()

        failure = self._failures.get(package_name)
        if failure is not None:
            self._record(package_name, method, timestamp, error=failure)
            raise failure

        info = self._available.get(package_name)
        if info is None or not info.available:
            error = PackageNotFoundError(package_name)
            self._record(package_name, method, timestamp, error=error)
            raise error

        logger.debug(f"Installing {package_name} version {info.version}")
        try:
            self._write_artifacts(package_name, info)
        except Exception as e:
            self._record(package_name, method, timestamp, error=e)
            raise

        self._installed[package_name] = info
        self._record(package_name, method, timestamp, version=info.version)
        logger.debug(f"Successfully installed {package_name}")

    def uninstall(self, package_name: str) -> None:
        """Remove the binary, config file and config directory, then forget the package.

        Raises:
            NotInstalledError: If the package is not installed
        """
        if package_name not in self._installed:
            raise NotInstalledError(package_name)

        self._synthesizer.binary_path(package_name).unlink(missing_ok=True)
        config_dir = self._config_dir(package_name)
        (config_dir / f"{package_name}.conf").unlink(missing_ok=True)
        if config_dir.is_dir() and not any(config_dir.iterdir()):
            config_dir.rmdir()

        del self._installed[package_name]
        logger.debug(f"Uninstalled {package_name}")

    def is_installed(self, package_name: str) -> bool:
        return package_name in self._installed

    def installed_packages(self) -> dict[str, PackageInfo]:
        return dict(self._installed)

    @property
    def install_history(self) -> list[InstallRecord]:
        """Get every install attempt in order.

        This property is for test assertions only.
        """
        return self._history.copy()

    def _config_dir(self, package_name: str) -> Path:
        return self._root / "etc" / package_name

    def _write_artifacts(self, package_name: str, info: PackageInfo) -> None:
        self._synthesizer.create_binary(
            BinaryProfile(
                name=package_name,
                version=info.version,
                help_text=f"Usage: {package_name} [options]",
                flags={"--version": f"{package_name} version {info.version}"},
            )
        )
        config_dir = self._config_dir(package_name)
        config_dir.mkdir(parents=True, exist_ok=True)
        (config_dir / f"{package_name}.conf").write_text(
            f"# Configuration for {package_name}\nversion={info.version}\n",
            encoding="utf-8",
        )

    def _record(
        self,
        package_name: str,
        method: str,
        timestamp: datetime,
        *,
        version: str = "",
        error: Exception | None = None,
    ) -> None:
        self._history.append(
            InstallRecord(
                package=package_name,
                method=method,
                version=version,
                timestamp=timestamp,
                success=error is None,
                error=error,
            )
        )
