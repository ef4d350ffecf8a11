"""Abstract interface for package managers."""

from abc import ABC, abstractmethod

from installsim.database.types import InstallMethod
from installsim.integrations.package_manager.types import PackageInfo


class PackageManager(ABC):
    """Abstract interface for installing and removing packages.

    All implementations must implement this interface.
    """

    @abstractmethod
    def install(self, package_name: str, method: InstallMethod) -> None:
        """Install a package through the given method.

        Raises:
            PackageNotFoundError: If the package is not available
            Exception: Any failure the implementation encounters
        """
        ...

    @abstractmethod
    def uninstall(self, package_name: str) -> None:
        """Remove an installed package.

        Raises:
            NotInstalledError: If the package is not installed
        """
        ...

    @abstractmethod
    def is_installed(self, package_name: str) -> bool:
        """Check whether a package is installed."""
        ...

    @abstractmethod
    def installed_packages(self) -> dict[str, PackageInfo]:
        """Return installed packages keyed by name."""
        ...
