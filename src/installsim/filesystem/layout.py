"""Fixed directory layout of a virtual root."""

from dataclasses import dataclass
from pathlib import Path

from installsim.errors import PathEscapeError

DEFAULT_HOME_USER = "testuser"

SKELETON_DIRS = (
    "usr/local/bin",
    "usr/bin",
    "usr/share/applications",
    "usr/share/man",
    "etc",
    "home/{user}/.config",
    "home/{user}/.local/share",
    "home/{user}/.local/bin",
    "tmp",
    "var/log",
    "var/cache",
    "opt",
)


@dataclass(frozen=True)
class RootLayout:
    """Paths inside a virtual root that the simulators and probes agree on."""

    root: Path
    home_user: str = DEFAULT_HOME_USER

    @property
    def bin_dir(self) -> Path:
        return self.root / "usr" / "local" / "bin"

    @property
    def config_dir(self) -> Path:
        return self.root / "etc"

    @property
    def data_dir(self) -> Path:
        return self.root / "usr" / "share"

    @property
    def desktop_dir(self) -> Path:
        return self.data_dir / "applications"

    @property
    def temp_dir(self) -> Path:
        return self.root / "tmp"

    @property
    def home_dir(self) -> Path:
        return self.root / "home" / self.home_user

    @property
    def status_path(self) -> Path:
        """Cumulative repository-manager status file."""
        return self.config_dir / "dpkg" / "status"

    @property
    def bundle_app_dir(self) -> Path:
        return self.data_dir / "flatpak" / "app"

    @property
    def install_record_dir(self) -> Path:
        return self.data_dir / "installsim" / "installed"

    def skeleton(self) -> list[Path]:
        """Directories created when the root is constructed."""
        return [self.root / d.format(user=self.home_user) for d in SKELETON_DIRS]

    def to_virtual(self, path: str) -> Path:
        """Translate a path as written in a shell command into the virtual root.

        `~/x` lands in the virtual home, `/x` under the root, and relative
        paths are taken relative to the virtual home.

        Raises:
            PathEscapeError: If `..` segments or symlinks lead outside the root
        """
        if path == "~":
            candidate = self.home_dir
        elif path.startswith("~/"):
            candidate = self.home_dir / path[2:]
        elif path.startswith("/"):
            candidate = self.root / path.lstrip("/")
        else:
            candidate = self.home_dir / path

        if not candidate.resolve().is_relative_to(self.root.resolve()):
            raise PathEscapeError(path, self.root)
        return candidate
