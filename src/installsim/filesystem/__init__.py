from installsim.filesystem.layout import RootLayout
from installsim.filesystem.simulators import INSTALL_TIMESTAMP
from installsim.filesystem.targets import (
    BundleTarget,
    InstallTarget,
    ReleaseTarget,
    RepositoryTarget,
    ScriptTarget,
    resolve_target,
)
from installsim.filesystem.virtual_root import VirtualRoot

__all__ = [
    "INSTALL_TIMESTAMP",
    "BundleTarget",
    "InstallTarget",
    "ReleaseTarget",
    "RepositoryTarget",
    "RootLayout",
    "ScriptTarget",
    "VirtualRoot",
    "resolve_target",
]
