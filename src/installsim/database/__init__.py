from installsim.database.database import PackageDatabase
from installsim.database.types import (
    INSTALL_METHODS,
    BundleInfo,
    InstallMethod,
    PackageMetadata,
    ReleaseAsset,
    ReleaseInfo,
    RepositoryInfo,
    ScriptInfo,
)

__all__ = [
    "INSTALL_METHODS",
    "BundleInfo",
    "InstallMethod",
    "PackageDatabase",
    "PackageMetadata",
    "ReleaseAsset",
    "ReleaseInfo",
    "RepositoryInfo",
    "ScriptInfo",
]
