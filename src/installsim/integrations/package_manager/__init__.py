from installsim.integrations.package_manager.abc import PackageManager
from installsim.integrations.package_manager.fake import COMMON_PACKAGES, FakePackageManager
from installsim.integrations.package_manager.types import InstallRecord, PackageInfo

__all__ = [
    "COMMON_PACKAGES",
    "FakePackageManager",
    "InstallRecord",
    "PackageInfo",
    "PackageManager",
]
