"""Release client served from the synthetic package database."""

from installsim.database import PackageDatabase
from installsim.database.types import ReleaseInfo
from installsim.errors import ReleaseNotFoundError
from installsim.integrations.releases.abc import ReleaseClient


class OfflineReleaseClient(ReleaseClient):
    """Answers release queries from loaded fixtures instead of the network."""

    def __init__(self, database: PackageDatabase) -> None:
        self._database = database

    def get_latest_release(self, repo: str) -> ReleaseInfo:
        release = self._database.get_release(repo)
        if release is None:
            raise ReleaseNotFoundError(repo)
        return release
