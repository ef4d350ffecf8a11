"""In-memory fake implementation of ReleaseClient for testing."""

from installsim.database.types import ReleaseAsset, ReleaseInfo
from installsim.integrations.releases.abc import ReleaseClient


def default_release(repo: str) -> ReleaseInfo:
    """Synthetic v1.0.0 release with a single Linux tarball."""
    name = repo.split("/")[-1]
    asset_name = f"{name}_1.0.0_Linux_x86_64.tar.gz"
    return ReleaseInfo(
        tag_name="v1.0.0",
        name=f"{name} v1.0.0",
        draft=False,
        prerelease=False,
        created_at="2024-03-15T10:30:00Z",
        published_at="2024-03-15T10:30:00Z",
        body="",
        assets=(
            ReleaseAsset(
                id=1,
                name=asset_name,
                size=0,
                download_count=0,
                browser_download_url=(
                    f"https://github.com/{repo}/releases/download/v1.0.0/{asset_name}"
                ),
            ),
        ),
    )


class FakeReleaseClient(ReleaseClient):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments. Repositories
    without a configured response get default_release().
    """

    def __init__(
        self,
        *,
        responses: dict[str, ReleaseInfo] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        """Create FakeReleaseClient with pre-configured state.

        Args:
            responses: "owner/repo" -> release to return
            failures: "owner/repo" -> exception to raise (checked first)
        """
        self._responses = responses or {}
        self._failures = failures or {}
        self._requested: list[str] = []

    @property
    def requested_repos(self) -> list[str]:
        """Read-only access to queried repositories, in order, for test assertions."""
        return self._requested.copy()

    def get_latest_release(self, repo: str) -> ReleaseInfo:
        self._requested.append(repo)
        failure = self._failures.get(repo)
        if failure is not None:
            raise failure
        return self._responses.get(repo) or default_release(repo)
