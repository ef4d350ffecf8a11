"""Abstract interface for release metadata lookups."""

from abc import ABC, abstractmethod

from installsim.database.types import ReleaseInfo


class ReleaseClient(ABC):
    """Abstract interface for a code-hosting release API.

    All implementations must implement this interface.
    """

    @abstractmethod
    def get_latest_release(self, repo: str) -> ReleaseInfo:
        """Fetch the latest release of a repository.

        Args:
            repo: Repository in "owner/repo" form

        Returns:
            ReleaseInfo with tag and assets

        Raises:
            ReleaseNotFoundError: If the repository has no known release
        """
        ...
