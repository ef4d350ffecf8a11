from installsim.integrations.releases.abc import ReleaseClient
from installsim.integrations.releases.fake import FakeReleaseClient, default_release
from installsim.integrations.releases.offline import OfflineReleaseClient

__all__ = ["FakeReleaseClient", "OfflineReleaseClient", "ReleaseClient", "default_release"]
