from installsim.integrations.time.abc import Time
from installsim.integrations.time.fake import FakeTime
from installsim.integrations.time.real import RealTime

__all__ = ["FakeTime", "RealTime", "Time"]
