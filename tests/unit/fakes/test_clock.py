"""Tests for the Time integrations."""

from datetime import UTC, datetime, timedelta

from installsim.integrations.time import FakeTime, RealTime
from installsim.integrations.time.fake import DEFAULT_NOW


def test_fake_time_is_frozen_by_default() -> None:
    clock = FakeTime()

    assert clock.now() == DEFAULT_NOW
    assert clock.now() == DEFAULT_NOW
    assert clock.reads == 2


def test_fake_time_advances_by_step() -> None:
    start = datetime(2025, 1, 1, tzinfo=UTC)
    clock = FakeTime(start=start, step=timedelta(milliseconds=250))

    assert clock.now() == start
    assert clock.now() == start + timedelta(milliseconds=250)


def test_real_time_is_timezone_aware() -> None:
    assert RealTime().now().tzinfo is not None
