"""Fake Time implementation for testing.

FakeTime returns a fixed instant, optionally advancing by a fixed step on
every read, enabling deterministic timestamps and durations.
"""

from datetime import UTC, datetime, timedelta

from installsim.integrations.time.abc import Time

DEFAULT_NOW = datetime(2024, 3, 15, 10, 30, tzinfo=UTC)


class FakeTime(Time):
    """In-memory fake clock.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, start: datetime = DEFAULT_NOW, step: timedelta | None = None) -> None:
        """Create FakeTime.

        Args:
            start: Instant returned by the first now() call
            step: Amount the clock advances after each now() call (None = frozen)
        """
        self._current = start
        self._step = step
        self._reads = 0

    @property
    def reads(self) -> int:
        """Number of now() calls made.

        This property is for test assertions only.
        """
        return self._reads

    def now(self) -> datetime:
        value = self._current
        self._reads += 1
        if self._step is not None:
            self._current = self._current + self._step
        return value
