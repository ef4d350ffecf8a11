"""Time operations abstraction for testing.

This module provides an ABC for clock reads so that install history and
phase durations can be asserted without depending on the wall clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
