"""Data types for the package-manager double."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PackageInfo:
    """A package the package manager knows about."""

    name: str
    version: str
    description: str = ""
    size: int = 0
    available: bool = True
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class InstallRecord:
    """One install attempt in the append-only history.

    `version` is empty for failed attempts; `error` is None for successful ones.
    """

    package: str
    method: str
    version: str
    timestamp: datetime
    success: bool
    error: Exception | None = None
