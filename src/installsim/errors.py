"""Error taxonomy for the simulation harness.

Every component raises one of these to its immediate caller. Callers match on
the exception class (and its structured attributes), never on message text.
"""

from pathlib import Path


class SimulationError(Exception):
    """Base class for all harness errors."""


class NotFoundError(SimulationError):
    """Raised when a named entity is absent."""

    kind = "entity"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{self.kind} not found: {name}")


class PackageNotFoundError(NotFoundError):
    """Raised when a package is absent from the database or package manager."""

    kind = "package"


class ReleaseNotFoundError(NotFoundError):
    """Raised when no release is tracked for an owner/repo."""

    kind = "release"


class ScriptNotFoundError(NotFoundError):
    """Raised when a script-registry key is unknown."""

    kind = "custom script"


class BinaryNotFoundError(NotFoundError):
    """Raised when a synthesized binary does not exist."""

    kind = "binary"


class DatabaseNotLoadedError(SimulationError):
    """Raised when an operation needs a package database and none was wired in."""

    def __init__(self, operation: str = "package installation") -> None:
        self.operation = operation
        super().__init__(f"package database not loaded (required for {operation})")


class UnsupportedMethodError(SimulationError):
    """Raised when a package carries an unrecognized installation method."""

    def __init__(self, method: str, package: str) -> None:
        self.method = method
        self.package = package
        super().__init__(f"unsupported installation method: {method} (package {package})")


class NotExecutableError(SimulationError):
    """Raised when a stub exists but lacks the executable bit."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"binary is not executable: {path}")


class NotInstalledError(SimulationError):
    """Raised when no probe finds the package installed."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"package does not appear to be installed: {name}")


class FixtureLoadError(SimulationError):
    """Raised when a fixture file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to load fixture {path}: {reason}")


class SynthesisError(SimulationError):
    """Raised when a fake binary or desktop entry cannot be written."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"failed to create fake binary {name}: {reason}")


class ConstructionError(SimulationError):
    """Raised when a virtual root cannot be brought to the ready state."""

    def __init__(self, root: Path, stage: str) -> None:
        self.root = root
        self.stage = stage
        super().__init__(f"failed to construct virtual root at {root}: {stage}")


class RootCleanedUpError(SimulationError):
    """Raised when a virtual root is used after cleanup()."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"virtual root {root} has been cleaned up and cannot be reused")


class PathEscapeError(SimulationError):
    """Raised when a path would resolve outside its virtual root."""

    def __init__(self, path: str, root: Path) -> None:
        self.path = path
        self.root = root
        super().__init__(f"path {path} resolves outside virtual root {root}")
