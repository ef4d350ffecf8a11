"""Data types for command execution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutedCommand:
    """A recorded invocation: program plus its arguments."""

    program: str
    args: tuple[str, ...]

    def __str__(self) -> str:
        return " ".join((self.program, *self.args))


@dataclass(frozen=True)
class CommandResponse:
    """Outcome of running a command."""

    output: str = ""
    exit_code: int = 0

    @property
    def success(self) -> bool:
        return self.exit_code == 0
