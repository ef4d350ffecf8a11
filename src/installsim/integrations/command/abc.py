"""Abstract interface for running external commands."""

from abc import ABC, abstractmethod

from installsim.integrations.command.types import CommandResponse


class CommandExecutor(ABC):
    """Abstract interface for command execution.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def execute(self, program: str, *args: str) -> CommandResponse:
        """Run a program with arguments.

        Args:
            program: Executable name or path
            *args: Arguments passed to the program

        Returns:
            CommandResponse with captured output and exit code

        Raises:
            RuntimeError: If the program cannot be started (real) or a failure
                was registered for this command line (fake)
        """
        ...
