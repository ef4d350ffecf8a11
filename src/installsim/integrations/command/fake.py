"""Fake implementation of CommandExecutor for testing.

This fake lets tests verify that an orchestrator issued the expected command
sequence without running anything.
"""

import logging

from installsim.integrations.command.abc import CommandExecutor
from installsim.integrations.command.types import CommandResponse, ExecutedCommand

logger = logging.getLogger(__name__)


class FakeCommandExecutor(CommandExecutor):
    """In-memory fake that records invocations and returns canned responses.

    Constructor Injection:
    - Responses and failures are provided via constructor parameters, keyed by
      the full command line ("program arg1 arg2")
    - Only the invocation log changes after construction

    Examples:
        # Default: every command succeeds with no output
        >>> executor = FakeCommandExecutor()
        >>> executor.execute("apt", "update").exit_code
        0

        # Canned response
        >>> executor = FakeCommandExecutor(
        ...     responses={"flatpak list": CommandResponse(output="org.gimp.GIMP")}
        ... )
        >>> executor.execute("flatpak", "list").output
        'org.gimp.GIMP'

        # Forced failure
        >>> executor = FakeCommandExecutor(
        ...     failures={"apt install -y vim": RuntimeError("dpkg lock held")}
        ... )
        >>> executor.execute("apt", "install", "-y", "vim")
        Traceback (most recent call last):
        RuntimeError: dpkg lock held
    """

    def __init__(
        self,
        *,
        responses: dict[str, CommandResponse] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        """Initialize fake with canned responses and forced failures.

        Args:
            responses: Command line -> response returned for it
            failures: Command line -> exception raised for it (checked first)
        """
        self._responses = responses or {}
        self._failures = failures or {}
        self._commands: list[ExecutedCommand] = []

    def execute(self, program: str, *args: str) -> CommandResponse:
        """Record the invocation, then fail, respond, or succeed silently."""
        command = ExecutedCommand(program=program, args=tuple(args))
        self._commands.append(command)
        command_line = str(command)
        logger.debug(f"FAKE EXEC: {command_line}")

        failure = self._failures.get(command_line)
        if failure is not None:
            raise failure

        return self._responses.get(command_line, CommandResponse())

    def was_executed(self, program: str, *args: str) -> bool:
        """Check whether this exact (program, args) tuple was ever invoked."""
        return ExecutedCommand(program=program, args=tuple(args)) in self._commands

    def reset(self) -> None:
        """Forget all recorded invocations."""
        self._commands.clear()

    @property
    def executed_commands(self) -> list[ExecutedCommand]:
        """Get the invocations in arrival order.

        This property is for test assertions only.
        """
        return self._commands.copy()
