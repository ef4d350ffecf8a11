"""Real command execution via subprocess."""

from pathlib import Path

from installsim.integrations.command.abc import CommandExecutor
from installsim.integrations.command.types import CommandResponse
from installsim.subprocess_utils import run_subprocess_with_context


class RealCommandExecutor(CommandExecutor):
    """Production implementation that runs programs with subprocess.run()."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def execute(self, program: str, *args: str) -> CommandResponse:
        """Run the program, capturing stdout; a non-zero exit is not an error."""
        result = run_subprocess_with_context(
            [program, *args],
            operation_context=f"run {program}",
            cwd=self._cwd,
            check=False,
        )
        return CommandResponse(output=result.stdout, exit_code=result.returncode)
