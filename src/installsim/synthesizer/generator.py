"""Fake binary synthesis.

Stubs are POSIX `sh` scripts so they run anywhere a shell exists. All
profile-provided text is shell-quoted; a stub never interprets its own output.
"""

import logging
import os
import shlex
import shutil
import stat
from pathlib import Path

from installsim.errors import BinaryNotFoundError, NotExecutableError, SynthesisError
from installsim.synthesizer.profiles import (
    APPLICATION_PROFILES,
    COMMON_PROFILES,
    DESKTOP_ENTRIES,
    BinaryProfile,
)

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = 0o755
HELP_FLAGS = ("--help", "-h")


def render_stub(profile: BinaryProfile) -> str:
    """Render the shell script for a profile.

    Evaluation order inside the stub:
    1. exact-argument exit code overrides
    2. exact-argument outputs
    3. no arguments: banner (or the "" output)
    4. first argument: flag table, then help flags, then "Unknown option"
    """
    lines = [
        "#!/bin/sh",
        f"# Fake {profile.name} binary (version {profile.version})",
    ]

    for args, code in profile.exit_codes.items():
        lines.append(f'if [ "$*" = {shlex.quote(args)} ]; then exit {int(code)}; fi')

    exact = {args: out for args, out in profile.outputs.items() if args}
    if exact:
        lines.append('case "$*" in')
        for args, output in exact.items():
            lines.append(f"    {shlex.quote(args)}) {_print(output)}; exit 0 ;;")
        lines.append("esac")

    banner = profile.outputs.get("", f"Fake {profile.name} version {profile.version}")
    lines.extend(
        [
            'if [ "$#" -eq 0 ]; then',
            f"    {_print(banner)}",
            "    exit 0",
            "fi",
            'case "$1" in',
        ]
    )
    for flag, output in profile.flags.items():
        lines.append(f"    {shlex.quote(flag)}) {_print(output)} ;;")
    help_text = profile.help_text or f"Usage: {profile.name} [options]"
    lines.append(f"    {'|'.join(HELP_FLAGS)}) {_print(help_text)} ;;")
    lines.append("    *) printf 'Unknown option: %s\\n' \"$1\" ;;")
    lines.append("esac")
    return "\n".join(lines) + "\n"


def _print(text: str) -> str:
    return f"printf '%s\\n' {shlex.quote(text)}"


def is_executable(path: Path) -> bool:
    """Check whether any executable bit is set on a regular file."""
    try:
        mode = path.stat().st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode) and bool(mode & 0o111)


class FakeBinarySynthesizer:
    """Writes executable stubs into a binaries directory.

    Examples:
        >>> synth = FakeBinarySynthesizer(root / "usr" / "local" / "bin")
        >>> synth.create_binary(BinaryProfile(name="tool", version="1.0"))
        >>> synth.list_created_binaries()
        ['tool']
    """

    def __init__(self, binary_dir: Path) -> None:
        self._binary_dir = binary_dir

    @property
    def binary_dir(self) -> Path:
        return self._binary_dir

    def binary_path(self, name: str) -> Path:
        """Return where the stub for name lives (whether or not it exists)."""
        return self._binary_dir / name

    def create_binary(self, profile: BinaryProfile) -> Path:
        """Write an executable stub reproducing the profile.

        Returns:
            Path of the written stub

        Raises:
            SynthesisError: If the directory or stub cannot be written
        """
        path = self.binary_path(profile.name)
        try:
            self._binary_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(render_stub(profile), encoding="utf-8")
            os.chmod(path, EXECUTABLE_MODE)
        except OSError as e:
            raise SynthesisError(profile.name, str(e)) from e

        logger.debug(f"Created fake binary: {path}")
        return path

    def create_common_binaries(self) -> None:
        """Install the system-tool catalog, stopping at the first failure."""
        for profile in COMMON_PROFILES:
            self.create_binary(profile)

    def create_application_binaries(self) -> None:
        """Install the desktop/editor application catalog, stopping at the first failure."""
        for profile in APPLICATION_PROFILES:
            self.create_binary(profile)

    def create_desktop_entries(self, desktop_dir: Path) -> list[Path]:
        """Write the built-in `.desktop` launcher files.

        Raises:
            SynthesisError: If an entry cannot be written
        """
        written: list[Path] = []
        for filename, content in DESKTOP_ENTRIES.items():
            path = desktop_dir / filename
            try:
                desktop_dir.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise SynthesisError(filename, str(e)) from e
            logger.debug(f"Created desktop entry: {path}")
            written.append(path)
        return written

    def validate_binary(self, name: str) -> None:
        """Check that a stub exists and is executable.

        Raises:
            BinaryNotFoundError: If the stub is missing
            NotExecutableError: If the stub has no executable bit
        """
        path = self.binary_path(name)
        if not path.is_file():
            raise BinaryNotFoundError(name)
        if not is_executable(path):
            raise NotExecutableError(path)

    def list_created_binaries(self) -> list[str]:
        """List executable entries in the binaries directory (non-recursive, sorted).

        Returns an empty list if the directory does not exist.
        """
        if not self._binary_dir.is_dir():
            return []
        return sorted(entry.name for entry in self._binary_dir.iterdir() if is_executable(entry))

    def cleanup(self) -> None:
        """Remove the binaries directory and everything in it."""
        if self._binary_dir.exists():
            shutil.rmtree(self._binary_dir)
        logger.debug(f"Cleaned up binary directory: {self._binary_dir}")
