"""Minimal interpreter for post-install steps.

Only directory creation has an effect, and only inside the root; every other
command is logged and otherwise ignored.
"""

import logging
import shlex
from pathlib import Path

from installsim.errors import PathEscapeError
from installsim.filesystem.layout import RootLayout

logger = logging.getLogger(__name__)


def run_post_install_command(layout: RootLayout, command: str) -> list[Path]:
    """Simulate one post-install command inside the virtual root.

    Args:
        layout: Layout of the virtual root the command runs in
        command: Shell command line as written in the script registry

    Returns:
        Directories created by the command (empty for logged-only commands)
    """
    try:
        argv = shlex.split(command)
    except ValueError:
        logger.debug(f"Simulating unparseable command: {command}")
        return []

    if not argv or argv[0] != "mkdir":
        logger.debug(f"Simulating command: {command}")
        return []

    created: list[Path] = []
    for arg in argv[1:]:
        if arg.startswith("-"):
            continue
        try:
            directory = layout.to_virtual(arg)
        except PathEscapeError as e:
            logger.warning(f"Skipping mkdir target: {e}")
            continue
        directory.mkdir(parents=True, exist_ok=True)
        created.append(directory)
    logger.debug(f"Created {len(created)} directories for: {command}")
    return created
