"""Output routing for CLI commands.

Human-facing messages go to stderr so stdout stays clean for machine-readable
data (JSON reports, binary paths) that callers may pipe.
"""

import logging
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler


def user_output(message: Any = "", nl: bool = True, color: bool | None = None) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True, color=color)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)


def configure_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Install a single rich handler on the root logger, writing to stderr.

    Library modules only create loggers; handlers are configured here, once,
    by the CLI entry point.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=True,
    )
