"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from installsim.errors import SimulationError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns predictable failures into `Error: ...` and exit 1.

    Catches:
        - SimulationError: Any harness error (missing package, bad fixture, ...)
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SimulationError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except FileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except PermissionError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
