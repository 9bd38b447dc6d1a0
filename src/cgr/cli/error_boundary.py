"""Error boundary handling for CLI commands.

Catches the fatal cgr errors at command entry points and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from cgr.core.errors import AllManagersFailedError, ManagerQueryError, PersistenceError

F = TypeVar("F", bound=Callable[..., Any])


def cli_error_boundary(func: F) -> F:
    """Decorator that catches well-known exceptions and exits with status 1.

    Catches:
        - AllManagersFailedError: no package manager could be queried or updated
        - ManagerQueryError: a required manager invocation failed
        - PersistenceError: a cgr file could not be written
        - ValueError: malformed cgr file

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AllManagersFailedError as e:
            for failure in e.failures:
                click.echo(click.style("Error: ", fg="red") + failure.message, err=True)
            raise SystemExit(1) from None
        except (ManagerQueryError, PersistenceError, ValueError) as e:
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
