"""Output helpers for CLI commands with clear intent.

user_output is for status and error messages (stderr); machine_output is for
the registry listings themselves (stdout) so they can be piped.
"""

import click


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    click.echo(message)


def output_block(lines: list[str], *, machine: bool = False) -> None:
    """Print lines framed by a blank line before and after."""
    emit = machine_output if machine else user_output
    emit()
    for line in lines:
        emit(line)
    emit()


def warn(message: str) -> None:
    user_output(click.style("Warning: ", fg="yellow") + message)
