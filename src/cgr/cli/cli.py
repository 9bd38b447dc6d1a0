import logging
import os

import click

from cgr.cli.commands.add import add_cmd
from cgr.cli.commands.current import current_cmd
from cgr.cli.commands.delete import del_cmd
from cgr.cli.commands.help import help_cmd
from cgr.cli.commands.latency import latency_cmd
from cgr.cli.commands.ls import ls_cmd
from cgr.cli.commands.toggle import off_cmd, on_cmd
from cgr.cli.commands.use import use_cmd
from cgr.cli.output import user_output
from cgr.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="cgr")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Switch the registry used by npm, yarn and pnpm."""
    # Enable debug logging if CGR_DEBUG environment variable is set
    if os.getenv("CGR_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


cli.add_command(ls_cmd)
cli.add_command(current_cmd)
cli.add_command(use_cmd)
cli.add_command(add_cmd)
cli.add_command(del_cmd)
cli.add_command(latency_cmd)
cli.add_command(on_cmd)
cli.add_command(off_cmd)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `cgr` console script."""
    cli()
