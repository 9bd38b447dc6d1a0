import click

from cgr.cli.output import user_output


@click.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Print this help."""
    parent = ctx.parent if ctx.parent is not None else ctx
    user_output(parent.get_help())
