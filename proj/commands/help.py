import click

from proj.commands.common import execute
from proj.models.command import CommandKind, help_args_from_tokens


@click.command(name="help")
@click.argument("tokens", nargs=-1, metavar="[COMMAND]")
@click.pass_context
def help_command(ctx, tokens):
    """Show general help, or the usage of one command."""
    execute(ctx, CommandKind.HELP, lambda: help_args_from_tokens(list(tokens)))
