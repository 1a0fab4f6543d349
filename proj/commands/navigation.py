"""
Commands for finding projects: go and list.
"""
import click

from proj.commands.common import execute
from proj.models.command import CommandKind, go_args_from_tokens


@click.command()
@click.argument("tokens", nargs=-1, metavar="PROJECT")
@click.pass_context
def go(ctx, tokens):
    """Change directory to a project.

    Needs the shell wrapper from `shell-init` to take effect in your shell.
    """
    execute(ctx, CommandKind.GO, lambda: go_args_from_tokens(list(tokens)))


@click.command(name="list")
@click.pass_context
def list_projects(ctx):
    """List known projects."""
    execute(ctx, CommandKind.LIST)
