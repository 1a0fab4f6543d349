"""
Commands that are still in development.

Each accepts the arguments its usage describes, prints a notice and exits 0.
"""
import click

from proj.commands.common import execute
from proj.models.command import CommandKind, StubArgs

PLACEHOLDER_SETTINGS = {"ignore_unknown_options": True}


def _placeholder(ctx, kind: CommandKind, args) -> None:
    execute(ctx, kind, lambda: StubArgs(kind=kind, args=list(args)))


@click.command(context_settings=PLACEHOLDER_SETTINGS)
@click.argument("args", nargs=-1, metavar="PROJECT")
@click.pass_context
def archive(ctx, args):
    """Archive a project into a tarball."""
    _placeholder(ctx, CommandKind.ARCHIVE, args)


@click.command(context_settings=PLACEHOLDER_SETTINGS)
@click.argument("args", nargs=-1, metavar="EXISTING [NEW]")
@click.pass_context
def copy(ctx, args):
    """Copy a project's files into a new project."""
    _placeholder(ctx, CommandKind.COPY, args)


@click.command(context_settings=PLACEHOLDER_SETTINGS)
@click.argument("args", nargs=-1)
@click.pass_context
def dump(ctx, args):
    """Dump the registry and project metadata."""
    _placeholder(ctx, CommandKind.DUMP, args)


@click.command(context_settings=PLACEHOLDER_SETTINGS)
@click.argument("args", nargs=-1, metavar="[FILE]")
@click.pass_context
def restore(ctx, args):
    """Restore an archived project."""
    _placeholder(ctx, CommandKind.RESTORE, args)


@click.command(context_settings=PLACEHOLDER_SETTINGS)
@click.option("-x", "done", type=int, metavar="N", help="Mark item N as done.")
@click.argument("args", nargs=-1, metavar="[TASK]")
@click.pass_context
def todo(ctx, done, args):
    """Keep a todo list for the current project."""
    if done is not None:
        args = ("-x", str(done), *args)
    _placeholder(ctx, CommandKind.TODO, args)
