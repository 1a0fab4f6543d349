"""
CLI for proj: register, list and jump between project directories.

Every command has a long and a short name (see CommandKind); both reach
the same click command.
"""
import logging
import sys
from pathlib import Path

import click

from proj import __version__
from proj.commands.common import ARGV_META_KEY, emit, fail, get_exe
from proj.commands.help import help_command
from proj.commands.navigation import go, list_projects
from proj.commands.placeholders import archive, copy, dump, restore, todo
from proj.commands.shell import shell_init
from proj.commands.start import start
from proj.core import ProjContext, ProjCore
from proj.exceptions import ProjError, UnknownCommandError
from proj.models.command import CommandKind


class AliasedGroup(click.Group):
    """A group that also accepts each command's short name."""

    def parse_args(self, ctx, args):
        ctx.meta[ARGV_META_KEY] = list(args)
        return super().parse_args(ctx, args)

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        try:
            kind = CommandKind.resolve(cmd_name)
        except UnknownCommandError:
            return None
        return super().get_command(ctx, kind.long_name)

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if (
            self.get_command(ctx, cmd_name) is None
            and not cmd_name.startswith("-")
            and not ctx.resilient_parsing
        ):
            raise fail(ctx, UnknownCommandError(f"unknown command: {cmd_name}", usage_for=""))
        _, command, rest = super().resolve_command(ctx, args)
        # Report the long name so ctx.invoked_subcommand is stable across forms
        return (command.name if command else cmd_name), command, rest

    def format_commands(self, ctx, formatter):
        rows = []
        for name in self.list_commands(ctx):
            command = self.get_command(ctx, name)
            if command is None or command.hidden:
                continue
            try:
                label = f"{name}, {CommandKind(name).short_name}"
            except ValueError:
                label = name
            rows.append((label, command.get_short_help_str()))
        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)


@click.group(name="p", cls=AliasedGroup, invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Log debug information to standard error.")
@click.option("--color/--no-color", default=None, help="Force or disable colored output.")
@click.version_option(__version__, prog_name="p")
@click.pass_context
def cli(ctx, verbose, color):
    """Keep track of your projects and jump between them."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        ctx.obj = ProjContext.create(exe=get_exe(ctx), color=color)
    except ProjError as e:
        raise fail(ctx, e)

    if ctx.invoked_subcommand is None:
        try:
            emit(ctx.obj, ProjCore(ctx.obj).whereami(Path.cwd()))
        except ProjError as e:
            raise fail(ctx, e)


cli.add_command(archive)
cli.add_command(copy)
cli.add_command(dump)
cli.add_command(go)
cli.add_command(help_command)
cli.add_command(list_projects)
cli.add_command(restore)
cli.add_command(start)
cli.add_command(todo)
cli.add_command(shell_init)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
