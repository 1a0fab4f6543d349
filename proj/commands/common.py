"""
Shared plumbing between click commands and ProjCore.

Converts ProjError into a click exception with colored output and usage,
and turns CommandResults into output or directory-change requests.
"""
import shlex
from typing import Callable, Optional

import click
from pydantic import BaseModel

from proj.constants import DEFAULT_EXECUTABLE_NAME
from proj.core import ProjContext, ProjCore
from proj.exceptions import ProjError
from proj.models.command import CommandKind
from proj.models.results import ChangeDirectory, CommandResult
from proj.printer import Printer
from proj.usage import usage_for

ARGV_META_KEY = "proj.argv"


class ProjClickException(click.ClickException):
    """A ProjError on its way out of click, shown in color with usage."""

    def __init__(self, error: ProjError, printer: Printer, exe: str) -> None:
        super().__init__(error.message)
        self.error = error
        self.printer = printer
        self.exe = exe
        self.exit_code = error.exit_code

    def show(self, file=None) -> None:
        if self.error.exit_code == 0:
            self.printer.notice(self.error.message)
        else:
            self.printer.error(self.error.message)
        if self.error.usage_for is not None:
            self.printer.echo(usage_for(self.error.usage_for, self.exe).rstrip("\n"), err=True)


def get_exe(ctx: click.Context) -> str:
    return ctx.find_root().info_name or DEFAULT_EXECUTABLE_NAME


def get_context(ctx: click.Context) -> ProjContext:
    return ctx.find_object(ProjContext)


def fail(ctx: click.Context, error: ProjError) -> ProjClickException:
    """Wrap ``error`` for click, using the invocation's printer when available."""
    context = get_context(ctx)
    if context is not None:
        printer = context.printer
    else:
        printer = Printer(color=ctx.find_root().params.get("color"))
    return ProjClickException(error, printer, get_exe(ctx))


def command_text(ctx: click.Context) -> str:
    """The invocation as typed, shell-quoted."""
    argv = ctx.find_root().meta.get(ARGV_META_KEY, [])
    return shlex.join([get_exe(ctx), *argv])


def emit(context: ProjContext, result: CommandResult) -> None:
    """Print an Output, or deliver a ChangeDirectory to the calling shell."""
    if isinstance(result, ChangeDirectory):
        if result.message:
            context.printer.status(result.message)
        context.channel.request(result.path)
        return

    for line in result.lines:
        context.printer.echo(line.rstrip("\n"))


def execute(
    ctx: click.Context,
    kind: CommandKind,
    build_args: Optional[Callable[[], Optional[BaseModel]]] = None,
) -> None:
    """Validate arguments, run the handler and emit its result.

    Any ProjError raised along the way ends the invocation through click.
    """
    context = get_context(ctx)
    try:
        args = build_args() if build_args else None
        result = ProjCore(context).run(kind, args)
        emit(context, result)
    except ProjError as e:
        raise fail(ctx, e)
