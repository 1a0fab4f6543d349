"""
The start command: create and register a new project.
"""
import click

from proj.commands.common import command_text, execute, fail
from proj.constants import MSG_MISSING_PROJECT_NAME
from proj.exceptions import InvalidArgumentError, MissingArgumentError
from proj.models.command import CommandKind, StartArgs


class StartCommand(click.Command):
    """Reports option errors in start's own terms, with start usage."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            raise fail(
                ctx,
                InvalidArgumentError(
                    f"invalid argument: {e.option_name}", usage_for=CommandKind.START.value
                ),
            )
        except click.BadOptionUsage as e:
            if self._is_flag(e.option_name):
                # --cd=value
                error = InvalidArgumentError(
                    f"invalid argument: {e.option_name}", usage_for=CommandKind.START.value
                )
            else:
                # --at as the last token, with no value
                error = MissingArgumentError(
                    f"missing value for {e.option_name}", usage_for=CommandKind.START.value
                )
            raise fail(ctx, error)

    def _is_flag(self, option_name):
        return any(
            getattr(param, "is_flag", False) and option_name in param.opts
            for param in self.params
        )


@click.command(cls=StartCommand)
@click.argument("tokens", nargs=-1, metavar="NAME")
@click.option("-w", "--with", "with_initializers", metavar="LIST",
              help="Initializers to run, e.g. git,npm,gh.")
@click.option("-a", "--at", "at", metavar="DIR",
              help="Create the project here instead of the default directory.")
@click.option("--cd", is_flag=True, help="Change into the project once created.")
@click.option("--then", "then_script", metavar="FILE",
              help="Script to run inside the new project.")
@click.pass_context
def start(ctx, tokens, with_initializers, at, cd, then_script):
    """Create a project directory and register it."""

    def build_args() -> StartArgs:
        if not tokens:
            raise MissingArgumentError(MSG_MISSING_PROJECT_NAME, usage_for=CommandKind.START.value)
        if len(tokens) > 1:
            raise InvalidArgumentError(
                f"invalid argument: {tokens[1]}", usage_for=CommandKind.START.value
            )
        return StartArgs(
            name=tokens[0],
            at=at,
            with_initializers=with_initializers,
            then_script=then_script,
            cd=cd,
            command_text=command_text(ctx),
        )

    execute(ctx, CommandKind.START, build_args)
