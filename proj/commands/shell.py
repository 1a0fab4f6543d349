import click

from proj.channel import shell_wrapper
from proj.commands.common import get_exe


@click.command(name="shell-init")
@click.pass_context
def shell_init(ctx):
    """Print the shell function that lets `go` and `start --cd` change directory.

    \b
    Works in bash, zsh and other POSIX shells. Add to your shell rc file:
      eval "$(command p shell-init)"
    """
    click.echo(shell_wrapper(get_exe(ctx)), nl=False)
