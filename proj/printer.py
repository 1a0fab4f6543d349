"""
Colored message output for the proj CLI.

Styling is dropped automatically when the stream is not a terminal, unless
forced with ``color=True``.
"""

from typing import Optional

import click


class Printer:
    """Writes plain, status, notice and error messages."""

    def __init__(self, color: Optional[bool] = None) -> None:
        self.color = color

    def echo(self, message: str = "", err: bool = False) -> None:
        click.echo(message, err=err, color=self.color)

    def status(self, message: str) -> None:
        click.secho(message, fg="green", color=self.color)

    def info(self, message: str) -> None:
        click.secho(message, fg="cyan", color=self.color)

    def notice(self, message: str) -> None:
        click.secho(message, fg="yellow", bold=True, err=True, color=self.color)

    def warning(self, message: str) -> None:
        click.secho(message, fg="yellow", err=True, color=self.color)

    def error(self, message: str) -> None:
        click.secho(f"error: {message}", fg="red", bold=True, err=True, color=self.color)
