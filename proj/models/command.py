"""
Command kinds and their argument models.

The command table is closed: every command has exactly one long and one
short name, and both resolve to the same kind.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from proj.constants import MSG_EXTRA_ARGUMENTS, MSG_MISSING_PROJECT_NAME
from proj.exceptions import (
    MissingArgumentError,
    TooManyArgumentsError,
    UnknownCommandError,
)


class CommandKind(str, Enum):
    """Valid commands, valued by their long name."""

    ARCHIVE = "archive"
    COPY = "copy"
    DUMP = "dump"
    GO = "go"
    HELP = "help"
    LIST = "list"
    RESTORE = "restore"
    START = "start"
    TODO = "todo"

    @property
    def long_name(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return SHORT_NAMES[self]

    @property
    def is_stub(self) -> bool:
        return self in STUB_COMMANDS

    @classmethod
    def resolve(cls, token: str) -> "CommandKind":
        """Map a long or short command name to its kind."""
        for kind in cls:
            if token in (kind.long_name, kind.short_name):
                return kind
        raise UnknownCommandError(f"unknown command: {token}", usage_for="")


SHORT_NAMES = {
    CommandKind.ARCHIVE: "ar",
    CommandKind.COPY: "cp",
    CommandKind.DUMP: "d",
    CommandKind.GO: "g",
    CommandKind.HELP: "h",
    CommandKind.LIST: "ls",
    CommandKind.RESTORE: "r",
    CommandKind.START: "s",
    CommandKind.TODO: "t",
}

STUB_COMMANDS = frozenset(
    {
        CommandKind.ARCHIVE,
        CommandKind.COPY,
        CommandKind.DUMP,
        CommandKind.RESTORE,
        CommandKind.TODO,
    }
)


class HelpArgs(BaseModel):
    topic: Optional[CommandKind] = None


class GoArgs(BaseModel):
    name: str


class StartArgs(BaseModel):
    """Validated arguments for ``start``."""

    name: str
    at: Optional[str] = None
    with_initializers: Optional[str] = None
    then_script: Optional[str] = None
    cd: bool = False
    command_text: str = ""


class StubArgs(BaseModel):
    kind: CommandKind
    args: List[str] = Field(default_factory=list)


def help_args_from_tokens(tokens: List[str]) -> HelpArgs:
    """Validate ``help [cmd]`` arguments."""
    if not tokens:
        return HelpArgs()
    if len(tokens) > 1:
        raise TooManyArgumentsError(MSG_EXTRA_ARGUMENTS, usage_for=CommandKind.HELP.value)
    return HelpArgs(topic=CommandKind.resolve(tokens[0]))


def go_args_from_tokens(tokens: List[str]) -> GoArgs:
    """Validate ``go <name>`` arguments: exactly one name."""
    if not tokens:
        raise MissingArgumentError(MSG_MISSING_PROJECT_NAME, usage_for=CommandKind.GO.value)
    if len(tokens) > 1:
        raise TooManyArgumentsError(MSG_EXTRA_ARGUMENTS, usage_for=CommandKind.GO.value)
    return GoArgs(name=tokens[0])
