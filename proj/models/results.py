"""
Command results for the proj CLI.

Handlers never print or change directory themselves; they return one of
these and the CLI wrapper acts on it.
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class Output(BaseModel):
    """Informational text for standard output."""

    lines: List[str] = Field(default_factory=list)


class ChangeDirectory(BaseModel):
    """A request for the calling shell to change into ``path``."""

    path: Path
    message: Optional[str] = None


CommandResult = Union[Output, ChangeDirectory]
