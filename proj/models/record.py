"""
Project record model for the proj CLI.

One record per registered project, persisted as a block in the registry file.
"""

import os
import re
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

from proj.constants import RECORD_LINE_PATTERN


def _is_single_line(value: str) -> bool:
    # str.splitlines also breaks on \r, \x1c-\x1e, \x85 and \u2028
    return value.splitlines() == [value]


class ProjectRecord(BaseModel):
    """A named project directory.

    - name: unique registry key; must be readable back as a record line
    - directory: path as the user gave it (may be ``~``-relative)
    - metadata: free-form trailing lines, order preserved, unindented
    """

    name: str
    directory: str
    metadata: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Name is required")
        if not re.match(RECORD_LINE_PATTERN, v):
            raise ValueError("Name must start with a letter or underscore")
        if ":" in v or not _is_single_line(v):
            raise ValueError("Name cannot contain ':' or line breaks")
        return v

    @field_validator("directory")
    @classmethod
    def validate_directory(cls, v: str) -> str:
        if not v:
            raise ValueError("Directory is required")
        if not _is_single_line(v):
            raise ValueError("Directory cannot contain line breaks")
        return v

    @field_validator("metadata")
    @classmethod
    def validate_metadata(cls, v: List[str]) -> List[str]:
        if any(not line.strip() or not _is_single_line(line) for line in v):
            raise ValueError("Metadata lines must be non-blank single lines")
        return v

    @property
    def path(self) -> Path:
        """The directory with ``~`` and ``$VAR`` expanded (not resolved)."""
        return Path(os.path.expandvars(os.path.expanduser(self.directory)))
