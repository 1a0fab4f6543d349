"""
Run-control model for the proj CLI.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from proj.constants import DEFAULT_PROJECT_DIR


class RunControlConfig(BaseModel):
    """Settings read once per invocation from the run-control file.

    Immutable for the rest of the invocation.
    """

    model_config = ConfigDict(frozen=True)

    default_project_dir: str = DEFAULT_PROJECT_DIR
    source: Optional[Path] = None
