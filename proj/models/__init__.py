"""
Data models for the proj CLI.

Import models explicitly from their modules:
    from proj.models.record import ProjectRecord
    from proj.models.config import RunControlConfig
    from proj.models.command import CommandKind, GoArgs, StartArgs
    from proj.models.results import Output, ChangeDirectory
"""

from .record import ProjectRecord
from .config import RunControlConfig
from .results import ChangeDirectory, CommandResult, Output
