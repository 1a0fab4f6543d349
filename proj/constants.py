"""
Constants for the proj CLI application.

Note: These constants serve as default fallback values.
Actual values are loaded from the run-control file (~/.prc) at runtime.
"""
import os
from pathlib import Path
from typing import Optional

import click

# =============================================================================
# Default Fallback Values
# =============================================================================

# Executable name used in usage text when it cannot be inferred
DEFAULT_EXECUTABLE_NAME = "p"

# Run-control defaults
DEFAULT_PROJECT_DIR = "~/projects"
DEFAULT_RUN_CONTROL_FILE = "~/.prc"
RUN_CONTROL_KEYS = ("default_project_dir",)

# Registry file layout
REGISTRY_FILE_NAME = "projects"
REGISTRY_LOCK_FILE_NAME = "projects.lock"
REGISTRY_METADATA_INDENT = "  "
RECORD_LINE_PATTERN = r"^[A-Za-z_]"

# Slug rules (applied in order: strip, replace, filter, lowercase)
SLUG_STRIP_CHARS = "_"
SLUG_SPACE_REPLACEMENT = "_"
SLUG_INVALID_CHARS_PATTERN = r"[^A-Za-z0-9_]"

# Environment variables
ENV_RUN_CONTROL = "PRC"
ENV_CONFIG_DIR = "P_CONFIG_DIR"
ENV_CD_FILE = "P_CD_FILE"

# Error messages (not configurable)
MSG_MISSING_PROJECT_NAME = "missing required project name"
MSG_EXTRA_ARGUMENTS = "extra arguments not supported"
MSG_NO_PROJECTS = "no projects yet"


def get_run_control_path() -> Path:
    """Get the run-control file path, honouring $PRC."""
    return Path(os.environ.get(ENV_RUN_CONTROL) or DEFAULT_RUN_CONTROL_FILE).expanduser()


def get_config_dir() -> Path:
    """Get the directory holding the project registry, honouring $P_CONFIG_DIR."""
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        return Path(override).expanduser()
    return Path(click.get_app_dir(DEFAULT_EXECUTABLE_NAME))


def get_cd_file() -> Optional[Path]:
    """Get the directory-change channel file set up by the shell wrapper, if any."""
    value = os.environ.get(ENV_CD_FILE)
    return Path(value) if value else None
