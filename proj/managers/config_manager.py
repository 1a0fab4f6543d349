"""
Run-control loader for the proj CLI.

The run-control file holds ``key = value`` lines. Blank lines and lines
starting with ``#`` are ignored. Any unrecognized key aborts the whole
invocation, before a command runs.
"""

import logging
from pathlib import Path
from typing import Optional

from proj.constants import RUN_CONTROL_KEYS, get_run_control_path
from proj.exceptions import ConfigParseError, ConfigurationError
from proj.models.config import RunControlConfig
from proj.paths import expand_path

logger = logging.getLogger(__name__)


def load_run_control(path: Optional[Path] = None) -> RunControlConfig:
    """
    Load the run-control file, falling back to defaults.

    Args:
        path: Run-control file. Defaults to get_run_control_path().

    Returns:
        RunControlConfig with defaults overridden by the file's values.

    Raises:
        ConfigParseError: On a malformed line or an unknown key.
        ConfigurationError: If the file exists but cannot be read.
    """
    path = path or get_run_control_path()
    if not path.exists():
        logger.debug("No run-control file at %s; using defaults", path)
        return RunControlConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"{path}: {e.strerror or e}")

    values = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key:
            raise ConfigParseError(f"{path}:{lineno}: expected 'key = value', got {stripped!r}")
        if key not in RUN_CONTROL_KEYS:
            raise ConfigParseError(f'{path}:{lineno}: unknown option "{key}"')

        if not value:
            raise ConfigParseError(f'{path}:{lineno}: empty value for "{key}"')
        if key == "default_project_dir":
            # Project directories are created on demand, so it need not exist yet
            value = str(expand_path(value, must_exist=False).unwrap())
        values[key] = value

    logger.debug("Loaded run-control %s: %s", path, values)
    return RunControlConfig(source=path, **values)
