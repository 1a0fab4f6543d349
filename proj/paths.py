"""
Path helpers for the proj CLI: shell-style path expansion and slugs.
"""

import errno
import logging
import os
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from proj.constants import (
    SLUG_INVALID_CHARS_PATTERN,
    SLUG_SPACE_REPLACEMENT,
    SLUG_STRIP_CHARS,
)
from proj.exceptions import PathExpansionError

logger = logging.getLogger(__name__)


class PathExpansion(BaseModel):
    """Result of expanding a path string.

    Exactly one of ``path`` and ``error`` is set.
    """

    raw: str
    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.path is not None

    def unwrap(self) -> Path:
        """Return the expanded path or raise PathExpansionError."""
        if self.path is None:
            raise PathExpansionError(f"{self.raw}: {self.error}")
        return self.path


def expand_path(raw: str, must_exist: bool = True, cwd: Optional[Path] = None) -> PathExpansion:
    """
    Expand ``~`` and environment variables, then canonicalize.

    Relative results are taken against ``cwd`` (default: the current
    working directory), the same way ``cd <raw> && pwd -P`` would.

    Args:
        raw: Path as written by the user or read from a file.
        must_exist: Require an existing, enterable directory.
        cwd: Directory to resolve relative paths against.

    Returns:
        PathExpansion holding either the absolute path or the OS error text.
    """
    expanded = os.path.expandvars(os.path.expanduser(raw))
    candidate = Path(expanded)
    if not candidate.is_absolute():
        candidate = (cwd or Path.cwd()) / candidate

    try:
        resolved = candidate.resolve(strict=must_exist)
        if must_exist:
            if not resolved.is_dir():
                return PathExpansion(raw=raw, error=os.strerror(errno.ENOTDIR))
            if not os.access(resolved, os.X_OK):
                return PathExpansion(raw=raw, error=os.strerror(errno.EACCES))
    except OSError as e:
        logger.debug("Could not expand %r: %s", raw, e)
        return PathExpansion(raw=raw, error=e.strerror or str(e))

    logger.debug("Expanded %r to %s", raw, resolved)
    return PathExpansion(raw=raw, path=resolved)


def slugify(name: str) -> str:
    """
    Derive a filesystem-safe directory name from a project name.

    Examples:
        >>> slugify("My Cool App")
        'my_cool_app'
        >>> slugify("my_app v2!")
        'myapp_v2'
    """
    slug = name.replace(SLUG_STRIP_CHARS, "")
    slug = slug.replace(" ", SLUG_SPACE_REPLACEMENT)
    slug = re.sub(SLUG_INVALID_CHARS_PATTERN, "", slug)
    return slug.lower()
