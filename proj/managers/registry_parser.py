"""
Parser and serializer for the registry file format.

A registry is a sequence of blocks separated by blank lines:

    <name>:<directory>
      cmd: <original invocation text>

A line starting with a letter or underscore opens a record and is split on
its first ``:``. Any other non-blank line belongs to the preceding record
as metadata.
"""

import logging
import re
from typing import List

from pydantic import ValidationError

from proj.constants import RECORD_LINE_PATTERN, REGISTRY_METADATA_INDENT
from proj.exceptions import StorageError
from proj.models.record import ProjectRecord

logger = logging.getLogger(__name__)

_RECORD_LINE = re.compile(RECORD_LINE_PATTERN)


def parse_registry(text: str, source: str = "registry") -> List[ProjectRecord]:
    """
    Parse registry text into records, in file order.

    Args:
        text: Full registry contents.
        source: Name used in error messages.

    Returns:
        List of ProjectRecord.

    Raises:
        StorageError: If a record line has no ':' separator or is invalid.
    """
    records: List[ProjectRecord] = []

    # Only \n separates lines; str.splitlines would also break on \x1c and the like
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue

        if _RECORD_LINE.match(line):
            name, sep, directory = line.partition(":")
            if not sep:
                raise StorageError(f"{source}:{lineno}: expected <name>:<directory>, got {line!r}")
            try:
                records.append(ProjectRecord(name=name, directory=directory))
            except ValidationError as e:
                raise StorageError(f"{source}:{lineno}: invalid record: {e.errors()[0]['msg']}")
            continue

        if not records:
            logger.debug("%s:%d: metadata before first record ignored", source, lineno)
            continue
        records[-1].metadata.append(line.strip())

    return records


def format_record(record: ProjectRecord) -> str:
    """Serialize one record, newline-terminated."""
    lines = [f"{record.name}:{record.directory}"]
    lines.extend(f"{REGISTRY_METADATA_INDENT}{meta}" for meta in record.metadata)
    return "\n".join(lines) + "\n"
