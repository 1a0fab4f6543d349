"""
ProjectRegistry for the proj CLI.

Loads project records from RegistryStorage and appends new ones.
Lookups are linear scans; the registry is expected to stay small.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from proj.exceptions import DuplicateProjectError
from proj.managers.registry_parser import format_record, parse_registry
from proj.managers.storage_manager import RegistryStorage
from proj.models.record import ProjectRecord
from proj.paths import expand_path

logger = logging.getLogger(__name__)


class ProjectRegistry:
    """
    Manages the ordered list of registered projects.

    Usage:
        registry = ProjectRegistry(RegistryStorage())

        records = registry.load()
        record = registry.find_by_name(records, "blog")

        registry.append(ProjectRecord(name="site", directory="~/projects/site"))
    """

    def __init__(self, storage: RegistryStorage) -> None:
        self.storage = storage

    def load(self) -> List[ProjectRecord]:
        """
        Load all records in file order.

        Creates an empty registry file if none exists.
        """
        text = self.storage.read_text()
        records = parse_registry(text, source=str(self.storage.registry_path))
        logger.debug("Loaded %d project(s) from %s", len(records), self.storage.registry_path)
        return records

    @staticmethod
    def find_by_name(records: Sequence[ProjectRecord], name: str) -> Optional[ProjectRecord]:
        """Return the first record called ``name``, or None."""
        for record in records:
            if record.name == name:
                return record
        return None

    @staticmethod
    def find_containing(records: Sequence[ProjectRecord], path: Path) -> Optional[ProjectRecord]:
        """
        Return the record whose directory is ``path`` or one of its parents.

        When projects are nested on disk the deepest directory wins.
        Directories are expanded as for go; records that no longer expand
        to an accessible directory are skipped.
        """
        best: Optional[ProjectRecord] = None
        best_depth = -1
        target = path.resolve()

        for record in records:
            expansion = expand_path(record.directory)
            if not expansion.ok:
                continue
            directory = expansion.path
            if target == directory or directory in target.parents:
                depth = len(directory.parts)
                if depth > best_depth:
                    best, best_depth = record, depth
        return best

    def append(self, record: ProjectRecord) -> None:
        """
        Append a record to the registry.

        The duplicate check and the write happen under the registry lock.

        Raises:
            DuplicateProjectError: If a record with the same name exists.
            StorageError: If the registry cannot be read or written.
        """
        with self.storage.lock():
            text = self.storage.read_text()
            existing = self.find_by_name(
                parse_registry(text, source=str(self.storage.registry_path)), record.name
            )
            if existing:
                raise DuplicateProjectError(
                    f'project already exists: "{existing.name}" at {existing.directory}'
                )

            prefix = ""
            if text.strip():
                prefix = "\n" if text.endswith("\n") else "\n\n"
            self.storage.append_text(prefix + format_record(record))

        logger.debug("Registered project %r at %s", record.name, record.directory)
