"""
Storage manager for the proj CLI.

Handles reading and appending to the registry file in the config directory.
"""

import fcntl
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from proj.constants import REGISTRY_FILE_NAME, REGISTRY_LOCK_FILE_NAME, get_config_dir
from proj.exceptions import StorageError

logger = logging.getLogger(__name__)


class RegistryStorage:
    """
    Manages persistence of the project registry to a flat text file.

    The file is created lazily on first access. Writers hold an exclusive
    lock on a sibling lock file for the whole read-check-append sequence.
    """

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """
        Initialize the RegistryStorage with a config directory.

        Args:
            config_dir: Directory holding the registry. Defaults to get_config_dir().
        """
        self.config_dir = config_dir if config_dir else get_config_dir()
        self.registry_path = self.config_dir / REGISTRY_FILE_NAME
        self.lock_path = self.config_dir / REGISTRY_LOCK_FILE_NAME

    def ensure_exists(self) -> None:
        """Create the config directory and an empty registry if missing."""
        if self.registry_path.exists():
            return
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.registry_path.touch()
        except OSError as e:
            raise StorageError(f"Failed to create {self.registry_path}: {e.strerror or e}")
        logger.debug("Created empty registry at %s", self.registry_path)

    def read_text(self) -> str:
        """Read the whole registry, creating it first if absent."""
        self.ensure_exists()
        try:
            return self.registry_path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read {self.registry_path}: {e.strerror or e}")

    def append_text(self, text: str) -> None:
        """Append text to the registry.

        Raises:
            StorageError: If writing to file fails.
        """
        self.ensure_exists()
        try:
            with open(self.registry_path, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise StorageError(f"Failed to write to {self.registry_path}: {e.strerror or e}")

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Hold an exclusive lock on the registry for the duration of the block."""
        self.ensure_exists()
        try:
            handle = open(self.lock_path, "a+", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to open {self.lock_path}: {e.strerror or e}")
        try:
            fcntl.flock(handle, fcntl.LOCK_EX)
            logger.debug("Acquired registry lock %s", self.lock_path)
            yield
        finally:
            fcntl.flock(handle, fcntl.LOCK_UN)
            handle.close()
