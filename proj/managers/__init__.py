"""
Managers for the proj CLI.

- RegistryStorage: persistence of the registry file, with locking
- ProjectRegistry: load, look up and append project records
- load_run_control: read the ~/.prc run-control file
"""

from proj.managers.storage_manager import RegistryStorage
from proj.managers.project_manager import ProjectRegistry
from proj.managers.config_manager import load_run_control
from proj.exceptions import StorageError

__all__ = [
    "RegistryStorage",
    "ProjectRegistry",
    "StorageError",
    "load_run_control",
]
