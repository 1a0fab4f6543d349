"""
Test fixtures for the proj CLI test suite.

Provides:
- Temporary directory fixtures (isolated from the real ~/.prc and registry)
- A registry backed by a temporary config directory
- A CliRunner with the environment pointed at the temporary directories
"""

import shutil
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
from click.testing import CliRunner

from proj.channel import DirectoryChannel
from proj.core import ProjContext, ProjCore
from proj.managers.project_manager import ProjectRegistry
from proj.managers.storage_manager import RegistryStorage
from proj.models.config import RunControlConfig
from proj.models.record import ProjectRecord
from proj.printer import Printer


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation.

    Resolved so comparisons against canonicalized paths hold on systems
    where the temp directory is a symlink.
    """
    temp_path = Path(tempfile.mkdtemp(prefix="proj_test_")).resolve()
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def home(temp_dir: Path, monkeypatch) -> Path:
    """Point HOME (and so ``~``) at a fresh directory."""
    home_path = temp_dir / "home"
    home_path.mkdir()
    monkeypatch.setenv("HOME", str(home_path))
    return home_path


@pytest.fixture
def config_dir(temp_dir: Path) -> Path:
    """Directory that will hold the registry (not created up front)."""
    return temp_dir / "config"


@pytest.fixture
def cd_file(temp_dir: Path) -> Path:
    return temp_dir / "cd-request"


@pytest.fixture
def env(home: Path, config_dir: Path, cd_file: Path, temp_dir: Path, monkeypatch) -> Path:
    """Isolate run-control, registry and directory-change channel.

    Returns the run-control path, which does not exist until a test writes it.
    """
    rc_path = temp_dir / "prc"
    monkeypatch.setenv("PRC", str(rc_path))
    monkeypatch.setenv("P_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("P_CD_FILE", str(cd_file))
    return rc_path


@pytest.fixture
def runner(env) -> CliRunner:
    return CliRunner()


# =============================================================================
# Registry and Core Fixtures
# =============================================================================


@pytest.fixture
def storage(config_dir: Path) -> RegistryStorage:
    return RegistryStorage(config_dir)


@pytest.fixture
def registry(storage: RegistryStorage) -> ProjectRegistry:
    return ProjectRegistry(storage)


@pytest.fixture
def sample_records(temp_dir: Path) -> List[ProjectRecord]:
    """Three records whose directories exist on disk."""
    records = []
    for name in ("blog", "api", "notes"):
        directory = temp_dir / "work" / name
        directory.mkdir(parents=True)
        records.append(
            ProjectRecord(name=name, directory=str(directory), metadata=[f"cmd: p start {name}"])
        )
    return records


@pytest.fixture
def populated_registry(registry: ProjectRegistry, sample_records) -> ProjectRegistry:
    for record in sample_records:
        registry.append(record)
    return registry


@pytest.fixture
def context(home: Path, registry: ProjectRegistry, cd_file: Path) -> ProjContext:
    """A ProjContext with default run-control settings and a temp registry."""
    printer = Printer(color=False)
    return ProjContext(
        config=RunControlConfig(),
        registry=registry,
        printer=printer,
        channel=DirectoryChannel(printer, cd_file=cd_file),
        exe="p",
    )


@pytest.fixture
def core(context: ProjContext) -> ProjCore:
    return ProjCore(context)
