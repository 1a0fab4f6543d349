"""
Tests for RegistryStorage and ProjectRegistry.

Uses a temporary config directory so the real registry is never touched.
"""

import pytest

from proj.exceptions import DuplicateProjectError, StorageError
from proj.managers.project_manager import ProjectRegistry
from proj.managers.storage_manager import RegistryStorage
from proj.models.record import ProjectRecord


class TestRegistryStorage:
    """Test RegistryStorage file handling."""

    def test_read_creates_empty_registry(self, storage, config_dir):
        assert not config_dir.exists()
        assert storage.read_text() == ""
        assert (config_dir / "projects").exists()

    def test_append_text(self, storage):
        storage.append_text("a:/a\n")
        storage.append_text("b:/b\n")
        assert storage.read_text() == "a:/a\nb:/b\n"

    def test_lock_creates_lock_file(self, storage, config_dir):
        with storage.lock():
            assert (config_dir / "projects.lock").exists()

    def test_default_config_dir_from_environment(self, temp_dir, monkeypatch):
        monkeypatch.setenv("P_CONFIG_DIR", str(temp_dir / "elsewhere"))
        storage = RegistryStorage()
        assert storage.registry_path == temp_dir / "elsewhere" / "projects"

    def test_unwritable_config_dir(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("not a directory")
        storage = RegistryStorage(blocker / "config")
        with pytest.raises(StorageError, match="Failed to create"):
            storage.read_text()

    def test_unopenable_lock_file(self, storage, config_dir):
        storage.ensure_exists()
        (config_dir / "projects.lock").mkdir()
        with pytest.raises(StorageError, match="Failed to open"):
            with storage.lock():
                pass


class TestProjectRegistryLoad:
    """Test loading records."""

    def test_load_missing_registry(self, registry, config_dir):
        assert registry.load() == []
        assert (config_dir / "projects").read_text() == ""

    def test_round_trip_preserves_order_and_metadata(self, populated_registry, sample_records):
        assert populated_registry.load() == sample_records

    def test_load_reads_hand_written_file(self, storage, registry):
        storage.append_text("notes:~/notes\n  cmd: p start notes\n  extra: kept\n")
        [record] = registry.load()
        assert record.name == "notes"
        assert record.metadata == ["cmd: p start notes", "extra: kept"]


class TestProjectRegistryAppend:
    """Test appending records."""

    def test_first_record_has_no_separator(self, registry, storage):
        registry.append(ProjectRecord(name="a", directory="/a", metadata=["cmd: p s a"]))
        assert storage.read_text() == "a:/a\n  cmd: p s a\n"

    def test_blank_line_separates_records(self, registry, storage):
        registry.append(ProjectRecord(name="a", directory="/a"))
        registry.append(ProjectRecord(name="b", directory="/b"))
        assert storage.read_text() == "a:/a\n\nb:/b\n"

    def test_append_after_file_without_trailing_newline(self, registry, storage):
        storage.append_text("a:/a")
        registry.append(ProjectRecord(name="b", directory="/b"))
        assert [r.name for r in registry.load()] == ["a", "b"]

    def test_duplicate_name_rejected(self, populated_registry, storage):
        before = storage.read_text()
        with pytest.raises(DuplicateProjectError, match='project already exists: "blog"'):
            populated_registry.append(ProjectRecord(name="blog", directory="/other"))
        assert storage.read_text() == before

    def test_append_many(self, registry):
        names = [f"project_{i}" for i in range(10)]
        for name in names:
            registry.append(ProjectRecord(name=name, directory=f"/work/{name}"))
        records = registry.load()
        assert [r.name for r in records] == names
        assert [r.directory for r in records] == [f"/work/{n}" for n in names]


class TestProjectRegistryLookup:
    """Test lookups by name and by path."""

    def test_find_by_name(self, populated_registry):
        records = populated_registry.load()
        assert ProjectRegistry.find_by_name(records, "api").name == "api"
        assert ProjectRegistry.find_by_name(records, "missing") is None

    def test_find_by_name_first_match_wins(self):
        records = [
            ProjectRecord(name="x", directory="/first"),
            ProjectRecord(name="x", directory="/second"),
        ]
        assert ProjectRegistry.find_by_name(records, "x").directory == "/first"

    def test_find_containing_exact_and_nested(self, sample_records, temp_dir):
        nested = temp_dir / "work" / "blog" / "posts" / "2024"
        nested.mkdir(parents=True)
        assert ProjectRegistry.find_containing(sample_records, temp_dir / "work" / "blog").name == "blog"
        assert ProjectRegistry.find_containing(sample_records, nested).name == "blog"

    def test_find_containing_outside_any_project(self, sample_records, temp_dir):
        assert ProjectRegistry.find_containing(sample_records, temp_dir) is None

    def test_find_containing_prefers_deepest(self, temp_dir):
        outer = temp_dir / "outer"
        inner = outer / "inner"
        inner.mkdir(parents=True)
        records = [
            ProjectRecord(name="outer", directory=str(outer)),
            ProjectRecord(name="inner", directory=str(inner)),
        ]
        assert ProjectRegistry.find_containing(records, inner / "x").name == "inner"

    def test_find_containing_skips_missing_directories(self, temp_dir):
        records = [ProjectRecord(name="gone", directory=str(temp_dir / "gone"))]
        assert ProjectRegistry.find_containing(records, temp_dir / "gone") is None

    def test_find_containing_expands_variables(self, temp_dir, monkeypatch):
        (temp_dir / "blog").mkdir()
        monkeypatch.setenv("PROJ_TEST_ROOT", str(temp_dir))
        records = [ProjectRecord(name="blog", directory="$PROJ_TEST_ROOT/blog")]
        assert ProjectRegistry.find_containing(records, temp_dir / "blog").name == "blog"
