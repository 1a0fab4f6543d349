"""
Tests for path expansion and slug derivation in proj.paths.
"""

import errno
import os
import re

import pytest

from proj.exceptions import PathExpansionError
from proj.paths import expand_path, slugify


class TestSlugify:
    """Tests for the slugify function."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("My Cool App", "my_cool_app"),
            ("blog", "blog"),
            ("my_app", "myapp"),
            ("my_app v2!", "myapp_v2"),
            ("Café  Menu", "caf__menu"),
            ("__init__", "init"),
            ("!!!", ""),
        ],
    )
    def test_slug_values(self, name, expected):
        assert slugify(name) == expected

    @pytest.mark.parametrize("name", ["A-B.C", "x/y\\z", "Tab\tSeparated", "ÜBER Ünited", "a:b"])
    def test_slug_charset(self, name):
        """Slugs only ever contain lowercase letters, digits and underscores."""
        assert re.fullmatch(r"[a-z0-9_]*", slugify(name))

    def test_slug_is_deterministic(self):
        assert slugify("Some Project") == slugify("Some Project")


class TestExpandPath:
    """Tests for the expand_path function."""

    def test_expands_home(self, home):
        (home / "src").mkdir()
        result = expand_path("~/src")
        assert result.ok
        assert result.path == home / "src"
        assert result.error is None

    def test_expands_environment_variables(self, temp_dir, monkeypatch):
        monkeypatch.setenv("PROJ_TEST_ROOT", str(temp_dir))
        result = expand_path("$PROJ_TEST_ROOT")
        assert result.path == temp_dir

    def test_relative_to_cwd(self, temp_dir):
        (temp_dir / "child").mkdir()
        result = expand_path("child/../child", cwd=temp_dir)
        assert result.path == temp_dir / "child"

    def test_missing_directory_reports_error(self, temp_dir):
        result = expand_path(str(temp_dir / "missing"))
        assert not result.ok
        assert result.path is None
        assert result.error == os.strerror(errno.ENOENT)

    def test_file_is_not_a_directory(self, temp_dir):
        target = temp_dir / "file.txt"
        target.write_text("x")
        result = expand_path(str(target))
        assert not result.ok
        assert "Not a directory" in result.error

    def test_missing_allowed_when_not_required(self, temp_dir):
        result = expand_path(str(temp_dir / "later" / "deeper"), must_exist=False)
        assert result.ok
        assert result.path == temp_dir / "later" / "deeper"

    def test_unwrap_raises_with_system_message(self, temp_dir):
        result = expand_path(str(temp_dir / "missing"))
        with pytest.raises(PathExpansionError, match="No such file or directory"):
            result.unwrap()
