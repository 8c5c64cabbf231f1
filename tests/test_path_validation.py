"""Tests for PathValidationService"""
import pytest

from git_reporter.exceptions import PathDoesNotExistError
from git_reporter.services.path_validation_service import PathValidationService


class TestPathValidation:
    def test_all_paths_exist(self, temp_dir):
        (temp_dir / "a.txt").write_text("a")
        (temp_dir / "b.txt").write_text("b")

        paths = PathValidationService.validate_existing(["a.txt", "b.txt"], temp_dir)

        assert paths == [temp_dir / "a.txt", temp_dir / "b.txt"]

    def test_missing_paths_reported_together(self, temp_dir):
        """Test every missing path is listed in one error."""
        (temp_dir / "a.txt").write_text("a")

        with pytest.raises(PathDoesNotExistError) as exc_info:
            PathValidationService.validate_existing(["gone.txt", "a.txt", "also-gone.txt"], temp_dir)

        assert exc_info.value.paths == ["gone.txt", "also-gone.txt"]
        assert "gone.txt, also-gone.txt" in str(exc_info.value)

    def test_relative_to_cwd_by_default(self, temp_dir, monkeypatch):
        (temp_dir / "here.txt").write_text("x")
        monkeypatch.chdir(temp_dir)

        assert PathValidationService.find_missing(["here.txt", "there.txt"]) == ["there.txt"]

    def test_absolute_path(self, temp_dir):
        target = temp_dir / "abs.txt"
        target.write_text("x")

        assert PathValidationService.validate_existing([str(target)]) == [target]
