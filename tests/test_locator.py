"""Tests for document discovery."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from mdrun.exceptions import DocumentNotFoundError
from mdrun.locator import find_document, find_in_directory, program_stem


class TestProgramStem:
    """Tests for program_stem function."""

    @pytest.mark.parametrize(
        ("argv0", "stem"),
        [
            ("mdrun", "mdrun"),
            ("/usr/local/bin/mdrun", "mdrun"),
            ("C:/tools/mdrun.exe", "mdrun"),
            ("./tasks", "tasks"),
        ],
    )
    def test_strips_directory_and_extension(self, argv0: str, stem: str) -> None:
        """Only the bare program name is kept."""
        assert program_stem(argv0) == stem


class TestFindInDirectory:
    """Tests for find_in_directory function."""

    def test_program_document_beats_readme(self, tmp_path: Path) -> None:
        """<program>.md is preferred over README.md."""
        (tmp_path / "README.md").write_text("# readme")
        (tmp_path / "tasks.md").write_text("# tasks")

        assert find_in_directory(tmp_path, "tasks") == tmp_path / "tasks.md"

    def test_hidden_document_beats_readme(self, tmp_path: Path) -> None:
        """.<program>.md is preferred over README.md."""
        (tmp_path / "README.md").write_text("# readme")
        (tmp_path / ".tasks.md").write_text("# tasks")

        assert find_in_directory(tmp_path, "tasks") == tmp_path / ".tasks.md"

    def test_visible_beats_hidden(self, tmp_path: Path) -> None:
        """<program>.md is preferred over .<program>.md."""
        (tmp_path / ".tasks.md").write_text("# hidden")
        (tmp_path / "tasks.md").write_text("# visible")

        assert find_in_directory(tmp_path, "tasks") == tmp_path / "tasks.md"

    def test_names_are_case_insensitive(self, tmp_path: Path) -> None:
        """Candidate names match regardless of case."""
        (tmp_path / "Readme.MD").write_text("# readme")

        assert find_in_directory(tmp_path, "tasks") == tmp_path / "Readme.MD"

    def test_directories_are_ignored(self, tmp_path: Path) -> None:
        """A directory named like a candidate does not count."""
        (tmp_path / "tasks.md").mkdir()

        assert find_in_directory(tmp_path, "tasks") is None

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Unreadable directories yield None."""
        assert find_in_directory(tmp_path / "absent", "tasks") is None


class TestFindDocument:
    """Tests for find_document function."""

    def test_walks_up_to_parent(self, tmp_path: Path) -> None:
        """The search continues in parent directories."""
        (tmp_path / "tasks.md").write_text("# tasks")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_document("tasks", nested) == (tmp_path / "tasks.md").resolve()

    def test_nearest_readme_beats_parent_program_document(self, tmp_path: Path) -> None:
        """A closer README.md wins over a program document further up."""
        (tmp_path / "tasks.md").write_text("# tasks")
        nested = tmp_path / "sub"
        nested.mkdir()
        (nested / "README.md").write_text("# readme")

        assert find_document("tasks", nested) == (nested / "README.md").resolve()

    def test_raises_when_nothing_found(self, tmp_path: Path) -> None:
        """The error lists every name that was searched for."""
        with patch("mdrun.locator.find_in_directory", return_value=None):
            with pytest.raises(DocumentNotFoundError, match=r"tasks\.md, \.tasks\.md, or README\.md"):
                find_document("tasks", tmp_path)
