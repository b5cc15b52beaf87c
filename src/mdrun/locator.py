"""Locate the markdown document that defines the commands."""

from __future__ import annotations

from pathlib import Path

from mdrun.config import README_NAME
from mdrun.exceptions import DocumentNotFoundError


def program_stem(argv0: str) -> str:
    """Return the program name from ``argv[0]`` without directory or extension."""
    return Path(argv0).stem or Path(argv0).name


def candidate_names(program_name: str) -> tuple[str, str]:
    return f"{program_name}.md", f".{program_name}.md"


def find_in_directory(directory: Path, program_name: str) -> Path | None:
    """Pick the command document in a single directory.

    ``<program>.md`` wins over ``.<program>.md``, which wins over
    ``README.md``. Names are compared case-insensitively and only regular
    files count.
    """
    wanted = [name.lower() for name in candidate_names(program_name)] + [README_NAME.lower()]
    found: dict[str, Path] = {}
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return None
    for entry in entries:
        key = entry.name.lower()
        if key in wanted and key not in found and entry.is_file():
            found[key] = entry
    for name in wanted:
        if name in found:
            return found[name]
    return None


def find_document(program_name: str, start: Path | None = None) -> Path:
    """Search ``start`` (default: the working directory) and its parents.

    Raises:
        DocumentNotFoundError: If no directory up to the filesystem root
            contains a candidate document.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        match = find_in_directory(candidate_dir, program_name)
        if match is not None:
            return match
    primary, hidden = candidate_names(program_name)
    raise DocumentNotFoundError(f"{primary}, {hidden}, or {README_NAME} not found")
