"""Parse a markdown document into a tree of runnable commands.

The parser makes a single pass over the lines of the document and switches
between three modes: normal text, fenced code and tables. It never raises on
malformed input; constructs it cannot interpret are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mdrun.languages import is_supported
from mdrun.schemas import CodeBlock, CommandNode, Document, EnvBinding
from mdrun.utils.logging_config import get_logger

logger = get_logger(__name__)

_CLOSING_HASHES_RE = re.compile(r"(?:^|\s+)#+$")
_FENCE = "```"
_DELIMITER_CELL_RE = re.compile(r"^:?-+:?$")


@dataclass
class _ScanState:
    document: Document
    current: CommandNode
    in_code: bool = False
    code_language: str = ""
    code_lines: list[str] = field(default_factory=list)
    in_table: bool = False


def parse_document(text: str | bytes) -> Document:
    """Build a command tree from markdown text.

    Args:
        text: Markdown content. Bytes are decoded as UTF-8.

    Returns:
        The parsed document. Its root node has level 0 and holds any content
        that precedes the first heading.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")

    document = Document()
    state = _ScanState(document=document, current=document.root)

    for raw_line in text.split("\n"):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        _consume_line(state, line)

    if state.in_code:
        logger.debug(
            "unterminated %r code fence under %r closed at end of input",
            state.code_language,
            state.current.name,
        )
        _close_code_block(state)

    return document


def heading_level(line: str) -> int:
    """Return the ATX heading level of ``line`` or 0 if it is not a heading."""
    stripped = line.lstrip()
    level = len(stripped) - len(stripped.lstrip("#"))
    if 1 <= level <= 6 and len(stripped) > level and stripped[level].isspace():
        return level
    return 0


def is_fence(line: str) -> bool:
    """Return True for a line opening or closing a backtick code fence."""
    stripped = line.lstrip()
    return stripped.startswith(_FENCE) and not stripped.startswith(_FENCE + "`")


def split_table_row(line: str) -> tuple[str, str] | None:
    """Return the first two non-empty cells of a table row, if any."""
    cells = [cell.strip() for cell in line.split("|")]
    cells = [cell for cell in cells if cell]
    if len(cells) < 2:
        return None
    return cells[0], cells[1]


def is_separator_row(line: str) -> bool:
    """Return True for a table delimiter row such as ``|---|:-:|`` or ``| :- | -: |``."""
    if "---" in line or "===" in line:
        return True
    cells = [cell.strip() for cell in line.split("|") if cell.strip()]
    return bool(cells) and all(_DELIMITER_CELL_RE.match(cell) for cell in cells)


def _consume_line(state: _ScanState, line: str) -> None:
    if state.in_code:
        if line.lstrip().startswith(_FENCE):
            _close_code_block(state)
        else:
            state.code_lines.append(line)
        return

    level = heading_level(line)
    if level:
        state.in_table = False
        _open_heading(state, level, _heading_text(line, level))
        return

    if is_fence(line):
        state.in_table = False
        state.in_code = True
        state.code_language = line.lstrip()[len(_FENCE):].strip()
        state.code_lines = []
        return

    if "|" in line:
        _consume_table_row(state, line)
        return

    if state.in_table:
        state.in_table = False

    stripped = line.strip()
    if stripped and state.current.description is None:
        state.current.description = stripped


def _heading_text(line: str, level: int) -> str:
    text = line.lstrip()[level:].strip()
    return _CLOSING_HASHES_RE.sub("", text).strip()


def _open_heading(state: _ScanState, level: int, name: str) -> None:
    parent: CommandNode = state.current
    while parent.level >= level and not parent.is_root:
        parent = state.document.parent_of(parent)  # type: ignore[assignment]
    state.current = state.document.add_node(level=level, name=name, parent=parent)


def _close_code_block(state: _ScanState) -> None:
    language = state.code_language
    if language and is_supported(language):
        source = "\n".join(state.code_lines).rstrip("\n")
        state.current.code_blocks.append(CodeBlock(language=language, source=source))
    else:
        logger.debug("skipping code block with unsupported language %r", language)
    state.in_code = False
    state.code_language = ""
    state.code_lines = []


def _consume_table_row(state: _ScanState, line: str) -> None:
    if not state.in_table:
        # First row of a table is its header.
        state.in_table = True
        return
    if is_separator_row(line):
        return
    row = split_table_row(line)
    if row is None:
        return
    key, value = row
    if key.lower() == "key" and value.lower() == "value":
        return
    state.current.env.append(EnvBinding(key=key, value=value))
