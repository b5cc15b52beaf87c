"""Format a parsed document as a tree of available commands."""

from __future__ import annotations

from dataclasses import dataclass

from mdrun.schemas import CommandNode, Document

_BRANCH = "├── "
_LAST = "└── "
_PIPE = "│   "
_SPACE = "    "


@dataclass
class _Row:
    prefix: str
    child_prefix: str
    node: CommandNode


def render_tree(document: Document, *, verbose: bool = False, title: str | None = None) -> str:
    """Render the command tree.

    Headings without code blocks or sub-headings are left out. Descriptions
    are aligned in one column; ``verbose`` adds each node's environment
    bindings and code blocks below it.
    """
    rows = _collect_rows(document, document.root, "")
    width = max((len(row.prefix) + len(row.node.name) for row in rows), default=0)

    lines = [title or document.root.name or "."]
    for row in rows:
        line = row.prefix + row.node.name
        if row.node.description:
            line = line.ljust(width) + "  " + row.node.description
        lines.append(line)
        if verbose:
            lines.extend(_detail_lines(row))
    return "\n".join(lines)


def is_listed(node: CommandNode) -> bool:
    return bool(node.code_blocks or node.children)


def _collect_rows(document: Document, parent: CommandNode, indent: str) -> list[_Row]:
    visible = [child for child in document.children_of(parent) if is_listed(child)]
    rows: list[_Row] = []
    for position, child in enumerate(visible):
        last = position == len(visible) - 1
        row = _Row(
            prefix=indent + (_LAST if last else _BRANCH),
            child_prefix=indent + (_SPACE if last else _PIPE),
            node=child,
        )
        rows.append(row)
        rows.extend(_collect_rows(document, child, row.child_prefix))
    return rows


def _detail_lines(row: _Row) -> list[str]:
    indent = row.child_prefix + _SPACE
    lines = [f"{indent}{binding.key}={binding.value}" for binding in row.node.env]
    for block in row.node.code_blocks:
        lines.append(f"{indent}```{block.language}")
        lines.extend(f"{indent}{source_line}" for source_line in block.source.split("\n"))
        lines.append(f"{indent}```")
    return lines
