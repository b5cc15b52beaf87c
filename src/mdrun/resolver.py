"""Resolve a heading path to a command node and its inherited environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from mdrun.exceptions import HeadingNotFoundError
from mdrun.schemas import CommandNode, Document, EnvBinding


@dataclass(frozen=True)
class Resolution:
    """A resolved command.

    Attributes:
        node: The node the heading path points at.
        env: Bindings from the root down to ``node``. Later entries override
            earlier ones with the same key.
    """

    node: CommandNode
    env: list[EnvBinding]


def _matches(node: CommandNode, heading: str) -> bool:
    return node.name.casefold() == heading.casefold()


def find_heading(document: Document, start: CommandNode, heading: str) -> CommandNode | None:
    """Find ``heading`` below ``start``.

    Direct children are checked first. Otherwise each child's subtree is
    searched depth first, in document order, and the first match wins.
    """
    children = document.children_of(start)
    for child in children:
        if _matches(child, heading):
            return child
    for child in children:
        for node in document.walk(child):
            if node is not child and _matches(node, heading):
                return node
    return None


def collect_env(document: Document, node: CommandNode) -> list[EnvBinding]:
    """Return the bindings of ``node`` and its ancestors, root first."""
    env: list[EnvBinding] = []
    for ancestor in document.ancestry(node):
        env.extend(ancestor.env)
    return env


def resolve_command(document: Document, path: Sequence[str]) -> Resolution:
    """Follow ``path`` from the document root.

    Args:
        document: Parsed document.
        path: Heading names, matched case-insensitively. An empty path
            resolves to the root.

    Returns:
        The resolved node and its root-to-leaf environment bindings.

    Raises:
        HeadingNotFoundError: If a segment matches nothing below the node
            reached so far. The error names that segment.
    """
    current = document.root
    for heading in path:
        found = find_heading(document, current, heading)
        if found is None:
            raise HeadingNotFoundError(heading)
        current = found
    return Resolution(node=current, env=collect_env(document, current))
