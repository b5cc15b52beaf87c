"""Command tree models built from a markdown document."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field


class CodeBlock(BaseModel):
    """A fenced code block in a registered language."""

    language: str
    source: str


class EnvBinding(BaseModel):
    """An environment variable taken from a two-column table row."""

    key: str
    value: str


class CommandNode(BaseModel):
    """A heading and everything nested under it.

    ``parent`` and ``children`` hold indices into ``Document.nodes``.
    """

    index: int = Field(..., ge=0)
    level: int = Field(..., ge=0, le=6)
    name: str = ""
    description: str | None = None
    code_blocks: list[CodeBlock] = Field(default_factory=list)
    env: list[EnvBinding] = Field(default_factory=list)
    parent: int | None = None
    children: list[int] = Field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None


class Document(BaseModel):
    """Arena of command nodes; index 0 is the synthetic root."""

    nodes: list[CommandNode] = Field(
        default_factory=lambda: [CommandNode(index=0, level=0)]
    )

    @property
    def root(self) -> CommandNode:
        return self.nodes[0]

    def node(self, index: int) -> CommandNode:
        return self.nodes[index]

    def add_node(self, *, level: int, name: str, parent: CommandNode) -> CommandNode:
        """Create a heading node and append it to ``parent``'s children."""
        node = CommandNode(index=len(self.nodes), level=level, name=name, parent=parent.index)
        self.nodes.append(node)
        parent.children.append(node.index)
        return node

    def children_of(self, node: CommandNode) -> list[CommandNode]:
        return [self.node(index) for index in node.children]

    def parent_of(self, node: CommandNode) -> CommandNode | None:
        if node.parent is None:
            return None
        return self.node(node.parent)

    def ancestry(self, node: CommandNode) -> list[CommandNode]:
        """Return the chain from the root down to ``node``, both included."""
        chain: list[CommandNode] = []
        current: CommandNode | None = node
        while current is not None:
            chain.append(current)
            current = self.parent_of(current)
        chain.reverse()
        return chain

    def walk(self, start: CommandNode | None = None) -> Iterator[CommandNode]:
        """Yield ``start`` (default: the root) and its descendants in document order."""
        stack = [start if start is not None else self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.children_of(node)))
