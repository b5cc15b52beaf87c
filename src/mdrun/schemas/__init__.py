"""Shared schemas for mdrun."""

from mdrun.schemas.document import CodeBlock, CommandNode, Document, EnvBinding

__all__ = ["CodeBlock", "CommandNode", "Document", "EnvBinding"]
