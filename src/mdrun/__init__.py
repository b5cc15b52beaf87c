"""mdrun: run the code blocks of a markdown document by heading."""

from mdrun.exceptions import (
    DocumentNotFoundError,
    HeadingNotFoundError,
    InternalError,
    MdrunError,
    NoCodeBlocksError,
    SpawnError,
)
from mdrun.executor import execute_command
from mdrun.languages import InterpreterSpec, Placeholder, resolve_language
from mdrun.parser import parse_document
from mdrun.resolver import Resolution, resolve_command
from mdrun.schemas import CodeBlock, CommandNode, Document, EnvBinding

__all__ = [
    "CodeBlock",
    "CommandNode",
    "Document",
    "DocumentNotFoundError",
    "EnvBinding",
    "HeadingNotFoundError",
    "InternalError",
    "InterpreterSpec",
    "MdrunError",
    "NoCodeBlocksError",
    "Placeholder",
    "Resolution",
    "SpawnError",
    "execute_command",
    "parse_document",
    "resolve_command",
    "resolve_language",
]
