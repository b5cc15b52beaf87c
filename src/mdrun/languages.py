"""Map fenced code block languages to interpreter invocations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Placeholder(Enum):
    """Template slots filled in when a code block is run."""

    CODE = "$CODE"
    NAME = "$NAME"


ArgSlot = Union[str, Placeholder]


@dataclass(frozen=True)
class InterpreterSpec:
    """How to start an interpreter for one language.

    Attributes:
        executable: Program looked up on ``PATH``.
        template: Full argument vector template. Plain strings are passed
            through unchanged; ``Placeholder.NAME`` becomes ``executable`` and
            ``Placeholder.CODE`` becomes the code block source.
    """

    executable: str
    template: tuple[ArgSlot, ...]

    def expand(self, code: str) -> list[str]:
        """Return the argument vector for running ``code``."""
        argv: list[str] = []
        for slot in self.template:
            if slot is Placeholder.CODE:
                argv.append(code)
            elif slot is Placeholder.NAME:
                argv.append(self.executable)
            else:
                argv.append(slot)
        return argv


def _shell(executable: str) -> InterpreterSpec:
    # The trailing "--" becomes $0, so caller arguments start at $1.
    return InterpreterSpec(executable, (Placeholder.NAME, "-euc", Placeholder.CODE, "--"))


def _inline(executable: str, flag: str) -> InterpreterSpec:
    return InterpreterSpec(executable, (Placeholder.NAME, flag, Placeholder.CODE))


_NODE = _inline("node", "-e")
_PYTHON = _inline("python", "-c")
_RUBY = _inline("ruby", "-e")
_CMD = _inline("cmd.exe", "/c")

_REGISTRY: dict[str, InterpreterSpec] = {
    "sh": _shell("sh"),
    "bash": _shell("bash"),
    "zsh": _shell("zsh"),
    "fish": _shell("fish"),
    "dash": _shell("dash"),
    "ksh": _shell("ksh"),
    "ash": _shell("ash"),
    "shell": _shell("sh"),
    "awk": InterpreterSpec("awk", (Placeholder.NAME, Placeholder.CODE)),
    "js": _NODE,
    "javascript": _NODE,
    "py": _PYTHON,
    "python": _PYTHON,
    "rb": _RUBY,
    "ruby": _RUBY,
    "php": _inline("php", "-r"),
    "cmd": _CMD,
    "batch": _CMD,
    "powershell": _inline("powershell.exe", "-c"),
}


def resolve_language(tag: str | None) -> InterpreterSpec | None:
    """Look up the interpreter for a fence info string, ignoring case."""
    if not tag:
        return None
    return _REGISTRY.get(tag.strip().lower())


def is_supported(tag: str | None) -> bool:
    """Return True if code blocks tagged ``tag`` can be run."""
    return resolve_language(tag) is not None


def supported_languages() -> list[str]:
    """Return the registered language tags in registration order."""
    return list(_REGISTRY)
