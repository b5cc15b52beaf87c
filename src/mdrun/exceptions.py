"""Custom exceptions for mdrun."""

from __future__ import annotations


class MdrunError(Exception):
    """Base exception for mdrun operations."""

    exit_code = 1


class DocumentNotFoundError(MdrunError):
    """No markdown document could be located or read."""

    exit_code = 66


class HeadingNotFoundError(MdrunError):
    """A heading path segment matched no node in the document."""

    exit_code = 64

    def __init__(self, heading: str) -> None:
        super().__init__(f"heading not found: {heading}")
        self.heading = heading


class NoCodeBlocksError(MdrunError):
    """The resolved heading has nothing to run."""

    exit_code = 65

    def __init__(self, heading: str) -> None:
        super().__init__(f"no code blocks found under heading: {heading}")
        self.heading = heading


class SpawnError(MdrunError):
    """An interpreter process could not be started."""

    def __init__(self, executable: str, reason: OSError | ValueError) -> None:
        detail = getattr(reason, "strerror", None) or reason
        super().__init__(f"failed to start {executable}: {detail}")
        self.executable = executable
        self.exit_code = 127 if isinstance(reason, FileNotFoundError) else 126


class InternalError(MdrunError):
    """An internal invariant was violated."""

    exit_code = 70
