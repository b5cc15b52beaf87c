"""Run the code blocks of a resolved command."""

from __future__ import annotations

import os
import subprocess
from typing import Mapping, Sequence

from mdrun.config import SIGNAL_EXIT_BASE
from mdrun.exceptions import InternalError, NoCodeBlocksError, SpawnError
from mdrun.languages import resolve_language
from mdrun.schemas import CodeBlock, CommandNode, EnvBinding
from mdrun.utils.logging_config import get_logger

logger = get_logger(__name__)


def build_environment(
    bindings: Sequence[EnvBinding],
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Overlay ``bindings`` on ``base`` (the process environment by default).

    Bindings are applied in order, so the last one for a key wins. Keys that
    cannot name an environment variable (empty, or containing "=" or NUL)
    are skipped.
    """
    env = dict(os.environ if base is None else base)
    for binding in bindings:
        if not binding.key or "=" in binding.key or "\0" in binding.key:
            logger.debug("skipping invalid environment variable name %r", binding.key)
            continue
        env[binding.key] = binding.value
    return env


def build_argv(block: CodeBlock, args: Sequence[str] = ()) -> list[str]:
    """Return the interpreter argument vector for ``block`` plus ``args``.

    Raises:
        InternalError: If the block's language is not registered. The parser
            only keeps registered languages, so this indicates a bug.
    """
    spec = resolve_language(block.language)
    if spec is None:
        raise InternalError(f"unsupported language in parsed document: {block.language}")
    return spec.expand(block.source) + list(args)


def execute_command(
    node: CommandNode,
    env: Sequence[EnvBinding],
    args: Sequence[str] = (),
    *,
    base_env: Mapping[str, str] | None = None,
) -> int:
    """Run every code block of ``node`` in order.

    Each block runs in its own child process with the caller's standard
    streams. Execution stops at the first block that fails.

    Args:
        node: Resolved command node.
        env: Bindings to apply, root first.
        args: Trailing arguments appended to every interpreter invocation.
        base_env: Environment to start from. Defaults to ``os.environ``,
            which is never modified.

    Returns:
        0 if every block succeeded, the failing block's exit status, or
        128 plus the signal number if a block was killed by a signal.

    Raises:
        NoCodeBlocksError: If ``node`` has no code blocks.
        SpawnError: If an interpreter cannot be started.
    """
    if not node.code_blocks:
        raise NoCodeBlocksError(node.name)

    child_env = build_environment(env, base_env)

    for position, block in enumerate(node.code_blocks, start=1):
        argv = build_argv(block, args)
        logger.debug("running %s block %d of %r", block.language, position, node.name)
        try:
            completed = subprocess.run(argv, env=child_env, check=False)
        except (OSError, ValueError) as exc:
            raise SpawnError(argv[0], exc) from exc

        status = completed.returncode
        if status < 0:
            logger.error("%s block %d terminated by signal %d", block.language, position, -status)
            return SIGNAL_EXIT_BASE - status
        if status != 0:
            logger.error("%s block %d exited with status %d", block.language, position, status)
            return status

    return 0
