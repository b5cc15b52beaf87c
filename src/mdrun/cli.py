"""Command line entry point: run markdown code blocks by their heading."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Mapping, Sequence

from mdrun.config import DEFAULT_PROGRAM_NAME, MD_EXE_VAR, MD_FILE_VAR
from mdrun.exceptions import DocumentNotFoundError, MdrunError
from mdrun.executor import execute_command
from mdrun.languages import supported_languages
from mdrun.locator import find_document, program_stem
from mdrun.output_formatter import render_tree
from mdrun.parser import parse_document
from mdrun.resolver import resolve_command
from mdrun.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

ARGS_SEPARATOR = "--"


def split_arguments(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split ``argv`` at the first ``--`` into CLI arguments and interpreter arguments."""
    argv = list(argv)
    if ARGS_SEPARATOR in argv:
        index = argv.index(ARGS_SEPARATOR)
        return argv[:index], argv[index + 1 :]
    return argv, []


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Run markdown codeblocks by its heading.",
        usage=f"{prog} [--file FILE] <heading...> [-- <args...>]",
        epilog="Supported languages: " + ", ".join(supported_languages()),
    )
    parser.add_argument("headings", nargs="*", metavar="heading", help="Heading path of the command to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print more information")
    parser.add_argument("-f", "--file", help="MarkDown file to use")
    return parser


def read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DocumentNotFoundError(f"opening file {path}: {exc.strerror or exc}") from exc


def run(
    argv: Sequence[str],
    *,
    argv0: str,
    program_name: str,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the CLI and return the process exit code.

    Args:
        argv: Arguments after the program name.
        argv0: How the program was invoked; exported as ``MD_EXE``.
        program_name: Name used to find ``<program>.md`` and in messages.
        environ: Environment passed to interpreters. Defaults to ``os.environ``.
        cwd: Directory where the document search starts.
    """
    cli_args, interpreter_args = split_arguments(argv)
    options = build_parser(program_name).parse_intermixed_args(cli_args)

    try:
        if options.file:
            path = Path(options.file)
        else:
            path = find_document(program_name, cwd)
        document = parse_document(read_document(path))

        if not options.headings:
            print(render_tree(document, verbose=options.verbose, title=path.name))
            return 0

        resolution = resolve_command(document, options.headings)
        base_env = dict(os.environ if environ is None else environ)
        base_env[MD_EXE_VAR] = argv0
        base_env[MD_FILE_VAR] = str(path)
        return execute_command(resolution.node, resolution.env, interpreter_args, base_env=base_env)
    except MdrunError as exc:
        logger.error("%s", exc)
        return exc.exit_code


def main(argv: Sequence[str] | None = None, *, program_name: str | None = None) -> int:
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else DEFAULT_PROGRAM_NAME
    name = program_name or program_stem(argv0)
    configure_logging(name)
    return run(sys.argv[1:] if argv is None else argv, argv0=argv0, program_name=name)


if __name__ == "__main__":
    sys.exit(main())
