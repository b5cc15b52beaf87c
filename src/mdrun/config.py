"""Local configuration for mdrun."""

from __future__ import annotations

import os


DEFAULT_PROGRAM_NAME = "mdrun"
DEFAULT_LOG_LEVEL = "WARNING"
README_NAME = "README.md"

# Variables exported to every interpreter started by the CLI.
MD_EXE_VAR = "MD_EXE"
MD_FILE_VAR = "MD_FILE"

MDRUN_PROGRAM_NAME = os.getenv("MDRUN_PROGRAM_NAME", DEFAULT_PROGRAM_NAME)
MDRUN_LOG_LEVEL = os.getenv("MDRUN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

# Exit status reported when an interpreter is killed by a signal: 128 + signal number.
SIGNAL_EXIT_BASE = 128
