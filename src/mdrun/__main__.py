"""Module entry point for running with python -m mdrun."""

import sys

from mdrun.cli import main
from mdrun.config import MDRUN_PROGRAM_NAME

if __name__ == "__main__":
    sys.exit(main(program_name=MDRUN_PROGRAM_NAME))
