"""Test setup for mdrun."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    Tests that start real interpreters can be skipped with:
        pytest -m "not subprocess"
    """
    config.addinivalue_line(
        "markers",
        "subprocess: marks tests that start a real sh interpreter",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if shutil.which("sh") is not None:
        return
    skip_sh = pytest.mark.skip(reason="sh is not available")
    for item in items:
        if "subprocess" in item.keywords:
            item.add_marker(skip_sh)


@pytest.fixture(autouse=True)
def _restore_mdrun_logger() -> Iterator[None]:
    """Undo handler changes made by the CLI's logging setup."""
    logger = logging.getLogger("mdrun")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def greet_markdown() -> str:
    """Single command that prints a greeting."""
    return "# Greet\n\n```sh\necho hello\n```\n"
