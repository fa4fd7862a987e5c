"""Pytest configuration applied to the entire test suite."""

from __future__ import annotations

import sys
from pathlib import Path


def _ensure_project_root_on_path() -> None:
    """Guarantee the repository root is discoverable for absolute imports."""

    root_str = str(Path(__file__).resolve().parent)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_path()


# Load the BDD step definitions before feature parsing so pytest-bdd can match
# scenario text to the registered steps regardless of which tests are collected.
pytest_plugins = [
    "tests.e2e.steps.negotiation",
]
