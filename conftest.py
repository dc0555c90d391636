"""Pytest configuration applied to the entire test suite."""

from __future__ import annotations

import sys
from pathlib import Path


def _ensure_project_root_on_path() -> None:
    """Make the top-level packages importable without installing them."""

    root = Path(__file__).resolve().parent
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_path()


# Step definitions must be registered before pytest-bdd parses the feature
# files so scenario text can be matched against them.
pytest_plugins = [
    "tests.e2e.steps.cli",
]
