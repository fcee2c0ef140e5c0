"""Pytest configuration for the finset test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path so tests run without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from finset import Set  # noqa: E402


@pytest.fixture
def mixed() -> Set:
    """The five-element mixed int/str fixture set."""
    return Set([1, 2, 3, "a", "b"])
