"""
Configuration for pytest to set up the import path and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path so the flat modules import directly
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))


@pytest.fixture
def fruits():
    """The sample fruit list used by the pattern, iterator and iterable demos."""
    from models import DEFAULT_FRUITS
    return list(DEFAULT_FRUITS)


@pytest.fixture
def call_counter():
    """Wrap a function so the test can see how many times it ran."""
    def _wrap(fn):
        def counted(*args):
            counted.calls += 1
            return fn(*args)
        counted.calls = 0
        return counted
    return _wrap
