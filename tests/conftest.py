"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from zipview.config import ZIP_CONFIG
from zipview.logging import reset_logging


@pytest.fixture(autouse=True)
def _restore_global_state():
    """Undo changes tests make to the global config and log level."""
    saved = (ZIP_CONFIG.default_access, ZIP_CONFIG.check_borrows)
    yield
    ZIP_CONFIG.default_access, ZIP_CONFIG.check_borrows = saved
    reset_logging()


@pytest.fixture
def short_long():
    """Sequences of length 3 and 5."""
    return [1, 2, 3], ["a", "b", "c", "d", "e"]


@pytest.fixture
def equal_lists():
    """Two sequences of length 3."""
    return [1, 2, 3], [10, 20, 30]

