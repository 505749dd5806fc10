"""Pytest configuration shared by unit and integration tests.

Provides:
1. Test environment defaults (settings load without a real database)
2. Marker registration and automatic asyncio marking
3. Deterministic clock, recording indexer and logger fixtures
"""

import inspect
import os
from unittest.mock import Mock

import pytest

from tests.utils.doubles import FixedClock, RecordingIndexer

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at NOW."""
    return FixedClock()


@pytest.fixture
def indexer() -> RecordingIndexer:
    """Indexer that records notifications."""
    return RecordingIndexer()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger mock whose bind() returns itself."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger
