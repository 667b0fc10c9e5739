"""CLI test fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def adapter() -> MagicMock:
    """Adapter mock usable as an async context manager."""
    mock = MagicMock()
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = False
    return mock
