from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing hooks.

    Example:
        >>> def test_hook(mock_callback):
        ...     config = ClientConfig(on_request=mock_callback)
        ...     mock_callback.assert_called_once()
    """
    return Mock()
