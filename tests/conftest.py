from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from employee_gateway.core import ApiConfig, RetryPolicy
from tests.helpers import BASE_URL

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def retry_policy() -> RetryPolicy:
    """Create the default policy: 3 attempts, 1 second apart."""
    return RetryPolicy(max_attempts=3, delay_between_attempts=1.0)


@pytest.fixture
def api_config(retry_policy: RetryPolicy) -> ApiConfig:
    """Create a configuration pointing at the fake upstream."""
    return ApiConfig(base_url=BASE_URL, retry_policy=retry_policy)
