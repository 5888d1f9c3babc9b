r"""Unit tests for asynchronous retry executor."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from employee_gateway.core import RetryPolicy
from employee_gateway.exceptions import (
    NotFoundError,
    RetryInterruptedError,
    UpstreamUnavailableError,
)
from employee_gateway.retry import AsyncRetryExecutor
from tests.helpers import envelope_response


def http_error(status_code: int) -> httpx.HTTPStatusError:
    response = envelope_response(status_code)
    return httpx.HTTPStatusError(
        f"status {status_code}", request=response.request, response=response
    )


########################################
#     Tests for AsyncRetryExecutor     #
########################################


def test_async_retry_executor_creation(retry_policy: RetryPolicy) -> None:
    """Test AsyncRetryExecutor initialization."""
    assert AsyncRetryExecutor(retry_policy).policy is retry_policy


@pytest.mark.asyncio
async def test_async_retry_executor_success_first_attempt(
    retry_policy: RetryPolicy, mock_asleep: Mock
) -> None:
    """Test successful async operation without retries."""
    operation = AsyncMock(return_value=42)

    assert await AsyncRetryExecutor(retry_policy).execute(operation) == 42
    operation.assert_awaited_once_with()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_success_after_retry(
    retry_policy: RetryPolicy, mock_asleep: Mock
) -> None:
    """Test async retry on a transient failure."""
    operation = AsyncMock(side_effect=[httpx.ConnectError("refused"), "ok"])

    assert await AsyncRetryExecutor(retry_policy).execute(operation) == "ok"
    assert operation.await_count == 2
    mock_asleep.assert_awaited_once_with(1.0)


@pytest.mark.asyncio
@pytest.mark.parametrize("max_attempts", [1, 2, 4])
async def test_async_retry_executor_exhausts_attempts(
    max_attempts: int, mock_asleep: Mock
) -> None:
    """Test that N retryable failures make N calls and N-1 sleeps."""
    policy = RetryPolicy(max_attempts=max_attempts, delay_between_attempts=0.2)
    operation = AsyncMock(side_effect=http_error(429))

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        await AsyncRetryExecutor(policy).execute(operation)

    assert operation.await_count == max_attempts
    assert mock_asleep.await_count == max_attempts - 1
    assert exc_info.value.attempts == max_attempts
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_async_retry_executor_terminal_failure(
    retry_policy: RetryPolicy, mock_asleep: Mock
) -> None:
    """Test that a terminal failure on attempt 2 stops after 2 calls."""
    error = NotFoundError("Employee not found with ID: 1")
    operation = AsyncMock(side_effect=[http_error(502), error])

    with pytest.raises(NotFoundError) as exc_info:
        await AsyncRetryExecutor(retry_policy).execute(operation)

    assert exc_info.value is error
    assert operation.await_count == 2
    assert mock_asleep.await_count == 1


@pytest.mark.asyncio
async def test_async_retry_executor_cancelled_during_delay(retry_policy: RetryPolicy) -> None:
    """Test that cancelling the delay raises RetryInterruptedError."""
    operation = AsyncMock(side_effect=http_error(503))

    with (
        patch("asyncio.sleep", side_effect=asyncio.CancelledError),
        pytest.raises(RetryInterruptedError) as exc_info,
    ):
        await AsyncRetryExecutor(retry_policy).execute(operation)

    assert isinstance(exc_info.value.__cause__, asyncio.CancelledError)
    operation.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_real_delay_is_short() -> None:
    """Test the executor with a real, tiny delay."""
    policy = RetryPolicy(max_attempts=2, delay_between_attempts=0.001)
    operation = AsyncMock(side_effect=[httpx.ReadTimeout("slow"), "ok"])

    assert await AsyncRetryExecutor(policy).execute(operation) == "ok"
