r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors: attempt evaluation, retry logging, and
construction of the terminal errors.
"""

from __future__ import annotations

__all__ = [
    "create_exhausted_error",
    "create_interrupted_error",
    "evaluate_attempt",
    "log_retry",
]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from employee_gateway.exceptions import RetryInterruptedError, UpstreamUnavailableError
from employee_gateway.retry.classifier import classify_error
from employee_gateway.retry.outcome import AttemptOutcome, Success

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def evaluate_attempt(operation: Callable[[], Any]) -> AttemptOutcome:
    """Run one synchronous attempt and classify its outcome.

    Args:
        operation: Zero-argument upstream operation.

    Returns:
        ``Success`` with the returned value, or the classified failure.
    """
    try:
        return Success(operation())
    except Exception as exc:  # noqa: BLE001
        return classify_error(exc)


def log_retry(
    description: str, cause: Exception, attempts: int, max_attempts: int, delay: float
) -> None:
    """Log a retryable failure.

    Args:
        description: Name of the operation being retried.
        cause: The transient failure.
        attempts: Number of attempts made so far (1-indexed).
        max_attempts: Maximum number of attempts.
        delay: Delay in seconds before the next attempt.
    """
    if isinstance(cause, httpx.HTTPStatusError):
        logger.warning(
            f"Rate limited or server error from employee API (status "
            f"{cause.response.status_code}) during {description}. Attempt "
            f"{attempts}/{max_attempts}. Retrying after {delay:.3f}s..."
        )
    else:
        logger.warning(
            f"Error communicating with employee API during {description}. Attempt "
            f"{attempts}/{max_attempts}. Error: {type(cause).__name__}: {cause}"
        )


def create_exhausted_error(
    description: str, cause: Exception, attempts: int
) -> UpstreamUnavailableError:
    """Create the error raised when the retry budget is exhausted.

    Args:
        description: Name of the operation.
        cause: The last transient failure observed.
        attempts: Number of attempts made.

    Returns:
        The terminal error wrapping the last cause.
    """
    logger.error(f"Max attempts ({attempts}) exceeded during {description}")
    return UpstreamUnavailableError(
        message=(
            f"Failed to communicate with employee API after {attempts} attempts "
            f"during {description}: {cause}"
        ),
        attempts=attempts,
        cause=cause,
    )


def create_interrupted_error(description: str, cause: BaseException) -> RetryInterruptedError:
    """Create the error raised when the delay between attempts is
    interrupted."""
    logger.warning(f"Retry interrupted during {description}")
    return RetryInterruptedError(message=f"Retry interrupted during {description}", cause=cause)
