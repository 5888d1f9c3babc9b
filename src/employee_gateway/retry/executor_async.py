r"""Asynchronous retry executor for upstream calls.

This module provides the AsyncRetryExecutor class that runs a
zero-argument coroutine function with bounded retries. The delay between
attempts uses ``asyncio.sleep`` so only the current task is suspended.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from employee_gateway.retry.classifier import classify_error
from employee_gateway.retry.executor_core import (
    create_exhausted_error,
    create_interrupted_error,
    log_retry,
)
from employee_gateway.retry.outcome import (
    AttemptOutcome,
    RetryableFailure,
    Success,
    TerminalFailure,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from employee_gateway.core.config import RetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async upstream operations with bounded retries.

    This is the asynchronous counterpart of ``RetryExecutor`` and follows
    the same classification rules. Cancelling the task while it waits
    between two attempts aborts the pending retry and raises
    ``RetryInterruptedError``.

    Attributes:
        policy: The immutable retry policy.

    Example:
        ```pycon
        >>> import asyncio
        >>> from employee_gateway.core import RetryPolicy
        >>> from employee_gateway.retry import AsyncRetryExecutor
        >>> async def fetch():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(RetryPolicy(max_attempts=2, delay_between_attempts=0.0))
        >>> asyncio.run(executor.execute(fetch))
        42

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    async def execute(
        self, operation: Callable[[], Awaitable[T]], description: str = "upstream call"
    ) -> T:
        """Execute the async operation with automatic retry logic.

        Args:
            operation: Zero-argument coroutine function performing one
                upstream call. It returns the unwrapped value or raises.
            description: Name of the operation, used in logs and error
                messages.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            UpstreamUnavailableError: If every attempt failed with a
                transient failure. The last failure is the cause.
            RetryInterruptedError: If the task was cancelled while
                waiting between two attempts.
            Exception: The cause of a terminal failure, unchanged.
        """
        attempts = 0
        while True:
            outcome = await self._evaluate_attempt(operation)
            if isinstance(outcome, Success):
                logger.debug(f"{description} succeeded after {attempts + 1} attempt(s)")
                return outcome.value
            if isinstance(outcome, TerminalFailure):
                raise outcome.cause

            assert isinstance(outcome, RetryableFailure)  # noqa: S101
            attempts += 1
            if attempts >= self.policy.max_attempts:
                raise create_exhausted_error(description, outcome.cause, attempts) from (
                    outcome.cause
                )
            log_retry(
                description,
                outcome.cause,
                attempts,
                self.policy.max_attempts,
                self.policy.delay_between_attempts,
            )
            await self._sleep(description)

    @staticmethod
    async def _evaluate_attempt(operation: Callable[[], Awaitable[T]]) -> AttemptOutcome:
        try:
            return Success(await operation())
        except Exception as exc:  # noqa: BLE001
            return classify_error(exc)

    async def _sleep(self, description: str) -> None:
        try:
            await asyncio.sleep(self.policy.delay_between_attempts)
        except asyncio.CancelledError as exc:
            raise create_interrupted_error(description, exc) from exc
