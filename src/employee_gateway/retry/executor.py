r"""Synchronous retry executor for upstream calls.

This module provides the RetryExecutor class that runs a zero-argument
upstream operation with bounded retries and a fixed delay between
attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from employee_gateway.retry.executor_core import (
    create_exhausted_error,
    create_interrupted_error,
    evaluate_attempt,
    log_retry,
)
from employee_gateway.retry.outcome import RetryableFailure, Success, TerminalFailure

if TYPE_CHECKING:
    from collections.abc import Callable

    from employee_gateway.core.config import RetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes upstream operations with bounded retries.

    Each attempt is classified as a success, a retryable failure or a
    terminal failure. Successes return immediately, terminal failures
    are re-raised immediately, and retryable failures are retried until
    ``policy.max_attempts`` calls have been made. The executor holds no
    state between calls and can be shared.

    Attributes:
        policy: The immutable retry policy.

    Example:
        ```pycon
        >>> from employee_gateway.core import RetryPolicy
        >>> from employee_gateway.retry import RetryExecutor
        >>> executor = RetryExecutor(RetryPolicy(max_attempts=3, delay_between_attempts=0.0))
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    def execute(self, operation: Callable[[], T], description: str = "upstream call") -> T:
        """Execute the operation with automatic retry logic.

        Args:
            operation: Zero-argument callable performing one upstream
                call. It returns the unwrapped value or raises.
            description: Name of the operation, used in logs and error
                messages.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            UpstreamUnavailableError: If every attempt failed with a
                transient failure. The last failure is the cause.
            RetryInterruptedError: If the delay between two attempts was
                interrupted.
            Exception: The cause of a terminal failure, unchanged.
        """
        attempts = 0
        while True:
            outcome = evaluate_attempt(operation)
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
            self._sleep(description)

    def _sleep(self, description: str) -> None:
        try:
            time.sleep(self.policy.delay_between_attempts)
        except InterruptedError as exc:
            raise create_interrupted_error(description, exc) from exc
