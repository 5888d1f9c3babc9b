r"""Bounded-retry execution of upstream calls.

Public API:
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - classify_error: Maps an attempt failure to an outcome variant
    - Success, RetryableFailure, TerminalFailure: Attempt outcomes
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "RETRY_STATUS_CODES",
    "RetryExecutor",
    "RetryableFailure",
    "Success",
    "TerminalFailure",
    "classify_error",
    "is_retryable_status",
]

from employee_gateway.retry.classifier import (
    RETRY_STATUS_CODES,
    classify_error,
    is_retryable_status,
)
from employee_gateway.retry.executor import RetryExecutor
from employee_gateway.retry.executor_async import AsyncRetryExecutor
from employee_gateway.retry.outcome import (
    AttemptOutcome,
    RetryableFailure,
    Success,
    TerminalFailure,
)
