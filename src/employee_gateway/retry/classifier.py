r"""Error classification logic for upstream attempts.

This module maps the exception raised by an upstream attempt into a
retryable or terminal outcome. Rate limiting (429), server errors (5xx),
transport errors and malformed responses are retryable. Any other client
error and every domain error is terminal.
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "classify_error", "is_retryable_status"]

import logging

import httpx

from employee_gateway.exceptions import EmployeeApiError, MalformedResponseError
from employee_gateway.retry.outcome import (
    AttemptOutcome,
    RetryableFailure,
    TerminalFailure,
)

logger: logging.Logger = logging.getLogger(__name__)

# 429: Too Many Requests - Rate limiting
RETRY_STATUS_CODES = (429,)


def is_retryable_status(status_code: int) -> bool:
    """Indicate whether an HTTP status code is transient.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` for 429 and every 5xx status code, otherwise ``False``.

    Example:
        ```pycon
        >>> from employee_gateway.retry.classifier import is_retryable_status
        >>> is_retryable_status(429), is_retryable_status(503)
        (True, True)
        >>> is_retryable_status(404), is_retryable_status(200)
        (False, False)

        ```
    """
    return status_code in RETRY_STATUS_CODES or 500 <= status_code < 600


def classify_error(exc: Exception) -> AttemptOutcome:
    """Classify the exception raised by one upstream attempt.

    Args:
        exc: The exception raised by the attempt.

    Returns:
        ``RetryableFailure`` for transient failures, ``TerminalFailure``
        otherwise. The original exception is kept as the cause.

    Example:
        ```pycon
        >>> import httpx
        >>> from employee_gateway.retry.classifier import classify_error
        >>> classify_error(httpx.ConnectError("refused"))
        RetryableFailure(cause=ConnectError('refused'))
        >>> classify_error(KeyError("id"))
        TerminalFailure(cause=KeyError('id'))

        ```
    """
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        if is_retryable_status(status_code):
            return RetryableFailure(exc)
        logger.debug(f"Upstream returned non-retryable status {status_code}")
        return TerminalFailure(exc)
    if isinstance(exc, (httpx.RequestError, MalformedResponseError)):
        return RetryableFailure(exc)
    if isinstance(exc, EmployeeApiError):
        return TerminalFailure(exc)
    logger.debug(f"Unexpected {type(exc).__name__} is not retried: {exc}")
    return TerminalFailure(exc)
