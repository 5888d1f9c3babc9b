r"""Exception classes raised by the employee gateway.

Every failure surfaced by this package derives from
``EmployeeApiError``. Each class carries a ``status_code`` hint that a
routing layer can use to translate the failure into a transport
response.
"""

from __future__ import annotations

__all__ = [
    "EmployeeApiError",
    "MalformedResponseError",
    "NotFoundError",
    "OperationFailedError",
    "RetryInterruptedError",
    "UpstreamUnavailableError",
    "ValidationFailedError",
]

from typing import ClassVar


class EmployeeApiError(Exception):
    """Base class for all errors raised by the employee gateway.

    Args:
        message: Human readable description of the failure.
        cause: Optional exception that originated the failure.

    Example:
        ```pycon
        >>> from employee_gateway.exceptions import EmployeeApiError
        >>> error = EmployeeApiError("upstream said no")
        >>> error.message
        'upstream said no'
        >>> error.status_code
        500

        ```
    """

    status_code: ClassVar[int] = 500

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class NotFoundError(EmployeeApiError):
    """Raised when the requested employee does not exist upstream."""

    status_code: ClassVar[int] = 404


class OperationFailedError(EmployeeApiError):
    """Raised when the upstream API acknowledged a call but signaled
    failure, for example a delete confirmation flag that is false."""

    status_code: ClassVar[int] = 503


class UpstreamUnavailableError(EmployeeApiError):
    """Raised when the retry budget is exhausted on transient failures.

    Args:
        message: Human readable description of the failure.
        attempts: Number of upstream calls made before giving up.
        cause: The last transient failure observed.
    """

    status_code: ClassVar[int] = 503

    def __init__(self, message: str, attempts: int, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)
        self.attempts = attempts


class RetryInterruptedError(EmployeeApiError):
    """Raised when the delay between two attempts is interrupted."""

    status_code: ClassVar[int] = 503


class MalformedResponseError(EmployeeApiError):
    """Raised when an upstream response body is not a valid envelope.

    This failure is treated as transient by the retry executor.
    """

    status_code: ClassVar[int] = 502


class ValidationFailedError(EmployeeApiError):
    """Raised when employee creation input is invalid.

    Args:
        errors: Mapping from field name to validation message.

    Example:
        ```pycon
        >>> from employee_gateway.exceptions import ValidationFailedError
        >>> error = ValidationFailedError({"name": "Name is required"})
        >>> error.message
        'name: Name is required'

        ```
    """

    status_code: ClassVar[int] = 400

    def __init__(self, errors: dict[str, str]) -> None:
        message = ", ".join(f"{field}: {msg}" for field, msg in errors.items())
        super().__init__(message or "Validation failed")
        self.errors = errors
