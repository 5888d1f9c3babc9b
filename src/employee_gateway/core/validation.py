r"""Parameter validation utilities.

This module provides validation functions for the retry policy, the
upstream connection settings, and the employee creation input.
"""

from __future__ import annotations

__all__ = [
    "MAX_EMPLOYEE_AGE",
    "MIN_EMPLOYEE_AGE",
    "validate_base_url",
    "validate_employee_input",
    "validate_retry_policy",
    "validate_timeout",
]

from typing import TYPE_CHECKING

from employee_gateway.exceptions import ValidationFailedError

if TYPE_CHECKING:
    from employee_gateway.models import CreateEmployeeInput

MIN_EMPLOYEE_AGE = 16
MAX_EMPLOYEE_AGE = 75


def validate_timeout(timeout: float) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0.

    Raises:
        ValueError: If timeout is <= 0.

    Example:
        ```pycon
        >>> from employee_gateway.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_base_url(base_url: str) -> None:
    """Validate the upstream base URL.

    Args:
        base_url: URL of the upstream employee collection. Must use the
            ``http`` or ``https`` scheme.

    Raises:
        ValueError: If the URL is empty or has an unsupported scheme.
    """
    if not base_url.startswith(("http://", "https://")):
        msg = f"base_url must be an http(s) URL, got {base_url!r}"
        raise ValueError(msg)


def validate_retry_policy(max_attempts: int, delay_between_attempts: float) -> None:
    """Validate retry policy parameters.

    Args:
        max_attempts: Maximum number of upstream calls. Must be >= 1.
        delay_between_attempts: Delay in seconds between two attempts.
            Must be >= 0.

    Raises:
        ValueError: If max_attempts < 1 or delay_between_attempts < 0.

    Example:
        ```pycon
        >>> from employee_gateway.core.validation import validate_retry_policy
        >>> validate_retry_policy(max_attempts=3, delay_between_attempts=1.0)
        >>> validate_retry_policy(max_attempts=0, delay_between_attempts=1.0)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    if delay_between_attempts < 0:
        msg = f"delay_between_attempts must be >= 0, got {delay_between_attempts}"
        raise ValueError(msg)


def validate_employee_input(employee_input: CreateEmployeeInput) -> None:
    """Validate employee creation input before it is sent upstream.

    Rules: name and title must be non-blank, salary must be a positive
    integer, age must be an integer between 16 and 75 inclusive.

    Args:
        employee_input: The creation input to validate.

    Raises:
        ValidationFailedError: If at least one field is invalid. All
            offending fields are reported at once.
    """
    errors: dict[str, str] = {}
    if not _is_non_blank(employee_input.name):
        errors["name"] = "Name is required"
    if employee_input.salary is None:
        errors["salary"] = "Salary is required"
    elif not _is_integer(employee_input.salary) or employee_input.salary <= 0:
        errors["salary"] = "Salary must be positive"
    if employee_input.age is None:
        errors["age"] = "Age is required"
    elif not _is_integer(employee_input.age) or employee_input.age < MIN_EMPLOYEE_AGE:
        errors["age"] = f"Age must be at least {MIN_EMPLOYEE_AGE}"
    elif employee_input.age > MAX_EMPLOYEE_AGE:
        errors["age"] = f"Age must be at most {MAX_EMPLOYEE_AGE}"
    if not _is_non_blank(employee_input.title):
        errors["title"] = "Title is required"
    if errors:
        raise ValidationFailedError(errors)


def _is_non_blank(value: str | None) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_integer(value: object) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)
