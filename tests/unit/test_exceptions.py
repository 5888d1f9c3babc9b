from __future__ import annotations

import pytest

from employee_gateway.exceptions import (
    EmployeeApiError,
    MalformedResponseError,
    NotFoundError,
    OperationFailedError,
    RetryInterruptedError,
    UpstreamUnavailableError,
    ValidationFailedError,
)


@pytest.mark.parametrize(
    ("error_cls", "status_code"),
    [
        (EmployeeApiError, 500),
        (NotFoundError, 404),
        (OperationFailedError, 503),
        (RetryInterruptedError, 503),
        (MalformedResponseError, 502),
    ],
)
def test_error_status_code(error_cls: type[EmployeeApiError], status_code: int) -> None:
    error = error_cls("boom")
    assert isinstance(error, EmployeeApiError)
    assert error.status_code == status_code
    assert error.message == "boom"
    assert str(error) == "boom"
    assert error.cause is None


def test_error_keeps_cause() -> None:
    cause = ConnectionError("refused")
    assert EmployeeApiError("boom", cause=cause).cause is cause


def test_upstream_unavailable_error() -> None:
    cause = TimeoutError()
    error = UpstreamUnavailableError("gave up", attempts=3, cause=cause)
    assert error.attempts == 3
    assert error.cause is cause
    assert error.status_code == 503


def test_validation_failed_error() -> None:
    error = ValidationFailedError({"name": "Name is required", "age": "Age is required"})
    assert error.errors == {"name": "Name is required", "age": "Age is required"}
    assert error.message == "name: Name is required, age: Age is required"


def test_validation_failed_error_empty() -> None:
    assert ValidationFailedError({}).message == "Validation failed"
