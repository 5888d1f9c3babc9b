from __future__ import annotations

import json

import httpx
import pytest

from employee_gateway.exceptions import (
    MalformedResponseError,
    NotFoundError,
    OperationFailedError,
)
from employee_gateway.retry import (
    RetryableFailure,
    TerminalFailure,
    classify_error,
    is_retryable_status,
)
from tests.helpers import envelope_response


def http_error(status_code: int) -> httpx.HTTPStatusError:
    response = envelope_response(status_code)
    return httpx.HTTPStatusError(
        f"status {status_code}", request=response.request, response=response
    )


#########################################
#     Tests for is_retryable_status     #
#########################################


@pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504, 599])
def test_is_retryable_status_true(status_code: int) -> None:
    assert is_retryable_status(status_code)


@pytest.mark.parametrize("status_code", [200, 201, 400, 401, 403, 404, 422, 600])
def test_is_retryable_status_false(status_code: int) -> None:
    assert not is_retryable_status(status_code)


####################################
#     Tests for classify_error     #
####################################


@pytest.mark.parametrize("status_code", [429, 500, 503])
def test_classify_error_retryable_status(status_code: int) -> None:
    exc = http_error(status_code)
    assert classify_error(exc) == RetryableFailure(exc)


@pytest.mark.parametrize("status_code", [400, 401, 404, 409])
def test_classify_error_terminal_status(status_code: int) -> None:
    exc = http_error(status_code)
    assert classify_error(exc) == TerminalFailure(exc)


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectError("refused"),
        httpx.ConnectTimeout("timeout"),
        httpx.ReadError("reset"),
        httpx.DecodingError("bad gzip"),
        MalformedResponseError("not json", cause=json.JSONDecodeError("x", "", 0)),
    ],
)
def test_classify_error_retryable_transport(exc: Exception) -> None:
    assert isinstance(classify_error(exc), RetryableFailure)


@pytest.mark.parametrize(
    "exc",
    [NotFoundError("missing"), OperationFailedError("refused"), ValueError("bug")],
)
def test_classify_error_terminal(exc: Exception) -> None:
    outcome = classify_error(exc)
    assert isinstance(outcome, TerminalFailure)
    assert outcome.cause is exc
