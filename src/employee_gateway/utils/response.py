r"""HTTP response handling utilities.

This module provides functions that validate an upstream response,
parse its ``{data, status, error}`` envelope, and extract the domain
value with a per-operation policy for absent data.
"""

from __future__ import annotations

__all__ = [
    "UpstreamEnvelope",
    "check_response",
    "parse_envelope",
    "unwrap_created",
    "unwrap_entity",
    "unwrap_flag",
    "unwrap_list",
]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from employee_gateway.exceptions import (
    MalformedResponseError,
    NotFoundError,
    OperationFailedError,
)
from employee_gateway.models import Employee

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamEnvelope:
    """Uniform response wrapper of the upstream API.

    Attributes:
        data: The payload, ``None`` on failure-shaped responses.
        status: Upstream status message.
        error: Optional upstream error message.
    """

    data: Any = None
    status: str | None = None
    error: str | None = None


def check_response(response: httpx.Response, not_found_message: str | None = None) -> None:
    """Raise an error for non-successful responses.

    Args:
        response: The HTTP response to validate.
        not_found_message: If provided, a 404 response raises
            ``NotFoundError`` with this message instead of
            ``httpx.HTTPStatusError``.

    Raises:
        NotFoundError: If the status is 404 and ``not_found_message``
            is provided.
        httpx.HTTPStatusError: For any other 4xx or 5xx status.
    """
    if response.status_code == 404 and not_found_message is not None:
        logger.warning(not_found_message)
        raise NotFoundError(not_found_message)
    response.raise_for_status()


def parse_envelope(response: httpx.Response) -> UpstreamEnvelope:
    """Parse the envelope carried by a response body.

    An empty body is treated as an envelope without data.

    Args:
        response: The HTTP response.

    Returns:
        The parsed envelope.

    Raises:
        MalformedResponseError: If the body is not a JSON object.
    """
    if not response.content:
        return UpstreamEnvelope()
    try:
        body = response.json()
    except ValueError as exc:
        msg = f"Upstream response is not valid JSON: {exc}"
        raise MalformedResponseError(msg, cause=exc) from exc
    if not isinstance(body, dict):
        msg = f"Upstream response is not an envelope object: {type(body).__name__}"
        raise MalformedResponseError(msg)
    return UpstreamEnvelope(
        data=body.get("data"), status=body.get("status"), error=body.get("error")
    )


def unwrap_list(envelope: UpstreamEnvelope) -> list[Employee]:
    """Extract a list of employees; absent data yields an empty list.

    Raises:
        MalformedResponseError: If the data is neither absent nor a list
            of objects.
    """
    if envelope.data is None:
        logger.warning("Received empty response when fetching all employees")
        return []
    if not isinstance(envelope.data, list) or not all(
        isinstance(item, dict) for item in envelope.data
    ):
        msg = "Upstream data is not a list of employees"
        raise MalformedResponseError(msg)
    return [Employee.from_dict(item) for item in envelope.data]


def unwrap_entity(envelope: UpstreamEnvelope, not_found_message: str) -> Employee:
    """Extract a single employee; absent data means the employee does
    not exist.

    Raises:
        NotFoundError: If the data is absent.
        MalformedResponseError: If the data is not an object.
    """
    if envelope.data is None:
        raise NotFoundError(not_found_message)
    if not isinstance(envelope.data, dict):
        msg = "Upstream data is not an employee object"
        raise MalformedResponseError(msg)
    return Employee.from_dict(envelope.data)


def unwrap_created(envelope: UpstreamEnvelope) -> Employee:
    """Extract the employee returned by a creation call.

    Raises:
        OperationFailedError: If the data is absent.
        MalformedResponseError: If the data is not an object.
    """
    if envelope.data is None:
        msg = "Failed to create employee - empty response received"
        raise OperationFailedError(msg)
    if not isinstance(envelope.data, dict):
        msg = "Upstream data is not an employee object"
        raise MalformedResponseError(msg)
    return Employee.from_dict(envelope.data)


def unwrap_flag(envelope: UpstreamEnvelope, failure_message: str) -> None:
    """Check a boolean confirmation flag.

    Raises:
        OperationFailedError: If the flag is ``False`` or absent.
    """
    if envelope.data is not True:
        if envelope.error:
            failure_message = f"{failure_message}: {envelope.error}"
        raise OperationFailedError(failure_message)
