r"""Shared response handling for the sync and async employee clients.

Each function turns the raw response of one upstream call into the
domain value of one operation. They run inside the retry loop, so a
malformed body is retried like a transport error.
"""

from __future__ import annotations

__all__ = [
    "handle_created_response",
    "handle_delete_response",
    "handle_employee_response",
    "handle_list_response",
    "not_found_message",
]

import logging
from typing import TYPE_CHECKING

from employee_gateway.utils.response import (
    check_response,
    parse_envelope,
    unwrap_created,
    unwrap_entity,
    unwrap_flag,
    unwrap_list,
)

if TYPE_CHECKING:
    import httpx

    from employee_gateway.models import Employee

logger: logging.Logger = logging.getLogger(__name__)


def not_found_message(employee_id: str) -> str:
    return f"Employee not found with ID: {employee_id}"


def handle_list_response(response: httpx.Response) -> list[Employee]:
    """Handle the response of ``GET {base}``."""
    check_response(response)
    employees = unwrap_list(parse_envelope(response))
    logger.debug(f"Successfully retrieved {len(employees)} employees")
    return employees


def handle_employee_response(response: httpx.Response, employee_id: str) -> Employee:
    """Handle the response of ``GET {base}/{id}``.

    Raises:
        NotFoundError: If the upstream returns 404 or no data.
    """
    message = not_found_message(employee_id)
    check_response(response, not_found_message=message)
    employee = unwrap_entity(parse_envelope(response), not_found_message=message)
    logger.debug(f"Successfully retrieved employee: {employee.name}")
    return employee


def handle_created_response(response: httpx.Response) -> Employee:
    """Handle the response of ``POST {base}``."""
    check_response(response)
    employee = unwrap_created(parse_envelope(response))
    logger.info(f"Successfully created employee with ID: {employee.id}")
    return employee


def handle_delete_response(response: httpx.Response, employee_id: str, name: str) -> str:
    """Handle the response of ``DELETE {base}``.

    Returns:
        The name of the deleted employee.

    Raises:
        OperationFailedError: If the confirmation flag is false or absent.
    """
    check_response(response)
    unwrap_flag(
        parse_envelope(response),
        failure_message=f"Failed to delete employee with ID: {employee_id}",
    )
    logger.info(f"Successfully deleted employee: {name}")
    return name
