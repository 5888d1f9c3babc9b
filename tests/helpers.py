r"""Shared test helpers for the employee gateway tests.

This module contains a fake upstream employee API built on
``httpx.MockTransport`` and builders for envelope responses.
"""

from __future__ import annotations

__all__ = [
    "BASE_URL",
    "EMPLOYEE_ID",
    "FakeUpstream",
    "envelope_response",
    "make_employee_payload",
]

import json
from typing import Any

import httpx

BASE_URL = "http://upstream.test/api/v1/employee"
EMPLOYEE_ID = "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507"


def make_employee_payload(
    name: str | None = "John Doe",
    salary: int | None = 50000,
    employee_id: str = EMPLOYEE_ID,
) -> dict[str, Any]:
    """Create an employee object as returned by the upstream API."""
    return {
        "id": employee_id,
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": 30,
        "employee_title": "Engineer",
        "employee_email": "john@company.com",
    }


def envelope_response(
    status_code: int = 200,
    data: Any = None,
    *,
    error: str | None = None,
    method: str = "GET",
    url: str = BASE_URL,
) -> httpx.Response:
    """Create an envelope response bound to a request."""
    return httpx.Response(
        status_code,
        json={"data": data, "status": "Successfully processed request.", "error": error},
        request=httpx.Request(method, url),
    )


class FakeUpstream:
    r"""Request handler for ``httpx.MockTransport``.

    Each call consumes the next scripted item; the last item is repeated
    once the script is exhausted. An item is either an
    ``httpx.Response`` or an exception to raise.

    Args:
        *items: The scripted responses or exceptions.
    """

    def __init__(self, *items: httpx.Response | Exception) -> None:
        self._items = list(items)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._items.pop(0) if len(self._items) > 1 else self._items[0]
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def json_body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    def async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))
