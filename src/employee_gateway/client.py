r"""Synchronous context manager client for the upstream employee API.

This module provides the EmployeeClient, which exposes the employee
operations and routes every upstream call through a RetryExecutor.
"""

from __future__ import annotations

__all__ = ["EmployeeClient"]

import logging
from typing import TYPE_CHECKING

import httpx

from employee_gateway.core.client_logic import (
    handle_created_response,
    handle_delete_response,
    handle_employee_response,
    handle_list_response,
)
from employee_gateway.core.config import ApiConfig
from employee_gateway.core.validation import validate_employee_input
from employee_gateway.operations import highest_salary, search_by_name, top_earner_names
from employee_gateway.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from employee_gateway.models import CreateEmployeeInput, Employee

logger: logging.Logger = logging.getLogger(__name__)


class EmployeeClient:
    r"""Synchronous client for the upstream employee API.

    Every upstream call is executed with the retry policy of ``config``.
    If an ``httpx.Client`` is passed, it is used as is and left open on
    exit; otherwise a client is created with ``config.timeout`` and
    closed when the context manager exits.

    Args:
        config: Optional upstream configuration. If ``None``, a default
            ApiConfig is used.
        client: Optional httpx.Client used for the upstream calls.

    Example:
        ```pycon
        >>> from employee_gateway import EmployeeClient
        >>> from employee_gateway.core import ApiConfig
        >>> with EmployeeClient(config=ApiConfig.from_env()) as client:  # doctest: +SKIP
        ...     employees = client.get_all_employees()
        ...     top = client.get_top_ten_highest_earning_employee_names()
        ...

        ```
    """

    def __init__(
        self,
        *,
        config: ApiConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config: ApiConfig = config or ApiConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=self._config.timeout)
        self._executor: RetryExecutor = RetryExecutor(self._config.retry_policy)

    @property
    def config(self) -> ApiConfig:
        return self._config

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this instance created
        it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def get_all_employees(self) -> list[Employee]:
        """Fetch every employee; an empty upstream payload yields ``[]``.

        Raises:
            UpstreamUnavailableError: If the retry budget is exhausted.
        """
        logger.info("Fetching all employees from employee API")
        return self._executor.execute(
            lambda: handle_list_response(self._client.get(self._config.base_url)),
            description="fetch all employees",
        )

    def search_employees_by_name(self, search_string: str) -> list[Employee]:
        """Return the employees whose name contains ``search_string``,
        ignoring case."""
        logger.info(f"Searching employees with name containing: {search_string}")
        employees = search_by_name(self.get_all_employees(), search_string)
        logger.debug(f"Found {len(employees)} employees matching search criteria")
        return employees

    def get_employee_by_id(self, employee_id: str) -> Employee:
        """Fetch a single employee.

        Raises:
            NotFoundError: If the employee does not exist. Not retried.
            UpstreamUnavailableError: If the retry budget is exhausted.
        """
        logger.info(f"Fetching employee with ID: {employee_id}")
        return self._executor.execute(
            lambda: handle_employee_response(
                self._client.get(self._config.employee_url(employee_id)), employee_id
            ),
            description=f"fetch employee {employee_id}",
        )

    def get_highest_salary(self) -> int:
        """Return the highest salary, or 0 if no employee has one."""
        logger.info("Finding highest salary among all employees")
        return highest_salary(self.get_all_employees())

    def get_top_ten_highest_earning_employee_names(self) -> list[str | None]:
        """Return the names of the ten best paid employees, highest
        first."""
        logger.info("Finding top 10 highest earning employees")
        names = top_earner_names(self.get_all_employees())
        logger.debug(f"Top 10 highest earners: {names}")
        return names

    def create_employee(self, employee_input: CreateEmployeeInput) -> Employee:
        """Validate the input and create the employee upstream.

        Raises:
            ValidationFailedError: If the input is invalid. No upstream
                call is made.
            OperationFailedError: If the upstream returns no employee.
            UpstreamUnavailableError: If the retry budget is exhausted.
        """
        validate_employee_input(employee_input)
        logger.info(f"Creating new employee with name: {employee_input.name}")
        payload = employee_input.to_dict()
        return self._executor.execute(
            lambda: handle_created_response(
                self._client.post(self._config.base_url, json=payload)
            ),
            description="create employee",
        )

    def delete_employee_by_id(self, employee_id: str) -> str:
        """Delete an employee and return its name.

        The upstream API deletes by name, so the employee is fetched
        first to resolve its name.

        Raises:
            NotFoundError: If the employee does not exist.
            OperationFailedError: If the upstream does not confirm the
                deletion.
            UpstreamUnavailableError: If the retry budget is exhausted.
        """
        logger.info(f"Deleting employee with ID: {employee_id}")
        name = self.get_employee_by_id(employee_id).name
        return self._executor.execute(
            lambda: handle_delete_response(
                self._client.request("DELETE", self._config.base_url, json={"name": name}),
                employee_id,
                name,
            ),
            description=f"delete employee {employee_id}",
        )
