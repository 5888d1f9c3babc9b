r"""Asynchronous context manager client for the upstream employee API.

This module provides the AsyncEmployeeClient, the asyncio counterpart of
EmployeeClient. Waiting between two attempts suspends only the current
task.
"""

from __future__ import annotations

__all__ = ["AsyncEmployeeClient"]

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
from employee_gateway.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from employee_gateway.models import CreateEmployeeInput, Employee

logger: logging.Logger = logging.getLogger(__name__)


class AsyncEmployeeClient:
    r"""Asynchronous client for the upstream employee API.

    If an ``httpx.AsyncClient`` is passed, it is used as is and left open
    on exit. Otherwise a client is created when entering the context
    manager and closed when leaving it.

    Args:
        config: Optional upstream configuration. If ``None``, a default
            ApiConfig is used.
        client: Optional httpx.AsyncClient used for the upstream calls.

    Example:
        ```pycon
        >>> import asyncio
        >>> from employee_gateway import AsyncEmployeeClient
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncEmployeeClient() as client:
        ...         return await client.get_highest_salary()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        *,
        config: ApiConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config: ApiConfig = config or ApiConfig()
        self._owns_client = client is None
        self._client: httpx.AsyncClient | None = client
        self._executor: AsyncRetryExecutor = AsyncRetryExecutor(self._config.retry_policy)

    @property
    def config(self) -> ApiConfig:
        return self._config

    async def __aenter__(self) -> Self:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._config.timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the client is available for use.

        Raises:
            RuntimeError: If no client was passed and the instance is used
                outside of an async context manager.
        """
        if self._client is None:
            msg = "AsyncEmployeeClient must be used within an async context manager (async with statement)"
            raise RuntimeError(msg)
        return self._client

    async def get_all_employees(self) -> list[Employee]:
        """Fetch every employee; an empty upstream payload yields ``[]``."""
        client = self._ensure_client()
        logger.info("Fetching all employees from employee API")

        async def operation() -> list[Employee]:
            return handle_list_response(await client.get(self._config.base_url))

        return await self._executor.execute(operation, description="fetch all employees")

    async def search_employees_by_name(self, search_string: str) -> list[Employee]:
        logger.info(f"Searching employees with name containing: {search_string}")
        employees = search_by_name(await self.get_all_employees(), search_string)
        logger.debug(f"Found {len(employees)} employees matching search criteria")
        return employees

    async def get_employee_by_id(self, employee_id: str) -> Employee:
        """Fetch a single employee.

        Raises:
            NotFoundError: If the employee does not exist. Not retried.
        """
        client = self._ensure_client()
        logger.info(f"Fetching employee with ID: {employee_id}")

        async def operation() -> Employee:
            response = await client.get(self._config.employee_url(employee_id))
            return handle_employee_response(response, employee_id)

        return await self._executor.execute(
            operation, description=f"fetch employee {employee_id}"
        )

    async def get_highest_salary(self) -> int:
        logger.info("Finding highest salary among all employees")
        return highest_salary(await self.get_all_employees())

    async def get_top_ten_highest_earning_employee_names(self) -> list[str | None]:
        logger.info("Finding top 10 highest earning employees")
        names = top_earner_names(await self.get_all_employees())
        logger.debug(f"Top 10 highest earners: {names}")
        return names

    async def create_employee(self, employee_input: CreateEmployeeInput) -> Employee:
        """Validate the input and create the employee upstream.

        Raises:
            ValidationFailedError: If the input is invalid.
        """
        client = self._ensure_client()
        validate_employee_input(employee_input)
        logger.info(f"Creating new employee with name: {employee_input.name}")
        payload = employee_input.to_dict()

        async def operation() -> Employee:
            return handle_created_response(await client.post(self._config.base_url, json=payload))

        return await self._executor.execute(operation, description="create employee")

    async def delete_employee_by_id(self, employee_id: str) -> str:
        """Delete an employee and return its name.

        The employee is fetched first because the upstream API deletes by
        name.
        """
        client = self._ensure_client()
        logger.info(f"Deleting employee with ID: {employee_id}")
        name = (await self.get_employee_by_id(employee_id)).name

        async def operation() -> str:
            response = await client.request("DELETE", self._config.base_url, json={"name": name})
            return handle_delete_response(response, employee_id, name)

        return await self._executor.execute(
            operation, description=f"delete employee {employee_id}"
        )
