r"""employee_gateway - Resilient client for an upstream employee API.

This package exposes the employee operations (list, search, get by id,
highest salary, top ten earners, create, delete) over an upstream HTTP
API that wraps every payload in a ``{data, status, error}`` envelope.
Built on top of the httpx library, every upstream call is retried on
transient failures with a fixed delay between attempts.

Key Features:
    - Bounded retries on rate limiting (429), server errors (5xx) and
      transport errors
    - Immediate failure on other client errors (e.g. 404 -> NotFoundError)
    - Explicit success/retryable/terminal outcome for every attempt
    - Synchronous and asyncio clients
    - Configuration from environment variables or a ``.env`` file

Example:
    ```pycon
    >>> from employee_gateway import EmployeeClient
    >>> from employee_gateway.core import ApiConfig, RetryPolicy
    >>> config = ApiConfig(retry_policy=RetryPolicy(max_attempts=5))
    >>> with EmployeeClient(config=config) as client:  # doctest: +SKIP
    ...     employee = client.get_employee_by_id("4a3a170b-22cd-4ac2-aad1-9bb5b34a1507")
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "ApiConfig",
    "AsyncEmployeeClient",
    "CreateEmployeeInput",
    "Employee",
    "EmployeeApiError",
    "EmployeeClient",
    "NotFoundError",
    "OperationFailedError",
    "RetryInterruptedError",
    "RetryPolicy",
    "UpstreamUnavailableError",
    "ValidationFailedError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from employee_gateway.client import EmployeeClient
from employee_gateway.client_async import AsyncEmployeeClient
from employee_gateway.core.config import ApiConfig, RetryPolicy
from employee_gateway.exceptions import (
    EmployeeApiError,
    NotFoundError,
    OperationFailedError,
    RetryInterruptedError,
    UpstreamUnavailableError,
    ValidationFailedError,
)
from employee_gateway.models import CreateEmployeeInput, Employee

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
