r"""Core configuration and validation shared by the sync and async
clients."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT",
    "ApiConfig",
    "RetryPolicy",
    "validate_base_url",
    "validate_employee_input",
    "validate_retry_policy",
    "validate_timeout",
]

from employee_gateway.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT,
    ApiConfig,
    RetryPolicy,
)
from employee_gateway.core.validation import (
    validate_base_url,
    validate_employee_input,
    validate_retry_policy,
    validate_timeout,
)
