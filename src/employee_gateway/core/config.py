r"""Configuration dataclasses and defaults for the employee gateway.

This module provides configuration constants and immutable dataclass
configuration objects used by the retry executors and the employee
clients. Values are read once and never mutated afterwards.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT",
    "ApiConfig",
    "RetryPolicy",
]

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from employee_gateway.core.validation import (
    validate_base_url,
    validate_retry_policy,
    validate_timeout,
)

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger(__name__)

# Upstream employee collection endpoint
DEFAULT_BASE_URL = "http://localhost:8112/api/v1/employee"

# Maximum number of upstream calls for one logical operation
# Sleeps between attempts = max_attempts - 1
DEFAULT_MAX_ATTEMPTS = 3

# Fixed delay between two attempts, in milliseconds
DEFAULT_RETRY_DELAY_MS = 1000

# Default timeout in seconds for a single upstream call
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry policy applied to every upstream call.

    Args:
        max_attempts: Maximum number of upstream calls. Must be >= 1.
        delay_between_attempts: Fixed delay in seconds between two
            attempts. Must be >= 0.

    Example:
        ```pycon
        >>> from employee_gateway.core.config import RetryPolicy
        >>> policy = RetryPolicy()
        >>> policy.max_attempts
        3
        >>> policy.delay_between_attempts
        1.0
        >>> RetryPolicy.from_milliseconds(max_attempts=5, delay_ms=250).delay_between_attempts
        0.25

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_between_attempts: float = DEFAULT_RETRY_DELAY_MS / 1000

    def __post_init__(self) -> None:
        validate_retry_policy(
            max_attempts=self.max_attempts,
            delay_between_attempts=self.delay_between_attempts,
        )

    @classmethod
    def from_milliseconds(cls, max_attempts: int, delay_ms: int) -> RetryPolicy:
        """Create a policy from a delay expressed in milliseconds.

        Args:
            max_attempts: Maximum number of upstream calls.
            delay_ms: Delay between two attempts in milliseconds.

        Returns:
            The retry policy.
        """
        return cls(max_attempts=max_attempts, delay_between_attempts=delay_ms / 1000)


@dataclass(frozen=True)
class ApiConfig:
    """Configuration of the upstream employee API.

    Args:
        base_url: URL of the upstream employee collection.
        timeout: Maximum seconds to wait for one upstream response.
        retry_policy: Retry policy applied to every upstream call.

    Example:
        ```pycon
        >>> from employee_gateway.core.config import ApiConfig, RetryPolicy
        >>> config = ApiConfig(base_url="http://api.test/employee")
        >>> config.employee_url("42")
        'http://api.test/employee/42'
        >>> config.retry_policy == RetryPolicy()
        True

        ```
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)

    def __post_init__(self) -> None:
        validate_base_url(self.base_url)
        validate_timeout(self.timeout)
        # Normalize so that URL joins never produce a double slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def employee_url(self, employee_id: str) -> str:
        """Return the URL of a single employee."""
        return f"{self.base_url}/{employee_id}"

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> ApiConfig:
        """Build the configuration from environment variables.

        The following variables are read, falling back to the module
        defaults when unset:

        - ``EMPLOYEE_API_BASE_URL``
        - ``EMPLOYEE_API_MAX_RETRIES`` (maximum number of attempts)
        - ``EMPLOYEE_API_RETRY_DELAY_MS``
        - ``EMPLOYEE_API_TIMEOUT`` (seconds)

        Args:
            dotenv_path: Optional path to a ``.env`` file loaded before
                reading the environment. Variables already set in the
                environment take precedence.

        Returns:
            The configuration.

        Raises:
            ValueError: If a variable cannot be parsed or is out of range.
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path)

        base_url = os.getenv("EMPLOYEE_API_BASE_URL", DEFAULT_BASE_URL)
        max_attempts = _parse_env("EMPLOYEE_API_MAX_RETRIES", DEFAULT_MAX_ATTEMPTS, int)
        delay_ms = _parse_env("EMPLOYEE_API_RETRY_DELAY_MS", DEFAULT_RETRY_DELAY_MS, int)
        timeout = _parse_env("EMPLOYEE_API_TIMEOUT", DEFAULT_TIMEOUT, float)
        logger.debug(
            f"Loaded employee API configuration: base_url={base_url}, "
            f"max_attempts={max_attempts}, delay_ms={delay_ms}, timeout={timeout}"
        )
        return cls(
            base_url=base_url,
            timeout=timeout,
            retry_policy=RetryPolicy.from_milliseconds(max_attempts=max_attempts, delay_ms=delay_ms),
        )


def _parse_env(name: str, default: int | float, cast: type) -> int | float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        msg = f"{name} must be a valid {cast.__name__}, got {raw!r}"
        raise ValueError(msg) from exc
