r"""Outcome of a single upstream attempt.

An attempt ends in exactly one of three variants. The retry executors
branch over this closed set instead of over exception hierarchies.
"""

from __future__ import annotations

__all__ = ["AttemptOutcome", "RetryableFailure", "Success", "TerminalFailure"]

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """The attempt produced a value."""

    value: Any


@dataclass(frozen=True)
class RetryableFailure:
    """The attempt failed in a way that may resolve on retry."""

    cause: Exception


@dataclass(frozen=True)
class TerminalFailure:
    """The attempt failed in a way that will not change on retry."""

    cause: Exception


AttemptOutcome = Union[Success, RetryableFailure, TerminalFailure]
