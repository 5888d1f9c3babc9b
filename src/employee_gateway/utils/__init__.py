r"""Utility functions for upstream response handling."""

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

from employee_gateway.utils.response import (
    UpstreamEnvelope,
    check_response,
    parse_envelope,
    unwrap_created,
    unwrap_entity,
    unwrap_flag,
    unwrap_list,
)
