"""
Normalized resolver error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the resolver, the configuration
layer and the CLI. Values are lowercase snake_case and are considered a
stable public contract for logging.

Absence of a configured extension is not represented here: lookups return
``None`` (or an empty list) for that case and never raise.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    UNSUPPORTED = "unsupported"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFIG = "config"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
