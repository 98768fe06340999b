"""
Error raised when a configuration holder cannot own a category of extension.

Example: asking a maven module for its build wrappers. This is a caller
mistake and is surfaced immediately rather than reported as "not
configured".
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .resolver_error import ResolverError


@dataclass
class UnsupportedItemError(ResolverError):
    """Holder does not support the requested extension category."""

    code: ErrorCode = ErrorCode.UNSUPPORTED
    message: str = "holder does not support this extension category"


__all__ = ["UnsupportedItemError"]
