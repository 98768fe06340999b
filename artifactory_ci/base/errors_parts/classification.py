"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Used by the CLI and the container to report failures from snapshot loading
and resolution in a uniform way.
"""
from __future__ import annotations

from pydantic import ValidationError

from .error_code import ErrorCode
from .resolver_error import ResolverError


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ResolverError passthrough.
        2. Pydantic validation failures.
        3. Lookup failures (``KeyError``/``IndexError``).
        4. Malformed values (``ValueError``/``TypeError``).
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ResolverError):
        return exc.code
    if isinstance(exc, ValidationError):
        return ErrorCode.VALIDATION
    if isinstance(exc, LookupError):
        return ErrorCode.NOT_FOUND
    if isinstance(exc, (ValueError, TypeError)):
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
