"""
Structured resolver error exception type.

Carries a normalized `ErrorCode` plus the holder/kind that were being looked
up, so callers and the CLI can report structural mistakes consistently.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ResolverError(Exception):
    """Represents a structured resolver error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        holder: Name of the configuration holder (project) involved, if known.
        kind: Capability kind that was requested, if any.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    holder: Optional[str] = None
    kind: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining holder, kind, code, and message."""
        return f"{self.holder or '-'}:{self.kind or '-'} {self.code.value}: {self.message}"


__all__ = ["ResolverError"]
