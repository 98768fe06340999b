"""Structured logging context object for resolver events.

This module defines :class:`LogContext`, a dataclass carrying the common
fields of a lookup event (project, extension category, requested kind and
build number). ``to_dict`` merges the ``extra`` mapping and prunes ``None``
values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for resolver logging events."""

    project: Optional[str] = None
    category: Optional[str] = None
    kind: Optional[str] = None
    build: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
