"""Kind matching primitives shared by the finders.

Every lookup in this package reduces to one of three linear scans over an
ordered sequence of tagged items: first match, all matches, or last match.
Items only need a ``kind`` attribute. The requested kind is stripped of
surrounding whitespace, matching how the models store their kinds.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar


class HasKind(Protocol):
    kind: str


T = TypeVar("T", bound=HasKind)


def first_of_kind(items: Iterable[T], kind: str) -> Optional[T]:
    """Return the first item whose ``kind`` equals ``kind`` or ``None``."""
    kind = kind.strip()
    return next((item for item in items if item.kind == kind), None)


def all_of_kind(items: Iterable[T], kind: str) -> List[T]:
    """Return every item of ``kind`` in iteration order, duplicates included."""
    kind = kind.strip()
    return [item for item in items if item.kind == kind]


def last_of_kind(items: Sequence[T], kind: str) -> Optional[T]:
    """Return the last item whose ``kind`` equals ``kind`` or ``None``."""
    kind = kind.strip()
    return next((item for item in reversed(items) if item.kind == kind), None)


__all__ = ["HasKind", "first_of_kind", "all_of_kind", "last_of_kind"]
