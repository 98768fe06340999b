"""
Kind tag field type shared by every snapshot model.

Kinds are compared by value, so surrounding whitespace is stripped on the way
in and a blank kind is rejected.
"""
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator


def normalize_kind(value: str) -> str:
    """Return ``value`` stripped; raise ``ValueError`` when nothing is left."""
    value = value.strip()
    if not value:
        raise ValueError("kind must be a non-empty string")
    return value


KindTag = Annotated[str, AfterValidator(normalize_kind)]

__all__ = ["KindTag", "normalize_kind"]
