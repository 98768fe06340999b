"""Shared testing utilities.

Exports:
    - assert_true(condition: bool, message: str) -> None
    - ext(kind, *nested, name=None) -> ConfiguredExtension
"""
from __future__ import annotations

from typing import Optional

from artifactory_ci.base.models import ConfiguredExtension


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False."""
    if not condition:
        raise AssertionError(message)


def ext(kind: str, *nested: ConfiguredExtension, name: Optional[str] = None) -> ConfiguredExtension:
    """Build a configured extension, optionally holding nested extensions."""
    return ConfiguredExtension(kind=kind, name=name, nested=tuple(nested))
