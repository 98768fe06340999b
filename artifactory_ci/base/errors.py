"""Resolver error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``artifactory_ci.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.resolver_error import ResolverError
from .errors_parts.unsupported_item_error import UnsupportedItemError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "ResolverError", "UnsupportedItemError", "classify_exception"]
