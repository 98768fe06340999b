"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `artifactory_ci.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .resolver_error import ResolverError
from .unsupported_item_error import UnsupportedItemError
from .classification import classify_exception

__all__ = ["ErrorCode", "ResolverError", "UnsupportedItemError", "classify_exception"]
