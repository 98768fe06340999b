"""Resolution package.

Exports the capability resolver, its module-level convenience functions and
the build-level helpers.
"""

from .build_helpers import (
    get_build_url,
    get_latest_artifact_record,
    get_project_actions,
    get_upstream_cause,
    get_user_cause_principal,
)
from .publisher_find import PublisherFind
from .publisher_flexible import PublisherFlexible
from .resolver import (
    CapabilityResolver,
    default_resolver,
    find_builders_of_type,
    find_publisher,
    find_wrapper,
    latest_action_of_type,
)

__all__ = [
    "CapabilityResolver",
    "PublisherFind",
    "PublisherFlexible",
    "default_resolver",
    "find_publisher",
    "find_wrapper",
    "find_builders_of_type",
    "latest_action_of_type",
    "get_latest_artifact_record",
    "get_upstream_cause",
    "get_user_cause_principal",
    "get_build_url",
    "get_project_actions",
]
