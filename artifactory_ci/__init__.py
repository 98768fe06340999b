"""artifactory_ci package

Extension and build-action lookup for the Artifactory CI server plugin.

Purpose:
    Given host-supplied snapshots of a project's configuration (builders,
    publishers, build wrappers) and of its builds, find the configured
    extension or recorded action of a requested kind. Publishers wrapped by a
    flexible publish container are found transparently.

Public API (re-exported):
    - Version: ``__version__``
    - Resolver: :class:`CapabilityResolver` and the module-level
      ``find_publisher``, ``find_wrapper``, ``find_builders_of_type``,
      ``latest_action_of_type`` functions
    - Models: :class:`ConfiguredExtension`, :class:`ProjectConfiguration`,
      :class:`BuildAction`, :class:`BuildCause`, :class:`BuildRecord`,
      :class:`ProjectAction`
    - Exceptions: :class:`ResolverError`, :class:`UnsupportedItemError`,
      :class:`ErrorCode`
"""

import logging

from .base.errors import ErrorCode, ResolverError, UnsupportedItemError
from .base.models import (
    BuildAction,
    BuildCause,
    BuildRecord,
    ConfiguredExtension,
    ProjectAction,
    ProjectConfiguration,
)
from .base.plugins import PluginRegistry, get_plugin_version
from .base.resolution import (
    CapabilityResolver,
    find_builders_of_type,
    find_publisher,
    find_wrapper,
    get_build_url,
    get_latest_artifact_record,
    get_project_actions,
    get_upstream_cause,
    get_user_cause_principal,
    latest_action_of_type,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "ErrorCode",
    "ResolverError",
    "UnsupportedItemError",
    # Models
    "BuildAction",
    "BuildCause",
    "BuildRecord",
    "ConfiguredExtension",
    "ProjectAction",
    "ProjectConfiguration",
    # Resolution
    "CapabilityResolver",
    "find_publisher",
    "find_wrapper",
    "find_builders_of_type",
    "latest_action_of_type",
    "get_latest_artifact_record",
    "get_upstream_cause",
    "get_user_cause_principal",
    "get_build_url",
    "get_project_actions",
    # Plugins
    "PluginRegistry",
    "get_plugin_version",
]

logger = logging.getLogger(__name__)
