"""Host snapshot models public surface.

Re-exports the DTOs under ``artifactory_ci.base.models_parts``. All models
are immutable pydantic v2 models; lookups never mutate them.
"""

from .models_parts import (
    BuildAction,
    BuildCause,
    BuildRecord,
    ConfiguredExtension,
    KindTag,
    ProjectAction,
    ProjectConfiguration,
    normalize_kind,
)

__all__ = [
    "BuildAction",
    "BuildCause",
    "BuildRecord",
    "ConfiguredExtension",
    "KindTag",
    "ProjectAction",
    "ProjectConfiguration",
    "normalize_kind",
]
