"""Model parts package (one DTO per module)."""

from .build_action import BuildAction, ProjectAction
from .build_cause import BuildCause
from .build_record import BuildRecord
from .configured_extension import ConfiguredExtension
from .kind_tag import KindTag, normalize_kind
from .project_configuration import ProjectConfiguration

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
