"""
Build action DTOs.

Actions are records attached to a build (or project) while it runs. One
producer may append several actions of the same kind to a build; the most
recent one is authoritative.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..constants import ACTION_ARTIFACTORY_PROJECT
from .build_cause import BuildCause
from .kind_tag import KindTag


class BuildAction(BaseModel):
    """A record produced for a build or project.

    Attributes:
        kind: Action tag used for lookups (e.g. ``"maven_artifact_record"``).
        data: Opaque payload of the record.
        causes: Causes carried by cause actions; empty for other kinds.
    """

    model_config = ConfigDict(frozen=True)

    kind: KindTag
    data: Dict[str, Any] = Field(default_factory=dict)
    causes: Tuple[BuildCause, ...] = ()


class ProjectAction(BuildAction):
    """Project-level action linking a project to its repository server."""

    kind: KindTag = ACTION_ARTIFACTORY_PROJECT
    server_name: str
    project_name: str


__all__ = ["BuildAction", "ProjectAction"]
