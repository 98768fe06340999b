"""
Build cause DTO.

Causes explain why a build was started: by a user (``user_id``) or by the
completion of another build (``upstream``). They are carried by the build's
cause action.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .kind_tag import KindTag


class BuildCause(BaseModel):
    """A single reason a build was triggered.

    Attributes:
        kind: Cause tag, e.g. ``"user_id"`` or ``"upstream"``.
        user_id: Id of the triggering user for user causes.
        upstream_project: Triggering project name for upstream causes.
        upstream_build: Triggering build number for upstream causes.
        description: Host supplied human readable description.
    """

    model_config = ConfigDict(frozen=True)

    kind: KindTag
    user_id: Optional[str] = None
    upstream_project: Optional[str] = None
    upstream_build: Optional[int] = None
    description: Optional[str] = None


__all__ = ["BuildCause"]
