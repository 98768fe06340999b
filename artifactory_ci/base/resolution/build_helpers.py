"""Build-level helpers built on top of the action lookup.

Covers the small questions the deploy publisher asks about a build: the
latest artifact record, what triggered the build and who started it, where
the build lives, and whether the project already links to a repository
server. The server root URL is passed in by the caller instead of being read
from a global host instance.
"""
from __future__ import annotations

from typing import List, Optional

from ..constants import (
    ACTION_ARTIFACTORY_PROJECT,
    ACTION_CAUSE,
    ACTION_MAVEN_ARTIFACT_RECORD,
    CAUSE_UPSTREAM,
    CAUSE_USER_ID,
    DEFAULT_PRINCIPAL,
    PROJECT_MATRIX_CONFIGURATION,
)
from ..models import BuildAction, BuildCause, BuildRecord, ProjectAction, ProjectConfiguration
from .matching import first_of_kind, last_of_kind


def get_latest_artifact_record(build: BuildRecord) -> Optional[BuildAction]:
    """Return the last maven artifact record of a module build.

    A module may record several artifact records; earlier ones can hold only
    the main artifact, the last one is complete.
    """
    return last_of_kind(build.actions, ACTION_MAVEN_ARTIFACT_RECORD)


def _cause_of_kind(build: BuildRecord, kind: str) -> Optional[BuildCause]:
    action = last_of_kind(build.actions, ACTION_CAUSE)
    if action is None:
        return None
    return first_of_kind(action.causes, kind)


def get_upstream_cause(build: BuildRecord) -> Optional[BuildCause]:
    """Return the upstream cause of the build, if it was triggered by another build."""
    return _cause_of_kind(build, CAUSE_UPSTREAM)


def get_user_cause_principal(build: BuildRecord, default_principal: str = DEFAULT_PRINCIPAL) -> str:
    """Return the id of the user who started the build.

    Args:
        build: The build.
        default_principal: Returned when no user cause (or no user id) exists.
    """
    cause = _cause_of_kind(build, CAUSE_USER_ID)
    if cause is not None and cause.user_id is not None:
        return cause.user_id
    return default_principal


def get_build_url(build: BuildRecord, root_url: Optional[str]) -> str:
    """Return the absolute build URL, or ``""`` when the root URL is unknown."""
    if root_url is None or not root_url.strip():
        return ""
    return root_url + build.url


def get_project_actions(server_name: Optional[str], project: ProjectConfiguration) -> List[ProjectAction]:
    """Return the project action to attach for ``server_name``.

    The list is empty when no server is configured, when the project already
    carries the action (several builders of one project share it) or when
    the project is a matrix configuration.
    """
    if server_name is None:
        return []
    if first_of_kind(project.actions, ACTION_ARTIFACTORY_PROJECT) is not None:
        return []
    if project.kind == PROJECT_MATRIX_CONFIGURATION:
        return []
    return [ProjectAction(server_name=server_name, project_name=project.name)]


__all__ = [
    "get_latest_artifact_record",
    "get_upstream_cause",
    "get_user_cause_principal",
    "get_build_url",
    "get_project_actions",
]
