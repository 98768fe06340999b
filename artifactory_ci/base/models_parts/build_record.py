"""
Build record DTO.

Read-only snapshot of a single build: where it lives and the ordered list of
actions it produced.
"""
from __future__ import annotations

from typing import Any, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import ErrorCode, ResolverError
from .build_action import BuildAction


class BuildRecord(BaseModel):
    """A build of a project.

    Attributes:
        project: Name of the owning project.
        number: Build number.
        url: Build URL relative to the server root (e.g. ``job/app/12/``).
        actions: Insertion-ordered actions recorded during the build.
    """

    model_config = ConfigDict(frozen=True)

    project: str
    number: int
    url: str = ""
    actions: Tuple[BuildAction, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BuildRecord":
        """Validate a host snapshot mapping into a ``BuildRecord``.

        Raises:
            ResolverError: ``VALIDATION`` when the mapping is malformed.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ResolverError(
                code=ErrorCode.VALIDATION,
                message=f"invalid build snapshot: {exc.error_count()} error(s)",
                holder=str(data["project"]) if isinstance(data, Mapping) and data.get("project") else None,
                raw=exc,
            ) from exc


__all__ = ["BuildRecord"]
