"""
Project configuration DTO.

Aggregates the three independent ordered extension lists of a project.
Holder kinds that cannot own build wrappers (maven modules) carry
``wrappers=None``; an empty tuple means "supports wrappers, none configured".
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..constants import PROJECT_FREESTYLE, WRAPPERLESS_PROJECT_KINDS
from ..errors import ErrorCode, ResolverError
from .build_action import BuildAction
from .configured_extension import ConfiguredExtension
from .kind_tag import KindTag


class ProjectConfiguration(BaseModel):
    """Snapshot of a project's configured extensions.

    Attributes:
        name: Project name.
        kind: Project kind (e.g. ``"freestyle"``, ``"maven_module"``).
        builders: Build steps in declaration order.
        publishers: Post-build publishers in declaration order.
        wrappers: Build wrappers, or ``None`` when the holder cannot own any.
            Always ``None`` for kinds in ``WRAPPERLESS_PROJECT_KINDS``.
        actions: Project-level actions already attached to the project.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    kind: KindTag = PROJECT_FREESTYLE
    builders: Tuple[ConfiguredExtension, ...] = ()
    publishers: Tuple[ConfiguredExtension, ...] = ()
    wrappers: Optional[Tuple[ConfiguredExtension, ...]] = ()
    actions: Tuple[BuildAction, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def wrappers_follow_holder_kind(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        kind = data.get("kind")
        if not isinstance(kind, str) or kind.strip() not in WRAPPERLESS_PROJECT_KINDS:
            return data
        if data.get("wrappers") is not None:
            raise ValueError(f"project of kind '{kind.strip()}' cannot own build wrappers")
        return {**data, "wrappers": None}

    @property
    def supports_wrappers(self) -> bool:
        return self.wrappers is not None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProjectConfiguration":
        """Validate a host snapshot mapping into a ``ProjectConfiguration``.

        Raises:
            ResolverError: ``VALIDATION`` when the mapping is malformed.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ResolverError(
                code=ErrorCode.VALIDATION,
                message=f"invalid project snapshot: {exc.error_count()} error(s)",
                holder=str(data["name"]) if isinstance(data, Mapping) and data.get("name") else None,
                raw=exc,
            ) from exc


__all__ = ["ProjectConfiguration"]
