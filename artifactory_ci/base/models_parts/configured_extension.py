"""
Configured extension DTO.

A ``ConfiguredExtension`` is one entry of a project's builders, publishers or
build wrappers list as supplied by the host. It is identified by its string
``kind`` (capability tag) and, for container kinds, owns an ordered tuple of
nested extensions.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..constants import CONTAINER_KINDS
from .kind_tag import KindTag


class ConfiguredExtension(BaseModel):
    """A configured builder, publisher or build wrapper.

    Attributes:
        kind: Capability tag identifying the concrete behavior.
        name: Optional display name given by the host.
        settings: Opaque, host-defined configuration values.
        nested: Sub-extensions owned by a container; empty otherwise.
    """

    model_config = ConfigDict(frozen=True)

    kind: KindTag
    name: Optional[str] = None
    settings: Dict[str, Any] = Field(default_factory=dict)
    nested: Tuple["ConfiguredExtension", ...] = ()

    @model_validator(mode="after")
    def nested_only_on_containers(self) -> "ConfiguredExtension":
        if self.nested and not self.is_container:
            raise ValueError(f"extension of kind '{self.kind}' cannot hold nested extensions")
        return self

    @property
    def is_container(self) -> bool:
        """Return True when this extension wraps a nested extension list."""
        return self.kind in CONTAINER_KINDS


ConfiguredExtension.model_rebuild()

__all__ = ["ConfiguredExtension"]
