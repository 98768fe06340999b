"""Direct publisher lookup over a project's top-level publishers list."""
from __future__ import annotations

from typing import Optional

from ..models import ConfiguredExtension, ProjectConfiguration
from .matching import first_of_kind


class PublisherFind:
    """Find the first top-level publisher of a kind.

    List order encodes configuration priority, so the first declared match
    wins.
    """

    def find(self, config: ProjectConfiguration, kind: str) -> Optional[ConfiguredExtension]:
        return first_of_kind(config.publishers, kind)


__all__ = ["PublisherFind"]
