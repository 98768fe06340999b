"""Publisher lookup inside conditional ("flexible publish") containers.

A publisher may be configured as one of the conditional actions of a
flexible publish container instead of directly on the project. This finder
walks every container publisher in declaration order and scans its nested
list. Only one level is searched: containers nested inside containers are
not unwrapped.
"""
from __future__ import annotations

from typing import Iterator, Optional

from ..models import ConfiguredExtension, ProjectConfiguration
from .matching import first_of_kind


class PublisherFlexible:
    """Find the first publisher of a kind wrapped by a container publisher."""

    def containers(self, config: ProjectConfiguration) -> Iterator[ConfiguredExtension]:
        """Yield the container publishers of ``config`` in declaration order."""
        return (publisher for publisher in config.publishers if publisher.is_container)

    def find(self, config: ProjectConfiguration, kind: str) -> Optional[ConfiguredExtension]:
        for container in self.containers(config):
            # A container without a match does not stop the scan
            match = first_of_kind(container.nested, kind)
            if match is not None:
                return match
        return None


__all__ = ["PublisherFlexible"]
