"""Installed host plugin abstractions.

The host server exposes the plugins it has installed; this package only
needs their descriptive metadata (name and version).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class PluginMetadata:
    """Metadata describing an installed host plugin.

    Attributes:
        name: Short plugin name (e.g. ``"artifactory"``).
        version: Installed version string; ``None`` when the host does not
            report one.
    """

    name: str
    version: Optional[str] = None


@runtime_checkable
class Plugin(Protocol):
    """Protocol for installed plugins exposed by the host."""

    @property
    def metadata(self) -> PluginMetadata:
        ...


@dataclass(frozen=True)
class InstalledPlugin:
    """Plain installed plugin record satisfying :class:`Plugin`."""

    metadata: PluginMetadata


__all__ = ["Plugin", "PluginMetadata", "InstalledPlugin"]
