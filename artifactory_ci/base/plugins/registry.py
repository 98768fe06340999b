"""Registry of installed host plugins.

Replaces the host's global plugin manager lookup: the registry is built by
the caller (or the DI container) and passed explicitly to version lookups.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..constants import PLUGIN_SHORT_NAME
from ..logging import get_logger
from .base import Plugin


class PluginRegistry:
    """Central registry of installed plugins keyed by short name.

    Attributes:
        plugins: Mapping of plugin name to plugin instance.
        logger: Structured logger instance.
    """

    def __init__(self) -> None:
        self.plugins: Dict[str, Plugin] = {}
        self.logger = get_logger("plugin_registry")

    def register(self, plugin: Plugin) -> None:
        """Register an installed plugin.

        Raises:
            ValueError: If the plugin name is already registered.
        """
        meta = plugin.metadata
        if meta.name in self.plugins:
            raise ValueError(f"Plugin '{meta.name}' already registered")
        self.plugins[meta.name] = plugin
        self.logger.info(
            "Plugin registered",
            extra={"plugin": meta.name, "version": meta.version},
        )

    def get(self, name: str) -> Optional[Plugin]:
        return self.plugins.get(name)


def get_plugin_version(registry: Optional[PluginRegistry], short_name: str = PLUGIN_SHORT_NAME) -> str:
    """Return the installed version of ``short_name`` or ``""`` if unknown.

    Some jobs run without access to the host instance, so a missing
    registry is an ordinary case.
    """
    if registry is None:
        return ""
    plugin = registry.get(short_name)
    if plugin is None or plugin.metadata.version is None:
        return ""
    return plugin.metadata.version


__all__ = ["PluginRegistry", "get_plugin_version"]
