"""Installed plugin metadata and registry."""

from .base import InstalledPlugin, Plugin, PluginMetadata
from .registry import PluginRegistry, get_plugin_version

__all__ = ["InstalledPlugin", "Plugin", "PluginMetadata", "PluginRegistry", "get_plugin_version"]
