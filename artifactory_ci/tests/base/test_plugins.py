"""Tests for the installed plugin registry and version lookup."""

from __future__ import annotations

import pytest

from artifactory_ci.base.plugins import InstalledPlugin, Plugin, PluginMetadata, PluginRegistry, get_plugin_version
from artifactory_ci.tests.utils import assert_true


def _plugin(name: str, version: str | None = "1.0") -> InstalledPlugin:
    return InstalledPlugin(PluginMetadata(name=name, version=version))


def test_installed_plugin_satisfies_protocol() -> None:
    assert_true(isinstance(_plugin("x"), Plugin), "runtime checkable protocol")


def test_register_and_lookup() -> None:
    registry = PluginRegistry()
    plugin = _plugin("artifactory", "3.2.1")
    registry.register(plugin)
    assert_true(registry.get("artifactory") is plugin, "registered")
    assert_true(registry.get("missing") is None, "unknown name")


def test_register_rejects_duplicates() -> None:
    registry = PluginRegistry()
    registry.register(_plugin("credentials"))
    with pytest.raises(ValueError):
        registry.register(_plugin("credentials", "2.0"))
    assert_true(get_plugin_version(registry, "credentials") == "1.0", "first registration kept")


def test_registry_surface_is_lookup_only() -> None:
    registry = PluginRegistry()
    for name in ("unregister", "list_plugins"):
        assert_true(not hasattr(registry, name), f"{name} not offered")
    assert_true(not hasattr(PluginMetadata(name="x"), "dependencies"), "no dependency metadata")


def test_plugin_version() -> None:
    registry = PluginRegistry()
    registry.register(_plugin("artifactory", "3.2.1"))
    registry.register(_plugin("unversioned", None))
    assert_true(get_plugin_version(registry) == "3.2.1", "default short name")
    assert_true(get_plugin_version(registry, "unversioned") == "", "missing version")
    assert_true(get_plugin_version(registry, "missing") == "", "missing plugin")
    assert_true(get_plugin_version(None) == "", "no registry")
