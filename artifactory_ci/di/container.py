"""Minimal dependency injection container.

Goals:
- Centralize construction of the shared resolver and plugin registry.
- Resolve configuration once per container instead of per call.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.logging import configure_logger
from ..base.models import BuildRecord
from ..base.plugins import PluginRegistry, get_plugin_version
from ..base.resolution import CapabilityResolver, get_build_url, get_user_cause_principal
from ..config import get_resolver_config


class ResolverContainer:
    """Dependency injection container for resolver services.

    Attributes are created lazily and cached; ``clear`` drops them.
    """

    def __init__(
        self,
        overrides: Optional[Dict[str, Any]] = None,
        registry: Optional[PluginRegistry] = None,
    ) -> None:
        """Initialize the container.

        Args:
            overrides: Configuration overrides applied on top of defaults,
                config file and environment.
            registry: Installed plugin registry supplied by the host, if any.
        """
        self._overrides = overrides or {}
        self._registry = registry
        self._singletons: Dict[str, Any] = {}

    def config(self) -> Dict[str, Any]:
        if "config" not in self._singletons:
            cfg = get_resolver_config(self._overrides)
            configure_logger(level=cfg["log_level"])
            self._singletons["config"] = cfg
        return self._singletons["config"]

    def resolver(self) -> CapabilityResolver:
        if "resolver" not in self._singletons:
            self.config()
            self._singletons["resolver"] = CapabilityResolver()
        return self._singletons["resolver"]

    def plugin_registry(self) -> Optional[PluginRegistry]:
        return self._registry

    def plugin_version(self) -> str:
        """Return this plugin's installed version or ``""``."""
        return get_plugin_version(self._registry, self.config()["plugin_short_name"])

    def build_url(self, build: BuildRecord) -> str:
        return get_build_url(build, self.config()["root_url"])

    def user_principal(self, build: BuildRecord) -> str:
        return get_user_cause_principal(build, self.config()["default_principal"])

    def clear(self) -> None:  # testing convenience
        self._singletons.clear()


def build_container(
    overrides: Optional[Dict[str, Any]] = None,
    registry: Optional[PluginRegistry] = None,
) -> ResolverContainer:
    """Construct and return a new ResolverContainer instance."""
    return ResolverContainer(overrides=overrides, registry=registry)


__all__ = ["ResolverContainer", "build_container"]
