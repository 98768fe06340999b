"""DI container for the resolver layer.

Composition root wiring configuration, the plugin registry and the resolver
so callers never reach into global host state.
"""
from __future__ import annotations

from .container import ResolverContainer, build_container

__all__ = ["ResolverContainer", "build_container"]
