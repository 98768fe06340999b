"""Typed capability lookup over a project's configured extensions.

The resolver answers "which configured builder/publisher/wrapper of kind X
does this project have?" without callers needing to know that publishers may
be wrapped by a conditional container.

Policy
------
- Absence is the common case (the project is simply not configured with the
  requested extension) and is reported as ``None`` or an empty list, never as
  an exception.
- Asking a holder for a category it cannot own (wrappers on a maven
  module) is a caller mistake and raises :class:`UnsupportedItemError`.
- Multiple matches resolve to the first declared one. This is a stable
  priority, not a ranking.
- Action lookups return the *last* recorded action of a kind: producers may
  record partial actions before the final complete one.

All operations are pure reads over immutable snapshots; no locking is needed.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..errors import UnsupportedItemError
from ..logging import LogContext, get_logger, log_event
from ..models import BuildAction, ConfiguredExtension, ProjectConfiguration
from .matching import all_of_kind, first_of_kind, last_of_kind
from .publisher_find import PublisherFind
from .publisher_flexible import PublisherFlexible


class CapabilityResolver:
    """Locate configured extensions and build actions by kind.

    Attributes:
        logger: Structured logger used for lookup diagnostics.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger("resolver")
        self._direct = PublisherFind()
        self._flexible = PublisherFlexible()

    def find_publisher(self, config: ProjectConfiguration, kind: str) -> Optional[ConfiguredExtension]:
        """Return the publisher of ``kind`` configured on the project.

        A top-level publisher takes precedence; otherwise the nested lists of
        container publishers are searched one level deep.

        Args:
            config: Project configuration snapshot.
            kind: Requested publisher kind.

        Returns:
            The matching publisher, or ``None`` when not configured.
        """
        kind = kind.strip()
        publisher = self._direct.find(config, kind)
        source = "direct"
        if publisher is None:
            publisher = self._flexible.find(config, kind)
            source = "flexible"
        log_event(
            self.logger,
            "resolver.publisher",
            LogContext(project=config.name, category="publisher", kind=kind),
            level=logging.DEBUG,
            found=publisher is not None,
            source=source if publisher is not None else None,
        )
        return publisher

    def find_wrapper(self, config: ProjectConfiguration, kind: str) -> Optional[ConfiguredExtension]:
        """Return the first build wrapper of ``kind`` configured on the project.

        Raises:
            UnsupportedItemError: When the holder cannot own build wrappers.
        """
        kind = kind.strip()
        ctx = LogContext(project=config.name, category="wrapper", kind=kind)
        if config.wrappers is None:
            log_event(
                self.logger,
                "resolver.unsupported",
                ctx,
                level=logging.WARNING,
                holder_kind=config.kind,
            )
            raise UnsupportedItemError(
                message=f"project kind '{config.kind}' does not support build wrappers",
                holder=config.name or None,
                kind=kind,
            )
        wrapper = first_of_kind(config.wrappers, kind)
        log_event(self.logger, "resolver.wrapper", ctx, level=logging.DEBUG, found=wrapper is not None)
        return wrapper

    def find_builders_of_type(self, config: ProjectConfiguration, kind: str) -> List[ConfiguredExtension]:
        """Return every builder of ``kind`` in declaration order.

        Builders legitimately repeat (several build steps of one kind), so
        all matches are returned. An empty list means none are configured.
        """
        kind = kind.strip()
        builders = all_of_kind(config.builders, kind)
        log_event(
            self.logger,
            "resolver.builders",
            LogContext(project=config.name, category="builder", kind=kind),
            level=logging.DEBUG,
            count=len(builders),
        )
        return builders

    def latest_action_of_type(self, actions: Sequence[BuildAction], kind: str) -> Optional[BuildAction]:
        """Return the most recently recorded action of ``kind`` or ``None``."""
        return last_of_kind(actions, kind)


_DEFAULT_RESOLVER: Optional[CapabilityResolver] = None


def default_resolver() -> CapabilityResolver:
    """Return the lazily created module-level resolver."""
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        _DEFAULT_RESOLVER = CapabilityResolver()
    return _DEFAULT_RESOLVER


def find_publisher(config: ProjectConfiguration, kind: str) -> Optional[ConfiguredExtension]:
    return default_resolver().find_publisher(config, kind)


def find_wrapper(config: ProjectConfiguration, kind: str) -> Optional[ConfiguredExtension]:
    return default_resolver().find_wrapper(config, kind)


def find_builders_of_type(config: ProjectConfiguration, kind: str) -> List[ConfiguredExtension]:
    return default_resolver().find_builders_of_type(config, kind)


def latest_action_of_type(actions: Sequence[BuildAction], kind: str) -> Optional[BuildAction]:
    return default_resolver().latest_action_of_type(actions, kind)


__all__ = [
    "CapabilityResolver",
    "default_resolver",
    "find_publisher",
    "find_wrapper",
    "find_builders_of_type",
    "latest_action_of_type",
]
