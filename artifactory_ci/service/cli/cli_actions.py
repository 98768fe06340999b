"""CLI action handlers.

Purpose
-------
Subcommand handlers for the artifactory-ci CLI, keeping the entrypoint
minimal (thin presentation layer). This module has no top-level side effects
and is safe to import in tests.

Exit codes
----------
- ``0``: the requested item was found (or the command always succeeds).
- ``1``: nothing of the requested kind is configured/recorded.
- ``2``: structural failure (unreadable or invalid snapshot, unsupported
  holder). The error is written as JSON to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel

from ...base.errors import ErrorCode, ResolverError, classify_exception
from ...base.logging import get_logger, log_event
from ...base.models import BuildRecord, ProjectConfiguration
from ...base.resolution import get_build_url, get_upstream_cause, get_user_cause_principal
from ...di import ResolverContainer

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2

logger = get_logger("cli")


def load_snapshot(path: str) -> Dict[str, Any]:
    """Read a JSON snapshot file into a mapping.

    Raises
    ------
    ResolverError
        ``NOT_FOUND`` when the file cannot be read, ``VALIDATION`` when it is
        not a JSON object.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ResolverError(code=ErrorCode.NOT_FOUND, message=f"cannot read {path}: {exc}", raw=exc) from exc
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ResolverError(code=ErrorCode.VALIDATION, message=f"{path} is not valid JSON", raw=exc) from exc
    if not isinstance(data, dict):
        raise ResolverError(code=ErrorCode.VALIDATION, message=f"{path} must contain a JSON object")
    return data


def _emit(payload: Any) -> None:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    elif isinstance(payload, list):
        payload = [p.model_dump(mode="json") if isinstance(p, BaseModel) else p for p in payload]
    sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")


def _found_or_not(item: Optional[BaseModel]) -> int:
    _emit(item)
    return EXIT_FOUND if item is not None else EXIT_NOT_FOUND


def handle_publisher(args: argparse.Namespace, container: ResolverContainer) -> int:
    project = ProjectConfiguration.from_mapping(load_snapshot(args.project))
    return _found_or_not(container.resolver().find_publisher(project, args.kind))


def handle_wrapper(args: argparse.Namespace, container: ResolverContainer) -> int:
    project = ProjectConfiguration.from_mapping(load_snapshot(args.project))
    return _found_or_not(container.resolver().find_wrapper(project, args.kind))


def handle_builders(args: argparse.Namespace, container: ResolverContainer) -> int:
    project = ProjectConfiguration.from_mapping(load_snapshot(args.project))
    builders = container.resolver().find_builders_of_type(project, args.kind)
    _emit(builders)
    return EXIT_FOUND if builders else EXIT_NOT_FOUND


def handle_action(args: argparse.Namespace, container: ResolverContainer) -> int:
    build = BuildRecord.from_mapping(load_snapshot(args.build))
    return _found_or_not(container.resolver().latest_action_of_type(build.actions, args.kind))


def handle_cause(args: argparse.Namespace, container: ResolverContainer) -> int:
    """Print the triggering user principal and upstream cause of a build."""
    build = BuildRecord.from_mapping(load_snapshot(args.build))
    upstream = get_upstream_cause(build)
    if args.default_principal is not None:
        principal = get_user_cause_principal(build, args.default_principal)
    else:
        principal = container.user_principal(build)
    _emit(
        {
            "principal": principal,
            "upstream": upstream.model_dump(mode="json") if upstream is not None else None,
        }
    )
    return EXIT_FOUND


def handle_build_url(args: argparse.Namespace, container: ResolverContainer) -> int:
    build = BuildRecord.from_mapping(load_snapshot(args.build))
    if args.root_url is not None:
        url = get_build_url(build, args.root_url)
    else:
        url = container.build_url(build)
    _emit({"url": url})
    return EXIT_FOUND if url else EXIT_NOT_FOUND


HANDLERS: Dict[str, Callable[[argparse.Namespace, ResolverContainer], int]] = {
    "publisher": handle_publisher,
    "wrapper": handle_wrapper,
    "builders": handle_builders,
    "action": handle_action,
    "cause": handle_cause,
    "build-url": handle_build_url,
}


def dispatch(args: argparse.Namespace, container: ResolverContainer) -> int:
    """Run the handler for ``args.cmd`` and map resolver errors to exit code 2."""
    handler = HANDLERS[args.cmd]
    try:
        return handler(args, container)
    except ResolverError as exc:
        code = classify_exception(exc)
        log_event(logger, "cli.error", level=logging.WARNING, command=args.cmd, error_code=code.value, message=exc.message)
        sys.stderr.write(
            json.dumps({"error": code.value, "message": exc.message, "kind": exc.kind}, ensure_ascii=False) + "\n"
        )
        return EXIT_ERROR


__all__ = [
    "EXIT_FOUND",
    "EXIT_NOT_FOUND",
    "EXIT_ERROR",
    "HANDLERS",
    "dispatch",
    "load_snapshot",
]
