"""CLI parser construction for artifactory-ci.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...config.defaults import CLI_PROG


def _add_project_lookup(sub: argparse._SubParsersAction, name: str, help_text: str) -> None:
    p = sub.add_parser(name, help=help_text)
    p.add_argument("--project", required=True, help="Path to a project configuration JSON snapshot")
    p.add_argument("--kind", required=True, help="Requested extension kind")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``publisher``, ``wrapper``, ``builders``, ``action``,
        ``cause`` and ``build-url`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(
        prog=CLI_PROG, description="Inspect configured extensions and build actions of a project snapshot"
    )
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="cmd", required=True)

    _add_project_lookup(sub, "publisher", "Find a publisher, looking inside flexible publish containers")
    _add_project_lookup(sub, "wrapper", "Find a build wrapper")
    _add_project_lookup(sub, "builders", "List all builders of a kind")

    p_action = sub.add_parser("action", help="Show the latest build action of a kind")
    p_action.add_argument("--build", required=True, help="Path to a build JSON snapshot")
    p_action.add_argument("--kind", required=True)

    p_cause = sub.add_parser("cause", help="Show who or what triggered a build")
    p_cause.add_argument("--build", required=True)
    p_cause.add_argument("--default-principal", default=None)

    p_url = sub.add_parser("build-url", help="Print the absolute URL of a build")
    p_url.add_argument("--build", required=True)
    p_url.add_argument("--root-url", default=None)

    return p


__all__ = ["build_parser"]
