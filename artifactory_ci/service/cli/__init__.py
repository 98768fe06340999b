"""artifactory-ci command line (package entrypoint).

Wires argument parsing to action handlers kept in small, focused modules.
Performs no resolution logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from ...di import ResolverContainer, build_container
from .cli_actions import dispatch
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None, container: Optional[ResolverContainer] = None) -> int:
	"""CLI entrypoint.

	Parameters
	----------
	argv: Optional[list[str]]
		Argument vector; when ``None`` uses ``sys.argv[1:]``.
	container: Optional[ResolverContainer]
		Pre-built container (tests inject one); built from the environment
		otherwise.

	Returns
	-------
	int
		Process exit code (0 found, 1 not found, 2 on error).
	"""
	p = build_parser()
	args = p.parse_args(list(sys.argv[1:] if argv is None else argv))
	if container is None:
		container = build_container(overrides={"log_level": args.log_level})
	return dispatch(args, container)


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
