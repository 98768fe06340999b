"""artifactory_ci.config.defaults
==============================

Central place for small, stable default values used by the configuration
layer and the CLI. These defaults can be overridden via environment variables
or an external configuration file.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# Server root URL; blank means "unknown" and disables absolute build URLs.
DEFAULT_ROOT_URL = ""

# Principal reported for builds not started by a user.
DEFAULT_PRINCIPAL = "anonymous"

# Short name of this plugin in the host's plugin manager.
DEFAULT_PLUGIN_SHORT_NAME = "artifactory"

DEFAULT_LOG_LEVEL = "INFO"

# CLI program name
CLI_PROG = "artifactory-ci"

__all__ = [
    "DEFAULT_ROOT_URL",
    "DEFAULT_PRINCIPAL",
    "DEFAULT_PLUGIN_SHORT_NAME",
    "DEFAULT_LOG_LEVEL",
    "CLI_PROG",
]
