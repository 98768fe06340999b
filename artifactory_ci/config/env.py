"""artifactory_ci.config.env
=========================

Environment variable names understood by the configuration layer and small
helpers to read them.

Failure Modes
-------------
Helpers never raise on unset variables; placeholder values (``changeme``,
``<placeholder>``) are treated as unset.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_PREFIX = "ARTIFACTORY_CI_"

# Config key -> environment variable
ENV_MAP: Dict[str, str] = {
    "root_url": "ARTIFACTORY_CI_ROOT_URL",
    "default_principal": "ARTIFACTORY_CI_DEFAULT_PRINCIPAL",
    "plugin_short_name": "ARTIFACTORY_CI_PLUGIN_NAME",
    "log_level": "ARTIFACTORY_CI_LOG_LEVEL",
}

CONFIG_FILE_ENV = "ARTIFACTORY_CI_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder' or 'changeme'. The check is
    case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v


def read_env(key: str) -> Optional[str]:
    """Return the environment value for config ``key`` or ``None``.

    Unknown keys, unset variables and placeholder values all yield ``None``.
    """
    name = ENV_MAP.get(key)
    if name is None:
        return None
    val = os.environ.get(name)
    if val is None or is_placeholder(val):
        return None
    return val


__all__ = [
    "ENV_PREFIX",
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "is_placeholder",
    "read_env",
]
