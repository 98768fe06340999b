"""Unified configuration layer.

Goals
-----
* Centralize defaults (root URL, default principal, plugin short name,
  log level).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``ARTIFACTORY_CI_CONFIG_FILE``
    3. Environment variables (``ARTIFACTORY_CI_ROOT_URL`` ...), after a
       one-time ``.env`` load
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_resolver_config()``.

External Config File
--------------------
JSON is tried first, then YAML. Structure example::

    root_url: https://ci.acme.io/
    default_principal: anonymous
    plugin_short_name: artifactory

Public API
----------
* get_resolver_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.errors import ErrorCode, ResolverError
from .defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PLUGIN_SHORT_NAME,
    DEFAULT_PRINCIPAL,
    DEFAULT_ROOT_URL,
)
from .env import CONFIG_FILE_ENV, DOTENV_FILE_ENV, ENV_MAP, is_placeholder, read_env


DEFAULTS: Dict[str, Any] = {
    "root_url": DEFAULT_ROOT_URL,
    "default_principal": DEFAULT_PRINCIPAL,
    "plugin_short_name": DEFAULT_PLUGIN_SHORT_NAME,
    "log_level": DEFAULT_LOG_LEVEL,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Existing environment variables win unless their current
    values are placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the external config file.

    Raises:
        ResolverError: ``CONFIG`` when the file exists but is neither a JSON
            nor a YAML mapping.
    """
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ResolverError(
                code=ErrorCode.CONFIG,
                message=f"config file {path} is neither JSON nor YAML",
                raw=exc,
            ) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ResolverError(code=ErrorCode.CONFIG, message=f"config file {path} must contain a mapping")
    _FILE_CACHE = data
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key in ENV_MAP:
        val = read_env(key)
        if val is not None:
            out[key] = val
    return out


def get_resolver_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    Keys with ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (test helper)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = ["DEFAULTS", "get_resolver_config", "reset_config_cache"]
