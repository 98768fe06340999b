"""Pytest configuration for the artifactory_ci test suite.

Resets cached configuration between tests and closes the shared log handler
at the end of the session to avoid ResourceWarnings.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from artifactory_ci.base.constants import (
    KIND_ARTIFACTORY_DEPLOYER,
    KIND_FLEXIBLE_PUBLISH,
    KIND_MAILER,
)
from artifactory_ci.base.models import ConfiguredExtension, ProjectConfiguration
from artifactory_ci.tests.utils import ext


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep each test independent of the developer's environment and .env file."""

    from artifactory_ci.base.logging import configure_logger
    from artifactory_ci.config import reset_config_cache

    for name in (
        "ARTIFACTORY_CI_ROOT_URL",
        "ARTIFACTORY_CI_DEFAULT_PRINCIPAL",
        "ARTIFACTORY_CI_PLUGIN_NAME",
        "ARTIFACTORY_CI_LOG_LEVEL",
        "ARTIFACTORY_CI_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    configure_logger(level="INFO", file_path=None, json_mode=True)


@pytest.fixture()
def deployer() -> ConfiguredExtension:
    return ext(KIND_ARTIFACTORY_DEPLOYER, name="deployer")


@pytest.fixture()
def flexible_project(deployer: ConfiguredExtension) -> ProjectConfiguration:
    """Publishers ``[Mailer, FlexiblePublish{[Deployer, Mailer]}]``."""
    return ProjectConfiguration(
        name="app",
        publishers=(
            ext(KIND_MAILER),
            ext(KIND_FLEXIBLE_PUBLISH, deployer, ext(KIND_MAILER)),
        ),
    )


@pytest.fixture(scope="session", autouse=True)
def close_log_handlers_after_session() -> Iterator[None]:
    yield
    from artifactory_ci.base.logging import close_handlers

    close_handlers()
