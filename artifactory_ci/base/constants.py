"""Base shared constants for extension and action lookup.

Central location for the capability kinds known to this plugin so that call
sites compare tags by value instead of scattering magic strings.

Kinds are plain strings (no Enum) because the host defines many extension
kinds that this package never enumerates; any non-empty string is a valid
kind and unknown kinds simply never match.
"""
from __future__ import annotations

# ---- Publisher kinds ----
KIND_ARTIFACTORY_DEPLOYER = "artifactory_redeploy_publisher"
KIND_GENERIC_DEPLOYER = "artifactory_generic_publisher"
KIND_MAILER = "mailer"

# Conditional container publisher holding a nested list of sub-publishers.
KIND_FLEXIBLE_PUBLISH = "flexible_publish"

# Only this container kind is unwrapped, and only one level deep.
CONTAINER_KINDS = frozenset({KIND_FLEXIBLE_PUBLISH})

# ---- Build wrapper kinds ----
KIND_RELEASE_WRAPPER = "artifactory_release_wrapper"
KIND_MAVEN_WRAPPER = "artifactory_maven_wrapper"
KIND_GENERIC_WRAPPER = "artifactory_generic_wrapper"

# ---- Builder kinds ----
KIND_GRADLE_BUILDER = "gradle"
KIND_MAVEN_BUILDER = "maven"
KIND_SHELL_BUILDER = "shell"

# ---- Action kinds ----
ACTION_MAVEN_ARTIFACT_RECORD = "maven_artifact_record"
ACTION_CAUSE = "cause"
ACTION_ARTIFACTORY_PROJECT = "artifactory_project"

# ---- Cause kinds ----
CAUSE_UPSTREAM = "upstream"
CAUSE_USER_ID = "user_id"

# ---- Project kinds ----
PROJECT_FREESTYLE = "freestyle"
PROJECT_MAVEN_MODULE = "maven_module"
PROJECT_MATRIX_CONFIGURATION = "matrix_configuration"

# Holder kinds that cannot own build wrappers
WRAPPERLESS_PROJECT_KINDS = frozenset({PROJECT_MAVEN_MODULE})

# Principal reported when a build was not started by a user
DEFAULT_PRINCIPAL = "anonymous"

# Short name under which this plugin is registered in the host
PLUGIN_SHORT_NAME = "artifactory"

__all__ = [
    "KIND_ARTIFACTORY_DEPLOYER",
    "KIND_GENERIC_DEPLOYER",
    "KIND_MAILER",
    "KIND_FLEXIBLE_PUBLISH",
    "CONTAINER_KINDS",
    "KIND_RELEASE_WRAPPER",
    "KIND_MAVEN_WRAPPER",
    "KIND_GENERIC_WRAPPER",
    "KIND_GRADLE_BUILDER",
    "KIND_MAVEN_BUILDER",
    "KIND_SHELL_BUILDER",
    "ACTION_MAVEN_ARTIFACT_RECORD",
    "ACTION_CAUSE",
    "ACTION_ARTIFACTORY_PROJECT",
    "CAUSE_UPSTREAM",
    "CAUSE_USER_ID",
    "PROJECT_FREESTYLE",
    "PROJECT_MAVEN_MODULE",
    "PROJECT_MATRIX_CONFIGURATION",
    "WRAPPERLESS_PROJECT_KINDS",
    "DEFAULT_PRINCIPAL",
    "PLUGIN_SHORT_NAME",
]
