"""Unit tests for the capability resolver (publishers, wrappers, builders, actions)."""

from __future__ import annotations

import pytest

from artifactory_ci.base.constants import (
    KIND_ARTIFACTORY_DEPLOYER,
    KIND_FLEXIBLE_PUBLISH,
    KIND_GENERIC_DEPLOYER,
    KIND_GRADLE_BUILDER,
    KIND_MAILER,
    KIND_MAVEN_WRAPPER,
    KIND_RELEASE_WRAPPER,
    KIND_SHELL_BUILDER,
    PROJECT_MATRIX_CONFIGURATION,
    PROJECT_MAVEN_MODULE,
)
from artifactory_ci.base.errors import ErrorCode, ResolverError, UnsupportedItemError
from artifactory_ci.base.models import BuildAction, ProjectConfiguration
from artifactory_ci.base.resolution import (
    CapabilityResolver,
    find_builders_of_type,
    find_publisher,
    find_wrapper,
    latest_action_of_type,
)
from artifactory_ci.tests.utils import assert_true, ext


@pytest.fixture()
def resolver() -> CapabilityResolver:
    return CapabilityResolver()


def test_publisher_found_top_level(resolver: CapabilityResolver) -> None:
    """A top-level publisher is returned as the exact configured instance."""
    deployer = ext(KIND_ARTIFACTORY_DEPLOYER)
    project = ProjectConfiguration(publishers=(ext(KIND_MAILER), deployer))
    assert_true(resolver.find_publisher(project, KIND_ARTIFACTORY_DEPLOYER) is deployer, "top-level match")


def test_publisher_unwrapped_from_flexible_container(resolver, flexible_project, deployer) -> None:
    """[Mailer, FlexiblePublish{[Deployer, Mailer]}] resolves to the nested Deployer."""
    found = resolver.find_publisher(flexible_project, KIND_ARTIFACTORY_DEPLOYER)
    assert_true(found is deployer, "nested deployer should be unwrapped")


def test_direct_publisher_precedes_nested(resolver: CapabilityResolver) -> None:
    """[Deployer, FlexiblePublish{[Deployer2]}] resolves to the top-level Deployer."""
    top = ext(KIND_ARTIFACTORY_DEPLOYER, name="top")
    nested = ext(KIND_ARTIFACTORY_DEPLOYER, name="nested")
    project = ProjectConfiguration(publishers=(top, ext(KIND_FLEXIBLE_PUBLISH, nested)))
    assert_true(resolver.find_publisher(project, KIND_ARTIFACTORY_DEPLOYER) is top, "direct match wins")


def test_direct_publisher_declared_after_container_still_wins(resolver: CapabilityResolver) -> None:
    """Direct matches are searched before any container, whatever their position."""
    nested = ext(KIND_ARTIFACTORY_DEPLOYER, name="nested")
    top = ext(KIND_ARTIFACTORY_DEPLOYER, name="top")
    project = ProjectConfiguration(publishers=(ext(KIND_FLEXIBLE_PUBLISH, nested), top))
    assert_true(resolver.find_publisher(project, KIND_ARTIFACTORY_DEPLOYER) is top, "direct match wins")


def test_first_declared_publisher_wins(resolver: CapabilityResolver) -> None:
    first = ext(KIND_ARTIFACTORY_DEPLOYER, name="first")
    second = ext(KIND_ARTIFACTORY_DEPLOYER, name="second")
    project = ProjectConfiguration(publishers=(first, second))
    assert_true(resolver.find_publisher(project, KIND_ARTIFACTORY_DEPLOYER) is first, "first declared wins")


def test_scan_continues_past_container_without_match(resolver: CapabilityResolver) -> None:
    """An empty-handed container does not stop the search of later containers."""
    wanted = ext(KIND_GENERIC_DEPLOYER)
    project = ProjectConfiguration(
        publishers=(
            ext(KIND_FLEXIBLE_PUBLISH, ext(KIND_MAILER)),
            ext(KIND_MAILER),
            ext(KIND_FLEXIBLE_PUBLISH, ext(KIND_MAILER), wanted),
        )
    )
    assert_true(resolver.find_publisher(project, KIND_GENERIC_DEPLOYER) is wanted, "second container searched")


def test_publisher_absent_returns_none(resolver, flexible_project) -> None:
    assert_true(resolver.find_publisher(flexible_project, KIND_GENERIC_DEPLOYER) is None, "absent is None")
    assert_true(resolver.find_publisher(ProjectConfiguration(), KIND_MAILER) is None, "empty project is None")


def test_container_kind_can_be_requested_directly(resolver, flexible_project) -> None:
    found = resolver.find_publisher(flexible_project, KIND_FLEXIBLE_PUBLISH)
    assert_true(found is flexible_project.publishers[1], "container itself is a publisher")


def test_only_one_level_of_nesting_is_searched(resolver: CapabilityResolver) -> None:
    """Containers nested inside containers are not unwrapped."""
    deep = ext(KIND_ARTIFACTORY_DEPLOYER)
    project = ProjectConfiguration(
        publishers=(ext(KIND_FLEXIBLE_PUBLISH, ext(KIND_FLEXIBLE_PUBLISH, deep)),)
    )
    assert_true(resolver.find_publisher(project, KIND_ARTIFACTORY_DEPLOYER) is None, "depth limited to one")


def test_publisher_lookup_is_stable(resolver, flexible_project) -> None:
    first = resolver.find_publisher(flexible_project, KIND_ARTIFACTORY_DEPLOYER)
    second = resolver.find_publisher(flexible_project, KIND_ARTIFACTORY_DEPLOYER)
    assert_true(first is second, "repeated lookups return the same instance")


def test_wrapper_found_first_match(resolver: CapabilityResolver) -> None:
    release = ext(KIND_RELEASE_WRAPPER, name="first")
    project = ProjectConfiguration(
        wrappers=(ext(KIND_MAVEN_WRAPPER), release, ext(KIND_RELEASE_WRAPPER, name="second"))
    )
    assert_true(resolver.find_wrapper(project, KIND_RELEASE_WRAPPER) is release, "first wrapper wins")


def test_wrapper_absent_returns_none(resolver: CapabilityResolver) -> None:
    project = ProjectConfiguration(wrappers=(ext(KIND_MAVEN_WRAPPER),))
    assert_true(resolver.find_wrapper(project, KIND_RELEASE_WRAPPER) is None, "absent wrapper is None")
    assert_true(resolver.find_wrapper(ProjectConfiguration(), KIND_RELEASE_WRAPPER) is None, "empty list is None")


def test_wrapper_on_unsupported_holder_raises(resolver: CapabilityResolver) -> None:
    project = ProjectConfiguration(name="module", kind=PROJECT_MAVEN_MODULE)
    with pytest.raises(UnsupportedItemError) as info:
        resolver.find_wrapper(project, KIND_RELEASE_WRAPPER)
    err = info.value
    assert isinstance(err, ResolverError)  # nosec B101
    assert err.code is ErrorCode.UNSUPPORTED  # nosec B101
    assert err.holder == "module"  # nosec B101
    assert err.kind == KIND_RELEASE_WRAPPER  # nosec B101


def test_matrix_configuration_supports_wrappers(resolver: CapabilityResolver) -> None:
    release = ext(KIND_RELEASE_WRAPPER)
    project = ProjectConfiguration(name="axis", kind=PROJECT_MATRIX_CONFIGURATION, wrappers=(release,))
    assert_true(resolver.find_wrapper(project, KIND_RELEASE_WRAPPER) is release, "matrix cells own wrappers")


def test_requested_kind_is_stripped(resolver: CapabilityResolver, flexible_project: ProjectConfiguration) -> None:
    mailer = flexible_project.publishers[0]
    assert_true(resolver.find_publisher(flexible_project, " mailer ") is mailer, "padded kind matches")
    project = ProjectConfiguration(builders=(ext(KIND_SHELL_BUILDER),), wrappers=(ext(KIND_MAVEN_WRAPPER),))
    assert_true(len(resolver.find_builders_of_type(project, f"{KIND_SHELL_BUILDER}\n")) == 1, "padded builder kind")
    assert_true(resolver.find_wrapper(project, f" {KIND_MAVEN_WRAPPER}") is not None, "padded wrapper kind")
    actions = [BuildAction(kind="x")]
    assert_true(resolver.latest_action_of_type(actions, "x ") is actions[0], "padded action kind")


def test_wrappers_are_not_unwrapped_from_containers(resolver: CapabilityResolver) -> None:
    """Only publishers are searched inside flexible publish containers."""
    project = ProjectConfiguration(
        publishers=(ext(KIND_FLEXIBLE_PUBLISH, ext(KIND_RELEASE_WRAPPER)),),
        wrappers=(),
    )
    assert_true(resolver.find_wrapper(project, KIND_RELEASE_WRAPPER) is None, "no unwrap for wrappers")


def test_builders_of_type_returns_all_in_order(resolver: CapabilityResolver) -> None:
    g1 = ext(KIND_GRADLE_BUILDER, name="g1")
    g2 = ext(KIND_GRADLE_BUILDER, name="g2")
    project = ProjectConfiguration(builders=(g1, ext(KIND_SHELL_BUILDER), g2))
    builders = resolver.find_builders_of_type(project, KIND_GRADLE_BUILDER)
    assert len(builders) == 2  # nosec B101
    assert builders[0] is g1 and builders[1] is g2  # nosec B101


def test_builders_of_type_keeps_duplicates(resolver: CapabilityResolver) -> None:
    step = ext(KIND_SHELL_BUILDER)
    project = ProjectConfiguration(builders=(step, step))
    assert resolver.find_builders_of_type(project, KIND_SHELL_BUILDER) == [step, step]  # nosec B101


def test_builders_of_type_empty_when_absent(resolver: CapabilityResolver) -> None:
    project = ProjectConfiguration(builders=(ext(KIND_SHELL_BUILDER),))
    assert resolver.find_builders_of_type(project, KIND_GRADLE_BUILDER) == []  # nosec B101


def test_latest_action_returns_last_of_kind(resolver: CapabilityResolver) -> None:
    """[A(X), B(Y), C(X)] resolves to C for kind X."""
    a = BuildAction(kind="x", data={"id": "a"})
    b = BuildAction(kind="y", data={"id": "b"})
    c = BuildAction(kind="x", data={"id": "c"})
    assert_true(resolver.latest_action_of_type([a, b, c], "x") is c, "latest action wins")
    assert_true(resolver.latest_action_of_type([a, b, c], "y") is b, "single match")
    assert_true(resolver.latest_action_of_type([a, b, c], "z") is None, "absent is None")
    assert_true(resolver.latest_action_of_type([], "x") is None, "empty is None")


def test_module_level_functions_delegate(flexible_project, deployer) -> None:
    assert_true(find_publisher(flexible_project, KIND_ARTIFACTORY_DEPLOYER) is deployer, "find_publisher")
    assert_true(find_wrapper(flexible_project, KIND_RELEASE_WRAPPER) is None, "find_wrapper")
    assert_true(find_builders_of_type(flexible_project, KIND_SHELL_BUILDER) == [], "find_builders_of_type")
    action = BuildAction(kind="x")
    assert_true(latest_action_of_type((action,), "x") is action, "latest_action_of_type")


def test_resolver_logs_lookup_at_debug(caplog, flexible_project) -> None:
    import logging

    resolver = CapabilityResolver(logger=logging.getLogger("test.resolver"))
    with caplog.at_level(logging.DEBUG, logger="test.resolver"):
        resolver.find_publisher(flexible_project, KIND_ARTIFACTORY_DEPLOYER)
    messages = [r.getMessage() for r in caplog.records if r.name == "test.resolver"]
    assert any('"resolver.publisher"' in m and '"source": "flexible"' in m for m in messages)  # nosec B101
