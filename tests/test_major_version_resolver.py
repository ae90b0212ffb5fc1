"""Tests for MajorVersionResolver."""

import logging
from typing import List

import pytest

from errors import RegistryQueryFailed
from identity.models import RepositorySlug
from versioning.major import MajorVersionResolver
from versioning.models import ReleaseQueryOutcome
from versioning.registries import GhCliReleaseRegistry, ReleaseRegistry

SLUG = RepositorySlug("hashicorp", "cdktf-provider-aws")


class StubRegistry(ReleaseRegistry):
    """Registry returning canned tags, or raising when ``error`` is set."""

    name = "stub"

    def __init__(self, tags=None, error=None):
        self.tags = tags or []
        self.error = error
        self.queried: List[RepositorySlug] = []

    def list_release_tags(self, repository):
        self.queried.append(repository)
        if self.error is not None:
            raise self.error
        return self.tags


class RaisingRegistry(ReleaseRegistry):
    """Registry whose tri-state query itself raises."""

    def list_release_tags(self, repository):
        return []

    def query_major_v1_release(self, repository):
        raise RegistryQueryFailed(str(repository), "registry unreachable")


class TestOverride:
    """A caller override always wins."""

    @pytest.mark.parametrize("override", [0, 1, 3, 42])
    def test_override_used_verbatim(self, override):
        registry = StubRegistry(tags=["v1.0.0"])
        assert MajorVersionResolver(registry).resolve(SLUG, override=override) == override
        assert registry.queried == []

    def test_override_wins_over_failing_registry(self):
        registry = StubRegistry(error=RegistryQueryFailed(str(SLUG), "boom"))
        assert MajorVersionResolver(registry).resolve(SLUG, override=2) == 2
        assert MajorVersionResolver(RaisingRegistry()).resolve(SLUG, override=5) == 5


class TestRegistryOutcomes:
    """Every registry outcome currently leaves the major version unconstrained."""

    def test_found(self):
        registry = StubRegistry(tags=["v2.0.0", "v1.4.0"])
        assert registry.query_major_v1_release(SLUG) is ReleaseQueryOutcome.FOUND
        assert MajorVersionResolver(registry).resolve(SLUG) is None

    def test_not_found(self):
        registry = StubRegistry(tags=["v2.0.0"])
        assert registry.query_major_v1_release(SLUG) is ReleaseQueryOutcome.NOT_FOUND
        assert MajorVersionResolver(registry).resolve(SLUG) is None

    def test_no_history(self):
        assert MajorVersionResolver(StubRegistry()).resolve(SLUG) is None

    def test_failed_query_degrades_with_warning(self, caplog):
        registry = StubRegistry(error=RegistryQueryFailed(str(SLUG), "gh exited with status 4"))
        with caplog.at_level(logging.WARNING):
            assert MajorVersionResolver(registry).resolve(SLUG) is None
        assert "unconstrained" in caplog.text
        assert "gh exited with status 4" in caplog.text

    def test_raising_registry_is_absorbed(self, caplog):
        with caplog.at_level(logging.WARNING, logger="versioning.major"):
            assert MajorVersionResolver(RaisingRegistry()).resolve(SLUG) is None
        assert "registry unreachable" in caplog.text

    def test_unexpected_registry_error_is_absorbed(self, caplog):
        registry = StubRegistry(error=ConnectionError("registry unreachable"))
        with caplog.at_level(logging.WARNING, logger="versioning.major"):
            assert MajorVersionResolver(registry).resolve(SLUG) is None
        assert "registry unreachable" in caplog.text
        assert "unconstrained" in caplog.text

    def test_queries_the_given_repository(self):
        registry = StubRegistry()
        MajorVersionResolver(registry).resolve(SLUG)
        assert registry.queried == [SLUG]


class TestDefaults:
    """Resolver defaults."""

    def test_defaults_to_gh_cli(self):
        assert isinstance(MajorVersionResolver().registry, GhCliReleaseRegistry)
