"""Resolve a provider reference into its complete cross-ecosystem identity."""

from __future__ import annotations

import logging
from typing import Optional, Union

from common.logging_utils import extra_context, is_debug_enabled
from errors import InvalidReference, ReservedSuffixConflict

from .models import (
    ComponentReference,
    GoIdentity,
    MavenIdentity,
    NamingConfig,
    NpmIdentity,
    NuGetIdentity,
    PackageIdentity,
    PythonIdentity,
    RepositorySlug,
)
from .normalizer import IdentifierNormalizer
from .parser import parse_component_reference

logger = logging.getLogger(__name__)

ReferenceInput = Union[str, ComponentReference]


class PackageIdentityResolver:
    """Builds ``PackageIdentity`` records; construction is all-or-nothing.

    Preconditions are checked in order and the first failure wins:

    1. a short name can be extracted (``InvalidReference``);
    2. the short name does not end with the Go suffix (``ReservedSuffixConflict``).
    """

    def __init__(self, naming: Optional[NamingConfig] = None):
        self.naming = naming or NamingConfig()
        self.normalizer = IdentifierNormalizer(self.naming)

    def _checked_reference(self, reference: ReferenceInput) -> ComponentReference:
        if not isinstance(reference, ComponentReference):
            reference = parse_component_reference(reference)
        if not reference.short_name.strip():
            raise InvalidReference(reference.raw)
        if reference.short_name.endswith(self.naming.reserved_go_suffix):
            raise ReservedSuffixConflict(
                reference.raw, reference.short_name, self.naming.reserved_go_suffix
            )
        return reference

    def _slug(self, short_name: str) -> RepositorySlug:
        return RepositorySlug(
            organization=self.naming.github_namespace,
            name=self.normalizer.repository_name(short_name),
        )

    def repository_slug(self, reference: ReferenceInput) -> RepositorySlug:
        """Repository holding the generated provider package."""
        return self._slug(self._checked_reference(reference).short_name)

    def resolve(self, reference: ReferenceInput) -> PackageIdentity:
        """Derive every ecosystem identifier for ``reference``.

        Args:
            reference: Raw ``namespace/name@version`` string or a parsed reference.

        Returns:
            PackageIdentity: The immutable identity record.

        Raises:
            InvalidReference: If no short name can be extracted.
            ReservedSuffixConflict: If the short name ends with ``-go``.
        """
        ref = self._checked_reference(reference)
        name = ref.short_name
        norm = self.normalizer
        nuget_name = norm.nuget_name(name)

        identity = PackageIdentity(
            reference=ref,
            npm=NpmIdentity(name=norm.npm_name(name)),
            python=PythonIdentity(
                dist_name=norm.python_dist_name(name),
                module=norm.python_module(name),
            ),
            nuget=NuGetIdentity(dotnet_namespace=nuget_name, package_id=nuget_name),
            maven=MavenIdentity(
                java_package=norm.maven_java_package(name),
                group_id=norm.maven_group_id(),
                artifact_id=norm.maven_artifact_id(name),
                endpoint=self.naming.maven_endpoint,
            ),
            go=GoIdentity(
                module_name=norm.go_module_name(name),
                # jsii go target expects the provider name as package name
                package_name=name,
                git_user_name=self.naming.go_identity.name,
                git_user_email=self.naming.go_identity.email,
            ),
            repository=self._slug(name),
        )

        if is_debug_enabled(logger):
            logger.debug(
                "Resolved package identity",
                extra=extra_context(
                    event="decision",
                    component="identity",
                    action="resolve",
                    reference=ref.raw,
                    npm=identity.npm.name,
                    repository=str(identity.repository),
                ),
            )
        return identity
