"""Provider reference parsing and cross-ecosystem package identity derivation."""

from .models import (
    RESERVED_WORD_SUFFIXES,
    ComponentReference,
    GitIdentity,
    NamingConfig,
    PackageIdentity,
    RepositorySlug,
)
from .normalizer import IdentifierNormalizer, pascal_case
from .parser import parse_component_reference
from .resolver import PackageIdentityResolver

__all__ = [
    "RESERVED_WORD_SUFFIXES",
    "ComponentReference",
    "GitIdentity",
    "NamingConfig",
    "PackageIdentity",
    "RepositorySlug",
    "IdentifierNormalizer",
    "pascal_case",
    "parse_component_reference",
    "PackageIdentityResolver",
]
