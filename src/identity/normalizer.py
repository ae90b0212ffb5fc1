"""Ecosystem-specific identifier transforms.

Each target ecosystem has its own naming grammar, so every transform starts
from the canonical short name. None of them consumes another's output: the
Python module, the Maven package segment and the Go module path each apply
their own rule to the canonical name.
"""

import re
from typing import List

from .models import NamingConfig

_WORD_SPLIT = re.compile(r'[^A-Za-z0-9]+')
# lower->Upper ("azureAd") and UPPER->Upper+lower ("AWSConfig")
_CASE_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def split_words(value: str) -> List[str]:
    """Split ``value`` on separators and case boundaries."""
    words: List[str] = []
    for chunk in _WORD_SPLIT.split(value):
        if chunk:
            words.extend(part for part in _CASE_BOUNDARY.split(chunk) if part)
    return words


def pascal_case(value: str) -> str:
    """Return ``value`` as a single PascalCase token.

    >>> pascal_case("google-beta")
    'GoogleBeta'
    >>> pascal_case("azureAD")
    'AzureAd'
    """
    return ''.join(word[:1].upper() + word[1:].lower() for word in split_words(value))


def underscore_dashes(value: str) -> str:
    return value.replace('-', '_')


def strip_dashes(value: str) -> str:
    return value.replace('-', '')


class IdentifierNormalizer:
    """Produces per-ecosystem tokens for a canonical provider short name.

    The short name is expected to be validated already; nothing here fails.
    """

    def __init__(self, naming: NamingConfig):
        self.naming = naming

    def npm_name(self, short_name: str) -> str:
        return f"@{self.naming.namespace}/provider-{short_name}"

    def python_dist_name(self, short_name: str) -> str:
        return f"{self.naming.namespace}-cdktf-provider-{underscore_dashes(short_name)}"

    def python_module(self, short_name: str) -> str:
        return f"{self.naming.namespace}_cdktf_provider_{underscore_dashes(short_name)}".lower()

    def nuget_name(self, short_name: str) -> str:
        """Combined .NET namespace and package id, e.g. ``HashiCorp.Cdktf.Providers.Aws``."""
        return ".".join([
            self.naming.organization,
            pascal_case(self.naming.namespace),
            "Providers",
            pascal_case(short_name),
        ])

    def maven_segment(self, short_name: str) -> str:
        """Java package segment, suffixed when the name is a reserved word."""
        suffix = self.naming.reserved_word_suffixes.get(short_name)
        if suffix is not None:
            return f"{short_name}{suffix}"
        return underscore_dashes(short_name)

    def maven_group_id(self) -> str:
        return f"{self.naming.maven_group_domain}.{self.naming.github_namespace}"

    def maven_java_package(self, short_name: str) -> str:
        return f"{self.maven_group_id()}.cdktf.providers.{self.maven_segment(short_name)}"

    def maven_artifact_id(self, short_name: str) -> str:
        return f"{self.naming.product_family}-{short_name}"

    def go_module_name(self, short_name: str) -> str:
        return (
            f"github.com/{self.naming.github_namespace}/"
            f"{self.naming.product_family}-{short_name}{self.naming.reserved_go_suffix}"
        )

    def repository_name(self, short_name: str) -> str:
        """Repository name: dashes are removed from the short name, not replaced."""
        return f"{self.naming.product_family}-{strip_dashes(short_name)}"
