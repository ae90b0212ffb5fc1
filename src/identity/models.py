"""Data models for provider references and per-ecosystem package identities."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

# Short names that collide with reserved identifiers in a target language.
# Extend this table when a new provider name turns out to be a keyword.
RESERVED_WORD_SUFFIXES: Mapping[str, str] = MappingProxyType({
    "null": "_provider",
    "random": "_provider",
})


@dataclass(frozen=True)
class GitIdentity:
    """Author attribution for generated commits."""
    name: str
    email: str


@dataclass(frozen=True)
class NamingConfig:
    """Organization-wide naming tokens injected into the normalizer and resolver."""
    organization: str = "HashiCorp"
    namespace: str = "cdktf"
    github_namespace: str = "hashicorp"
    product_family: str = "cdktf-provider"
    maven_group_domain: str = "com"
    maven_endpoint: str = "https://hashicorp.oss.sonatype.org"
    author_name: str = "HashiCorp"
    author_address: str = "https://hashicorp.com"
    reserved_go_suffix: str = "-go"
    go_identity: GitIdentity = GitIdentity(
        name="CDK for Terraform Team",
        email="github-team-tf-cdk@hashicorp.com",
    )
    workflow_identity: GitIdentity = GitIdentity(
        name="team-tf-cdk",
        email="github-team-tf-cdk@hashicorp.com",
    )
    reserved_word_suffixes: Mapping[str, str] = field(
        default_factory=lambda: RESERVED_WORD_SUFFIXES
    )


@dataclass(frozen=True)
class ComponentReference:
    """A parsed ``namespace/name@version`` provider reference."""
    raw: str
    name: str  # fully qualified name, namespace prefix included
    short_name: str
    version: Optional[str]


@dataclass(frozen=True)
class NpmIdentity:
    name: str


@dataclass(frozen=True)
class PythonIdentity:
    dist_name: str
    module: str


@dataclass(frozen=True)
class NuGetIdentity:
    dotnet_namespace: str
    package_id: str


@dataclass(frozen=True)
class MavenIdentity:
    java_package: str
    group_id: str
    artifact_id: str
    endpoint: str


@dataclass(frozen=True)
class GoIdentity:
    module_name: str
    package_name: str
    git_user_name: str
    git_user_email: str


@dataclass(frozen=True)
class RepositorySlug:
    """``organization/repo-name`` of the generated provider repository."""
    organization: str
    name: str

    def __str__(self) -> str:
        return f"{self.organization}/{self.name}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self}.git"


@dataclass(frozen=True)
class PackageIdentity:
    """Every ecosystem identifier derived from one provider reference."""
    reference: ComponentReference
    npm: NpmIdentity
    python: PythonIdentity
    nuget: NuGetIdentity
    maven: MavenIdentity
    go: GoIdentity
    repository: RepositorySlug

    @property
    def short_name(self) -> str:
        return self.reference.short_name
