"""Data models for caller settings and the assembled publishing configuration."""

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from constants import Constants
from errors import MissingConfiguration
from identity.models import GitIdentity

# camelCase spellings accepted in settings files, as used by projen options
_SETTING_ALIASES = {
    "terraformProvider": "terraform_provider",
    "cdktfVersion": "cdktf_version",
    "constructsVersion": "constructs_version",
    "jsiiVersion": "jsii_version",
    "forceMajorVersion": "force_major_version",
    "minNodeVersion": "min_node_version",
    "workflowContainerImage": "workflow_container_image",
}


@dataclass(frozen=True)
class ProjectSettings:
    """Caller-supplied scalar settings for one provider project."""
    terraform_provider: Optional[str] = None
    cdktf_version: Optional[str] = None
    constructs_version: Optional[str] = None
    jsii_version: Optional[str] = None
    force_major_version: Optional[int] = None
    min_node_version: Optional[str] = None
    workflow_container_image: str = Constants.WORKFLOW_CONTAINER_IMAGE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProjectSettings":
        """Build settings from a mapping, ignoring unknown keys and None values."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            key = _SETTING_ALIASES.get(key, key)
            if key in known and value is not None:
                values[key] = value
        if "force_major_version" in values:
            values["force_major_version"] = int(values["force_major_version"])
        for key in (
            "terraform_provider",
            "cdktf_version",
            "constructs_version",
            "jsii_version",
            "min_node_version",
        ):
            if key in values:
                values[key] = str(values[key])
        return cls(**values)

    def require(self, name: str) -> str:
        """Return setting ``name`` or raise MissingConfiguration if absent or blank."""
        value = getattr(self, name, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingConfiguration(name)
        return value


@dataclass(frozen=True)
class ProjectMetadata:
    name: str
    description: str
    keywords: Tuple[str, ...]
    license: str
    author_name: str
    author_address: str
    author_organization: bool
    repository_url: str
    default_release_branch: str
    min_node_version: Optional[str] = None


@dataclass(frozen=True)
class NpmSection:
    name: str
    release_to_npm: bool = True


@dataclass(frozen=True)
class PythonSection:
    dist_name: str
    module: str


@dataclass(frozen=True)
class NuGetSection:
    dotnet_namespace: str
    package_id: str


@dataclass(frozen=True)
class MavenSection:
    java_package: str
    maven_group_id: str
    maven_artifact_id: str
    maven_endpoint: str


@dataclass(frozen=True)
class GoSection:
    module_name: str
    package_name: str
    git_user_name: str
    git_user_email: str


@dataclass(frozen=True)
class CdktfSection:
    """Provider and library versions the generated bindings are built against."""
    terraform_provider: str
    provider_name: str
    provider_version: Optional[str]
    cdktf_version: str
    constructs_version: str
    jsii_version: Optional[str] = None


@dataclass(frozen=True)
class WorkflowSection:
    container_image: str
    git_identity: GitIdentity
    environment: Mapping[str, str]
    build_environment: Mapping[str, str]
    dev_dependencies: Tuple[str, ...]
    pinned_dev_dependency: bool = False


@dataclass(frozen=True)
class AutomationSection:
    """Declarative toggles for dependency upgrades and auto-merge."""
    upgrade_labels: Tuple[str, ...]
    auto_merge_label: str
    auto_merge: bool = True
    mergify: bool = False
    eslint: bool = False
    jest: bool = False
    sample_code: bool = False


@dataclass(frozen=True)
class PublishingConfig:
    """Everything the scaffolding engine needs to generate a provider project."""
    project: ProjectMetadata
    npm: NpmSection
    python: PythonSection
    nuget: NuGetSection
    maven: MavenSection
    go: GoSection
    cdktf: CdktfSection
    workflow: WorkflowSection
    automation: AutomationSection
    repository: str
    major_version: Optional[int] = None


def frozen_mapping(values: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(values))

