"""Assemble the publishing configuration handed to the scaffolding engine."""

from __future__ import annotations

import logging
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from identity.models import NamingConfig, PackageIdentity
from versioning.models import MajorVersionDecision

from .models import (
    AutomationSection,
    CdktfSection,
    GoSection,
    MavenSection,
    NpmSection,
    NuGetSection,
    ProjectMetadata,
    ProjectSettings,
    PublishingConfig,
    PythonSection,
    WorkflowSection,
    frozen_mapping,
)

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ("terraform_provider", "cdktf_version", "constructs_version")


def check_required(settings: ProjectSettings) -> None:
    """Raise MissingConfiguration for the first required setting that is absent."""
    for name in REQUIRED_SETTINGS:
        settings.require(name)


class PublishingConfigAssembler:
    """Pure composition of identity, major version decision and settings."""

    def __init__(
        self,
        naming: Optional[NamingConfig] = None,
        tool_version: str = Constants.TOOL_VERSION,
    ):
        self.naming = naming or NamingConfig()
        self.tool_version = tool_version

    def assemble(
        self,
        identity: PackageIdentity,
        major_version: MajorVersionDecision,
        settings: ProjectSettings,
    ) -> PublishingConfig:
        """Build the immutable configuration.

        Raises:
            MissingConfiguration: If a required setting is absent or blank.
        """
        check_required(settings)
        name = identity.short_name
        naming = self.naming

        config = PublishingConfig(
            project=ProjectMetadata(
                name=identity.npm.name,
                description=f"Prebuilt {name} Provider for Terraform CDK (cdktf)",
                keywords=("cdktf", "terraform", "cdk", "provider", name),
                license=Constants.LICENSE,
                author_name=naming.author_name,
                author_address=naming.author_address,
                author_organization=True,
                repository_url=identity.repository.url,
                default_release_branch=Constants.DEFAULT_RELEASE_BRANCH,
                min_node_version=settings.min_node_version,
            ),
            npm=NpmSection(name=identity.npm.name),
            python=PythonSection(
                dist_name=identity.python.dist_name,
                module=identity.python.module,
            ),
            nuget=NuGetSection(
                dotnet_namespace=identity.nuget.dotnet_namespace,
                package_id=identity.nuget.package_id,
            ),
            maven=MavenSection(
                java_package=identity.maven.java_package,
                maven_group_id=identity.maven.group_id,
                maven_artifact_id=identity.maven.artifact_id,
                maven_endpoint=identity.maven.endpoint,
            ),
            go=GoSection(
                module_name=identity.go.module_name,
                package_name=identity.go.package_name,
                git_user_name=identity.go.git_user_name,
                git_user_email=identity.go.git_user_email,
            ),
            cdktf=CdktfSection(
                terraform_provider=settings.terraform_provider,
                provider_name=name,
                provider_version=identity.reference.version,
                cdktf_version=settings.cdktf_version,
                constructs_version=settings.constructs_version,
                jsii_version=settings.jsii_version,
            ),
            workflow=WorkflowSection(
                container_image=settings.workflow_container_image,
                git_identity=naming.workflow_identity,
                environment=frozen_mapping(Constants.BUILD_ENVIRONMENT),
                build_environment=frozen_mapping(Constants.BUILD_TASK_ENVIRONMENT),
                dev_dependencies=(
                    f"{Constants.SELF_NPM_PACKAGE}@^{self.tool_version}",
                    *Constants.EXTRA_DEV_DEPENDENCIES,
                ),
            ),
            automation=AutomationSection(
                upgrade_labels=(Constants.AUTOMERGE_LABEL,),
                auto_merge_label=Constants.AUTOMERGE_LABEL,
            ),
            repository=str(identity.repository),
            major_version=major_version,
        )

        if is_debug_enabled(logger):
            logger.debug(
                "Assembled publishing config",
                extra=extra_context(
                    event="function_exit",
                    component="assembler",
                    action="assemble",
                    target=config.repository,
                    major_version=major_version,
                ),
            )
        return config
