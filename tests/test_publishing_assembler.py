"""Tests for PublishingConfigAssembler and ProjectSettings."""

import dataclasses

import pytest

from errors import MissingConfiguration
from identity.models import NamingConfig
from identity.resolver import PackageIdentityResolver
from publishing.assembler import REQUIRED_SETTINGS, PublishingConfigAssembler, check_required
from publishing.models import ProjectSettings


def _settings(**overrides):
    values = {
        "terraform_provider": "hashicorp/aws@5.42.0",
        "cdktf_version": "^0.20.0",
        "constructs_version": "^10.3.0",
    }
    values.update(overrides)
    return ProjectSettings(**values)


@pytest.fixture
def identity():
    return PackageIdentityResolver().resolve("hashicorp/aws@5.42.0")


@pytest.fixture
def assembler():
    return PublishingConfigAssembler(tool_version="0.6.0")


class TestAssemble:
    """Tests for assemble()."""

    def test_ecosystem_sections(self, assembler, identity):
        config = assembler.assemble(identity, None, _settings())
        assert config.npm.name == "@cdktf/provider-aws"
        assert config.npm.release_to_npm is True
        assert config.python.module == "cdktf_cdktf_provider_aws"
        assert config.python.dist_name == "cdktf-cdktf-provider-aws"
        assert config.nuget.package_id == "HashiCorp.Cdktf.Providers.Aws"
        assert config.maven.java_package == "com.hashicorp.cdktf.providers.aws"
        assert config.maven.maven_group_id == "com.hashicorp"
        assert config.maven.maven_artifact_id == "cdktf-provider-aws"
        assert config.go.module_name == "github.com/hashicorp/cdktf-provider-aws-go"
        assert config.go.package_name == "aws"

    def test_major_version_field(self, assembler, identity):
        assert assembler.assemble(identity, None, _settings()).major_version is None
        assert assembler.assemble(identity, 1, _settings()).major_version == 1

    def test_project_metadata(self, assembler, identity):
        config = assembler.assemble(identity, None, _settings(min_node_version="18.12.0"))
        project = config.project
        assert project.name == "@cdktf/provider-aws"
        assert project.description == "Prebuilt aws Provider for Terraform CDK (cdktf)"
        assert project.keywords == ("cdktf", "terraform", "cdk", "provider", "aws")
        assert project.license == "MPL-2.0"
        assert project.author_name == "HashiCorp"
        assert project.author_address == "https://hashicorp.com"
        assert project.author_organization is True
        assert project.repository_url == "https://github.com/hashicorp/cdktf-provider-aws.git"
        assert project.default_release_branch == "main"
        assert project.min_node_version == "18.12.0"
        assert config.repository == "hashicorp/cdktf-provider-aws"

    def test_cdktf_section(self, assembler, identity):
        config = assembler.assemble(identity, None, _settings(jsii_version="~5.2.0"))
        assert config.cdktf.terraform_provider == "hashicorp/aws@5.42.0"
        assert config.cdktf.provider_name == "aws"
        assert config.cdktf.provider_version == "5.42.0"
        assert config.cdktf.cdktf_version == "^0.20.0"
        assert config.cdktf.constructs_version == "^10.3.0"
        assert config.cdktf.jsii_version == "~5.2.0"

    def test_provider_version_optional(self, assembler):
        identity = PackageIdentityResolver().resolve("hashicorp/google")
        config = assembler.assemble(identity, None, _settings(terraform_provider="hashicorp/google"))
        assert config.cdktf.provider_version is None
        assert config.cdktf.jsii_version is None

    def test_workflow_section(self, assembler, identity):
        workflow = assembler.assemble(identity, None, _settings()).workflow
        assert workflow.container_image == "hashicorp/jsii-terraform"
        assert workflow.git_identity.name == "team-tf-cdk"
        assert workflow.git_identity.email == "github-team-tf-cdk@hashicorp.com"
        assert workflow.environment["NODE_OPTIONS"] == "--max-old-space-size=7168"
        assert workflow.environment["CHECKPOINT_DISABLE"] == "1"
        assert workflow.build_environment["GH_TOKEN"] == "${{ secrets.GITHUB_TOKEN }}"
        assert workflow.dev_dependencies == ("@cdktf/provider-project@^0.6.0", "dot-prop@^5.2.0")
        assert workflow.pinned_dev_dependency is False

    def test_custom_container_image(self, assembler, identity):
        config = assembler.assemble(identity, None, _settings(workflow_container_image="img:1"))
        assert config.workflow.container_image == "img:1"

    def test_automation_section(self, assembler, identity):
        automation = assembler.assemble(identity, None, _settings()).automation
        assert automation.upgrade_labels == ("automerge",)
        assert automation.auto_merge_label == "automerge"
        assert automation.auto_merge is True
        assert not (automation.mergify or automation.eslint or automation.jest or automation.sample_code)

    def test_config_is_immutable(self, assembler, identity):
        config = assembler.assemble(identity, None, _settings())
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.major_version = 3
        with pytest.raises(TypeError):
            config.workflow.environment["NODE_OPTIONS"] = "x"

    def test_alternate_naming(self):
        naming = NamingConfig(author_name="Acme", author_address="https://acme.test")
        identity = PackageIdentityResolver(naming).resolve("aws")
        config = PublishingConfigAssembler(naming).assemble(identity, None, _settings())
        assert config.project.author_name == "Acme"
        assert config.project.author_address == "https://acme.test"


class TestMissingConfiguration:
    """Required scalar settings."""

    @pytest.mark.parametrize("name", REQUIRED_SETTINGS)
    def test_missing_required(self, assembler, identity, name):
        with pytest.raises(MissingConfiguration) as excinfo:
            assembler.assemble(identity, None, _settings(**{name: None}))
        assert excinfo.value.setting == name
        assert name in str(excinfo.value)

    def test_blank_counts_as_missing(self, identity, assembler):
        with pytest.raises(MissingConfiguration, match="cdktf_version"):
            assembler.assemble(identity, None, _settings(cdktf_version="  "))

    def test_first_missing_wins(self):
        with pytest.raises(MissingConfiguration) as excinfo:
            check_required(ProjectSettings())
        assert excinfo.value.setting == "terraform_provider"

    def test_optional_settings_not_required(self):
        check_required(_settings())


class TestProjectSettingsFromMapping:
    """Tests for ProjectSettings.from_mapping()."""

    def test_camel_case_aliases(self):
        settings = ProjectSettings.from_mapping({
            "terraformProvider": "hashicorp/aws@5.42.0",
            "cdktfVersion": "^0.20.0",
            "constructsVersion": "^10.3.0",
            "forceMajorVersion": "2",
            "minNodeVersion": 18,
        })
        assert settings.terraform_provider == "hashicorp/aws@5.42.0"
        assert settings.force_major_version == 2
        assert settings.min_node_version == "18"

    def test_unknown_and_none_values_ignored(self):
        settings = ProjectSettings.from_mapping({"unknown": 1, "jsii_version": None})
        assert settings.jsii_version is None
        assert settings.workflow_container_image == "hashicorp/jsii-terraform"

    def test_non_string_provider_coerced(self):
        settings = ProjectSettings.from_mapping({"terraformProvider": 123})
        assert settings.terraform_provider == "123"

    def test_invalid_major_version(self):
        with pytest.raises(ValueError):
            ProjectSettings.from_mapping({"force_major_version": "one"})
