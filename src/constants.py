"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONFIG_ERROR = 2


class RegistryBackends(Enum):
    """Release registry backends supported by the program.

    Args:
        Enum (string): Release registry backends supported by the program.
    """

    GH_CLI = "gh"
    GITHUB_API = "github-api"


class OutputFormats(Enum):
    """Serialization formats for the assembled configuration."""

    JSON = "json"
    YAML = "yaml"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    TOOL_VERSION = "0.6.0"
    SUPPORTED_REGISTRIES = [
        RegistryBackends.GH_CLI.value,
        RegistryBackends.GITHUB_API.value,
    ]
    SUPPORTED_FORMATS = [
        OutputFormats.JSON.value,
        OutputFormats.YAML.value,
    ]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "PROVIDER_PROJECT_LOG_LEVEL"

    # Release registry query
    REGISTRY_QUERY_TIMEOUT = 5  # seconds; a timeout degrades to "no constraint"
    RELEASE_LIST_LIMIT = 10000000
    MAJOR_V1_TAG_PATTERN = "v1."
    GH_BINARY = "gh"
    GITHUB_API_BASE = "https://api.github.com"
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
    ENV_GH_TOKEN = "GH_TOKEN"
    REPO_API_PER_PAGE = 100
    HTTP_RETRY_MAX = 3

    # Generated project defaults
    LICENSE = "MPL-2.0"
    DEFAULT_RELEASE_BRANCH = "main"
    WORKFLOW_CONTAINER_IMAGE = "hashicorp/jsii-terraform"
    AUTOMERGE_LABEL = "automerge"
    BUILD_ENVIRONMENT = {
        "NODE_OPTIONS": "--max-old-space-size=7168",  # go bindings need the extra heap
        "CHECKPOINT_DISABLE": "1",
    }
    BUILD_TASK_ENVIRONMENT = {
        "GH_TOKEN": "${{ secrets.GITHUB_TOKEN }}",
    }
    EXTRA_DEV_DEPENDENCIES = ["dot-prop@^5.2.0"]
    SELF_NPM_PACKAGE = "@cdktf/provider-project"
