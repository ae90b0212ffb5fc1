"""Release registries answering "has this repository released v1.x?".

- base.py: the ReleaseRegistry capability interface and tag matching
- gh_cli.py: GitHub CLI subprocess backend (default)
- github_api.py: GitHub REST API backend
"""

from constants import RegistryBackends, Constants

from .base import ReleaseRegistry, has_major_v1_tag
from .gh_cli import GhCliReleaseRegistry
from .github_api import GitHubApiReleaseRegistry


def create_registry(
    backend: str = RegistryBackends.GH_CLI.value,
    timeout: float = Constants.REGISTRY_QUERY_TIMEOUT,
) -> ReleaseRegistry:
    """Build the registry backend named ``backend``."""
    if backend == RegistryBackends.GITHUB_API.value:
        return GitHubApiReleaseRegistry(timeout=timeout)
    if backend == RegistryBackends.GH_CLI.value:
        return GhCliReleaseRegistry(timeout=timeout)
    raise ValueError(f"unsupported release registry backend: {backend}")


__all__ = [
    "ReleaseRegistry",
    "has_major_v1_tag",
    "GhCliReleaseRegistry",
    "GitHubApiReleaseRegistry",
    "create_registry",
]
