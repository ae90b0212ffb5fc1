"""Release registry backed by the GitHub REST API."""

from __future__ import annotations

import logging
import os
import time
from typing import Dict, List, Optional

from common.http_client import get_json
from constants import Constants
from errors import RegistryQueryFailed
from identity.models import RepositorySlug

from .base import ReleaseRegistry

logger = logging.getLogger(__name__)


class GitHubApiReleaseRegistry(ReleaseRegistry):
    """Pages through ``GET /repos/{owner}/{repo}/releases``.

    Supports optional authentication via GITHUB_TOKEN or GH_TOKEN.
    """

    name = "github-api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = Constants.REGISTRY_QUERY_TIMEOUT,
        per_page: int = Constants.REPO_API_PER_PAGE,
        limit: int = Constants.RELEASE_LIST_LIMIT,
    ):
        self.base_url = (base_url or Constants.GITHUB_API_BASE).rstrip("/")
        self.token = (
            token
            or os.environ.get(Constants.ENV_GITHUB_TOKEN)
            or os.environ.get(Constants.ENV_GH_TOKEN)
        )
        self.timeout = timeout
        self.per_page = per_page
        self.limit = limit

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def list_release_tags(self, repository: RepositorySlug) -> List[str]:
        logger.info("Getting major version of %s", repository)
        tags: List[str] = []
        page = 1
        deadline = time.monotonic() + self.timeout
        while len(tags) < self.limit:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise RegistryQueryFailed(
                    str(repository), f"timed out after {self.timeout} seconds"
                )
            url = (
                f"{self.base_url}/repos/{repository}/releases"
                f"?per_page={self.per_page}&page={page}"
            )
            # one attempt per page, bounded by what is left of the lookup timeout
            status, _, data = get_json(
                url, headers=self._get_headers(), timeout=remaining, retries=1
            )
            if status == 0:
                raise RegistryQueryFailed(str(repository), "no response from GitHub API")
            if status != 200 or not isinstance(data, list):
                raise RegistryQueryFailed(str(repository), f"GitHub API returned HTTP {status}")
            tags.extend(
                str(release.get("tag_name"))
                for release in data
                if isinstance(release, dict) and release.get("tag_name")
            )
            if len(data) < self.per_page:
                break
            page += 1
        return tags[:self.limit]
