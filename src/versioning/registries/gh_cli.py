"""Release registry backed by the GitHub CLI (``gh release list``)."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional, Sequence

from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants
from errors import RegistryQueryFailed
from identity.models import RepositorySlug

from .base import ReleaseRegistry

logger = logging.getLogger(__name__)


class GhCliReleaseRegistry(ReleaseRegistry):
    """Lists releases by running ``gh release list -L=<limit> -R <repo>``.

    ``gh`` authenticates with ``GH_TOKEN`` from the environment; the build
    workflow provides it from the repository secrets.
    """

    name = "gh"

    def __init__(
        self,
        binary: str = Constants.GH_BINARY,
        timeout: float = Constants.REGISTRY_QUERY_TIMEOUT,
        limit: int = Constants.RELEASE_LIST_LIMIT,
    ):
        self.binary = binary
        self.timeout = timeout
        self.limit = limit

    def command(self, repository: RepositorySlug) -> List[str]:
        return [self.binary, "release", "list", f"-L={self.limit}", "-R", str(repository)]

    def list_release_tags(self, repository: RepositorySlug) -> List[str]:
        cmd = self.command(repository)
        logger.info("Getting major version of %s", repository)
        with Timer() as timer:
            try:
                result = subprocess.run(
                    cmd,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except subprocess.TimeoutExpired as exc:
                raise RegistryQueryFailed(
                    str(repository), f"timed out after {self.timeout} seconds"
                ) from exc
            except (OSError, UnicodeDecodeError, subprocess.SubprocessError) as exc:
                raise RegistryQueryFailed(str(repository), str(exc)) from exc

        if is_debug_enabled(logger):
            logger.debug(
                "gh release list finished",
                extra=extra_context(
                    event="subprocess",
                    component="gh_cli",
                    action="release_list",
                    target=str(repository),
                    status_code=result.returncode,
                    duration_ms=timer.duration_ms(),
                ),
            )

        if result.returncode != 0:
            raise RegistryQueryFailed(
                str(repository),
                _describe_failure(result.returncode, result.stderr),
            )
        return parse_release_list(result.stdout)


def _describe_failure(returncode: int, stderr: Optional[str]) -> str:
    detail = (stderr or "").strip().splitlines()
    if detail:
        return f"gh exited with status {returncode}: {detail[-1]}"
    return f"gh exited with status {returncode}"


def parse_release_list(output: str) -> List[str]:
    """Extract tag names from tab-separated ``gh release list`` output.

    Columns are TITLE, TYPE, TAG NAME, PUBLISHED; lines that do not have all
    four columns are kept whole so substring matching still sees them.
    """
    tags: List[str] = []
    for line in (output or "").splitlines():
        line = line.strip()
        if not line:
            continue
        columns: Sequence[str] = line.split("\t")
        tags.append(columns[2] if len(columns) >= 4 else line)
    return tags
