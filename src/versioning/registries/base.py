"""Release registry capability interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from constants import Constants
from errors import RegistryQueryFailed
from identity.models import RepositorySlug

from ..models import ReleaseQueryOutcome

logger = logging.getLogger(__name__)


def has_major_v1_tag(tags: Iterable[str], pattern: str = Constants.MAJOR_V1_TAG_PATTERN) -> bool:
    """Return True if any tag contains ``pattern`` (substring match, like ``grep``)."""
    return any(pattern in tag for tag in tags)


class ReleaseRegistry(ABC):
    """Source of release history for a repository.

    Backends only list release tags; the tri-state answer is derived here so
    every backend reports failures the same way.
    """

    name = "registry"

    @abstractmethod
    def list_release_tags(self, repository: RepositorySlug) -> Iterable[str]:
        """Return the release tag names of ``repository``.

        Raises:
            RegistryQueryFailed: If the registry could not be queried.
        """

    def query_major_v1_release(self, repository: RepositorySlug) -> ReleaseQueryOutcome:
        """Report whether ``repository`` has ever published a v1.x release."""
        try:
            tags = self.list_release_tags(repository)
            found = has_major_v1_tag(tags)
        except RegistryQueryFailed as exc:
            logger.warning("Could not fetch releases of %s via %s: %s", repository, self.name, exc)
            return ReleaseQueryOutcome.FAILED
        return ReleaseQueryOutcome.FOUND if found else ReleaseQueryOutcome.NOT_FOUND
