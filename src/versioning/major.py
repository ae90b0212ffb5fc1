"""Major version continuity for generated provider packages.

The first release of a provider package should land on 1.x, while later
major bumps are left to the regular version-increment workflow instead of
being forced again on every run.
"""

from __future__ import annotations

import logging
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled
from identity.models import RepositorySlug

from .models import MajorVersionDecision, ReleaseQueryOutcome
from .registries import GhCliReleaseRegistry, ReleaseRegistry

logger = logging.getLogger(__name__)


class MajorVersionResolver:
    """Decides which major version, if any, a generated package is pinned to."""

    def __init__(self, registry: Optional[ReleaseRegistry] = None):
        self.registry = registry or GhCliReleaseRegistry()

    def resolve(
        self,
        repository: RepositorySlug,
        override: Optional[int] = None,
    ) -> MajorVersionDecision:
        """Return the major version for ``repository``.

        Args:
            repository: Repository of the generated package.
            override: Caller-forced major version; used verbatim and skips the query.

        Returns:
            The major version to pin, or None to let normal increments decide.
        """
        if override is not None:
            logger.info("Using forced major version %s for %s", override, repository)
            return override

        try:
            outcome = self.registry.query_major_v1_release(repository)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.warning("Error fetching major version of %s: %s", repository, exc)
            outcome = ReleaseQueryOutcome.FAILED

        if outcome is ReleaseQueryOutcome.FAILED:
            logger.warning(
                "Release history of %s is unavailable; leaving the major version unconstrained",
                repository,
            )

        decision = self._decide(outcome)
        if is_debug_enabled(logger):
            logger.debug(
                "Resolved major version",
                extra=extra_context(
                    event="decision",
                    component="major_version",
                    action="resolve",
                    target=str(repository),
                    outcome=outcome.value,
                    major_version=decision,
                ),
            )
        return decision

    @staticmethod
    def _decide(outcome: ReleaseQueryOutcome) -> MajorVersionDecision:  # pylint: disable=unused-argument
        # TODO: pin NOT_FOUND to 1 once a brand-new repository can be told apart
        # from one whose history has no v1.x tag. Until then every outcome is
        # left unconstrained.
        return None
