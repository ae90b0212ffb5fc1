"""Data models for release history lookups and major version decisions."""

from enum import Enum
from typing import Optional


class ReleaseQueryOutcome(Enum):
    """Answer of a release registry to "has a v1.x release been published?"."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


# None means no prior major-version constraint: normal semver bumps pick the major.
MajorVersionDecision = Optional[int]
