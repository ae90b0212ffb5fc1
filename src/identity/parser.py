"""Token parsing for ``namespace/name@version`` provider references."""

from typing import Optional, Tuple

from errors import InvalidReference

from .models import ComponentReference


def tokenize_rightmost_at(s: str) -> Tuple[str, Optional[str]]:
    """Return (name, version or None) using the rightmost-@ rule."""
    s = s.strip()
    if '@' not in s:
        return s, None
    name, version = s.rsplit('@', 1)
    version = version.strip()
    return name.strip(), version if version else None


def parse_component_reference(token: str) -> ComponentReference:
    """Parse a provider reference such as ``hashicorp/aws@5.42.0``.

    Only the segment after the last ``/`` is the canonical short name.

    Raises:
        InvalidReference: If no short name can be extracted.
    """
    if token is None:
        raise InvalidReference(str(token))
    name, version = tokenize_rightmost_at(token)
    short_name = name.split('/')[-1].strip()
    if not short_name:
        raise InvalidReference(token)
    return ComponentReference(raw=token, name=name, short_name=short_name, version=version)
