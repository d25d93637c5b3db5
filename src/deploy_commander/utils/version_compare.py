"""Version parsing for tool prerequisites."""

from __future__ import annotations

import re

from packaging.version import Version, InvalidVersion

_RELEASE_PREFIX = re.compile(r"^v?(\d+(?:\.\d+)*)")


def parse_version(v: str) -> Version | None:
    """Parse a version string, returning None on failure.

    Vendor suffixes that are not PEP 440 (``v1.28.3-eks-4f4795d``) fall back
    to the numeric release prefix.
    """
    if not v:
        return None
    try:
        return Version(v)
    except InvalidVersion:
        pass
    match = _RELEASE_PREFIX.match(v.strip())
    if match:
        try:
            return Version(match.group(1))
        except InvalidVersion:
            pass
    return None


def meets_minimum(current: str, minimum: str) -> bool | None:
    """Return whether current >= minimum, or None if either is unparseable."""
    cur = parse_version(current)
    low = parse_version(minimum)
    if cur is None or low is None:
        return None
    return Version(cur.base_version) >= Version(low.base_version)
