"""Version normalization and version-distance metric."""

from __future__ import annotations

import re

_RANGE_PREFIX_RE = re.compile(r"^[\^~]")

# Strict major.minor.patch with optional prerelease/build, optional leading "v".
_SEMVER_RE = re.compile(
    r"^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def normalize_version(version: str) -> str:
    """Strip one leading ``^`` or ``~`` from a declared range.

    Other range syntax (``>=``, ``||``, ``1.x``) is returned unchanged.
    """
    return _RANGE_PREFIX_RE.sub("", version, count=1)


def parse_version(version: str) -> tuple[int, int, int] | None:
    """Parse ``major.minor.patch``; return None if *version* is not strict semver."""
    match = _SEMVER_RE.match(version.strip())
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def version_distance(current: str, latest: str) -> int:
    """Weighted distance from *current* to *latest*.

    ``major * 10000 + minor * 100 + patch`` over the component deltas.
    Returns 0 when either side does not parse.
    """
    cur = parse_version(current)
    lat = parse_version(latest)
    if cur is None or lat is None:
        return 0
    return (lat[0] - cur[0]) * 10000 + (lat[1] - cur[1]) * 100 + (lat[2] - cur[2])
