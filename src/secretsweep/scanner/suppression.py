"""False-positive suppression for entropy candidates.

A candidate is rejected when it looks like a URL, a file path, a
placeholder, or a UUID.
"""

from __future__ import annotations

import re
from typing import Iterable, Tuple

from secretsweep.config.schema import DEFAULT_FALSE_POSITIVE_MARKERS

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)


def looks_like_url(candidate: str) -> bool:
    lowered = candidate.lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def looks_like_path(candidate: str) -> bool:
    return "/" in candidate and (candidate.startswith("/") or "./" in candidate)


def is_uuid(candidate: str) -> bool:
    return _UUID_RE.match(candidate.lower()) is not None


class FalsePositiveFilter:
    """Marker-list aware suppression check; one instance is shared by all workers."""

    def __init__(self, markers: Iterable[str] = DEFAULT_FALSE_POSITIVE_MARKERS) -> None:
        self.markers: Tuple[str, ...] = tuple(m.lower() for m in markers if m)

    def has_marker(self, candidate: str) -> bool:
        lowered = candidate.lower()
        return any(marker in lowered for marker in self.markers)

    def is_false_positive(self, candidate: str) -> bool:
        return (
            looks_like_url(candidate)
            or looks_like_path(candidate)
            or self.has_marker(candidate)
            or is_uuid(candidate)
        )


_DEFAULT_FILTER = FalsePositiveFilter()


def looks_like_false_positive(candidate: str) -> bool:
    """Suppression check with the default marker list."""
    return _DEFAULT_FILTER.is_false_positive(candidate)
