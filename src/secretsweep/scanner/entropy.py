"""Shannon entropy calculator and quoted-candidate extraction."""

from __future__ import annotations

import math
import re
from collections import Counter
from functools import lru_cache
from typing import List, Pattern

HIGH_ENTROPY_RULE_ID = "HIGH_ENTROPY_STRING"
HIGH_ENTROPY_KIND = "High Entropy String"

DEFAULT_THRESHOLD = 4.5
DEFAULT_MIN_LENGTH = 20
DEFAULT_MAX_LENGTH = 100


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of string *s*.

    H = -Σ p(c) · log₂(p(c))  over unique characters c.
    """
    if not s:
        return 0.0
    counts = Counter(s)
    total = len(s)
    return -sum((c / total) * math.log2(c / total) for c in counts.values())


@lru_cache(maxsize=None)
def _quoted_re(min_length: int, max_length: int) -> Pattern[str]:
    window = f"{{{min_length},{max_length}}}"
    return re.compile(
        rf"\"([^\"\r\n]{window})\"|'([^'\r\n]{window})'"
    )


def extract_candidates(
    line: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> List[str]:
    """Return quoted substrings of *line* whose length lies in the window.

    The opening and closing quote must be the same character.
    """
    candidates: List[str] = []
    for m in _quoted_re(min_length, max_length).finditer(line):
        candidates.append(m.group(1) if m.group(1) is not None else m.group(2))
    return candidates
