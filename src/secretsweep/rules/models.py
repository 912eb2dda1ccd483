"""Rule data model — pattern stored as string, compiled once at construction."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

from secretsweep.config.schema import Severity


@dataclass(frozen=True)
class Rule:
    """A single named, severity-tagged secret pattern.

    ``pattern`` is kept as a raw string so the rule remains serialisable;
    ``compiled_pattern`` is built in ``__post_init__`` so that worker
    threads only ever read it.
    """

    id: str
    name: str
    severity: Severity
    pattern: str
    description: str = ""
    category: str = "secret"  # cloud | payment | token | database | key | generic

    compiled_pattern: re.Pattern[str] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled_pattern", re.compile(self.pattern))

    def find_all(self, line: str) -> List[str]:
        """Return every non-overlapping match of this rule in *line*."""
        return [m.group(0) for m in self.compiled_pattern.finditer(line)]
