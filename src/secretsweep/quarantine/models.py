"""Move result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

Outcome = Literal["moved", "copied", "copy_failed", "delete_failed"]


@dataclass(frozen=True)
class MoveResult:
    """Outcome of relocating one file into the vault."""

    original_path: str
    new_path: Optional[str]  # None when no copy exists
    success: bool
    outcome: Outcome
    error: Optional[str] = None

    @property
    def original_removed(self) -> bool:
        return self.outcome == "moved"
