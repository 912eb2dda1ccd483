"""Quarantine — collision-safe relocation of exposed files into a vault."""

from secretsweep.quarantine.manager import (
    QuarantineError,
    QuarantineManager,
    confirm_quarantine,
    quarantine_files,
)
from secretsweep.quarantine.models import MoveResult

__all__ = [
    "MoveResult",
    "QuarantineError",
    "QuarantineManager",
    "confirm_quarantine",
    "quarantine_files",
]
