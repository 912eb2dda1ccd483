"""Finding and scan-session data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from secretsweep.config.schema import Severity


@dataclass(frozen=True)
class Finding:
    """A single detected secret occurrence at a file/line."""

    file_path: str
    line_number: int
    kind: str  # rule name, or "High Entropy String"
    matched_text: str  # sensitive: report output only, never logged
    severity: Severity
    entropy: float = 0.0
    rule_id: str = ""


@dataclass
class ScanSession:
    """Complete result of one scan run."""

    root: str
    started_at: datetime
    finished_at: Optional[datetime] = None
    files_scanned: int = 0
    files_errored: int = 0  # candidates that could not be opened/read
    entries_skipped: int = 0  # walk entries dropped due to I/O errors
    cancelled: bool = False
    findings: List[Finding] = field(default_factory=list)

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def duration_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    def exposed_files(self) -> List[str]:
        """Distinct file paths that carry at least one finding, first-seen order."""
        seen: dict[str, None] = {}
        for f in self.findings:
            seen.setdefault(f.file_path, None)
        return list(seen)
