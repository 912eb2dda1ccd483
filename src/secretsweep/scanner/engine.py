"""Detection engine — pattern and entropy passes over one file.

Exception safety: read failures are reported by path and errno only, so
matched secret values never reach tracebacks, log records, or error
messages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from secretsweep.config.schema import EntropyConfig
from secretsweep.findings.models import Finding
from secretsweep.rules.models import Rule
from secretsweep.rules.registry import RuleRegistry
from secretsweep.scanner.entropy import (
    HIGH_ENTROPY_KIND,
    HIGH_ENTROPY_RULE_ID,
    extract_candidates,
    shannon_entropy,
)
from secretsweep.scanner.suppression import FalsePositiveFilter

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """Raised on scan setup or internal failure (never contains secret values)."""


@dataclass
class FileAnalysis:
    """Findings for one file plus the read error, if any."""

    path: str
    findings: List[Finding] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class DetectionEngine:
    """Runs the rule table and the entropy heuristic over file content.

    Holds only read-only state after construction, so a single instance
    is shared by every worker thread.
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        entropy: Optional[EntropyConfig] = None,
    ) -> None:
        self.rules: Tuple[Rule, ...] = tuple(rules)
        self.entropy = entropy or EntropyConfig()
        self.fp_filter = FalsePositiveFilter(self.entropy.false_positive_markers)

    @classmethod
    def from_registry(
        cls, registry: RuleRegistry, entropy: Optional[EntropyConfig] = None
    ) -> "DetectionEngine":
        return cls(registry.enabled_rules(), entropy)

    # ---- per-line passes ----

    def _pattern_pass(self, path: str, line_number: int, line: str) -> List[Finding]:
        hits: List[Finding] = []
        for rule in self.rules:
            for matched in rule.find_all(line):
                hits.append(
                    Finding(
                        file_path=path,
                        line_number=line_number,
                        kind=rule.name,
                        matched_text=matched,
                        severity=rule.severity,
                        rule_id=rule.id,
                    )
                )
        return hits

    def _entropy_pass(self, path: str, line_number: int, line: str) -> List[Finding]:
        cfg = self.entropy
        hits: List[Finding] = []
        for candidate in extract_candidates(line, cfg.min_length, cfg.max_length):
            if self.fp_filter.is_false_positive(candidate):
                continue
            value = shannon_entropy(candidate)
            if value >= cfg.threshold:
                hits.append(
                    Finding(
                        file_path=path,
                        line_number=line_number,
                        kind=HIGH_ENTROPY_KIND,
                        matched_text=candidate,
                        severity="medium",
                        entropy=value,
                        rule_id=HIGH_ENTROPY_RULE_ID,
                    )
                )
        return hits

    def analyze_line(self, path: str, line_number: int, line: str) -> List[Finding]:
        """All findings for a single line; blank lines yield nothing."""
        if not line.strip():
            return []
        hits = self._pattern_pass(path, line_number, line)
        if self.entropy.enabled:
            hits.extend(self._entropy_pass(path, line_number, line))
        return hits

    def analyze_lines(self, path: str, lines: Iterable[str]) -> List[Finding]:
        """Findings for an iterable of lines, in ascending line order."""
        findings: List[Finding] = []
        for line_number, raw in enumerate(lines, 1):
            findings.extend(self.analyze_line(path, line_number, raw.rstrip("\r\n")))
        return findings

    # ---- per-file ----

    def scan_file(self, path: str) -> FileAnalysis:
        """Analyze *path*, capturing any read failure instead of raising."""
        result = FileAnalysis(path=path)
        try:
            with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
                result.findings = self.analyze_lines(path, f)
        except OSError as exc:
            result.findings = []
            result.error = exc.strerror or type(exc).__name__
            logger.debug("cannot read %s: %s", path, result.error)
        return result

    def analyze(self, path: str) -> List[Finding]:
        """Findings for *path*; an unreadable file yields an empty list."""
        return self.scan_file(path).findings
