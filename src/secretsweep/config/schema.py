"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

Severity = Literal["low", "medium", "high"]

# Stored severities only; "critical" is a display tier (findings.classify).
SEVERITY_ORDER: dict[str, int] = {
    "low": 0,
    "medium": 1,
    "high": 2,
}

SEVERITIES = ("low", "medium", "high")

DEFAULT_FALSE_POSITIVE_MARKERS = [
    "example",
    "sample",
    "placeholder",
    "your_",
    "your-",
    "xxx",
    "abc",
    "test",
    "demo",
    "localhost",
    "undefined",
    "null",
]


def severity_at_or_above(finding_sev: str, threshold: str) -> bool:
    """Return True if *finding_sev* is at or above *threshold*."""
    return SEVERITY_ORDER.get(finding_sev, 0) >= SEVERITY_ORDER.get(threshold, 0)


@dataclass
class ScanConfig:
    workers: int = 10
    queue_size: int = 100  # capacity of both the path and the result queue
    max_file_size_mb: int = 5
    include_all_severities: bool = False  # False = HIGH findings only
    all_files: bool = False  # disable extension filtering
    extra_extensions: List[str] = field(default_factory=list)

    @property
    def max_file_size(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass
class EntropyConfig:
    enabled: bool = True
    threshold: float = 4.5
    min_length: int = 20
    max_length: int = 100
    false_positive_markers: List[str] = field(
        default_factory=lambda: list(DEFAULT_FALSE_POSITIVE_MARKERS)
    )


@dataclass
class RulesConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    format: Literal["markdown", "json"] = "markdown"  # saved report file
    report_dir: str = "reports"
    save_report: bool = True
    max_display: int = 25


@dataclass
class QuarantineConfig:
    target_dir: Optional[str] = None  # unset = quarantine disabled


@dataclass
class SweepConfig:
    version: str = "1.0"
    scan: ScanConfig = field(default_factory=ScanConfig)
    entropy: EntropyConfig = field(default_factory=EntropyConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    quarantine: QuarantineConfig = field(default_factory=QuarantineConfig)
