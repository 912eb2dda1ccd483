"""Scanner — extension filter, walker, detection engine, coordinator."""

from secretsweep.scanner.coordinator import ScanCoordinator, run_scan
from secretsweep.scanner.engine import DetectionEngine, FileAnalysis, ScanError
from secretsweep.scanner.entropy import extract_candidates, shannon_entropy
from secretsweep.scanner.filters import (
    DEFAULT_TEXT_EXTENSIONS,
    ExtensionFilter,
    merge_extensions,
)
from secretsweep.scanner.suppression import FalsePositiveFilter, looks_like_false_positive
from secretsweep.scanner.walker import walk

__all__ = [
    "DEFAULT_TEXT_EXTENSIONS",
    "DetectionEngine",
    "ExtensionFilter",
    "FalsePositiveFilter",
    "FileAnalysis",
    "ScanCoordinator",
    "ScanError",
    "extract_candidates",
    "looks_like_false_positive",
    "merge_extensions",
    "run_scan",
    "shannon_entropy",
    "walk",
]
