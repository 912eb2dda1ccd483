"""Markdown audit report."""

from __future__ import annotations

from typing import List

from secretsweep.findings.classify import count_by_tier, display_severity
from secretsweep.findings.models import ScanSession
from secretsweep.findings.redactor import redact
from secretsweep.output.terminal import format_duration

_TIER_LABEL = {
    "critical": "🚨 CRITICAL",
    "high": "🔴 HIGH",
    "medium": "🟡 MEDIUM",
    "low": "🔵 LOW",
}


def render(session: ScanSession) -> str:
    """Return the full Markdown report for *session*."""
    counts = count_by_tier(session.findings)
    lines: List[str] = [
        "# 🛡️ secretsweep Security Audit Report",
        "",
        f"**Scan Time:** {session.started_at:%Y-%m-%d %H:%M:%S}",
        "",
        f"**Target:** `{session.root}`",
        "",
        f"**Files Scanned:** {session.files_scanned}",
        "",
        f"**Unreadable Files:** {session.files_errored}",
        "",
        f"**Duration:** {format_duration(session.duration_seconds)}",
        "",
        "## Summary",
        "",
        "| Severity | Count |",
        "|----------|-------|",
    ]
    for tier, label in _TIER_LABEL.items():
        lines.append(f"| {label} | {counts[tier]} |")
    lines.append(f"| **Total** | **{session.total_findings}** |")
    lines.append("")

    if session.findings:
        lines.append("## Findings")
        lines.append("")
        for i, f in enumerate(session.findings, 1):
            lines.append(f"### {i}. [{display_severity(f).upper()}] {f.kind}")
            lines.append("")
            lines.append(f"- **File:** `{f.file_path}`")
            lines.append(f"- **Line:** {f.line_number}")
            lines.append(f"- **Match:** `{redact(f.matched_text)}`")
            if f.entropy:
                lines.append(f"- **Entropy:** {f.entropy:.2f} bits/char")
            lines.append("")

    return "\n".join(lines)
