"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from secretsweep import __version__
from secretsweep.findings.classify import count_by_tier, display_severity
from secretsweep.findings.models import ScanSession
from secretsweep.findings.redactor import redact


def to_dict(session: ScanSession, *, redact_values: bool = True) -> Dict[str, Any]:
    """Convert a ScanSession to a JSON-serialisable dict."""
    findings_list: List[Dict[str, Any]] = []
    for f in session.findings:
        findings_list.append({
            "file": f.file_path,
            "line": f.line_number,
            "type": f.kind,
            "rule": f.rule_id,
            "severity": f.severity,
            "display_severity": display_severity(f),
            "match": redact(f.matched_text, full=True) if redact_values else f.matched_text,
            **({"entropy": round(f.entropy, 2)} if f.entropy else {}),
        })

    return {
        "version": __version__,
        "scan_path": session.root,
        "start_time": session.started_at.isoformat(),
        "end_time": session.finished_at.isoformat() if session.finished_at else None,
        "files_scanned": session.files_scanned,
        "files_errored": session.files_errored,
        "entries_skipped": session.entries_skipped,
        "cancelled": session.cancelled,
        "total_findings": session.total_findings,
        "summary": count_by_tier(session.findings),
        "findings": findings_list,
    }


def render(session: ScanSession, *, redact_values: bool = True) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(session, redact_values=redact_values), indent=2)
