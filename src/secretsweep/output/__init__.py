"""Report renderers and report-file writer."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from secretsweep.findings.models import ScanSession
from secretsweep.output import json_report, markdown


def save_report(
    session: ScanSession,
    report_dir: str,
    *,
    fmt: str = "markdown",
    redact_values: bool = True,
    now: Optional[datetime] = None,
) -> Path:
    """Write the report to ``report_dir/secretsweep_<timestamp>.<ext>``."""
    out_dir = Path(report_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
    if fmt == "json":
        path = out_dir / f"secretsweep_{stamp}.json"
        path.write_text(json_report.render(session, redact_values=redact_values), encoding="utf-8")
    else:
        path = out_dir / f"secretsweep_{stamp}.md"
        path.write_text(markdown.render(session), encoding="utf-8")
    return path


__all__ = ["save_report"]
