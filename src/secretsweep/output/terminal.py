"""Rich terminal reporter — scorecard, risk bars, findings table."""

from __future__ import annotations

import os
from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from secretsweep.findings.classify import count_by_tier, display_severity, overall_tier
from secretsweep.findings.models import Finding, ScanSession
from secretsweep.findings.redactor import redact
from secretsweep.quarantine.models import MoveResult

_SEVERITY_STYLE = {
    "critical": "bold white on red",
    "high": "bold white on dark_orange",
    "medium": "bold black on yellow",
    "low": "bold black on bright_cyan",
}

_SEVERITY_ICON = {
    "critical": "🚨",
    "high": "🔴",
    "medium": "🟡",
    "low": "🔵",
}

_BAR_STYLE = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "blue",
}

_STATUS = {
    "critical": ("🚨 CRITICAL ISSUES FOUND", "bold red"),
    "high": ("⚠️  HIGH RISK DETECTED", "red"),
    "medium": ("⚡ MODERATE ISSUES FOUND", "yellow"),
    "low": ("⚡ MODERATE ISSUES FOUND", "yellow"),
    "clean": ("✅ ALL CLEAR - NO SECRETS DETECTED", "bold green"),
}

BAR_WIDTH = 20


def _severity_pill(tier: str) -> Text:
    style = _SEVERITY_STYLE.get(tier, "")
    icon = _SEVERITY_ICON.get(tier, "")
    return Text(f" {icon} {tier.upper()} ", style=style)


def shorten_path(path: str, max_len: int = 45) -> str:
    """Replace the home directory with ``~`` and keep the tail of long paths."""
    home = os.path.expanduser("~")
    if home and home != "~" and path.startswith(home):
        path = "~" + path[len(home):]
    if len(path) > max_len:
        return "..." + path[-(max_len - 3):]
    return path


def format_duration(seconds: float) -> str:
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    return f"{seconds / 60:.1f}m"


def format_count(n: int) -> str:
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1000:
        return f"{n / 1000:.1f}K"
    return str(n)


def _risk_bar(console: Console, tier: str, count: int, total: int) -> None:
    filled = (count * BAR_WIDTH) // max(total, 1)
    bar = "█" * filled + "░" * (BAR_WIDTH - filled)
    style = _BAR_STYLE[tier]
    console.print(
        f"  {_SEVERITY_ICON[tier]} [{style}]{tier.upper():<8} {count:>3} {bar}[/{style}]"
    )


def _findings_table(findings: List[Finding], max_display: int) -> Table:
    table = Table(
        title="Findings",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Risk", justify="center", width=14)
    table.add_column("Type", style="cyan", max_width=30)
    table.add_column("Location", style="magenta")
    table.add_column("Match", min_width=12)

    for finding in findings[:max_display]:
        table.add_row(
            _severity_pill(display_severity(finding)),
            escape(finding.kind),
            escape(f"{shorten_path(finding.file_path)}:{finding.line_number}"),
            escape(redact(finding.matched_text)),
        )
    return table


def render(
    session: ScanSession,
    *,
    console: Optional[Console] = None,
    max_display: int = 25,
    quiet: bool = False,
) -> None:
    """Print the security hygiene scorecard for *session*."""
    console = console or Console()
    counts = count_by_tier(session.findings)
    status, status_style = _STATUS[overall_tier(session.findings)]

    console.print()
    console.rule("[bold]🛡️  SECRETSWEEP SECURITY HYGIENE SCORECARD[/bold]", style="cyan")
    console.print()
    console.print(f"  [{status_style}]{status}[/{status_style}]")
    console.print()

    if not quiet:
        console.print("  [bold]📊 RISK BREAKDOWN[/bold]")
        total = sum(counts.values())
        for tier in ("critical", "high", "medium", "low"):
            _risk_bar(console, tier, counts[tier], total)
        console.print()

        if session.findings:
            console.print(_findings_table(session.findings, max_display))
            hidden = len(session.findings) - max_display
            if hidden > 0:
                console.print(
                    f"  [dim]... and {hidden} more findings (see full report)[/dim]"
                )
            console.print()

    _print_footer(console, session)


def _print_footer(console: Console, session: ScanSession) -> None:
    console.rule(style="dim")
    console.print(f"  📁 Scanned: [bold]{escape(shorten_path(session.root, 60))}[/bold]")
    console.print(f"  📄 Files analyzed: [bold]{format_count(session.files_scanned)}[/bold]")
    if session.files_errored or session.entries_skipped:
        console.print(
            f"  [dim]Unreadable files: {session.files_errored}  "
            f"Skipped entries: {session.entries_skipped}[/dim]"
        )
    if session.cancelled:
        console.print("  [yellow]Scan was cancelled before the walk completed.[/yellow]")
    console.print(f"  ⏱️  Duration: [bold]{format_duration(session.duration_seconds)}[/bold]")
    console.print(f"  🕐 Timestamp: {datetime.now():%Y-%m-%d %H:%M:%S}")
    console.print()


def render_quarantine(results: List[MoveResult], *, console: Optional[Console] = None) -> None:
    """Print the per-file quarantine outcome and a summary line."""
    console = console or Console()
    console.print()
    console.print("  [bold]📦 QUARANTINE RESULTS[/bold]")
    console.rule(style="dim")

    ok = 0
    failed = 0
    for r in results:
        original = escape(shorten_path(r.original_path, 60))
        if r.success:
            ok += 1
            verb = "Moved" if r.outcome == "moved" else "Copied"
            console.print(f"  [green]✅[/green] {verb}: {original}")
            console.print(f"     → {escape(shorten_path(r.new_path or '', 60))}")
        else:
            failed += 1
            console.print(f"  [red]❌[/red] Failed: {original}")
            console.print(f"     Error: {escape(r.error or 'unknown error')}")

    console.print()
    if failed == 0:
        console.print(f"  [green]✅ Successfully quarantined {ok} file(s)[/green]")
    else:
        console.print(f"  ⚠️  Quarantined: {ok} | Failed: {failed}")
    console.print()
