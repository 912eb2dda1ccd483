"""secretsweep CLI — Typer application with scan, rules, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from secretsweep import __version__

app = typer.Typer(
    name="secretsweep",
    help="Hunt exposed secrets across a file tree.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _split_extensions(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [e.strip() for e in raw.split(",") if e.strip()]


def _resolve_root(path: str) -> Path:
    root = Path(path).expanduser().resolve()
    if not root.is_dir():
        console.print(f"[bold red]Error:[/bold red] not a directory: {root}")
        raise typer.Exit(code=2)
    return root


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    path: str = typer.Argument(".", help="Directory to scan"),
    all_severities: bool = typer.Option(False, "--all", help="Report all severity levels (default: HIGH only)"),
    all_files: bool = typer.Option(False, "--all-files", help="Scan all files, not just text-based ones"),
    ext: Optional[str] = typer.Option(None, "--ext", help="Additional extensions to scan (comma-separated)"),
    json_report: bool = typer.Option(False, "--json", help="Save the report as JSON instead of Markdown"),
    no_report: bool = typer.Option(False, "--no-report", help="Don't save a report file"),
    no_redact: bool = typer.Option(False, "--no-redact", help="Keep raw matches in the JSON report"),
    report_dir: Optional[str] = typer.Option(None, "--report-dir", help="Directory for report files"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Minimal output, just summary stats"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including per-worker activity"),
    move_to: Optional[str] = typer.Option(None, "--move-to", help="Quarantine files with secrets into this directory"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Number of analyzer threads"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .secretsweep.toml"),
) -> None:
    """Scan a directory tree for exposed secrets."""
    from secretsweep.config.loader import ConfigError, load_config
    from secretsweep.log import configure_logging
    from secretsweep.output import save_report, terminal
    from secretsweep.rules.registry import build_registry
    from secretsweep.scanner.coordinator import ScanCoordinator
    from secretsweep.scanner.engine import DetectionEngine, ScanError
    from secretsweep.scanner.filters import ExtensionFilter

    configure_logging(verbose=verbose, debug=debug)
    root = _resolve_root(path)

    # --- Load config ---
    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if all_severities:
        cfg.scan.include_all_severities = True
    if all_files:
        cfg.scan.all_files = True
    cfg.scan.extra_extensions.extend(_split_extensions(ext))
    if workers is not None:
        cfg.scan.workers = workers
    if json_report:
        cfg.output.format = "json"
    if no_report:
        cfg.output.save_report = False
    if report_dir:
        cfg.output.report_dir = report_dir
    if move_to:
        cfg.quarantine.target_dir = move_to

    # --- Build rules ---
    try:
        registry = build_registry(cfg, root)
    except ConfigError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if cfg.scan.all_files:
        file_filter = ExtensionFilter.permissive(cfg.scan.max_file_size)
    else:
        file_filter = ExtensionFilter.with_extras(cfg.scan.extra_extensions, cfg.scan.max_file_size)

    logger.info("rules loaded: %d", len(registry.enabled_rules()))
    if not quiet:
        console.print(f"🔍 Scanning: {root}")

    # --- Run scan ---
    engine = DetectionEngine.from_registry(registry, cfg.entropy)
    coordinator = ScanCoordinator(
        engine, workers=cfg.scan.workers, queue_size=cfg.scan.queue_size
    )
    try:
        session = coordinator.run(str(root), file_filter, cfg.scan.include_all_severities)
    except ScanError as exc:
        console.print(f"[bold red]Scanner error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- Output ---
    terminal.render(session, max_display=cfg.output.max_display, quiet=quiet)

    if cfg.output.save_report:
        try:
            report_path = save_report(
                session,
                cfg.output.report_dir,
                fmt=cfg.output.format,
                redact_values=not no_redact,
            )
        except OSError as exc:
            console.print(f"[yellow]⚠️  Could not save report:[/yellow] {exc}")
        else:
            console.print(f"  📁 Report saved: {report_path}")

    # --- Quarantine ---
    if cfg.quarantine.target_dir and session.findings:
        _quarantine(session.exposed_files(), cfg.quarantine.target_dir)

    raise typer.Exit(code=1 if session.findings else 0)


def _quarantine(paths: List[str], target_dir: str) -> None:
    from secretsweep.output import terminal
    from secretsweep.quarantine.manager import QuarantineError, QuarantineManager

    manager = QuarantineManager(target_dir)
    if not manager.confirm(len(paths)):
        console.print("\n  ❌ Quarantine cancelled by user.")
        return

    console.print("\n  📦 Moving files to quarantine...")
    try:
        results = manager.quarantine(paths)
    except QuarantineError as exc:
        console.print(f"  [bold red]❌ Quarantine failed:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    terminal.render_quarantine(results)


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    path: str = typer.Argument(".", help="Directory whose config and custom rules apply"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .secretsweep.toml"),
) -> None:
    """List the detection rules that a scan would use."""
    from secretsweep.config.loader import ConfigError, load_config
    from secretsweep.findings.classify import rule_display_severity
    from secretsweep.rules.registry import build_registry

    root = _resolve_root(path)
    try:
        cfg = load_config(root, config)
        registry = build_registry(cfg, root)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    table = Table(title="secretsweep rules", border_style="dim", title_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Severity", justify="center")
    table.add_column("Category", style="magenta")
    table.add_column("Enabled", justify="center")
    for rule in registry.all_rules:
        tier = rule_display_severity(rule)
        severity = rule.severity.upper()
        if tier != rule.severity:
            severity += f" ({tier.upper()})"
        table.add_row(
            rule.id,
            rule.name,
            severity,
            rule.category,
            "✓" if registry.is_enabled(rule.id) else "✗",
        )
    Console().print(table)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    path: str = typer.Argument(".", help="Directory to write .secretsweep.toml into"),
) -> None:
    """Generate a starter .secretsweep.toml."""
    from secretsweep.config.defaults import DEFAULT_TOML
    from secretsweep.config.loader import CONFIG_FILENAME

    root = _resolve_root(path)
    config_path = root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"secretsweep {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """secretsweep — hunt exposed secrets across a file tree."""
