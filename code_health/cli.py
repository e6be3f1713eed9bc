"""Click CLI with scan, rules, and serve subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from code_health.analysis.health import Snapshot
from code_health.engine import analyze
from code_health.models import ScanConfig
from code_health.rules import default_rules, select_rules

_SEVERITY_COLORS = {
    "ERROR": "red",
    "WARN": "yellow",
    "INFO": "blue",
}

_LABEL_COLORS = {
    "Excellent": "green",
    "Good": "bright_green",
    "Risky": "yellow",
    "Critical": "red",
}


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """code-health: Find circular imports and other code smells in JS/TS projects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".")
@click.option("--max-lines", "max_lines", type=int, default=1000, show_default=True,
              help="Line count above which a file is reported as too large")
@click.option("--rule", "-r", "rule_ids", multiple=True, help="Only run these rule ids")
@click.option("--include", "-i", "include_dirs", multiple=True,
              help="Directories to scan (default: src, app, components)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--baseline", "baseline_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Snapshot file to compare against; written on first use")
@click.option("--update-baseline", is_flag=True, help="Overwrite the baseline with this scan")
def scan(
    source_dir: Path,
    max_lines: int,
    rule_ids: tuple[str, ...],
    include_dirs: tuple[str, ...],
    as_json: bool,
    baseline_path: Path | None,
    update_baseline: bool,
):
    """Scan a project and report issues."""
    config = ScanConfig(source_dir=source_dir, max_file_lines=max_lines)
    if include_dirs:
        config.include_dirs = list(include_dirs)

    try:
        rules = select_rules(list(rule_ids))
        report = analyze(config, rules)
    except ValueError as e:
        raise click.ClickException(str(e))

    if baseline_path is not None:
        _compare_to_baseline(report, baseline_path, update_baseline)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_report(report)

    if report.has_errors:
        raise SystemExit(1)


@cli.command(name="rules")
def list_rules():
    """List the available rules."""
    for rule in default_rules():
        click.echo(f"  {click.style(rule.id, fg='cyan'):<30} {rule.title}")


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the JSON report API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the API server. "
            "Install with: pip install 'code-health[web]'"
        )

    from code_health.web import create_app

    click.echo(f"Starting code-health API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


def _compare_to_baseline(report, baseline_path: Path, update: bool) -> None:
    if baseline_path.exists() and not update:
        try:
            baseline = Snapshot.from_dict(json.loads(baseline_path.read_text(encoding="utf-8")))
        except (ValueError, KeyError, TypeError) as e:
            raise click.ClickException(f"Invalid baseline file {baseline_path}: {e}")
    else:
        baseline = report.snapshot()
        baseline_path.write_text(json.dumps(baseline.to_dict(), indent=2), encoding="utf-8")
    report.compare_to(baseline)


def _print_report(report) -> None:
    click.echo(f"\nScanned {report.files_scanned} file(s).")

    if not report.issues:
        click.echo("No issues found.")
    else:
        click.echo(f"Found {len(report.issues)} issue(s):\n")

        by_file: dict[str, list] = {}
        for issue in report.issues:
            by_file.setdefault(issue.file_path, []).append(issue)

        for file_path, file_issues in by_file.items():
            click.echo(click.style(file_path, fg="cyan"))
            for issue in file_issues:
                severity = issue.severity.value
                where = f"L{issue.line}" if issue.line is not None else "L?"
                click.echo(
                    f"  {click.style(severity, fg=_SEVERITY_COLORS[severity]):>16}  "
                    f"{click.style(where, dim=True):<14} "
                    f"{issue.message}  "
                    f"{click.style(f'[{issue.rule_id}]', dim=True)}"
                )
            click.echo()

    if report.health:
        label = report.health.label
        click.echo(
            f"Health: {report.health.score}/100 "
            f"{click.style(label, fg=_LABEL_COLORS.get(label, 'white'))}"
        )
    if report.improvement:
        pct = report.improvement.pct
        click.echo(
            f"Since baseline: Δ {pct:+d}% "
            f"({report.improvement.delta_issues:+d} issue(s))"
        )


if __name__ == "__main__":
    cli()
