"""CLI interface for bundlesize."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from bundlesize.core.analyzer import analyze_bundle_size
from bundlesize.core.budget import DEFAULT_INCREASE_THRESHOLD, summarize_report
from bundlesize.core.report import generate_json_report, generate_report
from bundlesize.models.analysis_result import AnalysisResult
from bundlesize.models.budget import TargetSummary
from bundlesize.settings import load_limits
from bundlesize.storage import MERGED_REPORT_NAME, REPORTS_DIR, ReportError, load_report, report_path, save_report
from bundlesize.utils import format_number

log = logging.getLogger(__name__)

DEFAULT_TARGET = "chrome"
ALL_TARGETS = "all"
KNOWN_TARGETS = ("chrome", "firefox", "safari", "edge", "opera", "brave")
DIST_DIR = Path("dist")

EXIT_CHECK_FAILED = 1
EXIT_MISSING_INPUT = 2

_LEVEL_COLORS = {"ok": "green", "notice": "yellow", "critical": "red"}


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _config_option(func):
    return click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, exists=True, dir_okay=False),
        default=None,
        help="Limits file (default: ./bundle-size.json if present)",
    )(func)


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """Bundlesize — check built extension output against size budgets."""
    _setup_logging(verbose)


# ── check ────────────────────────────────────────────────────────────────

@main.command()
@click.argument("targets", nargs=-1)
@click.option("--json", "as_json", is_flag=True, help="Also save a JSON report")
@click.option("--ci", is_flag=True, help="Exit with a non-zero code when the check fails")
@click.option(
    "--dist-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=DIST_DIR,
    show_default=True,
    help="Directory holding one build per target",
)
@click.option(
    "--reports-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=REPORTS_DIR,
    show_default=True,
    help="Where JSON reports are saved",
)
@_config_option
def check(
    targets: tuple[str, ...],
    as_json: bool,
    ci: bool,
    dist_dir: Path,
    reports_dir: Path,
    config_path: Path | None,
) -> None:
    """Analyze the build of each TARGET (default: chrome, 'all' for every build)."""
    limits = load_limits(config_path)
    build_dirs = _resolve_build_dirs(targets or (DEFAULT_TARGET,), dist_dir)

    results: dict[str, AnalysisResult] = {}
    for target, build_dir in build_dirs.items():
        result = analyze_bundle_size(build_dir, limits)
        click.echo(generate_report(result, target))
        results[target] = result

    if as_json:
        for target, result in results.items():
            path = save_report(report_path(reports_dir, target), generate_json_report({target: result}, limits))
            click.echo(f"📄 JSON report saved to: {path}")
        if len(results) > 1:
            path = save_report(
                report_path(reports_dir, MERGED_REPORT_NAME),
                generate_json_report(results, limits),
            )
            click.echo(f"📄 Combined JSON report saved to: {path}")

    failed = [target for target, result in results.items() if not result.passed]
    if failed:
        log.info("Check failed for: %s", ", ".join(failed))
        if ci:
            sys.exit(EXIT_CHECK_FAILED)


def _resolve_build_dirs(targets: tuple[str, ...], dist_dir: Path) -> dict[str, Path]:
    """Map each requested target to its build directory.

    Exits when an explicitly named build is missing, or when 'all'
    finds no build at all.
    """
    build_dirs: dict[str, Path] = {}
    for target in targets:
        if target == ALL_TARGETS:
            found = {t: dist_dir / t for t in KNOWN_TARGETS if (dist_dir / t).is_dir()}
            if not found:
                _missing_input(f"No builds found in: {dist_dir.resolve()}")
            for name in KNOWN_TARGETS:
                if name not in found:
                    log.info("No build for '%s', skipping", name)
            for name, path in found.items():
                build_dirs.setdefault(name, path)
            continue

        build_dir = dist_dir / target
        if not build_dir.is_dir():
            _missing_input(f"Distribution directory not found: {build_dir.resolve()}")
        build_dirs.setdefault(target, build_dir)
    return build_dirs


def _missing_input(message: str) -> None:
    click.echo(f"{click.style('❌', fg='red')} {message}", err=True)
    click.echo("   Run the build first.", err=True)
    sys.exit(EXIT_MISSING_INPUT)


# ── summary ──────────────────────────────────────────────────────────────

@main.command()
@click.argument("report", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--baseline",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Earlier report to compare totals against",
)
@click.option(
    "--threshold",
    type=float,
    default=DEFAULT_INCREASE_THRESHOLD,
    show_default=True,
    help="Flag growth above this many percent",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def summary(report: Path, baseline: Path | None, threshold: float, as_json: bool) -> None:
    """Show budget usage of a saved JSON REPORT."""
    try:
        current = load_report(report)
        previous = load_report(baseline) if baseline else None
    except ReportError as exc:
        click.echo(f"{click.style('❌', fg='red')} {exc}", err=True)
        sys.exit(EXIT_MISSING_INPUT)

    summaries = summarize_report(current, previous, threshold)

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in summaries], indent=2))
        return

    click.echo(f"\n{click.style('📊', bold=True)} Bundle size budget ({report})\n")
    for item in summaries:
        _print_summary(item, threshold)
    click.echo()


def _print_summary(item: TargetSummary, threshold: float) -> None:
    status = click.style("✓", fg="green") if item.passed else click.style("✗", fg="red")
    level = click.style(item.level, fg=_LEVEL_COLORS.get(item.level, "white"), bold=True)
    click.echo(
        f"  {status} {item.target:12s} {item.total_kb:10.2f} KB  "
        f"{item.usage_percent:5.1f}% of {format_number(item.max_total_kb)}KB  [{level}]"
    )

    delta = item.delta
    if delta is None:
        return
    percent = f" ({delta.change_percent:+.1f}%)" if delta.change_percent is not None else ""
    line = f"{delta.change_kb:+.2f} KB{percent} vs baseline"
    if delta.exceeds_threshold:
        click.echo(f"      {click.style(line, fg='red')}, exceeds {format_number(threshold)}% increase threshold")
    else:
        click.echo(f"      {click.style(line, fg='bright_black')}")


# ── limits ───────────────────────────────────────────────────────────────

@main.command()
@_config_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def limits(config_path: Path | None, as_json: bool) -> None:
    """Show the size limits in effect."""
    active = load_limits(config_path)

    if as_json:
        click.echo(json.dumps(active.to_dict(), indent=2))
        return

    click.echo(f"  {click.style('Max total size:', bold=True)} {format_number(active.max_total_size_kb)}KB")
    click.echo(f"  {click.style('Max chunk size:', bold=True)} {format_number(active.max_chunk_size_kb)}KB")
    click.echo(f"  {click.style('Excluded:', bold=True)}       {', '.join(active.exclude) or '(none)'}")
