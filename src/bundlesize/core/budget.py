"""Budget usage and baseline comparison for saved reports."""

from __future__ import annotations

import logging
from typing import Any

from bundlesize.models.budget import SizeDelta, TargetSummary
from bundlesize.models.limits import DEFAULT_LIMITS

log = logging.getLogger(__name__)

CRITICAL_PERCENT = 90.0
NOTICE_PERCENT = 75.0
DEFAULT_INCREASE_THRESHOLD = 10.0


def budget_usage(total_kb: float, max_total_kb: float) -> float:
    """Return the share of the total ceiling in use, in percent."""
    if max_total_kb <= 0:
        return 0.0
    return total_kb * 100 / max_total_kb


def usage_level(percent: float) -> str:
    """Classify budget usage: 'critical' above 90%, 'notice' above 75%, else 'ok'."""
    if percent > CRITICAL_PERCENT:
        return "critical"
    if percent > NOTICE_PERCENT:
        return "notice"
    return "ok"


def compare_totals(
    current_kb: float,
    baseline_kb: float,
    threshold: float = DEFAULT_INCREASE_THRESHOLD,
) -> SizeDelta:
    """Compare a total size against a baseline.

    The percent change is None when the baseline is empty; any growth
    from an empty baseline counts as exceeding the threshold.
    """
    change = current_kb - baseline_kb
    if baseline_kb > 0:
        percent: float | None = change * 100 / baseline_kb
        exceeds = percent > threshold
    else:
        percent = None
        exceeds = change > 0
    return SizeDelta(
        baseline_kb=baseline_kb,
        current_kb=current_kb,
        change_kb=change,
        change_percent=percent,
        exceeds_threshold=exceeds,
    )


def summarize_report(
    report: dict[str, Any],
    baseline: dict[str, Any] | None = None,
    threshold: float = DEFAULT_INCREASE_THRESHOLD,
) -> list[TargetSummary]:
    """Summarize every target of a saved report.

    Args:
        report: A loaded JSON report.
        baseline: An earlier report; targets it shares with *report*
            get a size delta.
        threshold: Percent growth above which a delta is flagged.
    """
    config = report.get("config") or {}
    max_total = config.get("maxTotalSizeKB") or DEFAULT_LIMITS.max_total_size_kb
    baseline_results = (baseline or {}).get("results", {})

    summaries: list[TargetSummary] = []
    for target, result in report["results"].items():
        total_kb = result.get("totalSizeKB", 0.0)
        percent = budget_usage(total_kb, max_total)

        delta = None
        previous = baseline_results.get(target)
        if previous is not None:
            delta = compare_totals(total_kb, previous.get("totalSizeKB", 0.0), threshold)
        elif baseline is not None:
            log.info("Target '%s' not in baseline, skipping comparison", target)

        summaries.append(
            TargetSummary(
                target=target,
                total_kb=total_kb,
                max_total_kb=max_total,
                usage_percent=percent,
                level=usage_level(percent),
                passed=bool(result.get("passed", False)),
                delta=delta,
            )
        )
    return summaries
