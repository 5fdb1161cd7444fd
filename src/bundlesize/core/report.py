"""Text and JSON renderings of an analysis."""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from typing import Mapping

from bundlesize.models.analysis_result import AnalysisResult
from bundlesize.models.limits import DEFAULT_LIMITS, SizeLimits

_RULE_WIDTH = 50
_BAR_MAX = 20
_BAR_CHAR = "█"


def size_bar(size_kb: float) -> str:
    """Proportional bar, one block per started 10 KB, at most 20 blocks."""
    return _BAR_CHAR * min(_BAR_MAX, math.ceil(size_kb / 10))


def generate_report(result: AnalysisResult, target: str) -> str:
    """Render the human-readable report for one target."""
    lines = [
        "",
        f"📦 Bundle Size Analysis for {target}",
        "=" * _RULE_WIDTH,
        "",
        f"📊 Total Size: {result.total_size_formatted}",
        f"📁 Total Files: {len(result.files)}",
    ]
    if result.largest_chunk:
        chunk = result.largest_chunk
        lines.append(f"🔝 Largest Chunk: {chunk.file} ({chunk.size_formatted})")

    lines += ["", "📋 File Breakdown:", "-" * _RULE_WIDTH]
    for entry in result.files:
        lines.append(f"  {entry.size_formatted:>10} │ {size_bar(entry.size_kb)} {entry.file}")

    if result.warnings:
        lines += ["", "⚠️  Warnings:"]
        lines += [f"  - {warning}" for warning in result.warnings]

    if result.errors:
        lines += ["", "❌ Errors:"]
        lines += [f"  - {error}" for error in result.errors]

    lines.append("")
    if result.passed:
        lines.append("✅ Bundle size check PASSED")
    else:
        lines.append("❌ Bundle size check FAILED")
    return "\n".join(lines) + "\n"


def generate_json_report(
    results: Mapping[str, AnalysisResult],
    limits: SizeLimits = DEFAULT_LIMITS,
) -> str:
    """Render one JSON document covering every target in *results*."""
    document = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "config": limits.to_dict(),
        "results": {target: result.to_dict() for target, result in results.items()},
    }
    return json.dumps(document, indent=2, ensure_ascii=False)
