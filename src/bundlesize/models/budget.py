"""Budget summary dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SizeDelta:
    """Change of a bundle's total size against a baseline."""

    baseline_kb: float
    current_kb: float
    change_kb: float
    change_percent: float | None
    exceeds_threshold: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "baselineKB": self.baseline_kb,
            "currentKB": self.current_kb,
            "changeKB": self.change_kb,
            "changePercent": self.change_percent,
            "exceedsThreshold": self.exceeds_threshold,
        }


@dataclass(frozen=True, slots=True)
class TargetSummary:
    """Budget usage of one target in a saved report."""

    target: str
    total_kb: float
    max_total_kb: float
    usage_percent: float
    level: str
    passed: bool
    delta: SizeDelta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "totalSizeKB": self.total_kb,
            "maxTotalSizeKB": self.max_total_kb,
            "usagePercent": self.usage_percent,
            "level": self.level,
            "passed": self.passed,
            "delta": self.delta.to_dict() if self.delta else None,
        }
