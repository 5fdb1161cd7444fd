"""Bundlesize data models."""

from bundlesize.models.limits import DEFAULT_LIMITS, SizeLimits
from bundlesize.models.analysis_result import AnalysisResult, FileSizeEntry
from bundlesize.models.budget import SizeDelta, TargetSummary

__all__ = [
    "AnalysisResult",
    "DEFAULT_LIMITS",
    "FileSizeEntry",
    "SizeDelta",
    "SizeLimits",
    "TargetSummary",
]
