"""Analysis result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class FileSizeEntry:
    """Single output file (a "chunk") of a build."""

    file: str
    size_bytes: int
    size_kb: float
    size_formatted: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "sizeBytes": self.size_bytes,
            "sizeKB": self.size_kb,
            "sizeFormatted": self.size_formatted,
        }


@dataclass(slots=True)
class AnalysisResult:
    """Aggregate of one scan of a build directory.

    ``files`` is sorted by size, largest first. ``passed`` is true
    exactly when ``errors`` is empty; warnings never fail a check.
    """

    total_size_bytes: int = 0
    total_size_kb: float = 0.0
    total_size_formatted: str = "0 B"
    files: list[FileSizeEntry] = field(default_factory=list)
    largest_chunk: FileSizeEntry | None = None
    passed: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Render with the camelCase keys used in JSON reports."""
        return {
            "totalSizeBytes": self.total_size_bytes,
            "totalSizeKB": self.total_size_kb,
            "totalSizeFormatted": self.total_size_formatted,
            "files": [f.to_dict() for f in self.files],
            "largestChunk": self.largest_chunk.to_dict() if self.largest_chunk else None,
            "passed": self.passed,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
