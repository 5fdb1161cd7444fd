"""Bundle size analysis: directory walk, aggregation and threshold checks."""

from __future__ import annotations

import logging
from pathlib import Path

from bundlesize.models.analysis_result import AnalysisResult, FileSizeEntry
from bundlesize.models.limits import DEFAULT_LIMITS, SizeLimits
from bundlesize.utils import format_bytes, format_number, is_excluded, walk_files

log = logging.getLogger(__name__)

# Fraction of a ceiling above which a warning is raised
WARNING_RATIO = 0.8


def collect_file_sizes(root: Path | str, limits: SizeLimits = DEFAULT_LIMITS) -> list[FileSizeEntry]:
    """Collect one entry per non-excluded file under *root*.

    A missing *root* yields an empty list. Callers that consider that
    fatal must check for the directory first.
    """
    entries: list[FileSizeEntry] = []
    for relative, name, size in walk_files(root):
        if is_excluded(name, limits.exclude):
            log.debug("Excluded: %s", relative)
            continue
        entries.append(
            FileSizeEntry(
                file=relative,
                size_bytes=size,
                size_kb=size / 1024,
                size_formatted=format_bytes(size),
            )
        )
    return entries


def analyze_bundle_size(root: Path | str, limits: SizeLimits = DEFAULT_LIMITS) -> AnalysisResult:
    """Measure a build directory and check it against *limits*.

    Total-size messages come before per-file messages; per-file messages
    follow traversal order. A file over its own ceiling is reported even
    when the total is also over.
    """
    files = collect_file_sizes(root, limits)
    total_bytes = sum(f.size_bytes for f in files)
    total_kb = total_bytes / 1024
    total_formatted = format_bytes(total_bytes)

    errors: list[str] = []
    warnings: list[str] = []

    max_total = format_number(limits.max_total_size_kb)
    if total_kb > limits.max_total_size_kb:
        errors.append(f"Total bundle size ({total_formatted}) exceeds limit of {max_total}KB")
    elif total_kb > limits.max_total_size_kb * WARNING_RATIO:
        warnings.append(f"Total bundle size ({total_formatted}) is approaching limit of {max_total}KB")

    max_chunk = format_number(limits.max_chunk_size_kb)
    for entry in files:
        if entry.size_kb > limits.max_chunk_size_kb:
            errors.append(f'Chunk "{entry.file}" ({entry.size_formatted}) exceeds limit of {max_chunk}KB')
        elif entry.size_kb > limits.max_chunk_size_kb * WARNING_RATIO:
            warnings.append(
                f'Chunk "{entry.file}" ({entry.size_formatted}) is approaching limit of {max_chunk}KB'
            )

    sorted_files = sorted(files, key=lambda f: f.size_bytes, reverse=True)

    log.info(
        "Analyzed %s: %d files, %d bytes, %d error(s), %d warning(s)",
        root,
        len(sorted_files),
        total_bytes,
        len(errors),
        len(warnings),
    )

    return AnalysisResult(
        total_size_bytes=total_bytes,
        total_size_kb=total_kb,
        total_size_formatted=total_formatted,
        files=sorted_files,
        largest_chunk=sorted_files[0] if sorted_files else None,
        passed=not errors,
        errors=errors,
        warnings=warnings,
    )
