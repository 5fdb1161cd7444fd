"""JSON file storage for size reports."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

REPORTS_DIR = Path("bundle-reports")
MERGED_REPORT_NAME = "all"


class ReportError(Exception):
    """A saved report could not be read."""


def report_path(reports_dir: Path, target: str) -> Path:
    """Return the report file used for *target*."""
    return reports_dir / f"bundle-size-{target}.json"


def save_report(path: Path, text: str) -> Path:
    """Write a rendered report, creating the directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    log.info("Saved report: %s", path)
    return path


def load_report(path: Path) -> dict[str, Any]:
    """Load a saved JSON report.

    Raises:
        ReportError: the file is missing, unreadable or not a report.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ReportError(f"Report not found: {path}") from e
    except (json.JSONDecodeError, OSError) as e:
        raise ReportError(f"Cannot read report {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("results"), dict):
        raise ReportError(f"Not a bundle size report: {path}")

    config = data.get("config")
    if config is not None:
        if not isinstance(config, dict):
            raise ReportError(f"Invalid config in report {path}")
        _check_number(config, "maxTotalSizeKB", f"config in report {path}")

    for target, result in data["results"].items():
        if not isinstance(result, dict):
            raise ReportError(f"Invalid result for '{target}' in report {path}")
        _check_number(result, "totalSizeKB", f"result for '{target}' in report {path}")
    return data


def _check_number(section: dict[str, Any], key: str, where: str) -> None:
    value = section.get(key)
    # bool is an int subclass; "true" is never a size
    if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
        raise ReportError(f"{key} must be a number in {where}, got {value!r}")
