"""Size limits loaded from an optional JSON config file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from bundlesize.models.limits import DEFAULT_LIMITS, SizeLimits

log = logging.getLogger(__name__)

CONFIG_FILE = "bundle-size.json"


def find_config(cwd: Path | None = None) -> Path | None:
    """Return ``bundle-size.json`` in *cwd* if present."""
    candidate = (cwd or Path.cwd()) / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_limits(path: Path | None = None, cwd: Path | None = None) -> SizeLimits:
    """Resolve the limits for this run.

    Uses *path* when given, otherwise ``bundle-size.json`` in *cwd*,
    otherwise the defaults. The file uses the same keys as the ``config``
    block of a JSON report::

        {"maxTotalSizeKB": 600, "maxChunkSizeKB": 300, "exclude": [".map"]}

    A corrupt file is ignored with a warning. A key with an unusable
    value is ignored with a warning; the other keys still apply.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return DEFAULT_LIMITS

    data = _read(path)
    if data is None:
        return DEFAULT_LIMITS

    limits = DEFAULT_LIMITS
    for key in ("maxTotalSizeKB", "maxChunkSizeKB", "exclude"):
        if key not in data:
            continue
        try:
            limits = SizeLimits.from_dict({key: data[key]}, base=limits)
        except (TypeError, ValueError) as e:
            log.warning("Ignoring %s in %s: %s", key, path, e)

    unknown = set(data) - {"maxTotalSizeKB", "maxChunkSizeKB", "exclude"}
    if unknown:
        log.warning("Unknown keys in %s: %s", path, ", ".join(sorted(unknown)))

    log.info("Loaded limits from %s", path)
    return limits


def _read(path: Path) -> dict[str, Any] | None:
    """Read the config file, returning None if it cannot be used."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Could not load config from %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        log.warning("Could not load config from %s: expected a JSON object", path)
        return None
    return data
