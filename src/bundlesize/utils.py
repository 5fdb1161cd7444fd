"""Shared utility functions."""

from __future__ import annotations

import logging
import os
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path
from typing import Iterable, Iterator

log = logging.getLogger(__name__)

_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(size_bytes: int) -> str:
    """Convert a byte count to a base-1024 string with at most two decimals.

    >>> format_bytes(1536)
    '1.5 KB'
    """
    if size_bytes == 0:
        return "0 B"

    index = 0
    while index < len(_UNITS) - 1 and size_bytes >= 1024 ** (index + 1):
        index += 1
    # exact halves round up: 1152 B is 1.125 KB -> "1.13 KB"
    with localcontext() as ctx:
        ctx.prec = 80
        scaled = (Decimal(size_bytes) / Decimal(1024**index)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    value = f"{scaled:f}".rstrip("0").rstrip(".")
    return f"{value} {_UNITS[index]}"


def format_number(value: float) -> str:
    """Render a configured ceiling without a spurious trailing ``.0``."""
    return f"{value:g}"


def is_excluded(name: str, patterns: Iterable[str]) -> bool:
    """Check whether a filename ends with any of the excluded suffixes."""
    return any(name.endswith(pattern) for pattern in patterns)


def walk_files(
    root: Path | str,
    base: str = "",
    _ancestors: frozenset[tuple[int, int]] = frozenset(),
) -> Iterator[tuple[str, str, int]]:
    """Yield ``(relative_path, name, size_bytes)`` for every file under *root*.

    Depth-first, entries of a directory in name order. Symlinks are
    followed; a link back to a directory on the current path is skipped.
    Entries that cannot be stat'ed are skipped.
    """
    try:
        st = os.stat(root)
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        log.debug("Cannot read directory: %s", root)
        return

    ancestors = _ancestors | {(st.st_dev, st.st_ino)}
    for entry in entries:
        relative = os.path.join(base, entry.name)
        try:
            if entry.is_dir():
                target = entry.stat()
                if (target.st_dev, target.st_ino) in ancestors:
                    log.debug("Skipping directory loop: %s", entry.path)
                    continue
                yield from walk_files(entry.path, relative, ancestors)
            elif entry.is_file():
                yield relative, entry.name, entry.stat().st_size
        except OSError:
            log.debug("Cannot access: %s", entry.path)
