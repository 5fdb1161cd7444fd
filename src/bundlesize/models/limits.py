"""Size limit configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_EXCLUDE: tuple[str, ...] = (
    ".map",
    ".html",
    "manifest.json",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".ico",
    ".woff",
    ".woff2",
    ".ttf",
    ".eot",
)


@dataclass(frozen=True, slots=True)
class SizeLimits:
    """Ceilings a bundle is checked against.

    Sizes are in kibibytes. ``exclude`` holds filename suffixes that are
    left out of every total and listing.
    """

    max_total_size_kb: float = 500
    max_chunk_size_kb: float = 250
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE

    def to_dict(self) -> dict[str, Any]:
        """Render with the keys used in JSON reports and config files."""
        return {
            "maxTotalSizeKB": self.max_total_size_kb,
            "maxChunkSizeKB": self.max_chunk_size_kb,
            "exclude": list(self.exclude),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: SizeLimits | None = None) -> SizeLimits:
        """Build limits from a report/config mapping, filling gaps from *base*.

        Raises:
            TypeError, ValueError: a present key has an unusable value.
        """
        base = base or DEFAULT_LIMITS
        exclude = data.get("exclude", base.exclude)
        if isinstance(exclude, str) or not all(isinstance(p, str) for p in exclude):
            raise TypeError("exclude must be a list of strings")
        return cls(
            max_total_size_kb=_as_number(data.get("maxTotalSizeKB", base.max_total_size_kb)),
            max_chunk_size_kb=_as_number(data.get("maxChunkSizeKB", base.max_chunk_size_kb)),
            exclude=tuple(exclude),
        )


def _as_number(value: Any) -> float:
    # bool is an int subclass; "true" is never a size
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return value


DEFAULT_LIMITS = SizeLimits()
