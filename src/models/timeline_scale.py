"""Timeline scale selection (marker interval / snap grid) from video duration."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from src.utils.config import SCALE_CANDIDATES, TARGET_MARKER_COUNT
from src.utils.time_utils import seconds_to_ms

# Finest placement granularity for region edges
MIN_ITEM_DURATION_MS = 1


@dataclass(frozen=True, slots=True)
class ScaleConfig:
    """Axis granularity derived from a duration. Never mutated."""

    interval_ms: int
    grid_ms: int
    min_item_duration_ms: int
    default_item_duration_ms: int
    min_visible_range_ms: int


def select_scale_candidate(duration_seconds: float) -> tuple[float, float]:
    """Return the finest (interval, grid) pair keeping markers <= target.

    Falls back to the coarsest candidate when none fits.
    """
    for interval_s, grid_s in SCALE_CANDIDATES:
        if not duration_seconds > 0:
            return interval_s, grid_s
        if duration_seconds / interval_s <= TARGET_MARKER_COUNT:
            return interval_s, grid_s
    return SCALE_CANDIDATES[-1]


@lru_cache(maxsize=256)
def calculate_timeline_scale(duration_seconds: float) -> ScaleConfig:
    """Derive the :class:`ScaleConfig` for a video of *duration_seconds*.

    Pure function of the duration; results are cached per duration so it can
    be re-derived on every refresh without drift.

    Example:
        >>> calculate_timeline_scale(10).interval_ms
        1000
    """
    total_ms = seconds_to_ms(duration_seconds)
    interval_s, grid_s = select_scale_candidate(duration_seconds)

    interval_ms = int(round(interval_s * 1000))
    grid_ms = int(round(grid_s * 1000))

    min_item_duration_ms = MIN_ITEM_DURATION_MS
    default_item_duration_ms = min(
        max(min_item_duration_ms, interval_ms * 2),
        total_ms if total_ms > 0 else interval_ms * 2,
    )

    min_visible_range_ms = max(interval_ms * 3, min_item_duration_ms * 6, 1000)
    if total_ms > 0:
        min_visible_range_ms = min(min_visible_range_ms, total_ms)

    return ScaleConfig(
        interval_ms=interval_ms,
        grid_ms=grid_ms,
        min_item_duration_ms=min_item_duration_ms,
        default_item_duration_ms=default_item_duration_ms,
        min_visible_range_ms=min_visible_range_ms,
    )


def safe_min_duration(min_item_duration_ms: int, total_ms: int) -> int:
    """Minimum region length, never longer than the video itself."""
    if total_ms > 0:
        return min(min_item_duration_ms, total_ms)
    return min_item_duration_ms
