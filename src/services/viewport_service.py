"""Visible range handling and pixel <-> time mapping for the timeline."""

from __future__ import annotations

from typing import Protocol

from src.models.zoom_region import TimeSpan
from src.utils.config import FALLBACK_RANGE_MS


class CoordinateMapper(Protocol):
    """Pixel/time conversion supplied by the interaction layer.

    Both directions work on distances relative to the visible range start.
    """

    def value_to_offset(self, ms: float) -> float: ...

    def offset_to_value(self, px: float) -> float: ...


class LinearCoordinateMapper:
    """Constant pixels-per-millisecond mapping."""

    def __init__(self, px_per_ms: float) -> None:
        self.px_per_ms = px_per_ms

    @classmethod
    def fit(cls, visible_range: TimeSpan, width_px: float) -> LinearCoordinateMapper:
        """Mapper that shows *visible_range* across *width_px* pixels."""
        span = visible_range.duration_ms
        return cls(width_px / span if span > 0 else 0.0)

    def value_to_offset(self, ms: float) -> float:
        return ms * self.px_per_ms

    def offset_to_value(self, px: float) -> float:
        if self.px_per_ms <= 0:
            return 0.0
        return px / self.px_per_ms


def create_initial_range(total_ms: int) -> TimeSpan:
    """Full video, or a 1 s placeholder before anything is loaded."""
    if total_ms > 0:
        return TimeSpan(0, total_ms)
    return TimeSpan(0, FALLBACK_RANGE_MS)


def clamp_range(visible_range: TimeSpan, total_ms: int) -> TimeSpan:
    """Keep the visible range inside ``[0, total_ms]``. No-op without a video."""
    if total_ms == 0:
        return visible_range
    return TimeSpan(
        max(0, min(visible_range.start, total_ms)),
        min(visible_range.end, total_ms),
    )


def enforce_min_visible_range(visible_range: TimeSpan, min_visible_ms: int, total_ms: int) -> TimeSpan:
    """Widen a range narrower than *min_visible_ms* around its centre.

    The widened range is shifted back inside the video when it would cross
    either end.
    """
    if visible_range.duration_ms >= min_visible_ms:
        return visible_range

    centre = (visible_range.start + visible_range.end) / 2
    start = int(round(centre - min_visible_ms / 2))
    end = start + min_visible_ms
    if total_ms > 0:
        if end > total_ms:
            start -= end - total_ms
            end = total_ms
        if start < 0:
            end = min(total_ms, end - start)
            start = 0
    elif start < 0:
        end -= start
        start = 0
    return TimeSpan(start, end)


def offset_to_time(offset_px: float, visible_range: TimeSpan, mapper: CoordinateMapper,
                   video_duration_ms: int) -> int:
    """Absolute time under a pixel offset, clamped to the video."""
    absolute = visible_range.start + mapper.offset_to_value(offset_px)
    return int(round(max(0, min(absolute, video_duration_ms))))


def cursor_offset(current_ms: int, video_duration_ms: int, visible_range: TimeSpan,
                  mapper: CoordinateMapper) -> float | None:
    """Pixel offset of the playback cursor, or None when it is not drawn."""
    if video_duration_ms <= 0 or current_ms < 0:
        return None
    clamped = min(current_ms, video_duration_ms)
    if clamped < visible_range.start or clamped > visible_range.end:
        return None
    return mapper.value_to_offset(clamped - visible_range.start)
