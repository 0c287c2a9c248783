"""Axis marker (ruler tick) generation for the visible range."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

from src.models.zoom_region import TimeSpan
from src.utils.time_utils import format_time_label


@dataclass(frozen=True, slots=True)
class Marker:
    """A labelled tick on the time axis."""

    time_ms: int
    label: str

    def is_current(self, current_ms: int) -> bool:
        return self.time_ms == current_ms


@lru_cache(maxsize=512)
def _generate_markers(interval_ms: int, range_start: float, range_end: float,
                      video_duration_ms: int) -> tuple[Marker, ...]:
    max_time = video_duration_ms if video_duration_ms > 0 else range_end
    visible_start = max(0, min(range_start, max_time))
    visible_end = min(range_end, max_time)

    times: set[int] = set()
    t = math.ceil(visible_start / interval_ms) * interval_ms
    while t <= max_time:
        if visible_start <= t <= visible_end:
            times.add(int(round(t)))
        elif t > visible_end:
            break
        t += interval_ms

    # 실제 시작/끝은 격자와 무관하게 항상 표시
    if visible_start <= max_time:
        times.add(int(round(visible_start)))
    if video_duration_ms > 0:
        times.add(int(round(video_duration_ms)))

    return tuple(
        Marker(time, format_time_label(time, interval_ms))
        for time in sorted(t for t in times if t <= max_time)
    )


def generate_markers(interval_ms: int, visible_range: TimeSpan,
                     video_duration_ms: int) -> tuple[Marker, ...]:
    """Return the ticks visible in *visible_range*, ascending.

    Interval multiples inside the window, plus the window start and the true
    video end, deduplicated and labelled. ``interval_ms <= 0`` yields no
    markers. Results are cached per input tuple.
    """
    if not interval_ms > 0:
        return ()
    start, end = visible_range.start, visible_range.end
    if not (math.isfinite(start) and math.isfinite(end)):
        return ()
    return _generate_markers(interval_ms, start, end, video_duration_ms)
