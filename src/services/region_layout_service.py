"""
Layout rules for zoom regions: normalization, overlap/snap-gap detection
and placement of new regions.

All functions are pure. They take the region collection by value and never
mutate it; callers apply the returned spans to their store.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from src.models.zoom_region import TimeSpan, ZoomRegion
from src.utils.config import (
    DEFAULT_REGION_DURATION_MS,
    NO_SPACE_TITLE,
    SNAP_THRESHOLD_MS,
)


def _clamp(value: int, lo: int, hi: int) -> int:
    # hi wins when lo > hi
    return min(max(value, lo), hi)


# ---------------------------------------------------------------- Normalizer

def normalize_span(start_ms: int, end_ms: int, total_ms: int, min_item_duration_ms: int) -> TimeSpan | None:
    """Clamp a region into ``[0, total_ms]`` keeping at least the minimum length.

    Returns None when there is nothing to normalize against (no video, or a
    non-positive minimum).
    """
    if total_ms <= 0 or min_item_duration_ms <= 0:
        return None

    clamped_start = _clamp(start_ms, 0, total_ms)
    min_end = clamped_start + min_item_duration_ms
    clamped_end = _clamp(max(min_end, end_ms), min_end, total_ms)
    normalized_start = _clamp(clamped_start, 0, total_ms - min_item_duration_ms)
    normalized_end = _clamp(max(min_end, clamped_end), min_end, total_ms)
    return TimeSpan(normalized_start, normalized_end)


def normalize_regions(
    regions: Iterable[ZoomRegion],
    total_ms: int,
    min_item_duration_ms: int,
) -> list[tuple[str, TimeSpan]]:
    """Return ``(region_id, span)`` corrections for every invalid region.

    Every region is checked against the same duration snapshot, so the caller
    can apply the whole batch before anything downstream reads the regions.
    """
    if total_ms <= 0 or min_item_duration_ms <= 0:
        return []

    corrections: list[tuple[str, TimeSpan]] = []
    for region in regions:
        span = normalize_span(region.start_ms, region.end_ms, total_ms, min_item_duration_ms)
        if span is None:
            continue
        if span.start != region.start_ms or span.end != region.end_ms:
            corrections.append((region.id, span))
    return corrections


# ---------------------------------------------------------- Overlap / gaps

def _conflicts(span: TimeSpan, region: ZoomRegion, snap_threshold_ms: int) -> bool:
    gap_before = span.start - region.end_ms
    gap_after = region.start_ms - span.end
    if 0 < gap_before <= snap_threshold_ms:
        return True
    if 0 < gap_after <= snap_threshold_ms:
        return True
    return not (span.end <= region.start_ms or span.start >= region.end_ms)


def find_conflicts(
    span: TimeSpan,
    regions: Iterable[ZoomRegion],
    exclude_id: str | None = None,
    snap_threshold_ms: int = SNAP_THRESHOLD_MS,
) -> list[ZoomRegion]:
    """Regions that overlap *span* or sit within the snap threshold of it."""
    return [
        region for region in regions
        if region.id != exclude_id and _conflicts(span, region, snap_threshold_ms)
    ]


def has_overlap(
    span: TimeSpan,
    regions: Iterable[ZoomRegion],
    exclude_id: str | None = None,
    snap_threshold_ms: int = SNAP_THRESHOLD_MS,
) -> bool:
    """True if *span* must be rejected.

    A span is rejected when it truly overlaps another region, or when it
    leaves a gap of 1..snap_threshold_ms to one. Exactly touching edges
    are fine. *exclude_id* is the region being resized/moved.
    """
    return any(
        region.id != exclude_id and _conflicts(span, region, snap_threshold_ms)
        for region in regions
    )


# ---------------------------------------------------------------- Placement

@dataclass(frozen=True, slots=True)
class PlacementResult:
    """Outcome of a placement search: a span, or the reason there is none."""

    span: TimeSpan | None = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.span is not None


def placement_duration(total_ms: int, min_item_duration_ms: int,
                       preferred_ms: int = DEFAULT_REGION_DURATION_MS) -> int:
    """Length of a new region: preferred, at least the minimum, at most the video."""
    return min(max(preferred_ms, min_item_duration_ms), total_ms)


def find_placement(
    regions: Iterable[ZoomRegion],
    total_ms: int,
    min_item_duration_ms: int,
    preferred_ms: int = DEFAULT_REGION_DURATION_MS,
) -> PlacementResult:
    """First-fit search for a free slot, scanning regions by start time.

    The candidate start advances past every region that the new span would
    collide with; the first region it fits in front of ends the scan.
    """
    if total_ms <= 0:
        return PlacementResult(reason="No video loaded")

    duration = placement_duration(total_ms, min_item_duration_ms, preferred_ms)
    if duration <= 0:
        return PlacementResult(reason="No video loaded")

    start_pos = 0
    for region in sorted(regions, key=lambda r: r.start_ms):
        if start_pos + duration <= region.start_ms:
            break
        start_pos = max(start_pos, region.end_ms)

    if start_pos + duration > total_ms:
        return PlacementResult(reason=NO_SPACE_TITLE)

    return PlacementResult(span=TimeSpan(start_pos, start_pos + duration))
