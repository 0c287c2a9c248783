"""Zoom region data models (pure Python, no Qt dependency)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TimeSpan:
    """A half-open time range ``[start, end)`` in milliseconds.

    Used both for region extents and for the visible range of the timeline.
    """

    start: int
    end: int

    @property
    def duration_ms(self) -> int:
        return self.end - self.start

    @property
    def is_valid(self) -> bool:
        return self.start < self.end

    def overlaps(self, other: TimeSpan) -> bool:
        """True if the spans share time. Touching boundaries do not overlap."""
        return not (self.end <= other.start or self.start >= other.end)


def new_region_id() -> str:
    """Return a fresh, never-reused region identifier."""
    return uuid.uuid4().hex


@dataclass(slots=True)
class ZoomRegion:
    """A user-defined zoom annotation over the video."""

    id: str
    start_ms: int
    end_ms: int

    @classmethod
    def create(cls, span: TimeSpan) -> ZoomRegion:
        return cls(id=new_region_id(), start_ms=span.start, end_ms=span.end)

    @property
    def span(self) -> TimeSpan:
        return TimeSpan(self.start_ms, self.end_ms)

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms


@dataclass(slots=True)
class ZoomRegionTrack:
    """The set of zoom regions on the single timeline row.

    Regions are kept in insertion order; layout code works on
    :meth:`sorted_regions`, which orders them by start time.
    """

    regions: list[ZoomRegion] = field(default_factory=list)

    def sorted_regions(self) -> list[ZoomRegion]:
        return sorted(self.regions, key=lambda r: r.start_ms)

    def get(self, region_id: str) -> ZoomRegion | None:
        for region in self.regions:
            if region.id == region_id:
                return region
        return None

    def add_region(self, region: ZoomRegion) -> None:
        self.regions.append(region)

    def remove_region(self, region_id: str) -> ZoomRegion | None:
        """Remove and return the region with *region_id* (None if absent)."""
        for i, region in enumerate(self.regions):
            if region.id == region_id:
                return self.regions.pop(i)
        return None

    def update_span(self, region_id: str, span: TimeSpan) -> bool:
        region = self.get(region_id)
        if region is None:
            return False
        region.start_ms = span.start
        region.end_ms = span.end
        return True

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self):
        return iter(self.regions)

    def __contains__(self, region_id: object) -> bool:
        return any(r.id == region_id for r in self.regions)
