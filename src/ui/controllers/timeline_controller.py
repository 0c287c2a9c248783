"""TimelineController — 줌 영역 추가/크기조절/이동/삭제 및 뷰포트 로직."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from src.models.timeline_scale import ScaleConfig, calculate_timeline_scale, safe_min_duration
from src.models.zoom_region import TimeSpan, ZoomRegion
from src.services.marker_service import Marker, generate_markers
from src.services.region_layout_service import (
    find_conflicts,
    find_placement,
    normalize_regions,
    normalize_span,
)
from src.services.viewport_service import (
    clamp_range,
    create_initial_range,
    cursor_offset,
    enforce_min_visible_range,
    offset_to_time,
)
from src.utils.config import (
    DEFAULT_REGION_DURATION_MS,
    NO_SPACE_DESCRIPTION,
    NO_SPACE_TITLE,
    ROW_ID,
    SNAP_THRESHOLD_MS,
)
from src.utils.time_utils import ms_to_display, ms_to_seconds, seconds_to_ms

if TYPE_CHECKING:
    from src.services.viewport_service import CoordinateMapper
    from src.ui.controllers.app_context import AppContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegionItem:
    """A region as handed to the timeline view."""

    id: str
    row_id: str
    span: TimeSpan
    label: str


class TimelineController(QObject):
    """줌 영역 편집 Controller.

    Every edit is validated against the overlap/snap-gap rule before it is
    applied, and the whole region set is re-normalized whenever the duration
    changes. Rejections are reported through signals and never raise.
    """

    regions_changed = Signal()
    region_added = Signal(str)                 # region id
    region_span_changed = Signal(str, int, int)  # (id, start_ms, end_ms)
    region_deleted = Signal(str)
    region_selected = Signal(object)           # region id or None
    placement_failed = Signal(str, str)        # (title, description)
    seek_requested = Signal(float)             # seconds
    range_changed = Signal(int, int)           # (start_ms, end_ms)
    duration_changed = Signal(int)             # total ms

    def __init__(self, ctx: AppContext, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.ctx = ctx

    # ---- 파생 상태 ----

    @property
    def scale(self) -> ScaleConfig:
        return calculate_timeline_scale(self.ctx.duration_seconds)

    @property
    def min_duration_ms(self) -> int:
        return safe_min_duration(self.scale.min_item_duration_ms, self.ctx.total_ms)

    @property
    def snap_threshold_ms(self) -> int:
        if self.ctx.settings is not None:
            return self.ctx.settings.get_snap_threshold()
        return SNAP_THRESHOLD_MS

    @property
    def default_region_duration_ms(self) -> int:
        if self.ctx.settings is not None:
            return self.ctx.settings.get_default_region_duration()
        return DEFAULT_REGION_DURATION_MS

    # ---- 재생 길이 ----

    def set_duration(self, duration_seconds: float | None) -> None:
        """Load a new video duration and re-derive everything from it."""
        ctx = self.ctx
        if duration_seconds is None or not math.isfinite(duration_seconds) or duration_seconds < 0:
            duration_seconds = 0.0
        ctx.duration_seconds = duration_seconds
        ctx.total_ms = seconds_to_ms(duration_seconds)
        ctx.visible_range = create_initial_range(ctx.total_ms)
        logger.info(f"Timeline duration set: {ctx.total_ms}ms, interval={self.scale.interval_ms}ms")

        self.normalize_all()
        self.duration_changed.emit(ctx.total_ms)
        self.range_changed.emit(ctx.visible_range.start, ctx.visible_range.end)

    def normalize_all(self) -> int:
        """Bring every region inside the current duration.

        All corrections are computed first and applied together, then a
        single ``regions_changed`` is emitted. Returns the number of
        regions that changed.
        """
        ctx = self.ctx
        corrections = normalize_regions(ctx.track, ctx.total_ms, self.min_duration_ms)
        if not corrections:
            return 0
        for region_id, span in corrections:
            ctx.track.update_span(region_id, span)
        for region_id, span in corrections:
            self.region_span_changed.emit(region_id, span.start, span.end)
        logger.info(f"Normalized {len(corrections)} zoom region(s) to duration {ctx.total_ms}ms")
        self.regions_changed.emit()
        return len(corrections)

    # ---- 영역 편집 ----

    def add_region(self) -> ZoomRegion | None:
        """Place a new region in the first free slot ("Add Zoom")."""
        ctx = self.ctx
        if not ctx.has_video:
            return None

        result = find_placement(
            ctx.track, ctx.total_ms, self.min_duration_ms, self.default_region_duration_ms,
        )
        if not result.ok:
            logger.warning(f"Zoom region not added: {result.reason} (duration={ctx.total_ms}ms, regions={len(ctx.track)})")
            self.placement_failed.emit(NO_SPACE_TITLE, NO_SPACE_DESCRIPTION)
            return None

        # first-fit slot은 다음 영역과 1~2ms 간격을 남길 수 있음
        conflicts = find_conflicts(result.span, ctx.track, None, self.snap_threshold_ms)
        if conflicts:
            logger.warning(
                f"Zoom region not added: slot {result.span.start}-{result.span.end}ms "
                f"conflicts with {[c.id for c in conflicts]}"
            )
            self.placement_failed.emit(NO_SPACE_TITLE, NO_SPACE_DESCRIPTION)
            return None

        region = ZoomRegion.create(result.span)
        ctx.track.add_region(region)
        logger.info(f"Zoom region added: {ms_to_display(region.start_ms)} - {ms_to_display(region.end_ms)}")
        self.region_added.emit(region.id)
        self.regions_changed.emit()
        return region

    def resize_region(self, region_id: str, span: TimeSpan) -> bool:
        """Apply a new span to a region if it passes the layout rules."""
        ctx = self.ctx
        region = ctx.track.get(region_id)
        if region is None:
            logger.warning(f"Resize ignored, unknown zoom region: {region_id}")
            return False
        if not span.is_valid:
            logger.debug(f"Resize rejected, empty span {span} for {region_id}")
            return False

        normalized = normalize_span(span.start, span.end, ctx.total_ms, self.min_duration_ms) or span
        conflicts = find_conflicts(normalized, ctx.track, region_id, self.snap_threshold_ms)
        if conflicts:
            logger.debug(
                f"Resize rejected for {region_id}: {normalized.start}-{normalized.end}ms "
                f"conflicts with {[c.id for c in conflicts]}"
            )
            return False

        if normalized == region.span:
            return True
        ctx.track.update_span(region_id, normalized)
        self.region_span_changed.emit(region_id, normalized.start, normalized.end)
        self.regions_changed.emit()
        return True

    def move_region(self, region_id: str, new_start_ms: int) -> bool:
        """Shift a region to *new_start_ms*, keeping its length."""
        ctx = self.ctx
        region = ctx.track.get(region_id)
        if region is None:
            logger.warning(f"Move ignored, unknown zoom region: {region_id}")
            return False

        duration = region.duration_ms
        start = max(0, new_start_ms)
        if ctx.has_video:
            start = min(start, max(0, ctx.total_ms - duration))
        return self.resize_region(region_id, TimeSpan(start, start + duration))

    def delete_region(self, region_id: str) -> bool:
        ctx = self.ctx
        if ctx.track.remove_region(region_id) is None:
            return False
        if ctx.selected_region_id == region_id:
            self.select_region(None)
        self.region_deleted.emit(region_id)
        self.regions_changed.emit()
        return True

    def select_region(self, region_id: str | None) -> None:
        ctx = self.ctx
        if region_id is not None and region_id not in ctx.track:
            return
        if ctx.selected_region_id == region_id:
            return
        ctx.selected_region_id = region_id
        self.region_selected.emit(region_id)

    def render_items(self) -> list[RegionItem]:
        """Regions in start order, labelled 'Zoom 1', 'Zoom 2', ..."""
        return [
            RegionItem(region.id, ROW_ID, region.span, f"Zoom {i + 1}")
            for i, region in enumerate(self.ctx.track.sorted_regions())
        ]

    # ---- 뷰포트 ----

    def set_mapper(self, mapper: CoordinateMapper) -> None:
        self.ctx.mapper = mapper

    def visible_range(self) -> TimeSpan:
        """The visible range, clamped to the loaded video."""
        return clamp_range(self.ctx.visible_range, self.ctx.total_ms)

    def set_visible_range(self, visible_range: TimeSpan) -> None:
        """Accept a pan/zoom from the view, never narrower than the scale allows."""
        ctx = self.ctx
        new_range = enforce_min_visible_range(
            clamp_range(visible_range, ctx.total_ms), self.scale.min_visible_range_ms, ctx.total_ms,
        )
        if new_range == ctx.visible_range:
            return
        ctx.visible_range = new_range
        self.range_changed.emit(new_range.start, new_range.end)

    def markers(self) -> tuple[Marker, ...]:
        return generate_markers(self.scale.interval_ms, self.visible_range(), self.ctx.total_ms)

    # ---- 재생 위치 ----

    def set_current_time(self, seconds: float | None) -> None:
        if seconds is None or not math.isfinite(seconds):
            seconds = 0.0
        self.ctx.current_time_ms = int(round(seconds * 1000))

    def cursor_offset(self) -> float | None:
        ctx = self.ctx
        return cursor_offset(ctx.current_time_ms, ctx.total_ms, self.visible_range(), ctx.mapper)

    def seek_to_offset(self, offset_px: float) -> float | None:
        """Seek to the time under a click at *offset_px* from the track start.

        Clears the region selection. Returns the seek target in seconds, or
        None when nothing was requested.
        """
        ctx = self.ctx
        if not ctx.has_video:
            return None
        self.select_region(None)
        if offset_px < 0:
            return None

        ms = offset_to_time(offset_px, self.visible_range(), ctx.mapper, ctx.total_ms)
        seconds = ms_to_seconds(ms)
        self.seek_requested.emit(seconds)
        return seconds
