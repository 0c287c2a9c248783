"""AppContext — 타임라인 Controller 공유 상태.

Controller는 self.ctx 로 접근. 영역 목록(ZoomRegionTrack)과 재생 길이는
외부 소유이며, Controller는 매번 현재 값으로 파생 상태를 다시 계산한다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.models.zoom_region import TimeSpan, ZoomRegionTrack
from src.services.viewport_service import LinearCoordinateMapper, create_initial_range

if TYPE_CHECKING:
    from src.services.settings_manager import SettingsManager
    from src.services.viewport_service import CoordinateMapper


class AppContext:
    """Controller들이 공유하는 상태 컨테이너."""

    def __init__(self, track: ZoomRegionTrack | None = None) -> None:
        # ---- Core state ----
        self.track: ZoomRegionTrack = track if track is not None else ZoomRegionTrack()
        self.duration_seconds: float = 0.0
        self.total_ms: int = 0

        # ---- Viewport ----
        self.visible_range: TimeSpan = create_initial_range(0)
        self.mapper: CoordinateMapper = LinearCoordinateMapper(0.0)

        # ---- 선택/재생 ----
        self.selected_region_id: str | None = None
        self.current_time_ms: int = 0

        # ---- Services ----
        self.settings: SettingsManager | None = None

    @property
    def has_video(self) -> bool:
        return self.total_ms > 0

    def selected_region(self):
        """현재 선택된 영역 반환 (없으면 None)."""
        if self.selected_region_id is None:
            return None
        return self.track.get(self.selected_region_id)
