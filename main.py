"""ZoomTimeline entry point — headless demo of the timeline layout engine."""

import logging
import sys

from PySide6.QtCore import QCoreApplication

from src.models.zoom_region import TimeSpan
from src.services.settings_manager import SettingsManager
from src.services.viewport_service import LinearCoordinateMapper
from src.ui.controllers import AppContext, TimelineController
from src.utils.config import APP_NAME, APP_VERSION, ORG_NAME


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QCoreApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(ORG_NAME)

    try:
        duration = float(sys.argv[1]) if len(sys.argv) > 1 else 10.0
    except ValueError:
        print(f"Invalid duration: {sys.argv[1]!r}", file=sys.stderr)
        return 2

    ctx = AppContext()
    ctx.settings = SettingsManager()
    controller = TimelineController(ctx)
    controller.placement_failed.connect(lambda title, desc: print(f"[!] {title}: {desc}"))
    controller.set_duration(duration)
    controller.set_mapper(LinearCoordinateMapper.fit(controller.visible_range(), 1000))

    while controller.add_region() is not None:
        pass

    scale = controller.scale
    print(f"{APP_NAME} {APP_VERSION}: duration {ctx.total_ms}ms, "
          f"interval {scale.interval_ms}ms, grid {scale.grid_ms}ms")
    print("Markers:", " ".join(m.label for m in controller.markers()))
    for item in controller.render_items():
        print(f"  {item.label}: {item.span.start}-{item.span.end}ms")

    half = controller.visible_range()
    controller.set_visible_range(TimeSpan(half.start, half.start + half.duration_ms // 2))
    print("Zoomed markers:", " ".join(m.label for m in controller.markers()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
