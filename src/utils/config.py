"""Application configuration constants."""

from __future__ import annotations

APP_NAME = "ZoomTimeline"
APP_VERSION = "0.1.0"
ORG_NAME = "ZoomTimeline"

# Timeline row (single track)
ROW_ID = "row-1"

# Visible range used before a video is loaded
FALLBACK_RANGE_MS = 1000

# Axis never shows more than this many major ticks
TARGET_MARKER_COUNT = 12

# Regions closer than this are rejected instead of leaving a sliver gap
SNAP_THRESHOLD_MS = 2

# Preferred length of a newly added zoom region
DEFAULT_REGION_DURATION_MS = 3000

# (interval_seconds, grid_seconds), strictly increasing
SCALE_CANDIDATES = (
    (0.25, 0.05),
    (0.5, 0.1),
    (1, 0.25),
    (2, 0.5),
    (5, 1),
    (10, 2),
    (15, 3),
    (30, 5),
    (60, 10),
    (120, 20),
    (300, 30),
    (600, 60),
    (900, 120),
    (1800, 180),
    (3600, 300),
)

# Notification text for a failed "Add Zoom"
NO_SPACE_TITLE = "No space available"
NO_SPACE_DESCRIPTION = "Remove or resize existing zoom regions to add more."
