"""Settings manager for timeline preferences."""

from PySide6.QtCore import QSettings

from src.utils.config import DEFAULT_REGION_DURATION_MS, SNAP_THRESHOLD_MS


class SettingsManager:
    """Wrapper around QSettings for type-safe preference management."""

    def __init__(self):
        self._settings = QSettings()

    # ---------------------------------------------------- Editing Settings

    def get_default_region_duration(self) -> int:
        """Get the preferred length of a new zoom region in ms (default: 3000)."""
        return int(self._settings.value("editing/default_region_duration", DEFAULT_REGION_DURATION_MS, int))

    def set_default_region_duration(self, ms: int) -> None:
        """Set the preferred length of a new zoom region in ms."""
        self._settings.setValue("editing/default_region_duration", ms)

    def get_snap_threshold(self) -> int:
        """Get the gap in ms below which regions are rejected (default: 2)."""
        return int(self._settings.value("editing/snap_threshold", SNAP_THRESHOLD_MS, int))

    def set_snap_threshold(self, ms: int) -> None:
        """Set the gap in ms below which regions are rejected."""
        self._settings.setValue("editing/snap_threshold", ms)
