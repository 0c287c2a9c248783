"""Tests for timeline scale selection."""

from __future__ import annotations

import dataclasses
import math

import pytest

from src.models.timeline_scale import (
    ScaleConfig,
    calculate_timeline_scale,
    safe_min_duration,
    select_scale_candidate,
)
from src.utils.config import SCALE_CANDIDATES, TARGET_MARKER_COUNT


class TestCalculateTimelineScale:
    def test_ten_seconds(self):
        scale = calculate_timeline_scale(10)
        assert scale.interval_ms == 1000  # 10 markers <= 12
        assert scale.grid_ms == 250
        assert scale.min_item_duration_ms == 1
        assert scale.default_item_duration_ms == 2000
        assert scale.min_visible_range_ms == 3000

    def test_one_hour(self):
        scale = calculate_timeline_scale(3600)
        assert scale.interval_ms == 300000  # exactly 12 markers
        assert scale.grid_ms == 30000
        assert scale.default_item_duration_ms == 600000
        assert scale.min_visible_range_ms == 900000

    def test_zero_duration_uses_finest(self):
        scale = calculate_timeline_scale(0)
        assert scale.interval_ms == 250
        assert scale.grid_ms == 50
        assert scale.default_item_duration_ms == 500
        assert scale.min_visible_range_ms == 1000

    def test_negative_duration_uses_finest(self):
        assert calculate_timeline_scale(-5) == calculate_timeline_scale(0)

    def test_nan_duration_uses_finest(self):
        assert calculate_timeline_scale(float("nan")).interval_ms == 250

    def test_very_long_duration_falls_back_to_coarsest(self):
        scale = calculate_timeline_scale(100_000)
        assert scale.interval_ms == 3_600_000
        assert scale.grid_ms == 300_000

    def test_boundary_at_target_count(self):
        assert calculate_timeline_scale(3).interval_ms == 250
        assert calculate_timeline_scale(3.1).interval_ms == 500

    def test_short_video_caps_to_duration(self):
        scale = calculate_timeline_scale(0.5)
        assert scale.interval_ms == 250
        assert scale.default_item_duration_ms == 500
        assert scale.min_visible_range_ms == 500

    def test_cached_per_duration(self):
        assert calculate_timeline_scale(42) is calculate_timeline_scale(42)

    def test_frozen(self):
        scale = calculate_timeline_scale(10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            scale.interval_ms = 5  # type: ignore[misc]

    def test_returns_scale_config(self):
        assert isinstance(calculate_timeline_scale(1), ScaleConfig)


class TestScaleProperties:
    DURATIONS = [0, 0.1, 1, 2.9, 3, 5, 6, 11, 12, 30, 59, 60, 61, 119, 180, 600,
                 1000, 1800, 3599, 3600, 7200, 10800, 43200, 50000]

    def test_interval_monotonic_in_duration(self):
        intervals = [calculate_timeline_scale(d).interval_ms for d in self.DURATIONS]
        assert intervals == sorted(intervals)

    def test_marker_bound_when_not_fallback(self):
        max_interval_s = SCALE_CANDIDATES[-1][0]
        for d in self.DURATIONS:
            if d <= 0 or d / max_interval_s > TARGET_MARKER_COUNT:
                continue
            interval_s = calculate_timeline_scale(d).interval_ms / 1000
            assert math.ceil(d / interval_s) <= TARGET_MARKER_COUNT

    def test_deterministic(self):
        calculate_timeline_scale.cache_clear()
        first = calculate_timeline_scale(123.4)
        calculate_timeline_scale.cache_clear()
        assert calculate_timeline_scale(123.4) == first


class TestSelectScaleCandidate:
    def test_first_fit(self):
        assert select_scale_candidate(10) == (1, 0.25)

    def test_fallback(self):
        assert select_scale_candidate(1e9) == SCALE_CANDIDATES[-1]


class TestSafeMinDuration:
    def test_no_video(self):
        assert safe_min_duration(1, 0) == 1

    def test_capped_by_video(self):
        assert safe_min_duration(5, 3) == 3

    def test_normal(self):
        assert safe_min_duration(1, 10000) == 1
