"""Tests for time utilities and axis label formatting."""

from src.utils.time_utils import (
    format_time_label,
    fraction_digits_for_interval,
    ms_to_display,
    ms_to_seconds,
    seconds_to_ms,
)


def _label_to_ms(label: str) -> int:
    """'M:SS', 'M:SS.f', 'H:MM:SS' 라벨을 ms로 되돌림 (정렬 비교용)."""
    parts = label.split(":")
    if len(parts) == 3:
        hours, minutes, seconds = (int(p) for p in parts)
        return hours * 3_600_000 + minutes * 60_000 + seconds * 1000
    minutes, seconds = parts
    return int(minutes) * 60_000 + round(float(seconds) * 1000)


class TestSecondsToMs:
    def test_integer(self):
        assert seconds_to_ms(5.0) == 5000

    def test_fractional(self):
        assert seconds_to_ms(1.5) == 1500

    def test_rounding(self):
        assert seconds_to_ms(1.9999) == 2000

    def test_negative_is_zero(self):
        assert seconds_to_ms(-3.0) == 0

    def test_nan_and_inf_are_zero(self):
        assert seconds_to_ms(float("nan")) == 0
        assert seconds_to_ms(float("inf")) == 0

    def test_none_is_zero(self):
        assert seconds_to_ms(None) == 0


class TestMsToSeconds:
    def test_seek_value(self):
        assert ms_to_seconds(2500) == 2.5
        assert ms_to_seconds(0) == 0.0


class TestMsToDisplay:
    def test_zero(self):
        assert ms_to_display(0) == "00:00.000"

    def test_normal(self):
        assert ms_to_display(83456) == "01:23.456"

    def test_negative_clamps(self):
        assert ms_to_display(-100) == "00:00.000"


class TestFractionDigits:
    def test_tiers(self):
        assert fraction_digits_for_interval(50) == 2
        assert fraction_digits_for_interval(249) == 2
        assert fraction_digits_for_interval(250) == 1
        assert fraction_digits_for_interval(999) == 1
        assert fraction_digits_for_interval(1000) == 0
        assert fraction_digits_for_interval(300000) == 0


class TestFormatTimeLabel:
    def test_zero(self):
        assert format_time_label(0, 1000) == "0:00"

    def test_whole_seconds(self):
        assert format_time_label(83456, 1000) == "1:23"  # truncated

    def test_no_leading_zero_on_minutes(self):
        assert format_time_label(600000, 60000) == "10:00"
        assert format_time_label(65000, 5000) == "1:05"

    def test_one_fraction_digit(self):
        assert format_time_label(500, 500) == "0:00.5"
        assert format_time_label(1250, 500) == "0:01.3"  # half-up
        assert format_time_label(750, 250) == "0:00.8"

    def test_two_fraction_digits(self):
        assert format_time_label(125, 50) == "0:00.13"
        assert format_time_label(1000, 100) == "0:01.00"  # no trailing-zero trimming

    def test_rounding_carries_into_minutes(self):
        assert format_time_label(59960, 500) == "1:00.0"

    def test_hours_format(self):
        assert format_time_label(3600000, 300000) == "1:00:00"
        assert format_time_label(3723000, 1000) == "1:02:03"

    def test_hours_ignore_fraction_tier(self):
        assert format_time_label(3723999, 250) == "1:02:03"

    def test_negative_clamps(self):
        assert format_time_label(-5, 1000) == "0:00"

    def test_monotonic_for_fixed_interval(self):
        for interval in (250, 500, 1000, 5000):
            values = [_label_to_ms(format_time_label(ms, interval)) for ms in range(0, 3_600_000, 777)]
            assert values == sorted(values), f"labels not monotonic at interval {interval}"

    def test_distinct_on_interval_boundaries(self):
        labels = [format_time_label(ms, 250) for ms in range(0, 60000, 250)]
        assert len(set(labels)) == len(labels)
