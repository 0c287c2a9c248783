"""Time conversion and axis label utilities."""

from __future__ import annotations

import math
from functools import lru_cache


def seconds_to_ms(seconds: float) -> int:
    """Convert seconds (float) to integer milliseconds.

    Negative, NaN and infinite inputs map to 0.
    """
    if seconds is None or not math.isfinite(seconds) or seconds <= 0:
        return 0
    return int(round(seconds * 1000))


def ms_to_seconds(ms: int) -> float:
    """Convert milliseconds to seconds for the seek handler."""
    return ms / 1000


@lru_cache(maxsize=4096)
def ms_to_display(ms: int) -> str:
    """Convert milliseconds to display string 'MM:SS.mmm'."""
    if ms < 0:
        ms = 0
    total_seconds = ms / 1000.0
    minutes = int(total_seconds // 60)
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:06.3f}"


def fraction_digits_for_interval(interval_ms: int) -> int:
    """Number of fractional second digits shown at a marker interval."""
    if interval_ms < 250:
        return 2
    if interval_ms < 1000:
        return 1
    return 0


@lru_cache(maxsize=4096)
def format_time_label(ms: int, interval_ms: int) -> str:
    """Format an axis timestamp at the precision implied by *interval_ms*.

    - ``H:MM:SS`` once the time reaches an hour (seconds truncated)
    - ``M:SS.f`` / ``M:SS.ff`` for sub-second intervals (rounded half-up)
    - ``M:SS`` otherwise (seconds truncated)

    Examples:
        >>> format_time_label(83456, 1000)
        '1:23'
        >>> format_time_label(1250, 500)
        '0:01.3'
        >>> format_time_label(3723000, 1000)
        '1:02:03'
    """
    ms = int(round(ms)) if ms > 0 else 0

    hours = ms // 3_600_000
    if hours > 0:
        minutes = (ms % 3_600_000) // 60_000
        seconds = (ms % 60_000) // 1000
        return f"{hours}:{minutes:02d}:{seconds:02d}"

    digits = fraction_digits_for_interval(interval_ms)
    if digits > 0:
        units = 10 ** digits
        # 정수 연산으로 반올림 (float 오차 회피)
        scaled = (ms * units + 500) // 1000
        whole, fraction = divmod(scaled, units)
        minutes, seconds = divmod(whole, 60)
        return f"{minutes}:{seconds:02d}.{fraction:0{digits}d}"

    minutes = ms // 60_000
    seconds = (ms % 60_000) // 1000
    return f"{minutes}:{seconds:02d}"
