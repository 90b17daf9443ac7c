"""
Round windows derived from Unix time.

Every player whose clock agrees to within one window computes the same
round number for the same instant. Larger skew puts players in different
rounds; there is no correction for it.
"""

from __future__ import annotations

import time
from math import floor

ROUND_LENGTH_SECONDS = 120


def unix_now() -> int:
    """Current wall-clock time in whole Unix seconds."""
    return int(floor(time.time()))


def _whole_seconds(now: float) -> int:
    return int(floor(now))


def current_round_number(
    now_unix_seconds: float, window_length_seconds: int = ROUND_LENGTH_SECONDS
) -> int:
    return _whole_seconds(now_unix_seconds) // window_length_seconds


def seconds_until_next_round(
    now_unix_seconds: float, window_length_seconds: int = ROUND_LENGTH_SECONDS
) -> int:
    """Seconds left in the current window, in [1, window_length_seconds]."""
    into_round = _whole_seconds(now_unix_seconds) % window_length_seconds
    return window_length_seconds - into_round


def round_key(round_number: int) -> str:
    return str(round_number)
