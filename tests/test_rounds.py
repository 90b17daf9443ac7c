from imposter_party.core.rounds import (
    ROUND_LENGTH_SECONDS,
    current_round_number,
    round_key,
    seconds_until_next_round,
    unix_now,
)


def test_round_number_uses_two_minute_windows_by_default() -> None:
    assert ROUND_LENGTH_SECONDS == 120
    assert current_round_number(0) == 0
    assert current_round_number(119) == 0
    assert current_round_number(120) == 1
    assert current_round_number(1_764_000_000) == 14_700_000


def test_round_number_floors_fractional_seconds() -> None:
    assert current_round_number(239.999) == 1
    assert seconds_until_next_round(239.999) == 1


def test_round_number_is_monotonic() -> None:
    prev = current_round_number(1_700_000_000, 90)
    for t in range(1_700_000_000, 1_700_001_000, 7):
        rn = current_round_number(t, 90)
        assert rn >= prev
        prev = rn


def test_countdown_bounds() -> None:
    for window in (1, 30, 120, 300):
        for t in range(0, 1000, 3):
            left = seconds_until_next_round(t, window)
            assert 1 <= left <= window


def test_countdown_at_window_edges() -> None:
    assert seconds_until_next_round(0) == 120
    assert seconds_until_next_round(1) == 119
    assert seconds_until_next_round(119) == 1
    assert seconds_until_next_round(120) == 120


def test_round_key_and_clock() -> None:
    assert round_key(0) == "0"
    assert round_key(14_700_000) == "14700000"
    assert isinstance(unix_now(), int)
    assert unix_now() > 1_600_000_000
