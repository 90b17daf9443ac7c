"""
Player-facing reveal flow.

Validates what a player typed, works out the current round and tells them
whether they are the imposter. Only a non-imposter is handed the word.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from imposter_party.core.rounds import (
    current_round_number,
    round_key,
    seconds_until_next_round,
)
from imposter_party.game.params import GameParams, InvalidInput
from imposter_party.game.resolver import imposter_slot, secret_word

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Reveal:
    round_number: int
    player_number: int
    is_imposter: bool
    word: str | None


def normalize_room_code(raw: str) -> str:
    return raw.strip().upper()


def parse_player_number(raw: str, slot_count: int) -> int:
    # Same leniency as parseInt: "3rd" reads as 3, "x3" is rejected.
    m = _LEADING_INT.match(raw)
    n = int(m.group(1)) if m else None
    if n is None or n < 1 or n > slot_count:
        raise InvalidInput(f"Please enter a valid player number (1-{slot_count}).")
    return n


def reveal_role(
    raw_room_code: str, raw_player_number: str, params: GameParams, now: float
) -> Reveal:
    room_code = normalize_room_code(raw_room_code)
    if not room_code:
        raise InvalidInput("Please enter a room code.")
    player = parse_player_number(raw_player_number, params.slot_count)

    round_number = current_round_number(now, params.round_length_seconds)
    key = round_key(round_number)
    if player == imposter_slot(room_code, key, params.slot_count):
        return Reveal(round_number, player, True, None)
    return Reveal(round_number, player, False, secret_word(room_code, key, params.words))


def countdown_text(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def _window_phrase(window_length_seconds: int) -> str:
    if window_length_seconds % 60 == 0:
        minutes = window_length_seconds // 60
        return "every minute" if minutes == 1 else f"every {minutes} minutes"
    return f"every {window_length_seconds} seconds"


def round_banner(round_number: int, window_length_seconds: int) -> str:
    return f"Round {round_number} (resets {_window_phrase(window_length_seconds)})"


def next_round_text(now: float, window_length_seconds: int) -> str:
    left = seconds_until_next_round(now, window_length_seconds)
    return f"Next round in: {countdown_text(left)}"
