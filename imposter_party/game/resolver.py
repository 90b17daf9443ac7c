from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from math import floor

from imposter_party.core.prng import seeded_random
from imposter_party.core import rounds
from imposter_party.game.params import GameParams


@dataclass(frozen=True)
class RoundState:
    round_number: int
    imposter_slot: int
    secret_word: str


def imposter_slot(room_code: str, round_key: str, slot_count: int) -> int:
    """Player slot in [1, slot_count] who gets no word this round."""
    seed = room_code + "-imposter-" + round_key
    return 1 + floor(seeded_random(seed) * slot_count)


def secret_word(room_code: str, round_key: str, word_table: Sequence[str]) -> str:
    # Different tag than imposter_slot so the two picks are decorrelated.
    seed = room_code + "-word-" + round_key
    return word_table[floor(seeded_random(seed) * len(word_table))]


def resolve_round(room_code: str, round_number: int, params: GameParams) -> RoundState:
    key = rounds.round_key(round_number)
    return RoundState(
        round_number=round_number,
        imposter_slot=imposter_slot(room_code, key, params.slot_count),
        secret_word=secret_word(room_code, key, params.words),
    )
