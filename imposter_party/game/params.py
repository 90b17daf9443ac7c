from __future__ import annotations

from dataclasses import dataclass, replace

from imposter_party.core.rounds import ROUND_LENGTH_SECONDS
from imposter_party.game.words import WORD_LIST

DEFAULT_SLOT_COUNT = 6
MIN_SLOT_COUNT = 3
MAX_SLOT_COUNT = 6


class InvalidInput(ValueError):
    """Bad player input; the message is meant to be shown as-is."""


@dataclass(frozen=True)
class GameParams:
    slot_count: int = DEFAULT_SLOT_COUNT
    round_length_seconds: int = ROUND_LENGTH_SECONDS
    # Order matters: the hash picks an index, not a word.
    words: tuple[str, ...] = WORD_LIST

    def __post_init__(self) -> None:
        if self.slot_count < 1:
            raise InvalidInput("slot_count must be >= 1")
        if self.round_length_seconds < 1:
            raise InvalidInput("round_length_seconds must be >= 1")
        if not self.words:
            raise InvalidInput("words must not be empty")
        if len(set(self.words)) != len(self.words):
            raise InvalidInput("words must be distinct")

    def with_slot_count(self, slot_count: int) -> GameParams:
        return replace(self, slot_count=slot_count)
