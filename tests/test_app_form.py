import logging

import pygame

from imposter_party.app import PLAYER, ROOM, RevealForm
from imposter_party.game.params import GameParams


def _key(key: int, unicode: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode)


def _type(form: RevealForm, text: str) -> None:
    for ch in text:
        form.handle_key(_key(pygame.K_a, ch), now=60)


def test_enter_moves_focus_then_reveals() -> None:
    form = RevealForm(GameParams())
    _type(form, "pinkfish")
    form.handle_key(_key(pygame.K_RETURN), now=60)
    assert form.focus == PLAYER
    _type(form, "2")
    form.handle_key(_key(pygame.K_RETURN), now=60)
    assert form.error is None
    assert form.reveal is not None
    assert not form.reveal.is_imposter
    assert form.reveal.word == "submarine"


def test_invalid_input_is_shown_instead_of_a_result() -> None:
    form = RevealForm(GameParams())
    form.handle_key(_key(pygame.K_TAB), now=60)
    _type(form, "3")
    form.submit(now=60)
    assert form.reveal is None
    assert form.error == "Please enter a room code."


def test_tab_and_backspace_edit_the_focused_field() -> None:
    form = RevealForm(GameParams())
    _type(form, "abc")
    form.handle_key(_key(pygame.K_BACKSPACE), now=60)
    form.handle_key(_key(pygame.K_TAB), now=60)
    _type(form, "12")
    form.handle_key(_key(pygame.K_TAB), now=60)
    assert form.focus == ROOM
    assert form.room_text == "ab"
    assert form.player_text == "12"


def test_field_length_is_capped() -> None:
    form = RevealForm(GameParams())
    _type(form, "X" * 40)
    assert len(form.room_text) == 16


def test_brackets_change_slot_count_within_limits() -> None:
    form = RevealForm(GameParams())
    form.handle_key(_key(pygame.K_RIGHTBRACKET, "]"), now=60)
    assert form.params.slot_count == 6
    for _ in range(5):
        form.handle_key(_key(pygame.K_LEFTBRACKET, "["), now=60)
    assert form.params.slot_count == 3
    assert form.room_text == ""


def test_reveal_log_never_contains_the_word(caplog) -> None:
    form = RevealForm(GameParams())
    form.room_text = "PINKFISH"
    form.player_text = "2"
    with caplog.at_level(logging.INFO, logger="imposter_party.app"):
        form.submit(now=60)
    assert "revealed room=PINKFISH round=0 player=2" in caplog.text
    assert "submarine" not in caplog.text
