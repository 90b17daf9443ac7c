from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pygame

from imposter_party.core.rounds import current_round_number, unix_now
from imposter_party.game.params import (
    MAX_SLOT_COUNT,
    MIN_SLOT_COUNT,
    GameParams,
    InvalidInput,
)
from imposter_party.game.reveal import (
    Reveal,
    next_round_text,
    normalize_room_code,
    reveal_role,
    round_banner,
)

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
FIELD_MAX_LEN = 16

ROOM = "room"
PLAYER = "player"


@dataclass(frozen=True)
class AppOptions:
    size: tuple[int, int] = (560, 520)
    fps: int = 30
    params: GameParams = field(default_factory=GameParams)


class RevealForm:
    """Text fields, slot count and the last reveal; no drawing."""

    def __init__(self, params: GameParams):
        self.params = params
        self.room_text = ""
        self.player_text = ""
        self.focus = ROOM
        self.reveal: Reveal | None = None
        self.error: str | None = None

    def handle_key(self, event: pygame.event.Event, now: float) -> None:
        key = event.key
        if key == pygame.K_TAB:
            self.focus = PLAYER if self.focus == ROOM else ROOM
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.focus == ROOM:
                self.focus = PLAYER
            else:
                self.submit(now)
        elif key == pygame.K_BACKSPACE:
            self._set_text(self._text()[:-1])
        elif key == pygame.K_LEFTBRACKET:
            self.set_slot_count(self.params.slot_count - 1)
        elif key == pygame.K_RIGHTBRACKET:
            self.set_slot_count(self.params.slot_count + 1)
        else:
            ch = getattr(event, "unicode", "")
            if ch and ch.isprintable() and len(self._text()) < FIELD_MAX_LEN:
                self._set_text(self._text() + ch)

    def set_slot_count(self, n: int) -> None:
        n = max(MIN_SLOT_COUNT, min(MAX_SLOT_COUNT, n))
        if n != self.params.slot_count:
            self.params = self.params.with_slot_count(n)
            logger.debug("slot count set to %d", n)

    def submit(self, now: float) -> None:
        try:
            self.reveal = reveal_role(
                self.room_text, self.player_text, self.params, now
            )
        except InvalidInput as e:
            logger.info("reveal rejected: %s", e)
            self.reveal = None
            self.error = str(e)
            return
        self.error = None
        logger.info(
            "revealed room=%s round=%d player=%d",
            normalize_room_code(self.room_text),
            self.reveal.round_number,
            self.reveal.player_number,
        )

    def _text(self) -> str:
        return self.room_text if self.focus == ROOM else self.player_text

    def _set_text(self, s: str) -> None:
        if self.focus == ROOM:
            self.room_text = s
        else:
            self.player_text = s


def _draw_field(
    surf: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    label: str,
    text: str,
    focused: bool,
) -> None:
    surf.blit(font.render(label, True, (190, 196, 210)), (rect.x, rect.y - 22))
    pygame.draw.rect(surf, (30, 34, 46), rect, border_radius=6)
    border = (120, 170, 255) if focused else (70, 76, 96)
    pygame.draw.rect(surf, border, rect, width=2, border_radius=6)
    caret = "|" if focused else ""
    surf.blit(font.render(text + caret, True, (235, 238, 245)), (rect.x + 10, rect.y + 8))


def run(options: AppOptions | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    opts = options or AppOptions()

    pygame.init()
    pygame.display.set_caption("Imposter Party")

    screen = pygame.display.set_mode(opts.size, pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 26)
    big = pygame.font.SysFont(None, 40)

    form = RevealForm(opts.params)
    pygame.time.set_timer(TICK_EVENT, 1000)

    def timer_lines() -> tuple[int, str, str]:
        now = unix_now()
        window = form.params.round_length_seconds
        rn = current_round_number(now, window)
        return rn, round_banner(rn, window), next_round_text(now, window)

    shown_round, banner, countdown = timer_lines()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            elif event.type == TICK_EVENT:
                rn, banner, countdown = timer_lines()
                if rn != shown_round:
                    logger.debug("round %d started", rn)
                    shown_round = rn
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    form.handle_key(event, unix_now())

        w, _ = screen.get_size()
        screen.fill((16, 18, 26))

        screen.blit(big.render("Imposter Party", True, (255, 255, 255)), (24, 20))
        slots = form.params.slot_count
        screen.blit(
            font.render(f"Players: {slots}   ([ / ] to change)", True, (190, 196, 210)),
            (24, 72),
        )

        field_w = max(200, w - 48)
        _draw_field(
            screen,
            font,
            pygame.Rect(24, 130, field_w, 38),
            "Room code",
            form.room_text,
            form.focus == ROOM,
        )
        _draw_field(
            screen,
            font,
            pygame.Rect(24, 210, field_w, 38),
            f"Your player number (1-{slots})",
            form.player_text,
            form.focus == PLAYER,
        )
        screen.blit(
            font.render("Enter to reveal, Tab to switch field", True, (120, 126, 146)),
            (24, 260),
        )

        panel = pygame.Rect(24, 300, field_w, 110)
        if form.error is not None:
            pygame.draw.rect(screen, (60, 40, 20), panel, border_radius=8)
            screen.blit(font.render(form.error, True, (255, 200, 120)), (40, 340))
        elif form.reveal is not None:
            if form.reveal.is_imposter:
                pygame.draw.rect(screen, (90, 24, 36), panel, border_radius=8)
                role, line2 = "You are the Imposter!", "Try to blend in!"
            else:
                pygame.draw.rect(screen, (24, 70, 44), panel, border_radius=8)
                role, line2 = "You are NOT the Imposter", form.reveal.word or ""
            screen.blit(font.render(role, True, (235, 238, 245)), (40, 316))
            screen.blit(big.render(line2, True, (255, 255, 255)), (40, 352))

        screen.blit(font.render(banner, True, (190, 196, 210)), (24, 440))
        screen.blit(font.render(countdown, True, (235, 238, 245)), (24, 470))

        pygame.display.flip()
        clock.tick(opts.fps)

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()


if __name__ == "__main__":
    run()
