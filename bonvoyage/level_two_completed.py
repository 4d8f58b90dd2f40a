"""The level two completed screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .level_two import (
    BOTTOM_LIMIT,
    EFFECT_DURATION,
    LEFT_LIMIT,
    LOW_LIFE,
    TOP_LIMIT,
    LevelTwo,
    SpriteSheet,
)
from .level_two_life import ALERT_SKIN, NORMAL_SKIN
from .scene import Screen, Sprite


def _tick_exact(sheet: SpriteSheet, now_ms: int) -> None:
    """Tick a two-row sheet wrapping only on an exact end-of-row match."""
    previous = sheet.exact_wrap
    sheet.exact_wrap = True
    try:
        sheet.tick(now_ms)
    finally:
        sheet.exact_wrap = previous


@dataclass
class LevelTwoCompletedScreen:
    """The night scene still animating behind the trophy message.

    The score is reported once, on the first frame the screen is drawn.
    """

    level: LevelTwo = field(default_factory=LevelTwo)
    overlay: Sprite = field(default_factory=Sprite)
    message: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)
    score_listener: Callable[[int], None] | None = None
    frames: int = 0

    def _switch_skin(self, path: str) -> None:
        level = self.level
        level.skin = path
        if level.skin_loader is not None:
            level.character.texture = level.skin_loader(path)

    def _update(self, now_ms: int) -> None:
        level = self.level
        level.dragon_sheet.tick(now_ms)

        collisions = level.collisions
        if collisions.effect_delay == EFFECT_DURATION:
            self._switch_skin(NORMAL_SKIN if level.life.current_life > LOW_LIFE else ALERT_SKIN)
            collisions.effect_delay = 0
        if collisions.effect_delay > 0:
            collisions.effect_delay += 1

        level.character_sheet.tick(now_ms)
        _tick_exact(level.coin_sheet, now_ms)
        _tick_exact(level.heart_sheet, now_ms)

        walker = level.walker
        if walker.y <= TOP_LIMIT:
            walker.y = TOP_LIMIT
        if walker.x <= LEFT_LIMIT:
            walker.x = LEFT_LIMIT
        if walker.y >= BOTTOM_LIMIT:
            walker.y = BOTTOM_LIMIT
        if walker.x >= level.viewport.width:
            walker.x = 0
        level.character.rect.x = int(walker.x)
        level.character.rect.y = int(walker.y)

        level.backdrop.advance()

    def draw(self, target: Any, now_ms: int) -> None:
        self.frames += 1
        level = self.level
        active = level.scene.is_active(Screen.LEVEL_TWO_COMPLETED)
        if active:
            self._update(now_ms)
        if active and self.frames == 1 and self.score_listener is not None:
            self.score_listener(level.score)

        level.backdrop.draw(target)
        for layer in (
            level.score_icon,
            level.high_score_icon,
            level.score_text,
            level.high_score_text,
            self.overlay,
            self.message,
            self.back,
        ):
            layer.draw(target)