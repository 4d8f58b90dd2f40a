"""Level two life meter, hearts and collision handling."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable

from .level_two_items import LevelTwoCoins
from .scene import Rect, Sprite, SoundBoard, Viewport

NORMAL_SKIN = "images/level2obstacles/sonicsprite.png"
ALERT_SKIN = "images/level2obstacles/sonicsprite3.png"
TEXT_POSITION = (1163, 69)
ENLARGED_TEXT_POSITION = (1154, 62)
TEXT_SIZE = 30
ENLARGED_TEXT_SIZE = 40
TEXT_COLOR = (234, 206, 9)
HEART_SIZE = 80
BONUS_POPUP_SIZE = 50
COIN_POPUP_SIZE = (80, 50)
EXPLOSION_SIZE = (int(333 / 1.5), int(320 / 1.5))
COIN_POINTS = 100


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _text_sprite() -> Sprite:
    return Sprite(rect=Rect(*TEXT_POSITION))


@dataclass
class LevelTwoLife:
    """Life percentage, the wandering heart and the bonus pop-up."""

    viewport: Viewport = field(default_factory=Viewport)
    sounds: SoundBoard = field(default_factory=SoundBoard)
    heart: Sprite = field(default_factory=Sprite)
    heart_frame: Rect = field(default_factory=Rect)
    heart_display: Sprite = field(default_factory=Sprite)
    score_display: Sprite = field(default_factory=Sprite)
    score_text: Sprite = field(default_factory=_text_sprite)
    bonus_popup: Sprite = field(default_factory=Sprite)
    font_factory: Callable[[int], Any] | None = None
    life_percentage: int = 0
    current_life: int = 100
    life_text: str = "100"
    font_size: int = TEXT_SIZE
    at_stake: bool = False
    heart_delay: int = 0
    text_delay: int = 0

    def refresh(self) -> None:
        """Render the life text and put it back in its place."""
        if self.font_factory is not None:
            surface = self.font_factory(self.font_size).render(self.life_text, False, TEXT_COLOR)
            self.score_text.texture = surface
            self.score_text.rect.resize(*surface.get_size())
        self.score_text.rect.x, self.score_text.rect.y = TEXT_POSITION

    def update_heart(self, rng: random.Random) -> None:
        """Recompute life and cycle the bonus heart while life is below 95."""
        self.current_life = 100 - _trunc_div(self.life_percentage, 20)
        self.life_text = str(self.current_life)
        heart = self.heart.rect
        if self.current_life > 95:
            heart.hide()
            return
        if self.heart_delay == 0:
            heart.hide()
        self.heart_delay += 1
        if self.heart_delay == 30:
            heart.resize(HEART_SIZE, HEART_SIZE)
            heart.x = rng.randrange(self.viewport.width - 150)
            heart.y = rng.randrange(self.viewport.height)
            if heart.y < 150 or heart.y > 750:
                heart.y = 500
        if self.heart_delay == 300:
            heart.hide()
        if self.heart_delay == 500:
            self.heart_delay = 0

    def move_bonus_popup(self) -> None:
        """Glide the bonus pop-up towards the life text and apply it on arrival."""
        popup = self.bonus_popup.rect
        text = self.score_text.rect
        popup.x += _trunc_div(text.x - popup.x, 30)
        popup.y += _trunc_div(text.y - popup.y, 30)
        if abs(popup.x - text.x) <= 30:
            if self.current_life >= 95 and popup.w == BONUS_POPUP_SIZE:
                self.life_percentage = 0
            elif popup.w == BONUS_POPUP_SIZE:
                self.life_percentage -= 100
                self.sounds.play("pointgain")
                self.font_size = ENLARGED_TEXT_SIZE
                text.x, text.y = ENLARGED_TEXT_POSITION
                self.text_delay += 1
            popup.hide()
        if self.text_delay > 0:
            self.text_delay += 1
        if self.text_delay == 15:
            self.text_delay = 0
            self.font_size = TEXT_SIZE
            text.x, text.y = TEXT_POSITION

    def check_at_stake(self) -> str | None:
        """Return the character skin to switch to, or None to keep the current one."""
        if self.current_life <= 10 and not self.at_stake and self.current_life > 0:
            self.at_stake = True
            return ALERT_SKIN
        if (self.current_life > 10 and self.at_stake) or self.current_life <= 0:
            self.at_stake = False
            return NORMAL_SKIN
        return None

    def draw(self, target: Any) -> None:
        self.score_display.draw(target)
        self.heart_display.draw(target)
        self.score_text.draw(target)
        self.heart.draw(target, self.heart_frame)
        self.bonus_popup.draw(target)


@dataclass
class LevelTwoCollisions:
    """Score and effect timers driven by level two collisions."""

    sounds: SoundBoard = field(default_factory=SoundBoard)
    explosion: Sprite = field(default_factory=Sprite)
    score: int = 0
    popup_delay: int = 0
    explosion_delay: int = 0
    effect_delay: int = 0

    def check(
        self, character: Rect, coins: LevelTwoCoins, bomb: Sprite, life: LevelTwoLife
    ) -> str | None:
        """Resolve collisions with coins, the bomb and the heart.

        Returns the character skin to switch to after a bomb hit, else None.
        """
        popup = coins.popup.rect
        for coin in coins.coins:
            if coin.rect.intersects(character):
                self.sounds.play("coingain")
                self.score += COIN_POINTS
                coin.rect.hide()
                popup.resize(*COIN_POPUP_SIZE)
                popup.x, popup.y = coin.rect.x, coin.rect.y
                self.popup_delay += 1
            if self.popup_delay > 0:
                self.popup_delay += 1
                popup.y -= 1
            if self.popup_delay == 400:
                self.popup_delay = 0
                popup.hide()

        skin = None
        if bomb.rect.intersects(character) and life.current_life > 0:
            self.sounds.play("explosion")
            life.life_percentage += 200
            blast = self.explosion.rect
            blast.resize(*EXPLOSION_SIZE)
            blast.x, blast.y = bomb.rect.x, bomb.rect.y
            bomb.rect.hide()
            self.explosion_delay = 0
            skin = ALERT_SKIN
            self.effect_delay = 1
        else:
            self.explosion_delay += 1
        if self.explosion_delay == 10 and bomb.rect.w == 0:
            self.explosion.rect.hide()
            self.explosion_delay = 0

        heart = life.heart.rect
        if heart.intersects(character):
            self.sounds.play("coingain")
            heart.hide()
            if life.current_life >= 95:
                life.life_percentage = 0
            bonus = life.bonus_popup.rect
            bonus.resize(BONUS_POPUP_SIZE, BONUS_POPUP_SIZE)
            bonus.x, bonus.y = heart.x, heart.y
        return skin