"""Level two moving items: the bomb-dropping dragon, the coins and the floating tracks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Sequence

from .scene import Rect, Sprite, Viewport

DRAGON_STEP = 6
BOMB_START_Y = 150
BOMB_SIZE = (40, 50)
BOMB_FALL = 7
BOMB_AIM_TOLERANCE = 10
COIN_SIZE = 60
TRACK_GAP = 900


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Dragon:
    """The dragon crossing the sky and the bomb it drops on the character."""

    viewport: Viewport = field(default_factory=Viewport)
    sprite: Sprite = field(default_factory=Sprite)
    frame: Rect = field(default_factory=Rect)
    bomb: Sprite = field(default_factory=Sprite)
    target_x: int = 0

    def fly(self, character_x: int) -> None:
        """Move the dragon one step and let the bomb drop at the aimed spot."""
        position = self.sprite.rect
        bomb = self.bomb.rect
        if position.x + position.w <= 0 and bomb.y > self.viewport.height:
            position.x = self.viewport.width
            bomb.y = BOMB_START_Y
            bomb.hide()
            self.target_x = character_x
        else:
            position.x -= DRAGON_STEP
        if abs(self.target_x - position.x) <= BOMB_AIM_TOLERANCE:
            bomb.x = self.target_x
            bomb.y = BOMB_START_Y
            bomb.resize(*BOMB_SIZE)
        if bomb.x == self.target_x:
            bomb.y += BOMB_FALL

    def draw(self, target: Any, explosion: Sprite) -> None:
        self.bomb.draw(target)
        self.sprite.draw(target, self.frame)
        explosion.draw(target)


@dataclass
class LevelTwoCoins:
    """Seven coins placed relative to the two tracks, plus the score pop-up."""

    viewport: Viewport = field(default_factory=Viewport)
    coins: list[Sprite] = field(default_factory=lambda: [Sprite() for _ in range(7)])
    popup: Sprite = field(default_factory=Sprite)

    def reposition_first(self, track: Rect, rng: random.Random) -> None:
        """Place the five coins tied to the first track; keeps the track in frame."""
        for coin in self.coins[:5]:
            coin.rect.resize(COIN_SIZE, COIN_SIZE)
        height = self.viewport.height
        if track.y < height // 2 or track.y >= height - 400:
            track.y = height // 2 + rng.randrange(100)
        first, second, third, fourth, fifth = (coin.rect for coin in self.coins[:5])
        first.y = track.y - 70 - rng.randrange(200)
        second.y = track.y - 70 - rng.randrange(200)
        if track.y - 120 < first.y < track.y:
            first.y = self.viewport.width + 300
        third.y = 200
        fourth.y = third.y + 200
        fifth.y = fourth.y + 300

    def reposition_second(self, track: Rect, rng: random.Random) -> None:
        """Place the two coins tied to the second track."""
        sixth, seventh = (coin.rect for coin in self.coins[5:7])
        sixth.resize(COIN_SIZE, COIN_SIZE)
        seventh.resize(COIN_SIZE, COIN_SIZE)
        sixth.y = track.y - 70 - rng.randrange(200)
        seventh.y = track.y - 70 - rng.randrange(200)
        if track.y - 120 < sixth.y < track.y:
            sixth.y = self.viewport.width + 300

    def follow(self, tracks: Sequence[Rect]) -> None:
        """Keep the coins horizontally in step with the tracks."""
        lead, trail = tracks
        c = [coin.rect for coin in self.coins]
        c[0].x = lead.x + _trunc_div(c[0].y, 4)
        c[1].x = lead.x + _trunc_div(c[1].y, 4) + 300
        c[2].x = lead.x - 200
        c[3].x = lead.x - 300
        c[4].x = lead.x + lead.w + 200
        c[5].x = trail.x + _trunc_div(c[5].y, 4)
        c[6].x = trail.x + _trunc_div(c[6].y, 4) + 300

    def draw(self, target: Any, frame: Rect) -> None:
        for coin in self.coins:
            coin.draw(target, frame)

    def draw_popup(self, target: Any) -> None:
        self.popup.draw(target)


@dataclass
class Walker:
    """Vertical state of the level-two character."""

    x: float = 0
    y: float = 0
    frame_width: int = 0
    up_pressed: bool = False
    down_pressed: bool = False


@dataclass
class Tracks:
    """Two scrolling tracks with invisible borders beneath them."""

    viewport: Viewport = field(default_factory=Viewport)
    sprites: list[Sprite] = field(default_factory=lambda: [Sprite(), Sprite()])
    borders: list[Rect] = field(default_factory=lambda: [Rect(), Rect()])
    lead_x: float = 0.0
    trail_x: float = 0.0
    speed: float = 5.0

    def move(self, delta: float, coins: LevelTwoCoins, rng: random.Random) -> None:
        """Scroll the tracks, respawning one that has left the screen."""
        first, second = (sprite.rect for sprite in self.sprites)
        self.lead_x -= self.speed * delta
        self.trail_x -= self.speed * delta
        if self.lead_x + first.w <= 0:
            self.lead_x = self.viewport.width
            first.y = rng.randrange(self.viewport.height)
            coins.reposition_first(first, rng)
        if self.trail_x + first.w <= 0:
            self.trail_x = self.lead_x + TRACK_GAP
            second.y = first.y - 100
            coins.reposition_second(second, rng)
        lead_border, trail_border = self.borders
        lead_border.y = first.y + first.h
        lead_border.x = int(self.lead_x)
        trail_border.y = second.y + first.h
        trail_border.x = int(self.trail_x)
        first.x = int(self.lead_x)
        second.x = int(self.trail_x)
        coins.follow([first, second])

    def land(self, walker: Walker, character: Rect) -> None:
        """Let the character stand on, bump under or fall past the tracks."""
        first, second = (sprite.rect for sprite in self.sprites)
        on_first = first.intersects(character)
        on_second = second.intersects(character)
        under = any(border.intersects(character) for border in self.borders)
        height = self.viewport.height
        offset = walker.frame_width

        if under:
            walker.y += 5
            walker.down_pressed = False
        elif on_first and not walker.up_pressed:
            walker.down_pressed = False
            walker.y = first.y - offset - 5
        elif on_second and not walker.up_pressed:
            walker.down_pressed = False
            walker.y = second.y - offset - 5

        if (
            (not on_first and not on_second)
            or abs(second.y - walker.y - offset) >= 6
            or abs(first.y - walker.y - offset) >= 6
        ):
            if walker.y != height:
                walker.y += 10
            if walker.y >= height - 250:
                walker.y = height - 250

        walker.up_pressed = False
        if walker.down_pressed and walker.y <= height - 260:
            walker.y += 40
            walker.down_pressed = False

    def draw(self, target: Any) -> None:
        first, second = self.sprites
        first.draw(target)
        first.rect.x = int(self.lead_x) + first.rect.w
        second.draw(target)
        second.rect.x = int(self.trail_x) + second.rect.w