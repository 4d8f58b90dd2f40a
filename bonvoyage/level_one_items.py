"""Level one items: coins, their "+100" effects, obstacles, lives and collisions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from .scene import Rect, SoundBoard, Sprite, Viewport

COIN_STEPS = (8, 7, 6, 5, 4)
COIN_SIZE = 40
COIN_TOP = 630
COIN_SPREAD = 500

EFFECT_WRAP = -1280
EFFECT_OFFSET = 100
EFFECT_SIZE = 100
EXPIRE_X = 300

OBSTACLE_STEP = 5
OBSTACLE_SIZES = ((160, 140), (224, 136), (102, 93))
OBSTACLE_SPACING = 500

LIFE_X = 1000
LIFE_SPACING = 40
LIFE_Y = 30
LIFE_SIZE = 30
MAX_LIVES = 6

BALLOON_START = 700
BALLOON_STEP = 3
BALLOON_FLOORS = (10, -10, 10)
BALLOON_X = 700
BALLOON_SIZE = 60

COIN_POINTS = 100
COIN_VOLUME = 40
TIGER_JUMP = 8
TIGER_START_Y = 730.0

COIN_SOUND = "levelonecoin"
HIT_SOUND = "hitlevelone"


def _sprites(count: int) -> list[Sprite]:
    return [Sprite() for _ in range(count)]


def _draw_twice(target: Any, sprite: Sprite, x: int) -> None:
    """Draw at the old position, move to ``x`` and draw again."""
    sprite.draw(target)
    sprite.rect.x = x
    sprite.draw(target)


@dataclass
class Coins:
    """Five coins sliding in from the right at different speeds."""

    viewport: Viewport = field(default_factory=Viewport)
    rng: random.Random = field(default_factory=random.Random)
    sprites: list[Sprite] = field(default_factory=lambda: _sprites(len(COIN_STEPS)))
    speeds: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.speeds:
            self.speeds = [self.viewport.width + 100] * len(COIN_STEPS)

    def advance(self) -> None:
        """Move each coin by its own step; a coin that left the screen respawns."""
        floor = -self.viewport.width + 100
        for index, (sprite, step) in enumerate(zip(self.sprites, COIN_STEPS)):
            self.speeds[index] -= step
            if self.speeds[index] < floor:
                self.speeds[index] = self.viewport.width + 100
                sprite.rect.resize(COIN_SIZE, COIN_SIZE)
                sprite.rect.y = COIN_TOP - self.rng.randrange(COIN_SPREAD)

    def draw(self, target: Any) -> None:
        self.advance()
        for sprite, speed in zip(self.sprites, self.speeds):
            _draw_twice(target, sprite, speed)


@dataclass
class CoinEffects:
    """The "+100" shown where a coin was collected."""

    viewport: Viewport = field(default_factory=Viewport)
    sprites: list[Sprite] = field(default_factory=lambda: _sprites(len(COIN_STEPS)))
    speeds: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.speeds:
            self.speeds = [self.viewport.width] * len(COIN_STEPS)

    def advance(self, coins: Coins) -> None:
        """Move each effect; one that scrolled far enough is hidden and rearmed."""
        for index, (effect, coin, step) in enumerate(zip(self.sprites, coins.sprites, COIN_STEPS)):
            self.speeds[index] -= step
            if self.speeds[index] < EFFECT_WRAP:
                self.speeds[index] = self.viewport.width
                effect.rect.hide()
                effect.rect.y = coin.rect.y

    def expire(self, coins: Coins) -> None:
        """Hide the effect of every coin that is passing the expiry column."""
        for effect, coin in zip(self.sprites, coins.sprites):
            if coin.rect.x == EXPIRE_X:
                effect.rect.hide()

    def draw(self, target: Any, coins: Coins) -> None:
        self.advance(coins)
        self.expire(coins)
        for effect, speed in zip(self.sprites, self.speeds):
            _draw_twice(target, effect, speed + EFFECT_OFFSET)


@dataclass
class Obstacles:
    """Three obstacles on the track, spaced apart."""

    viewport: Viewport = field(default_factory=Viewport)
    sprites: list[Sprite] = field(default_factory=lambda: _sprites(len(OBSTACLE_SIZES)))
    speeds: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.speeds:
            self.speeds = self._respawn_positions()

    def _respawn_positions(self) -> list[int]:
        width = self.viewport.width
        return [width + 100, width * 2, width * 3]

    def advance(self) -> None:
        """Move every obstacle; one that left the screen comes back full size."""
        floor = -self.viewport.width - 100
        respawn = self._respawn_positions()
        for index, (sprite, size) in enumerate(zip(self.sprites, OBSTACLE_SIZES)):
            self.speeds[index] -= OBSTACLE_STEP
            if self.speeds[index] < floor:
                self.speeds[index] = respawn[index]
                sprite.rect.resize(*size)

    def draw(self, target: Any) -> None:
        self.advance()
        for index, (sprite, speed) in enumerate(zip(self.sprites, self.speeds)):
            sprite.rect.x = speed + OBSTACLE_SPACING * index
            sprite.draw(target)


@dataclass
class LifeBar:
    """A row of hearts, one per remaining life."""

    sprites: list[Sprite] = field(default_factory=lambda: _sprites(MAX_LIVES))

    def draw(self, target: Any, lives: int) -> int:
        """Lay out and draw the first ``lives`` hearts; returns how many were placed."""
        shown = self.sprites[: max(lives, 0)]
        for index, sprite in enumerate(shown):
            sprite.rect = Rect(index * LIFE_SPACING + LIFE_X, LIFE_Y, LIFE_SIZE, LIFE_SIZE)
            sprite.draw(target)
        return len(shown)


@dataclass
class LifeLossBalloons:
    """Balloons that rise after the character hits an obstacle."""

    sprites: list[Sprite] = field(default_factory=lambda: _sprites(len(BALLOON_FLOORS)))
    speeds: list[int] = field(default_factory=lambda: [BALLOON_START] * len(BALLOON_FLOORS))

    def advance(self) -> None:
        """Raise each balloon; one past its ceiling is hidden and reset."""
        for index, (sprite, floor) in enumerate(zip(self.sprites, BALLOON_FLOORS)):
            self.speeds[index] -= BALLOON_STEP
            if self.speeds[index] < floor:
                self.speeds[index] = BALLOON_START
                sprite.rect.hide()

    def pop(self, index: int) -> None:
        """Show balloon ``index`` from its starting height."""
        self.speeds[index] = BALLOON_START
        self.sprites[index].rect.resize(BALLOON_SIZE, BALLOON_SIZE)

    def draw(self, target: Any) -> None:
        self.advance()
        for sprite, speed in zip(self.sprites, self.speeds):
            sprite.rect.y = speed
            sprite.rect.x = BALLOON_X
            sprite.draw(target)


@dataclass
class LevelOneStatus:
    """Score, remaining lives and the tiger's height."""

    score: int = 0
    lives: int = MAX_LIVES
    tiger_y: float = TIGER_START_Y


@dataclass
class LevelOneItems:
    """All level one items and the collisions between them and the runners."""

    coins: Coins = field(default_factory=Coins)
    effects: CoinEffects = field(default_factory=CoinEffects)
    obstacles: Obstacles = field(default_factory=Obstacles)
    life_bar: LifeBar = field(default_factory=LifeBar)
    balloons: LifeLossBalloons = field(default_factory=LifeLossBalloons)
    sounds: SoundBoard = field(default_factory=SoundBoard)
    character_tinted: bool = False

    def collide(self, character: Rect, tiger: Rect, status: LevelOneStatus) -> bool:
        """Collect coins, take hits from obstacles and let the tiger jump them.

        Returns True when the character hit an obstacle this frame.
        """
        for coin, effect in zip(self.coins.sprites, self.effects.sprites):
            if character.intersects(coin.rect):
                self.sounds.play(COIN_SOUND, COIN_VOLUME)
                coin.rect.hide()
                effect.rect.resize(EFFECT_SIZE, EFFECT_SIZE)
                status.score += COIN_POINTS
                self.effects.expire(self.coins)

        hit = False
        for index, obstacle in enumerate(self.obstacles.sprites):
            if character.intersects(obstacle.rect):
                hit = True
                self.sounds.play(HIT_SOUND)
                self.character_tinted = True
                obstacle.rect.hide()
                self.balloons.pop(index)
                if status.lives >= 1:
                    status.lives -= 1
                    break
            if tiger.intersects(obstacle.rect):
                status.tiger_y -= TIGER_JUMP
        return hit