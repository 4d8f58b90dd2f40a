"""The level two play screen: animation sheets, the night backdrop and the frame update."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from .level_two_items import Dragon, LevelTwoCoins, Tracks, Walker
from .level_two_life import ALERT_SKIN, NORMAL_SKIN, LevelTwoCollisions, LevelTwoLife
from .scene import Rect, Scene, Screen, SoundBoard, Sprite, Viewport

FRAME_THRESHOLD = 0.25
SHEET_DIVISOR = 280.0
DRAGON_DIVISOR = 260.0
TRACK_DIVISOR = 280.0
SCORE_TICKS = 10
EFFECT_DURATION = 250
LOW_LIFE = 10
THRONE_STEP = 2
THRONE_START = 10000.0
TOP_LIMIT = 40
LEFT_LIMIT = 40
BOTTOM_LIMIT = 800
CLEAR_COLOR = (0, 0, 0)

SKY_STEP = 0.5
MOUNTAINS_STEP = 2
TREE_SHADE_STEP = 4
CLOUDS_STEP = 1
TRACK_STEP = 6


class Facing(enum.Enum):
    """Which way the character was last told to run."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class SpriteSheet:
    """Steps a source frame across a sprite sheet at a time-based rate.

    Sheets have one or two rows; a two-row sheet moves to the second row at
    the end of the first and back to the start at the end of the second.
    """

    frame: Rect = field(default_factory=Rect)
    frame_width: int = 0
    frame_height: int = 0
    texture_width: int = 0
    rows: int = 1
    divisor: float = SHEET_DIVISOR
    exact_wrap: bool = False
    last_ms: int = 0
    elapsed: float = 0.0

    def tick(self, now_ms: int) -> bool:
        """Account for elapsed time; returns True when the frame moved."""
        self.elapsed += (now_ms - self.last_ms) / self.divisor
        self.last_ms = now_ms
        if self.elapsed < FRAME_THRESHOLD:
            return False
        self.elapsed = 0.0
        frame = self.frame
        frame.x += self.frame_width
        if self.rows == 1:
            if frame.x >= self.texture_width:
                frame.x = 0
            return True
        if self.exact_wrap:
            past_end = frame.x == self.texture_width
        else:
            past_end = frame.x >= self.texture_width
        if frame.x == self.texture_width and frame.y == self.frame_height:
            frame.x = 0
            frame.y = 0
        elif past_end:
            frame.x = 0
            frame.y = self.frame_height
        return True


def _draw_tiled(target: Any, sprite: Sprite, offset: float) -> None:
    sprite.rect.x = int(offset)
    sprite.draw(target)
    sprite.rect.x = int(offset) + sprite.rect.w
    sprite.draw(target)


@dataclass
class LevelTwoBackdrop:
    """The scrolling night scene behind level two."""

    sky: Sprite = field(default_factory=Sprite)
    moon: Sprite = field(default_factory=Sprite)
    mountains: Sprite = field(default_factory=Sprite)
    tree_shade: Sprite = field(default_factory=Sprite)
    clouds: Sprite = field(default_factory=Sprite)
    track: Sprite = field(default_factory=Sprite)
    sky_speed: float = 0.0
    mountains_speed: float = 0.0
    tree_shade_speed: float = 0.0
    clouds_speed: float = 0.0
    track_speed: float = 0.0

    def advance(self) -> None:
        """Move every layer one step, wrapping those that ran off their width."""
        self.sky_speed -= SKY_STEP
        if self.sky_speed < -self.sky.rect.w:
            self.sky_speed = 0
        self.mountains_speed -= MOUNTAINS_STEP
        if self.mountains_speed < -self.mountains.rect.w:
            self.mountains_speed = 0
        self.tree_shade_speed -= TREE_SHADE_STEP
        if self.tree_shade_speed < -self.tree_shade.rect.w:
            self.tree_shade_speed = 0
        self.clouds_speed -= CLOUDS_STEP
        if self.clouds_speed < -self.clouds.rect.w:
            self.clouds_speed = 0
        self.track_speed -= TRACK_STEP
        if self.track_speed < -self.track.rect.w:
            self.track_speed = 0

    def draw(self, target: Any) -> None:
        """Clear the frame and draw the layers at their current offsets."""
        target.fill(CLEAR_COLOR)
        _draw_tiled(target, self.sky, self.sky_speed)
        _draw_tiled(target, self.mountains, self.mountains_speed)
        _draw_tiled(target, self.tree_shade, self.tree_shade_speed)
        _draw_tiled(target, self.track, self.track_speed)
        self.moon.draw(target)
        _draw_tiled(target, self.clouds, self.clouds_speed)


def _draw_flipped(target: Any, sprite: Sprite, area: Rect) -> bool:
    """Draw ``area`` of the sprite's texture mirrored left to right."""
    if sprite.texture is None or sprite.rect.is_empty():
        return False
    image = sprite.texture
    clip = pygame.Rect(area.x, area.y, area.w, area.h).clip(image.get_rect())
    if clip.w <= 0 or clip.h <= 0:
        return False
    image = pygame.transform.flip(image.subsurface(clip), True, False)
    size = (sprite.rect.w, sprite.rect.h)
    if image.get_size() != size:
        image = pygame.transform.scale(image, size)
    target.blit(image, (sprite.rect.x, sprite.rect.y))
    return True


def _two_row_character() -> SpriteSheet:
    return SpriteSheet(rows=2, exact_wrap=True)


def _two_row_sheet() -> SpriteSheet:
    return SpriteSheet(rows=2)


def _dragon_sheet() -> SpriteSheet:
    return SpriteSheet(divisor=DRAGON_DIVISOR)


@dataclass
class LevelTwo:
    """Level two: the character runs over floating tracks towards the throne."""

    viewport: Viewport = field(default_factory=Viewport)
    scene: Scene = field(default_factory=Scene)
    sounds: SoundBoard = field(default_factory=SoundBoard)
    rng: random.Random = field(default_factory=random.Random)
    backdrop: LevelTwoBackdrop = field(default_factory=LevelTwoBackdrop)
    character: Sprite = field(default_factory=Sprite)
    character_sheet: SpriteSheet = field(default_factory=_two_row_character)
    coin_sheet: SpriteSheet = field(default_factory=_two_row_sheet)
    heart_sheet: SpriteSheet = field(default_factory=_two_row_sheet)
    dragon_sheet: SpriteSheet = field(default_factory=_dragon_sheet)
    dragon: Dragon = field(default_factory=Dragon)
    coins: LevelTwoCoins = field(default_factory=LevelTwoCoins)
    tracks: Tracks = field(default_factory=Tracks)
    walker: Walker = field(default_factory=Walker)
    life: LevelTwoLife = field(default_factory=LevelTwoLife)
    collisions: LevelTwoCollisions = field(default_factory=LevelTwoCollisions)
    throne: Sprite = field(default_factory=Sprite)
    score_icon: Sprite = field(default_factory=Sprite)
    high_score_icon: Sprite = field(default_factory=Sprite)
    score_text: Sprite = field(default_factory=Sprite)
    high_score_text: Sprite = field(default_factory=Sprite)
    instructions: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)
    skin_loader: Callable[[str], Any] | None = None
    score_listener: Callable[[int], None] | None = None
    running: bool = False
    facing: Facing = Facing.RIGHT
    throne_x: float = THRONE_START
    skin: str = NORMAL_SKIN
    score_ticks: int = 0
    track_ms: int = 0

    def __post_init__(self) -> None:
        self.dragon.frame = self.dragon_sheet.frame
        self.life.heart_frame = self.heart_sheet.frame
        for part in (self.dragon, self.coins, self.tracks, self.life):
            part.viewport = self.viewport
        self.life.sounds = self.sounds
        self.collisions.sounds = self.sounds
        self.throne.rect.x = int(self.throne_x)

    @property
    def score(self) -> int:
        return self.collisions.score

    def start(self) -> None:
        """Begin play (the player pressed space)."""
        self.running = True

    def _switch_skin(self, path: str | None) -> None:
        if path is None:
            return
        self.skin = path
        if self.skin_loader is not None:
            self.character.texture = self.skin_loader(path)

    def _report_score(self) -> None:
        if self.score_listener is not None:
            self.score_listener(self.collisions.score)

    def _advance_collision_effect(self) -> None:
        if self.collisions.effect_delay == EFFECT_DURATION:
            self._switch_skin(NORMAL_SKIN if self.life.current_life > LOW_LIFE else ALERT_SKIN)
            self.collisions.effect_delay = 0
        if self.collisions.effect_delay > 0:
            self.collisions.effect_delay += 1

    def _move_tracks(self, now_ms: int) -> None:
        delta = (now_ms - self.track_ms) / TRACK_DIVISOR
        self.track_ms = now_ms
        self.tracks.move(delta, self.coins, self.rng)
        self.walker.frame_width = self.character_sheet.frame.w
        self.tracks.land(self.walker, self.character.rect)

    def _keep_in_frame(self) -> None:
        walker = self.walker
        if walker.y <= TOP_LIMIT:
            walker.y = TOP_LIMIT
        if walker.x <= LEFT_LIMIT:
            walker.x = LEFT_LIMIT
        if walker.y >= BOTTOM_LIMIT:
            walker.y = BOTTOM_LIMIT
        if walker.x >= self.viewport.width:
            walker.x = 0
        self.character.rect.x = int(walker.x)
        self.character.rect.y = int(walker.y)

    def update(self, now_ms: int) -> None:
        """Advance the level by one frame."""
        self.dragon_sheet.tick(now_ms)
        self._advance_collision_effect()
        self.character_sheet.tick(now_ms)
        self.coin_sheet.tick(now_ms)
        self.heart_sheet.tick(now_ms)

        self.life.refresh()
        self._move_tracks(now_ms)
        self.life.update_heart(self.rng)

        self.score_ticks += 1
        if self.score_ticks == SCORE_TICKS:
            self.score_ticks = 0
            self.collisions.score += 1

        self._switch_skin(
            self.collisions.check(self.character.rect, self.coins, self.dragon.bomb, self.life)
        )
        self._switch_skin(self.life.check_at_stake())
        self.life.move_bonus_popup()
        self._report_score()
        self.life.life_text = str(self.life.current_life)

        self._keep_in_frame()
        self.backdrop.advance()

        if self.life.current_life <= 0:
            self.running = False
            self.life.score_text.texture = None
            self.scene.hide(Screen.LEVEL_TWO)
            self.scene.show(Screen.LEVEL_TWO_GAME_OVER)
            self.sounds.play("gameover")

        self.throne_x -= THRONE_STEP
        if self.character.rect.x >= self.throne.rect.x:
            self.scene.hide(Screen.LEVEL_TWO)
            self.scene.show(Screen.LEVEL_TWO_COMPLETED)

    def draw(self, target: Any, now_ms: int) -> None:
        """Update the level if it is in play, then draw the whole frame."""
        playing = self.running and self.scene.is_active(Screen.LEVEL_TWO)
        if playing:
            self.update(now_ms)
            self._report_score()

        self.throne.rect.x = int(self.throne_x)
        self.backdrop.draw(target)
        for hud in (self.score_icon, self.high_score_icon, self.score_text, self.high_score_text):
            hud.draw(target)

        if not self.running:
            self.character.draw(target, self.character_sheet.frame)
        self.life.score_display.draw(target)
        self.life.heart_display.draw(target)
        self.life.score_text.draw(target)
        if self.scene.is_active(Screen.LEVEL_TWO) and not self.running:
            self.instructions.draw(target)

        if self.running and self.scene.is_active(Screen.LEVEL_TWO):
            self.tracks.draw(target)
            self.coins.draw(target, self.coin_sheet.frame)
            self.coins.draw_popup(target)
            self.dragon.fly(self.character.rect.x)
            self.dragon.draw(target, self.collisions.explosion)
            self.life.heart.draw(target, self.life.heart_frame)
            self.life.bonus_popup.draw(target)
            if self.facing is Facing.LEFT:
                _draw_flipped(target, self.character, self.character_sheet.frame)
            else:
                self.character.draw(target, self.character_sheet.frame)

        self.throne.draw(target)
        self.back.draw(target)