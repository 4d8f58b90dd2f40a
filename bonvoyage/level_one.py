"""The level one play screen: the character runs from the tiger towards the cinema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from .level_one_backdrop import FrameClock, LevelOneBackdrop
from .level_one_items import LevelOneItems, LevelOneStatus
from .level_two import SpriteSheet
from .scene import Scene, Screen, SoundBoard, Sprite, Viewport

CHARACTER_DIVISOR = 220.0
TIGER_DIVISOR = 280.0
LAP_POINTS = 22
FINISH_MARGIN = 100
TOP_LIMIT = 40
GROUND = 665
X_LIMIT = 600
X_BAND_END = 665
X_FAR = 700
TIGER_GROUND = 730
CHARACTER_FALL_DIVISOR = 70
TIGER_FALL_DIVISOR = 130
CURZON_STEP = 3
CURZON_START = 10000.0
ROAR_EVERY = 100
ROAR_VOLUME = 10
TINT = (255, 0, 0)


def _character_sheet() -> SpriteSheet:
    return SpriteSheet(divisor=CHARACTER_DIVISOR)


def _tiger_sheet() -> SpriteSheet:
    return SpriteSheet(divisor=TIGER_DIVISOR)


@dataclass
class LevelOne:
    """Level one: run, jump, collect coins and dodge obstacles until the finish."""

    viewport: Viewport = field(default_factory=Viewport)
    scene: Scene = field(default_factory=Scene)
    sounds: SoundBoard = field(default_factory=SoundBoard)
    backdrop: LevelOneBackdrop = field(default_factory=LevelOneBackdrop)
    items: LevelOneItems = field(default_factory=LevelOneItems)
    status: LevelOneStatus = field(default_factory=LevelOneStatus)
    character: Sprite = field(default_factory=Sprite)
    character_sheet: SpriteSheet = field(default_factory=_character_sheet)
    tiger: Sprite = field(default_factory=Sprite)
    tiger_sheet: SpriteSheet = field(default_factory=_tiger_sheet)
    jump_clock: FrameClock = field(default_factory=FrameClock)
    curzon: Sprite = field(default_factory=Sprite)
    instructions: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)
    score_listener: Callable[[int], None] | None = None
    character_x: float = 0.0
    character_y: float = float(GROUND)
    curzon_x: float = CURZON_START
    scroll_speed: int = 700
    running: bool = False
    tinted: bool = False

    def __post_init__(self) -> None:
        self.curzon.rect.x = int(self.curzon_x)

    def start(self) -> None:
        """Begin play (the player pressed space)."""
        self.running = True

    def _report_score(self) -> None:
        if self.score_listener is not None:
            self.score_listener(self.status.score)

    def _step_character(self, now_ms: int) -> None:
        sheet = self.character_sheet
        wraps = sheet.frame.x + sheet.frame_width >= sheet.texture_width
        if sheet.tick(now_ms) and wraps:
            self.status.score += LAP_POINTS

    def _keep_in_frame(self) -> None:
        if self.character_y <= TOP_LIMIT:
            self.character_y = TOP_LIMIT
        if X_LIMIT <= self.character_x < X_BAND_END:
            self.character_x = X_LIMIT
        if self.character_y >= GROUND:
            self.character_y = GROUND
        if self.character_x >= X_FAR:
            self.character_x = X_LIMIT
        self.character.rect.x = self.viewport.width // 2 - 100
        self.character.rect.y = int(self.character_y)

    def _fall(self, now_ms: int) -> None:
        if not self.jump_clock.tick(now_ms):
            return
        if self.character_y < GROUND:
            self.character_y += self.scroll_speed // CHARACTER_FALL_DIVISOR
        if self.status.tiger_y < TIGER_GROUND:
            self.status.tiger_y += self.scroll_speed / TIGER_FALL_DIVISOR

    def update(self, now_ms: int) -> None:
        """Advance the level by one frame."""
        self._step_character(now_ms)
        self.tiger_sheet.tick(now_ms)

        if self.character.rect.x >= self.curzon.rect.x + FINISH_MARGIN:
            self.scene.show(Screen.LEVEL_ONE_COMPLETED)
            self.scene.hide(Screen.LEVEL_ONE)
            self.scene.save_score = True

        self.backdrop.advance(now_ms)
        self._keep_in_frame()
        self._fall(now_ms)
        self.tiger.rect.y = int(self.status.tiger_y)

        if self.status.lives == 0:
            self.scene.hide(Screen.LEVEL_ONE)
            self.scene.show(Screen.LEVEL_ONE_GAME_OVER)
            self.sounds.play("gameover")

        self.curzon_x -= CURZON_STEP
        if self.status.score % ROAR_EVERY == 0:
            self.sounds.play("tigerroar", ROAR_VOLUME)

    def _apply_tint(self) -> None:
        if self.tinted or not self.items.character_tinted or self.character.texture is None:
            return
        texture = self.character.texture.copy()
        texture.fill(TINT, special_flags=pygame.BLEND_RGB_MULT)
        self.character.texture = texture
        self.tinted = True

    def _playing(self) -> bool:
        return self.running and self.scene.is_active(Screen.LEVEL_ONE)

    def draw(self, target: Any, now_ms: int) -> None:
        """Update the level if it is in play, then draw the whole frame."""
        if self._playing():
            self.update(now_ms)
            self._report_score()

        self.backdrop.advance_clouds()
        self.curzon.rect.x = int(self.curzon_x)
        self.backdrop.draw(target)

        if self.scene.is_active(Screen.LEVEL_ONE) and not self.running:
            self.instructions.draw(target)

        if self._playing():
            self._apply_tint()
            self.character.draw(target, self.character_sheet.frame)
            self.tiger.draw(target, self.tiger_sheet.frame)

        self.back.draw(target)

        if self._playing():
            items = self.items
            items.coins.draw(target)
            items.obstacles.draw(target)
            items.collide(self.character.rect, self.tiger.rect, self.status)
            items.effects.draw(target, items.coins)
            items.life_bar.draw(target, self.status.lives)
            items.balloons.draw(target)

        self.curzon.draw(target)