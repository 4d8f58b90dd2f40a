"""The scrolling daytime backdrop of level one and its end screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .level_one_items import LevelOneStatus
from .scene import Scene, Screen, Sprite

CLOCK_DIVISOR = 20.0
FRAME_THRESHOLD = 0.25
CLEAR_COLOR = (0, 0, 0)

SKY_STEP = 0.412
CLOUDS_STEP = 0.812
MOUNTAINS_STEP = 1.625
TREE_SHADE_STEP = 2.125
TREES_STEP = 4.25
TRACK_STEP = 5.5


@dataclass
class FrameClock:
    """Accumulates elapsed time and fires once a quarter of a frame has passed."""

    divisor: float = CLOCK_DIVISOR
    last_ms: int = 0
    elapsed: float = 0.0

    def tick(self, now_ms: int) -> bool:
        """Account for the time since the last tick; True when a step is due."""
        self.elapsed += (now_ms - self.last_ms) / self.divisor
        self.last_ms = now_ms
        if self.elapsed >= FRAME_THRESHOLD:
            self.elapsed = 0.0
            return True
        return False


def _scroll(speed: float, step: float, width: int) -> float:
    speed -= step
    return 0.0 if speed < -width else speed


def _draw_tiled(target: Any, sprite: Sprite, offset: float) -> None:
    sprite.rect.x = int(offset)
    sprite.draw(target)
    sprite.rect.x = int(offset) + sprite.rect.w
    sprite.draw(target)


@dataclass
class LevelOneBackdrop:
    """Sky, sun, clouds, mountains, tree shade, trees and track, plus the score HUD."""

    sky: Sprite = field(default_factory=Sprite)
    sun: Sprite = field(default_factory=Sprite)
    clouds: Sprite = field(default_factory=Sprite)
    mountains: Sprite = field(default_factory=Sprite)
    tree_shade: Sprite = field(default_factory=Sprite)
    trees: Sprite = field(default_factory=Sprite)
    track: Sprite = field(default_factory=Sprite)
    score_icon: Sprite = field(default_factory=Sprite)
    high_score_icon: Sprite = field(default_factory=Sprite)
    score_text: Sprite = field(default_factory=Sprite)
    high_score_text: Sprite = field(default_factory=Sprite)
    clock: FrameClock = field(default_factory=FrameClock)
    sky_speed: float = 0.0
    clouds_speed: float = 0.0
    mountains_speed: float = 0.0
    tree_shade_speed: float = 0.0
    trees_speed: float = 0.0
    track_speed: float = 0.0

    def advance(self, now_ms: int) -> bool:
        """Scroll every layer but the clouds when the clock fires; returns whether it did."""
        if not self.clock.tick(now_ms):
            return False
        self.sky_speed = _scroll(self.sky_speed, SKY_STEP, self.sky.rect.w)
        self.mountains_speed = _scroll(self.mountains_speed, MOUNTAINS_STEP, self.mountains.rect.w)
        self.tree_shade_speed = _scroll(
            self.tree_shade_speed, TREE_SHADE_STEP, self.tree_shade.rect.w
        )
        self.trees_speed = _scroll(self.trees_speed, TREES_STEP, self.trees.rect.w)
        self.track_speed = _scroll(self.track_speed, TRACK_STEP, self.track.rect.w)
        return True

    def advance_clouds(self) -> None:
        self.clouds_speed = _scroll(self.clouds_speed, CLOUDS_STEP, self.clouds.rect.w)

    def draw(self, target: Any) -> None:
        """Clear the frame and draw the scenery and the score HUD."""
        target.fill(CLEAR_COLOR)
        _draw_tiled(target, self.sky, self.sky_speed)
        self.sun.draw(target)
        _draw_tiled(target, self.clouds, self.clouds_speed)
        _draw_tiled(target, self.mountains, self.mountains_speed)
        _draw_tiled(target, self.tree_shade, self.tree_shade_speed)
        _draw_tiled(target, self.trees, self.trees_speed)
        _draw_tiled(target, self.track, self.track_speed)
        for hud in (self.score_icon, self.high_score_icon, self.score_text, self.high_score_text):
            hud.draw(target)


@dataclass
class LevelOneEndScreen:
    """The completed or game-over screen of level one.

    The completed screen animates while the score is to be saved and reports
    the score once; the game-over screen animates while it is showing and
    reports the score on every frame once no lives are left.
    """

    backdrop: LevelOneBackdrop = field(default_factory=LevelOneBackdrop)
    scene: Scene = field(default_factory=Scene)
    screen: Screen = Screen.LEVEL_ONE_COMPLETED
    status: LevelOneStatus = field(default_factory=LevelOneStatus)
    overlay: Sprite = field(default_factory=Sprite)
    message: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)
    score_listener: Callable[[int], None] | None = None
    frames: int = 0

    def draw(self, target: Any, now_ms: int) -> None:
        self.frames += 1
        if self.screen is Screen.LEVEL_ONE_COMPLETED:
            animate = self.scene.save_score
            report = animate and self.frames == 1
        else:
            animate = self.scene.is_active(self.screen)
            report = animate and self.status.lives == 0
        if animate and self.backdrop.advance(now_ms):
            self.backdrop.advance_clouds()
        if report and self.score_listener is not None:
            self.score_listener(self.status.score)

        self.backdrop.draw(target)
        self.overlay.draw(target)
        self.message.draw(target)
        self.back.draw(target)