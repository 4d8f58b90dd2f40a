"""Core scene types: rectangles, sprites, screens, sound effects and frame dispatch."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

import pygame

MAX_VOLUME = 128


@dataclass
class Rect:
    """An integer rectangle; a rectangle with no area is hidden."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles have area and overlap."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )

    def hide(self) -> None:
        self.w = 0
        self.h = 0

    def resize(self, w: int, h: int) -> None:
        self.w = w
        self.h = h


@dataclass
class Sprite:
    """A texture drawn stretched into a destination rectangle."""

    texture: Any = None
    rect: Rect = field(default_factory=Rect)

    def draw(self, target: Any, area: Rect | None = None) -> bool:
        """Blit the texture (or the ``area`` part of it) onto ``target``.

        Returns False when nothing was drawn.
        """
        if self.texture is None or self.rect.is_empty():
            return False
        image = self.texture
        if area is not None:
            clip = pygame.Rect(area.x, area.y, area.w, area.h).clip(image.get_rect())
            if clip.w <= 0 or clip.h <= 0:
                return False
            image = image.subsurface(clip)
        size = (self.rect.w, self.rect.h)
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        target.blit(image, (self.rect.x, self.rect.y))
        return True


@dataclass(frozen=True)
class Viewport:
    """Size of the game window in pixels."""

    width: int = 1280
    height: int = 960


class Screen(enum.Enum):
    """Game screens, in the order they are drawn within one frame."""

    WELCOME = enum.auto()
    CHOOSE_LEVEL = enum.auto()
    LEVEL_ONE = enum.auto()
    LEVEL_ONE_COMPLETED = enum.auto()
    LEVEL_TWO = enum.auto()
    LEVEL_ONE_PLAYER_NAME = enum.auto()
    SCORE_BOARD = enum.auto()
    LEVEL_ONE_GAME_OVER = enum.auto()
    LEVEL_TWO_COMPLETED = enum.auto()
    LEVEL_TWO_SCORE_BOARD = enum.auto()
    LEGENDS = enum.auto()
    LEVEL_TWO_PLAYER_NAME = enum.auto()
    CONTROLS = enum.auto()
    LEVEL_TWO_GAME_OVER = enum.auto()


@dataclass
class Scene:
    """Which screens are currently showing."""

    active: set[Screen] = field(default_factory=set)
    save_score: bool = False

    def show(self, screen: Screen) -> None:
        self.active.add(screen)

    def hide(self, screen: Screen) -> None:
        self.active.discard(screen)

    def is_active(self, screen: Screen) -> bool:
        return screen in self.active


class SoundBoard:
    """Named sound effects; playing an unknown name is silently skipped."""

    def __init__(self, factory: Callable[[str], Any] | None = None) -> None:
        self._factory = factory
        self._sounds: dict[str, Any] = {}

    def load(self, name: str, path: str) -> None:
        factory = self._factory or pygame.mixer.Sound
        self._sounds[name] = factory(path)

    def play(self, name: str, volume: int | None = None) -> bool:
        """Play a sound; ``volume`` ranges from 0 to 128. Returns whether it played."""
        sound = self._sounds.get(name)
        if sound is None:
            return False
        if volume is not None:
            sound.set_volume(volume / MAX_VOLUME)
        sound.play()
        return True


def prepare_scene(scene: Scene, drawers: Mapping[Screen, Callable[[], Any]]) -> list[Screen]:
    """Run the drawer of every active screen in drawing order.

    A drawer may switch screens; later screens are checked after it runs.
    Returns the screens that were drawn.
    """
    drawn = []
    for screen in Screen:
        if scene.is_active(screen):
            drawers[screen]()
            drawn.append(screen)
    return drawn


def present_scene(display: Any) -> None:
    """Show the finished frame."""
    display.flip()