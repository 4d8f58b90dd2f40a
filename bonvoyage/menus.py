"""Menu screens drawn over the animated welcome backdrop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .scene import Sprite

SKY_STEP = 2
BIRDS_STEP = 3
MOUNTAINS_STEP = 1
CLEAR_COLOR = (0, 0, 0)


def _draw_tiled(target: Any, sprite: Sprite, offset: int) -> None:
    """Draw a layer at ``offset`` and once more right after it, for seamless scrolling."""
    sprite.rect.x = offset
    sprite.draw(target)
    sprite.rect.x = offset + sprite.rect.w
    sprite.draw(target)


@dataclass
class MenuBackdrop:
    """Scrolling sky, birds and mountains with trees in front.

    One backdrop is shared by every menu screen, so the animation carries on
    when the player moves between menus.
    """

    sky: Sprite = field(default_factory=Sprite)
    birds: Sprite = field(default_factory=Sprite)
    mountains: Sprite = field(default_factory=Sprite)
    trees: Sprite = field(default_factory=Sprite)
    sky_speed: int = 0
    birds_speed: int = 0
    mountains_speed: int = 0

    def advance(self) -> None:
        """Move every layer one step, wrapping those that ran off their width."""
        self.sky_speed -= SKY_STEP
        if self.sky_speed < -self.sky.rect.w:
            self.sky_speed = 0

        self.birds_speed += BIRDS_STEP
        if self.birds_speed > self.birds.rect.w:
            self.birds_speed -= 2 * self.birds.rect.w

        self.mountains_speed -= MOUNTAINS_STEP
        if self.mountains_speed < -self.mountains.rect.w:
            self.mountains_speed = 0

    def draw(self, target: Any) -> None:
        """Clear the frame and draw the layers at their current offsets."""
        target.fill(CLEAR_COLOR)
        _draw_tiled(target, self.sky, self.sky_speed)
        _draw_tiled(target, self.birds, self.birds_speed)
        _draw_tiled(target, self.mountains, self.mountains_speed)
        self.trees.draw(target)


@dataclass
class MenuScreen:
    """A menu: the shared backdrop followed by its own items, drawn in order.

    The welcome screen's items are the title and its four buttons; the level
    chooser, the legends hub and the controls window add their own buttons or
    panels and the back button.
    """

    backdrop: MenuBackdrop
    items: list[Sprite] = field(default_factory=list)

    def draw(self, target: Any) -> None:
        self.backdrop.advance()
        self.backdrop.draw(target)
        for item in self.items:
            item.draw(target)