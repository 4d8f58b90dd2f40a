"""The screen where a player types their name before a level starts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .menus import MenuBackdrop
from .scene import Sprite


@dataclass
class NameEntryScreen:
    """Menu backdrop with the title, back button, prompt, name box and enter button.

    Both levels use this screen, each with its own prompt and button sprites.
    """

    backdrop: MenuBackdrop
    title: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)
    prompt: Sprite = field(default_factory=Sprite)
    name_box: Sprite = field(default_factory=Sprite)
    enter_button: Sprite = field(default_factory=Sprite)
    command: Sprite = field(default_factory=Sprite)

    @property
    def layers(self) -> list[Sprite]:
        """The screen's own sprites in drawing order."""
        return [
            self.title,
            self.back,
            self.prompt,
            self.name_box,
            self.enter_button,
            self.command,
        ]

    def draw(self, target: Any) -> None:
        self.backdrop.advance()
        self.backdrop.draw(target)
        for layer in self.layers:
            layer.draw(target)