"""The level two game-over screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .level_two import LevelTwoBackdrop
from .scene import Sprite


@dataclass
class LevelTwoGameOverScreen:
    """The still-scrolling night scene with the scores and the game-over message."""

    backdrop: LevelTwoBackdrop = field(default_factory=LevelTwoBackdrop)
    score_icon: Sprite = field(default_factory=Sprite)
    high_score_icon: Sprite = field(default_factory=Sprite)
    score_text: Sprite = field(default_factory=Sprite)
    high_score_text: Sprite = field(default_factory=Sprite)
    overlay: Sprite = field(default_factory=Sprite)
    message: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)

    def draw(self, target: Any) -> None:
        self.backdrop.advance()
        self.backdrop.draw(target)
        for layer in (
            self.score_icon,
            self.high_score_icon,
            self.score_text,
            self.high_score_text,
            self.overlay,
            self.message,
            self.back,
        ):
            layer.draw(target)