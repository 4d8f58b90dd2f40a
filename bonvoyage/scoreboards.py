"""The score board screens of both levels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from .menus import MenuBackdrop
from .scene import Sprite


def scoreboard_layers(
    board: Sprite,
    names: Sequence[Sprite],
    scores: Sequence[Sprite],
    title: Sprite,
    back: Sprite,
) -> list[Sprite]:
    """The board, then each player's name and score in turn, then title and back button."""
    layers = [board]
    for name, score in zip(names, scores):
        layers.append(name)
        layers.append(score)
    layers.append(title)
    layers.append(back)
    return layers


@dataclass
class ScoreBoardScreen:
    """The menu backdrop with a board listing the best players and their scores."""

    backdrop: MenuBackdrop
    board: Sprite = field(default_factory=Sprite)
    names: list[Sprite] = field(default_factory=lambda: [Sprite() for _ in range(5)])
    scores: list[Sprite] = field(default_factory=lambda: [Sprite() for _ in range(5)])
    title: Sprite = field(default_factory=Sprite)
    back: Sprite = field(default_factory=Sprite)

    def draw(self, target: Any) -> None:
        self.backdrop.advance()
        self.backdrop.draw(target)
        for layer in scoreboard_layers(self.board, self.names, self.scores, self.title, self.back):
            layer.draw(target)