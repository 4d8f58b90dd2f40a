import random

import pygame

from bonvoyage.level_two_items import LevelTwoCoins
from bonvoyage.level_two_life import (
    ALERT_SKIN,
    BONUS_POPUP_SIZE,
    ENLARGED_TEXT_POSITION,
    ENLARGED_TEXT_SIZE,
    EXPLOSION_SIZE,
    NORMAL_SKIN,
    TEXT_POSITION,
    TEXT_SIZE,
    LevelTwoCollisions,
    LevelTwoLife,
)
from bonvoyage.scene import Rect, SoundBoard, Sprite


class FakeSound:
    def __init__(self, path):
        self.plays = 0

    def set_volume(self, value):
        pass

    def play(self):
        self.plays += 1


def sound_board():
    board = SoundBoard(factory=FakeSound)
    for name in ("coingain", "explosion", "pointgain"):
        board.load(name, name + ".wav")
    return board


def test_full_life_hides_heart():
    life = LevelTwoLife()
    life.heart.rect = Rect(10, 10, 80, 80)
    life.update_heart(random.Random(0))
    assert life.current_life == 100
    assert life.life_text == "100"
    assert life.heart.rect.is_empty()
    assert life.heart_delay == 0


def test_life_drops_with_percentage():
    life = LevelTwoLife(life_percentage=200)
    life.update_heart(random.Random(0))
    assert life.current_life < 95
    assert life.life_text == str(life.current_life)


def test_heart_cycle():
    life = LevelTwoLife(life_percentage=200)
    rng = random.Random(5)
    for _ in range(30):
        life.update_heart(rng)
    heart = life.heart.rect
    assert (heart.w, heart.h) == (80, 80)
    assert 0 <= heart.x < life.viewport.width - 150
    assert 150 <= heart.y <= 750
    for _ in range(270):
        life.update_heart(rng)
    assert heart.is_empty()
    for _ in range(200):
        life.update_heart(rng)
    assert life.heart_delay == 0


def test_bonus_popup_adds_life_and_enlarges_text():
    sounds = sound_board()
    life = LevelTwoLife(sounds=sounds, life_percentage=300, current_life=85)
    life.bonus_popup.rect = Rect(*TEXT_POSITION, BONUS_POPUP_SIZE, BONUS_POPUP_SIZE)
    life.move_bonus_popup()
    assert life.life_percentage == 300 - 100
    assert sounds._sounds["pointgain"].plays == 1
    assert life.font_size == ENLARGED_TEXT_SIZE
    assert (life.score_text.rect.x, life.score_text.rect.y) == ENLARGED_TEXT_POSITION
    assert life.bonus_popup.rect.is_empty()
    for _ in range(20):
        life.move_bonus_popup()
    assert life.font_size == TEXT_SIZE
    assert (life.score_text.rect.x, life.score_text.rect.y) == TEXT_POSITION
    assert life.life_percentage == 300 - 100


def test_bonus_popup_at_high_life_resets_percentage():
    life = LevelTwoLife(sounds=sound_board(), life_percentage=60, current_life=97)
    life.bonus_popup.rect = Rect(*TEXT_POSITION, BONUS_POPUP_SIZE, BONUS_POPUP_SIZE)
    life.move_bonus_popup()
    assert life.life_percentage == 0
    assert life.font_size == TEXT_SIZE


def test_at_stake_transitions():
    life = LevelTwoLife(current_life=5)
    assert life.check_at_stake() == ALERT_SKIN
    assert life.check_at_stake() is None
    life.current_life = 50
    assert life.check_at_stake() == NORMAL_SKIN
    assert life.check_at_stake() is None
    life.current_life = 0
    assert life.check_at_stake() == NORMAL_SKIN


def test_refresh_renders_text():
    sizes = []

    class FakeFont:
        def render(self, text, antialias, color):
            return pygame.Surface((33, 21))

    def factory(size):
        sizes.append(size)
        return FakeFont()

    life = LevelTwoLife(font_factory=factory)
    life.score_text.rect.x = 0
    life.refresh()
    assert sizes == [TEXT_SIZE]
    assert (life.score_text.rect.w, life.score_text.rect.h) == (33, 21)
    assert (life.score_text.rect.x, life.score_text.rect.y) == TEXT_POSITION


def test_coin_collision_scores_and_pops_up():
    sounds = sound_board()
    collisions = LevelTwoCollisions(sounds=sounds)
    coins = LevelTwoCoins()
    coins.coins[0].rect = Rect(100, 100, 60, 60)
    life = LevelTwoLife()
    assert collisions.check(Rect(110, 110, 20, 20), coins, Sprite(), life) is None
    assert collisions.score == 100
    assert coins.coins[0].rect.is_empty()
    popup = coins.popup.rect
    assert popup.x == 100
    assert (popup.w, popup.h) == (80, 50)
    assert popup.y < 100
    assert sounds._sounds["coingain"].plays == 1


def test_bomb_collision():
    collisions = LevelTwoCollisions(sounds=sound_board())
    bomb = Sprite(rect=Rect(200, 300, 40, 50))
    life = LevelTwoLife(current_life=100)
    skin = collisions.check(Rect(210, 310, 20, 20), LevelTwoCoins(), bomb, life)
    assert skin == ALERT_SKIN
    assert life.life_percentage == 200
    blast = collisions.explosion.rect
    assert (blast.w, blast.h) == EXPLOSION_SIZE
    assert (blast.x, blast.y) == (200, 300)
    assert bomb.rect.is_empty()
    assert collisions.effect_delay == 1


def test_explosion_clears_after_delay():
    collisions = LevelTwoCollisions(sounds=sound_board())
    collisions.explosion.rect = Rect(0, 0, 50, 50)
    bomb = Sprite()
    for _ in range(10):
        collisions.check(Rect(500, 500, 10, 10), LevelTwoCoins(), bomb, LevelTwoLife())
    assert collisions.explosion.rect.is_empty()
    assert collisions.explosion_delay == 0


def test_bomb_ignored_without_life():
    collisions = LevelTwoCollisions(sounds=sound_board())
    bomb = Sprite(rect=Rect(200, 300, 40, 50))
    life = LevelTwoLife(current_life=0)
    assert collisions.check(Rect(210, 310, 20, 20), LevelTwoCoins(), bomb, life) is None
    assert life.life_percentage == 0
    assert collisions.explosion_delay == 1
    assert not bomb.rect.is_empty()


def test_heart_collision_starts_bonus_popup():
    collisions = LevelTwoCollisions(sounds=sound_board())
    life = LevelTwoLife(life_percentage=40, current_life=98)
    life.heart.rect = Rect(400, 400, 80, 80)
    collisions.check(Rect(410, 410, 20, 20), LevelTwoCoins(), Sprite(), life)
    assert life.heart.rect.is_empty()
    assert life.life_percentage == 0
    bonus = life.bonus_popup.rect
    assert (bonus.x, bonus.y) == (400, 400)
    assert (bonus.w, bonus.h) == (BONUS_POPUP_SIZE, BONUS_POPUP_SIZE)