import random

import pygame
import pytest

from bonvoyage.level_two import Facing, LevelTwo, LevelTwoBackdrop, SpriteSheet
from bonvoyage.level_two_life import ALERT_SKIN, NORMAL_SKIN
from bonvoyage.scene import Rect, Screen, Sprite

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _surface(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _level(**kwargs):
    level = LevelTwo(rng=random.Random(7), **kwargs)
    level.scene.show(Screen.LEVEL_TWO)
    level.start()
    return level


def test_sheet_waits_for_enough_time():
    sheet = SpriteSheet(frame=Rect(0, 0, 10, 10), frame_width=10, texture_width=60)
    assert sheet.tick(0) is False
    assert sheet.frame.x == 0
    assert sheet.tick(1000) is True
    assert sheet.frame.x == 10
    assert sheet.tick(1000) is False
    assert sheet.frame.x == 10


def test_single_row_sheet_wraps():
    sheet = SpriteSheet(frame=Rect(50, 0, 10, 10), frame_width=10, texture_width=60)
    sheet.tick(1000)
    assert sheet.frame.x == 0


def test_two_row_sheet_moves_to_second_row_then_restarts():
    sheet = SpriteSheet(
        frame=Rect(10, 0, 10, 5), frame_width=10, frame_height=5, texture_width=20, rows=2
    )
    sheet.tick(1000)
    assert (sheet.frame.x, sheet.frame.y) == (0, 5)
    sheet.tick(2000)
    sheet.tick(3000)
    assert (sheet.frame.x, sheet.frame.y) == (0, 0)


def test_backdrop_layers_move_left_and_wrap():
    backdrop = LevelTwoBackdrop()
    backdrop.sky.rect.w = 100
    backdrop.track.rect.w = 100
    backdrop.advance()
    assert backdrop.sky_speed == -0.5
    assert backdrop.track_speed == -6
    backdrop.clouds.rect.w = 10
    backdrop.clouds_speed = -10
    backdrop.advance()
    assert backdrop.clouds_speed == 0


def test_character_is_kept_inside_the_frame():
    level = _level()
    level.update(0)
    assert (level.character.rect.x, level.character.rect.y) == (40, 40)


def test_character_leaving_right_edge_returns_left():
    level = _level()
    level.walker.x = level.viewport.width
    level.update(0)
    assert level.character.rect.x == 0


def test_score_rises_every_tenth_frame():
    level = _level()
    reported = []
    level.score_listener = reported.append
    for _ in range(9):
        level.update(0)
    assert level.score == 0
    level.update(0)
    assert level.score == 1
    assert reported[-1] == 1


def test_no_life_left_ends_the_level():
    level = _level()
    level.life.life_percentage = 2000
    level.update(0)
    assert level.life.current_life == 0
    assert level.running is False
    assert level.scene.is_active(Screen.LEVEL_TWO_GAME_OVER)
    assert not level.scene.is_active(Screen.LEVEL_TWO)


def test_reaching_the_throne_completes_the_level():
    level = _level(throne_x=0)
    level.update(0)
    assert level.scene.is_active(Screen.LEVEL_TWO_COMPLETED)
    assert not level.scene.is_active(Screen.LEVEL_TWO)


def test_throne_approaches_each_frame():
    level = _level(throne_x=5000)
    level.update(0)
    assert level.throne_x == 4998


def test_bomb_hit_costs_life_and_switches_skin():
    loaded = []
    level = _level(
        character=Sprite(rect=Rect(0, 0, 50, 50)),
        skin_loader=lambda path: loaded.append(path) or path,
    )
    level.dragon.bomb.rect = Rect(0, 0, level.viewport.width, level.viewport.height)
    level.update(0)
    assert level.life.life_percentage == 200
    assert level.skin == ALERT_SKIN
    assert loaded == [ALERT_SKIN]
    assert level.dragon.bomb.rect.is_empty()


def test_collision_effect_ends_with_normal_skin():
    level = _level(skin=ALERT_SKIN)
    level.collisions.effect_delay = 250
    level.update(0)
    assert level.skin == NORMAL_SKIN
    assert level.collisions.effect_delay == 0


def test_draw_before_start_shows_back_button():
    level = LevelTwo(back=Sprite(_surface((10, 10), RED), Rect(30, 890, 115, 47)))
    target = pygame.Surface((level.viewport.width, level.viewport.height))
    level.draw(target, 0)
    assert target.get_at((40, 900)) == RED
    assert level.backdrop.sky_speed == 0


@pytest.mark.parametrize("facing, expected", [(Facing.RIGHT, RED), (Facing.LEFT, BLUE)])
def test_character_drawn_facing_its_direction(facing, expected):
    texture = pygame.Surface((20, 10))
    texture.fill(RED, pygame.Rect(0, 0, 10, 10))
    texture.fill(BLUE, pygame.Rect(10, 0, 10, 10))
    level = _level(character=Sprite(texture, Rect(0, 0, 20, 10)), facing=facing)
    level.character_sheet.frame = Rect(0, 0, 20, 10)
    target = pygame.Surface((level.viewport.width, level.viewport.height))
    level.draw(target, 0)
    assert level.character.rect.x == 40
    assert target.get_at((42, 42)) == expected