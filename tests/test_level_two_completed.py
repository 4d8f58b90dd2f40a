import pygame

from bonvoyage.level_two import EFFECT_DURATION, SKY_STEP, TOP_LIMIT, LevelTwo
from bonvoyage.level_two_completed import LevelTwoCompletedScreen
from bonvoyage.level_two_life import ALERT_SKIN, NORMAL_SKIN
from bonvoyage.scene import Rect, Scene, Screen, Sprite


class Canvas:
    def __init__(self):
        self.blits = []
        self.fills = 0

    def blit(self, image, pos):
        self.blits.append((image.get_size(), pos))

    def fill(self, color):
        self.fills += 1


def _active_level(**kwargs):
    scene = Scene()
    scene.show(Screen.LEVEL_TWO_COMPLETED)
    return LevelTwo(scene=scene, **kwargs)


def test_score_reported_once():
    reported = []
    level = _active_level()
    level.collisions.score = 321
    screen = LevelTwoCompletedScreen(level=level, score_listener=reported.append)
    screen.draw(Canvas(), 10)
    screen.draw(Canvas(), 20)
    assert reported == [321]
    assert screen.frames == 2


def test_inactive_screen_does_not_animate():
    reported = []
    level = LevelTwo()
    screen = LevelTwoCompletedScreen(level=level, score_listener=reported.append)
    canvas = Canvas()
    screen.draw(canvas, 10)
    assert reported == []
    assert level.backdrop.sky_speed == 0
    assert canvas.fills == 1


def test_active_screen_advances_backdrop():
    level = _active_level()
    LevelTwoCompletedScreen(level=level).draw(Canvas(), 10)
    assert level.backdrop.sky_speed == -SKY_STEP


def test_collision_effect_restores_alert_skin_on_low_life():
    loaded = []
    level = _active_level(skin_loader=lambda path: loaded.append(path) or None)
    level.life.current_life = 5
    level.collisions.effect_delay = EFFECT_DURATION
    LevelTwoCompletedScreen(level=level).draw(Canvas(), 10)
    assert level.skin == ALERT_SKIN
    assert loaded == [ALERT_SKIN]
    assert level.collisions.effect_delay == 0


def test_collision_effect_restores_normal_skin():
    level = _active_level()
    level.skin = ALERT_SKIN
    level.life.current_life = 100
    level.collisions.effect_delay = EFFECT_DURATION
    LevelTwoCompletedScreen(level=level).draw(Canvas(), 10)
    assert level.skin == NORMAL_SKIN


def test_collision_effect_counts_up():
    level = _active_level()
    level.collisions.effect_delay = 3
    LevelTwoCompletedScreen(level=level).draw(Canvas(), 10)
    assert level.collisions.effect_delay == 4


def test_character_kept_in_frame():
    level = _active_level()
    level.walker.y = 0
    level.walker.x = level.viewport.width
    LevelTwoCompletedScreen(level=level).draw(Canvas(), 10)
    assert level.character.rect.y == TOP_LIMIT
    assert level.character.rect.x == 0


def test_coin_sheet_wraps_only_on_exact_match():
    level = _active_level()
    sheet = level.coin_sheet
    sheet.frame_width = 10
    sheet.texture_width = 25
    sheet.frame.x = 20
    LevelTwoCompletedScreen(level=level).draw(Canvas(), 1000)
    assert sheet.frame.x == 30
    assert sheet.exact_wrap is False


def test_overlay_and_message_drawn():
    level = _active_level()
    overlay = Sprite(pygame.Surface((4, 4)), Rect(0, 0, 8, 8))
    message = Sprite(pygame.Surface((4, 4)), Rect(20, 30, 6, 6))
    canvas = Canvas()
    LevelTwoCompletedScreen(level=level, overlay=overlay, message=message).draw(canvas, 10)
    assert ((8, 8), (0, 0)) in canvas.blits
    assert ((6, 6), (20, 30)) in canvas.blits
    assert canvas.blits.index(((8, 8), (0, 0))) < canvas.blits.index(((6, 6), (20, 30)))