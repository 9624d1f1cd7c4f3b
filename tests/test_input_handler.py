import pygame
import pytest

from flying_toilet.data_models import GameMode
from flying_toilet.input_handler import InputHandler, point_in_button


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=button)


@pytest.fixture
def handler(engine):
    return InputHandler(engine)


def center(handler, name):
    return handler.buttons[name].center


def test_space_and_up_flap_from_start(engine, handler):
    handler.handle(key(pygame.K_SPACE))
    assert engine.mode is GameMode.PLAYING
    engine.player.velocity = 0
    handler.handle(key(pygame.K_UP))
    assert engine.player.velocity == engine.config.flap_impulse


def test_restart_key_only_after_game_over(engine, handler):
    handler.handle(key(pygame.K_SPACE))
    engine.state.score = 3
    handler.handle(key(pygame.K_r))
    assert engine.state.score == 3

    engine.machine.end_round()
    handler.handle(key(pygame.K_r))
    assert engine.mode is GameMode.PLAYING
    assert engine.state.score == 0


def test_pause_key_and_escape_resume(engine, handler):
    handler.handle(key(pygame.K_SPACE))
    handler.handle(key(pygame.K_p))
    assert engine.mode is GameMode.PAUSED
    handler.handle(key(pygame.K_SPACE))
    assert engine.mode is GameMode.PAUSED
    handler.handle(key(pygame.K_ESCAPE))
    assert engine.mode is GameMode.PLAYING


def test_mute_key_in_any_mode(engine, handler):
    handler.handle(key(pygame.K_m))
    assert engine.state.muted is True
    engine.flap()
    engine.machine.end_round()
    handler.handle(key(pygame.K_m))
    assert engine.state.muted is False


def test_escape_closes_help_first(engine, handler):
    engine.toggle_help()
    handler.handle(key(pygame.K_ESCAPE))
    assert engine.state.showing_help is False


def test_quit_event_stops_the_loop(handler):
    assert handler.handle(pygame.event.Event(pygame.QUIT)) is False
    assert handler.handle(key(pygame.K_m)) is True


def test_play_button_starts(engine, handler):
    handler.handle(click(*center(handler, "play")))
    assert engine.mode is GameMode.PLAYING
    assert engine.player.velocity == engine.config.flap_impulse


def test_click_elsewhere_on_start_flaps(engine, handler):
    handler.handle(click(10, 10))
    assert engine.mode is GameMode.PLAYING


def test_right_click_is_ignored(engine, handler):
    handler.handle(click(10, 10, button=3))
    assert engine.mode is GameMode.START


def test_help_overlay_swallows_clicks_until_closed(engine, handler):
    handler.handle(click(*center(handler, "help_start")))
    assert engine.state.showing_help is True

    handler.handle(click(*center(handler, "play")))
    assert engine.mode is GameMode.START
    assert engine.state.showing_help is True

    handler.handle(click(*center(handler, "close_help")))
    assert engine.state.showing_help is False


def test_pause_button_toggles_and_other_clicks_flap(engine, handler):
    engine.flap()
    engine.player.velocity = 0
    handler.handle(click(300, 300))
    assert engine.player.velocity == engine.config.flap_impulse

    handler.handle(click(*center(handler, "pause")))
    assert engine.mode is GameMode.PAUSED
    handler.handle(click(300, 300))
    assert engine.mode is GameMode.PAUSED
    handler.handle(click(*center(handler, "pause")))
    assert engine.mode is GameMode.PLAYING


def test_restart_button_after_game_over(engine, handler):
    engine.flap()
    engine.machine.end_round()
    handler.handle(click(10, 10))
    assert engine.mode is GameMode.GAME_OVER
    handler.handle(click(*center(handler, "restart")))
    assert engine.mode is GameMode.PLAYING


def test_window_clicks_map_onto_the_world(engine):
    handler = InputHandler(engine, window_size=(1200, 900))
    assert handler.to_world((600, 450)) == (300, 300)


def test_point_in_button_includes_edges():
    rect = pygame.Rect(10, 20, 30, 40)
    assert point_in_button(10, 20, rect)
    assert point_in_button(40, 60, rect)
    assert not point_in_button(41, 60, rect)


def test_touch_tap_is_handled_once(engine, handler):
    engine.flap()
    x, y = center(handler, "pause")
    # SDL reports a tap as FINGERDOWN and again as a touch-flagged click
    handler.handle(pygame.event.Event(pygame.FINGERDOWN, x=x / 600, y=y / 600))
    handler.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=1, touch=True))

    assert engine.mode is GameMode.PAUSED
