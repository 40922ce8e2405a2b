import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from crabbybird.app import BIRD_COLOUR, PIPE_COLOUR, SENSOR_COLOUR, Renderer, parse_args
from crabbybird.game import Session
from crabbybird.pipes import PipePair
from crabbybird.resources import WINDOW_HEIGHT, WINDOW_WIDTH


def make_surface():
    return pygame.Surface((round(WINDOW_WIDTH), round(WINDOW_HEIGHT)))


def screen_point(x, y):
    return round(x + WINDOW_WIDTH / 2.0), round(WINDOW_HEIGHT / 2.0 - y)


def test_parse_args_default():
    assert parse_args([]).dev is False


def test_parse_args_dev():
    assert parse_args(["--dev"]).dev is True


def test_parse_args_rejects_unknown():
    with pytest.raises(SystemExit):
        parse_args(["--bogus"])


def test_draw_paints_bird():
    surface = make_surface()
    session = Session()
    Renderer(surface).draw(session)
    bird = session.world.bird
    assert tuple(surface.get_at(screen_point(bird.x, bird.y)))[:3] == BIRD_COLOUR


def test_draw_paints_pipes():
    surface = make_surface()
    session = Session()
    pair = PipePair(x=200.0, y=0.0, gap=150.0)
    session.world.pipes.append(pair)
    Renderer(surface).draw(session)
    upper = pair.upper_box()
    assert tuple(surface.get_at(screen_point(upper.cx, upper.cy)))[:3] == PIPE_COLOUR


def test_debug_overlay_outlines_sensor():
    session = Session()
    pair = PipePair(x=200.0, y=0.0, gap=150.0)
    session.world.pipes.append(pair)
    point = screen_point(pair.sensor_box().left, 0.0)

    plain = make_surface()
    Renderer(plain).draw(session)
    debug = make_surface()
    Renderer(debug, show_debug=True).draw(session, fps=60.0)

    assert tuple(debug.get_at(point))[:3] == SENSOR_COLOUR
    assert tuple(plain.get_at(point))[:3] != SENSOR_COLOUR


def test_game_over_label_changes_frame():
    session = Session()
    hidden = make_surface()
    Renderer(hidden).draw(session)
    session.world.labels.game_over_visible = True
    shown = make_surface()
    Renderer(shown).draw(session)
    assert pygame.image.tobytes(hidden, "RGB") != pygame.image.tobytes(shown, "RGB")