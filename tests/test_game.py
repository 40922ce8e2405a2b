import random

import pytest

from crabbybird.game import FLAP_VELOCITY, MAX_BIRD_ANGLE, Session, next_bird_angle, next_frame
from crabbybird.pipes import PipePair
from crabbybird.resources import GameSpeed, GameState, WINDOW_HEIGHT
from crabbybird.world import BIRD_START_X, BIRD_START_Y

DT = 0.01


def active_session():
    session = Session(rng=random.Random(7))
    session.enter(GameState.ACTIVE)
    return session


@pytest.mark.parametrize("index, expected", [(0, 1), (1, 2), (2, 0)])
def test_next_frame_cycles(index, expected):
    assert next_frame(index) == expected


def test_bird_angle_level_when_still():
    assert next_bird_angle(0.0, 0.0) == 0.0


def test_bird_angle_clamps_velocity():
    assert next_bird_angle(0.0, FLAP_VELOCITY) == pytest.approx(next_bird_angle(0.0, 10_000.0))


@pytest.mark.parametrize("velocity, limit", [(10_000.0, MAX_BIRD_ANGLE), (-10_000.0, -MAX_BIRD_ANGLE)])
def test_bird_angle_converges_to_limit(velocity, limit):
    angle = 0.0
    for _ in range(300):
        angle = next_bird_angle(angle, velocity)
    assert angle == pytest.approx(limit, abs=1e-6)


def test_space_starts_round_on_next_frame():
    session = Session()
    session.update(DT, space=True)
    assert session.state is GameState.INACTIVE
    session.update(DT)
    assert session.state is GameState.ACTIVE
    assert session.world.labels.press_space_visible is False


def test_entering_active_resets_score_and_speed():
    session = Session()
    session.game.score = 5
    session.speed.current_multiplier = 2.0
    session.enter(GameState.ACTIVE)
    assert session.game.score == 0
    assert session.speed.current_multiplier == 1.0


def test_flap_ignored_for_grace_frames():
    session = active_session()
    session.update(DT, space=True)
    session.update(DT, space=True)
    assert session.world.bird.velocity_y < 0
    session.update(DT, click=True)
    assert session.world.bird.velocity_y > 0


def test_inactive_bird_stays_put():
    session = Session()
    for _ in range(5):
        session.update(0.1)
    bird = session.world.bird
    assert (bird.x, bird.y) == (BIRD_START_X, BIRD_START_Y)
    assert bird.gravity_scale == 0.0


def test_active_scrolls_at_game_speed():
    session = active_session()
    session.update(DT)
    assert session.world.ground.velocity_x == -GameSpeed().current_speed()
    assert session.world.background.velocity_x == -GameSpeed().current_speed()


def test_ground_collision_ends_round():
    session = active_session()
    session.world.bird.y = -WINDOW_HEIGHT / 2.0 + 36.0
    session.update(DT)
    assert session.state is GameState.ACTIVE
    session.update(DT)
    assert session.state is GameState.GAME_OVER
    assert session.world.labels.game_over_visible is True


def test_passing_sensor_scores_once():
    session = active_session()
    bird = session.world.bird
    session.world.pipes.append(PipePair(x=bird.x, y=bird.y, gap=200.0))
    session.update(DT)
    session.update(DT)
    assert session.game.score == 1
    assert session.world.labels.score_text == "1"
    assert session.world.pipes[0].has_sensor is False


def test_game_over_removes_sensors_and_space_resets():
    session = active_session()
    session.world.pipes.append(PipePair(x=100.0, y=0.0, gap=150.0))
    session.enter(GameState.GAME_OVER)
    assert all(not pair.has_sensor for pair in session.world.pipes)
    session.update(DT, space=True)
    session.update(DT)
    assert session.state is GameState.INACTIVE
    assert session.world.pipes == []
    assert session.world.labels.score_text == "0"
    assert session.world.labels.press_space_visible is True
    assert session.world.labels.game_over_visible is False
    assert (session.world.bird.x, session.world.bird.y) == (BIRD_START_X, BIRD_START_Y)


def test_pipes_spawn_after_interval():
    session = active_session()
    session.update(2.3)
    assert len(session.world.pipes) == 1
    assert session.world.pipes[0].velocity_x < 0


def test_offscreen_pipes_removed():
    session = active_session()
    session.world.pipes.append(PipePair(x=-1000.0, y=0.0, gap=150.0))
    session.update(DT)
    assert session.world.pipes == []


def test_speed_grows_while_active():
    session = active_session()
    session.update(10.0)
    assert session.speed.current_speed() > GameSpeed().current_speed()