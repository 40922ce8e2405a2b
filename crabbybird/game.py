"""Round logic: state transitions, player input, scoring and collisions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from crabbybird.resources import GRAVITY, Game, GameSpeed, GameState
from crabbybird.world import World

FLAP_VELOCITY = 350.0
MAX_BIRD_ANGLE = 0.7
ANGLE_SMOOTHING = 0.1
LAST_BIRD_FRAME = 2
# Input is ignored on the frame the round starts and on the one after it,
# so the key press that started the round does not also flap.
INPUT_GRACE_FRAMES = 2

_log = logging.getLogger(__name__)


def next_frame(index: int) -> int:
    """The animation frame that follows ``index`` in the flapping cycle."""
    return 0 if index == LAST_BIRD_FRAME else index + 1


def next_bird_angle(current: float, velocity_y: float) -> float:
    """Ease the bird's tilt towards the angle its vertical speed calls for."""
    normalized = max(-1.0, min(1.0, velocity_y / FLAP_VELOCITY))
    target = normalized * MAX_BIRD_ANGLE
    return current + (target - current) * ANGLE_SMOOTHING


@dataclass
class Session:
    """A running game: the world, the score, the speed and the current state."""

    world: World = field(default_factory=World)
    game: Game = field(default_factory=Game)
    speed: GameSpeed = field(default_factory=GameSpeed)
    rng: random.Random = field(default_factory=random.Random)
    state: GameState = GameState.INACTIVE
    _next_state: GameState | None = field(default=None, init=False, repr=False)
    _input_grace: int = field(default=0, init=False, repr=False)

    def enter(self, state: GameState) -> None:
        """Switch to ``state`` and do what entering it requires."""
        self.state = state
        labels = self.world.labels
        if state is GameState.ACTIVE:
            self.game.score = 0
            self.speed.reset()
            labels.press_space_visible = False
            self._input_grace = INPUT_GRACE_FRAMES
        elif state is GameState.GAME_OVER:
            labels.game_over_visible = True
            for pair in self.world.pipes:
                pair.has_sensor = False
        else:
            self.world.pipes.clear()
            labels.score_text = "0"
            self.world.bird.reset()
            labels.game_over_visible = False
            labels.press_space_visible = True

    def update(self, dt: float, space: bool = False, click: bool = False) -> None:
        """Run one frame lasting ``dt`` seconds with the given presses."""
        if self._next_state is not None:
            state, self._next_state = self._next_state, None
            self.enter(state)

        if space and self.state is GameState.INACTIVE:
            self._next_state = GameState.ACTIVE
        elif space and self.state is GameState.GAME_OVER:
            self._next_state = GameState.INACTIVE

        self._control_bird_physics()
        self._control_scrolling_velocity()

        if self.state is GameState.ACTIVE:
            self._handle_bird_input(space or click)
            self.speed.advance(dt)
            for strip in (self.world.background, self.world.ground):
                strip.wrap()
            self._animate_bird(dt)
            bird = self.world.bird
            bird.angle = next_bird_angle(bird.angle, bird.velocity_y)
            self._handle_collisions()
            self._handle_scoring()
            self._spawn_pipes(dt)
            self.world.pipes[:] = [p for p in self.world.pipes if not p.is_offscreen()]

        self.world.step(dt)

    def _control_bird_physics(self) -> None:
        bird = self.world.bird
        if self.state is GameState.ACTIVE:
            bird.gravity_scale = GRAVITY
        else:
            bird.gravity_scale = 0.0
            bird.velocity_x = 0.0
            bird.velocity_y = 0.0
            bird.angular_velocity = 0.0

    def _control_scrolling_velocity(self) -> None:
        velocity = -self.speed.current_speed() if self.state is GameState.ACTIVE else 0.0
        for body in self.world.scrolling():
            body.velocity_x = velocity

    def _handle_bird_input(self, pressed: bool) -> None:
        if self._input_grace > 0:
            self._input_grace -= 1
            return
        if pressed:
            self.world.bird.velocity_y = FLAP_VELOCITY

    def _animate_bird(self, dt: float) -> None:
        bird = self.world.bird
        bird.timer.tick(dt)
        if bird.timer.just_finished:
            bird.frame = next_frame(bird.frame)

    def _handle_collisions(self) -> None:
        bird = self.world.bird
        if any(bird.touches(box) for box in self.world.collidables()):
            _log.info("Collision detected!")
            self._next_state = GameState.GAME_OVER

    def _handle_scoring(self) -> None:
        bird = self.world.bird
        for pair in self.world.pipes:
            if pair.has_sensor and bird.touches(pair.sensor_box()):
                pair.has_sensor = False
                self.game.score += 1
                _log.info("Score: %d", self.game.score)
                self.world.labels.score_text = str(self.game.score)

    def _spawn_pipes(self, dt: float) -> None:
        pair = self.world.spawner.tick(dt, self.speed.current_speed(), self.rng)
        if pair is not None:
            self.world.pipes.append(pair)