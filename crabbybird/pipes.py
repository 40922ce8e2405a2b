"""Pipe pairs: their geometry, movement and timed spawning."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from crabbybird.resources import WINDOW_HEIGHT, WINDOW_WIDTH, Timer

PIPE_SPAWN_INTERVAL = 2.2
PIPE_WIDTH = 52.0
PIPE_HEIGHT = 320.0
MAX_GAP = 220.0
MIN_GAP = 120.0
SENSOR_MARGIN = 50.0
EDGE_PADDING = 50.0
# The ground is 100px high with its centre at the bottom edge of the window.
GROUND_TOP = -WINDOW_HEIGHT / 2.0 + 50.0
CEILING_BOTTOM = WINDOW_HEIGHT / 2.0
SPAWN_X = WINDOW_WIDTH / 2.0 + PIPE_WIDTH
OFFSCREEN_X = -WINDOW_WIDTH / 2.0 - PIPE_WIDTH


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its centre and size."""

    cx: float
    cy: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.cx - self.width / 2.0

    @property
    def right(self) -> float:
        return self.cx + self.width / 2.0

    @property
    def bottom(self) -> float:
        return self.cy - self.height / 2.0

    @property
    def top(self) -> float:
        return self.cy + self.height / 2.0

    def overlaps_circle(self, cx: float, cy: float, radius: float) -> bool:
        """Whether a circle at (cx, cy) overlaps this rectangle."""
        nearest_x = min(max(cx, self.left), self.right)
        nearest_y = min(max(cy, self.bottom), self.top)
        dx = cx - nearest_x
        dy = cy - nearest_y
        return dx * dx + dy * dy < radius * radius


@dataclass
class PipePair:
    """An upper and lower pipe around a gap, with a score sensor in the gap."""

    x: float
    y: float
    gap: float
    velocity_x: float = 0.0
    has_sensor: bool = True

    def upper_box(self) -> Box:
        return Box(self.x, self.y + PIPE_HEIGHT / 2.0 + self.gap / 2.0, PIPE_WIDTH, PIPE_HEIGHT)

    def lower_box(self) -> Box:
        return Box(self.x, self.y - PIPE_HEIGHT / 2.0 - self.gap / 2.0, PIPE_WIDTH, PIPE_HEIGHT)

    def sensor_box(self) -> Box:
        return Box(self.x, self.y, PIPE_WIDTH, self.gap + SENSOR_MARGIN)

    def advance(self, dt: float) -> None:
        """Move by the current velocity for ``dt`` seconds."""
        self.x += self.velocity_x * dt

    def is_offscreen(self) -> bool:
        """Whether the pair has scrolled past the left edge."""
        return self.x < OFFSCREEN_X


def new_pipe_pair(rng: random.Random, speed: float) -> PipePair:
    """A pipe pair at the right edge with a random gap size and height."""
    gap = rng.uniform(MIN_GAP, MAX_GAP)
    min_y = GROUND_TOP + gap / 2.0 + EDGE_PADDING
    max_y = CEILING_BOTTOM - gap / 2.0 - EDGE_PADDING
    return PipePair(x=SPAWN_X, y=rng.uniform(min_y, max_y), gap=gap, velocity_x=-speed)


@dataclass
class PipeSpawner:
    """Produces a new pipe pair at a fixed interval."""

    timer: Timer = field(default_factory=lambda: Timer(PIPE_SPAWN_INTERVAL))

    def tick(self, dt: float, speed: float, rng: random.Random) -> PipePair | None:
        """Advance the spawn timer; return a new pair when it runs out."""
        self.timer.tick(dt)
        if not self.timer.just_finished:
            return None
        return new_pipe_pair(rng, speed)

    def reset(self) -> None:
        self.timer.reset()