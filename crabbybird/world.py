"""Everything on screen: the bird, the scrolling scenery, pipes and labels."""

from __future__ import annotations

from dataclasses import dataclass, field

from crabbybird.pipes import Box, PipePair, PipeSpawner
from crabbybird.resources import BASE_GRAVITY, GRAVITY, WINDOW_HEIGHT, WINDOW_WIDTH, Timer

BIRD_START_X = -WINDOW_WIDTH / 2.0 + 100.0
BIRD_START_Y = 0.0
BIRD_RADIUS = 16.0
BIRD_FRAME_SIZE = (34, 24)
BIRD_FRAME_COUNT = 3
BIRD_START_FRAME = 1
FLAP_INTERVAL = 0.2

TILE_WIDTH = 288.0
STRIP_WIDTH = WINDOW_WIDTH + TILE_WIDTH * 2.0
GROUND_HEIGHT = 100.0
CEILING_HEIGHT = 1.0

SCORE_POSITION = (-WINDOW_WIDTH / 2.0 + 20.0, WINDOW_HEIGHT / 2.0 - 50.0)
SCORE_FONT_SIZE = 40.0
GAME_OVER_TEXT = "Game Over"
GAME_OVER_POSITION = (0.0, 0.0)
GAME_OVER_FONT_SIZE = 50.0
PRESS_SPACE_TEXT = "Press Spacebar"
PRESS_SPACE_POSITION = (0.0, 50.0)
PRESS_SPACE_FONT_SIZE = 40.0


@dataclass
class Bird:
    """The player: a circle body that falls under gravity and flaps."""

    x: float = BIRD_START_X
    y: float = BIRD_START_Y
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    angle: float = 0.0
    angular_velocity: float = 0.0
    gravity_scale: float = GRAVITY
    radius: float = BIRD_RADIUS
    frame: int = BIRD_START_FRAME
    timer: Timer = field(default_factory=lambda: Timer(FLAP_INTERVAL))

    def reset(self) -> None:
        """Put the bird back at its start position, at rest and level."""
        self.x = BIRD_START_X
        self.y = BIRD_START_Y
        self.angle = 0.0
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.angular_velocity = 0.0

    def touches(self, box: Box) -> bool:
        """Whether the bird's body overlaps ``box``."""
        return box.overlaps_circle(self.x, self.y, self.radius)

    def advance(self, dt: float) -> None:
        """Integrate gravity and motion over ``dt`` seconds."""
        self.velocity_y -= BASE_GRAVITY * self.gravity_scale * dt
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        self.angle += self.angular_velocity * dt


@dataclass
class ScrollingStrip:
    """A tiled band of scenery that scrolls left and wraps by one tile."""

    y: float
    width: float
    height: float
    x: float = 0.0
    velocity_x: float = 0.0
    collider_width: float | None = None

    @property
    def collider(self) -> Box | None:
        """The solid part of the strip, if it has one."""
        if self.collider_width is None:
            return None
        return Box(self.x, self.y, self.collider_width, self.height)

    def advance(self, dt: float) -> None:
        self.x += self.velocity_x * dt

    def wrap(self) -> bool:
        """Jump back by one tile once a whole tile has scrolled by."""
        if self.x <= -TILE_WIDTH:
            self.x = 0.0
            return True
        return False


@dataclass
class Labels:
    """The text shown over the playfield."""

    score_text: str = "0"
    game_over_visible: bool = False
    press_space_visible: bool = True


def _background() -> ScrollingStrip:
    return ScrollingStrip(y=0.0, width=STRIP_WIDTH, height=WINDOW_HEIGHT)


def _ground() -> ScrollingStrip:
    return ScrollingStrip(
        y=-WINDOW_HEIGHT / 2.0,
        width=STRIP_WIDTH,
        height=GROUND_HEIGHT,
        collider_width=WINDOW_WIDTH,
    )


def _ceiling() -> Box:
    return Box(0.0, WINDOW_HEIGHT / 2.0, WINDOW_WIDTH, CEILING_HEIGHT)


@dataclass
class World:
    """The whole scene as it stands in one frame."""

    bird: Bird = field(default_factory=Bird)
    background: ScrollingStrip = field(default_factory=_background)
    ground: ScrollingStrip = field(default_factory=_ground)
    ceiling: Box = field(default_factory=_ceiling)
    pipes: list[PipePair] = field(default_factory=list)
    labels: Labels = field(default_factory=Labels)
    spawner: PipeSpawner = field(default_factory=PipeSpawner)

    def step(self, dt: float) -> None:
        """Move every body according to its velocity for ``dt`` seconds."""
        self.bird.advance(dt)
        for body in self.scrolling():
            body.advance(dt)

    def collidables(self) -> list[Box]:
        """Every solid shape that ends the round when the bird touches it."""
        boxes = [self.ground.collider, self.ceiling]
        for pair in self.pipes:
            boxes.append(pair.upper_box())
            boxes.append(pair.lower_box())
        return [box for box in boxes if box is not None]

    def scrolling(self) -> list[ScrollingStrip | PipePair]:
        """Every body that moves with the scrolling speed."""
        return [self.background, self.ground, *self.pipes]