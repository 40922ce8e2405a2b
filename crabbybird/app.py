"""The window, drawing and the main loop."""

from __future__ import annotations

import argparse
import logging
import math

import pygame

from crabbybird.game import Session
from crabbybird.pipes import Box
from crabbybird.resources import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from crabbybird.world import (
    GAME_OVER_FONT_SIZE,
    GAME_OVER_POSITION,
    GAME_OVER_TEXT,
    PRESS_SPACE_FONT_SIZE,
    PRESS_SPACE_POSITION,
    PRESS_SPACE_TEXT,
    SCORE_FONT_SIZE,
    SCORE_POSITION,
    TILE_WIDTH,
    Bird,
    Labels,
    ScrollingStrip,
)

SKY_COLOUR = (78, 192, 202)
HILL_COLOUR = (94, 226, 112)
PIPE_COLOUR = (84, 170, 40)
PIPE_EDGE_COLOUR = (40, 90, 20)
GROUND_COLOUR = (222, 216, 149)
GROUND_STRIPE_COLOUR = (160, 200, 80)
BIRD_COLOUR = (250, 200, 40)
WING_COLOUR = (240, 240, 220)
EYE_COLOUR = (255, 255, 255)
BEAK_COLOUR = (240, 90, 40)
TEXT_COLOUR = (255, 255, 255)
COLLIDER_COLOUR = (255, 0, 0)
SENSOR_COLOUR = (255, 255, 0)

FPS_LIMIT = 60
MAX_DELTA = 0.25
DEBUG_TOGGLE_KEY = pygame.K_BACKQUOTE

_log = logging.getLogger(__name__)


def _to_screen(x: float, y: float) -> tuple[int, int]:
    return round(x + WINDOW_WIDTH / 2.0), round(WINDOW_HEIGHT / 2.0 - y)


def _screen_rect(box: Box) -> pygame.Rect:
    left, top = _to_screen(box.left, box.top)
    return pygame.Rect(left, top, max(1, round(box.width)), max(1, round(box.height)))


class Renderer:
    """Draws a session onto a surface the size of the window."""

    def __init__(self, surface: pygame.Surface, show_debug: bool = False) -> None:
        self.surface = surface
        self.show_debug = show_debug
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: float) -> pygame.font.Font:
        key = round(size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def draw(self, session: Session, fps: float | None = None) -> None:
        """Paint one frame of ``session``; show ``fps`` with the debug overlay."""
        world = session.world
        self.surface.fill(SKY_COLOUR)
        self._draw_background(world.background)
        for pair in world.pipes:
            for box in (pair.upper_box(), pair.lower_box()):
                rect = _screen_rect(box)
                pygame.draw.rect(self.surface, PIPE_COLOUR, rect)
                pygame.draw.rect(self.surface, PIPE_EDGE_COLOUR, rect, 2)
        self._draw_ground(world.ground)
        self._draw_bird(world.bird)
        self._draw_labels(world.labels)
        if self.show_debug:
            for box in world.collidables():
                pygame.draw.rect(self.surface, COLLIDER_COLOUR, _screen_rect(box), 1)
            for pair in world.pipes:
                if pair.has_sensor:
                    pygame.draw.rect(self.surface, SENSOR_COLOUR, _screen_rect(pair.sensor_box()), 1)
            if fps is not None:
                image = self._font(24).render(f"{fps:.0f} fps", True, TEXT_COLOUR)
                self.surface.blit(image, image.get_rect(topright=(round(WINDOW_WIDTH) - 8, 8)))

    def _tile_starts(self, strip: ScrollingStrip):
        start = strip.x - strip.width / 2.0
        count = math.ceil(strip.width / TILE_WIDTH)
        return (start + k * TILE_WIDTH for k in range(count))

    def _draw_background(self, strip: ScrollingStrip) -> None:
        base = -WINDOW_HEIGHT / 2.0 + 50.0
        for left in self._tile_starts(strip):
            box = Box(left + TILE_WIDTH / 2.0, base + 30.0, TILE_WIDTH * 0.8, 60.0)
            pygame.draw.ellipse(self.surface, HILL_COLOUR, _screen_rect(box))

    def _draw_ground(self, strip: ScrollingStrip) -> None:
        band = Box(strip.x, strip.y, strip.width, strip.height)
        pygame.draw.rect(self.surface, GROUND_COLOUR, _screen_rect(band))
        top = strip.y + strip.height / 2.0
        for left in self._tile_starts(strip):
            stripe = Box(left + TILE_WIDTH / 4.0, top - 5.0, TILE_WIDTH / 2.0, 10.0)
            pygame.draw.rect(self.surface, GROUND_STRIPE_COLOUR, _screen_rect(stripe))

    def _draw_bird(self, bird: Bird) -> None:
        centre = _to_screen(bird.x, bird.y)
        cos_a, sin_a = math.cos(bird.angle), math.sin(bird.angle)

        def local(dx: float, dy: float) -> tuple[int, int]:
            return _to_screen(bird.x + dx * cos_a - dy * sin_a, bird.y + dx * sin_a + dy * cos_a)

        pygame.draw.circle(self.surface, BIRD_COLOUR, centre, round(bird.radius))
        wing_x, wing_y = local(-8.0, (1 - bird.frame) * 4.0)
        pygame.draw.ellipse(self.surface, WING_COLOUR, pygame.Rect(wing_x - 5, wing_y - 3, 10, 6))
        pygame.draw.circle(self.surface, EYE_COLOUR, local(7.0, 5.0), 3)
        beak = [local(bird.radius - 2.0, 3.0), local(bird.radius + 6.0, 0.0), local(bird.radius - 2.0, -3.0)]
        pygame.draw.polygon(self.surface, BEAK_COLOUR, beak)

    def _draw_labels(self, labels: Labels) -> None:
        score = self._font(SCORE_FONT_SIZE).render(labels.score_text, True, TEXT_COLOUR)
        self.surface.blit(score, score.get_rect(midleft=_to_screen(*SCORE_POSITION)))
        if labels.game_over_visible:
            image = self._font(GAME_OVER_FONT_SIZE).render(GAME_OVER_TEXT, True, TEXT_COLOUR)
            self.surface.blit(image, image.get_rect(center=_to_screen(*GAME_OVER_POSITION)))
        if labels.press_space_visible:
            image = self._font(PRESS_SPACE_FONT_SIZE).render(PRESS_SPACE_TEXT, True, TEXT_COLOUR)
            self.surface.blit(image, image.get_rect(center=_to_screen(*PRESS_SPACE_POSITION)))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(prog="crabbybird", description="A side-scrolling flapping game.")
    parser.add_argument(
        "--dev",
        action="store_true",
        help="log frame times and let ` toggle the collider overlay",
    )
    return parser.parse_args(argv)


def run(dev: bool = False) -> int:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((round(WINDOW_WIDTH), round(WINDOW_HEIGHT)))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen)
        session = Session()
        clock = pygame.time.Clock()
        since_report = 0.0
        running = True
        while running:
            dt = min(clock.tick(FPS_LIMIT) / 1000.0, MAX_DELTA)
            space = click = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_SPACE:
                        space = True
                    elif dev and event.key == DEBUG_TOGGLE_KEY:
                        renderer.show_debug = not renderer.show_debug
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    click = True
            session.update(dt, space, click)
            fps = clock.get_fps()
            renderer.draw(session, fps if dev else None)
            pygame.display.flip()
            if dev:
                since_report += dt
                if since_report >= 1.0:
                    since_report = 0.0
                    _log.debug("fps: %.1f  frame time: %.2f ms", fps, dt * 1000.0)
    finally:
        pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.dev else logging.INFO, format="%(message)s")
    return run(args.dev)


if __name__ == "__main__":
    raise SystemExit(main())