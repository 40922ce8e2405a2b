"""Window constants, game state and the resources shared by the game."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

WINDOW_TITLE = "Crabby Bird"
WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 512.0
GRAVITY = 65.0
BASE_GRAVITY = 9.81

_log = logging.getLogger(__name__)


class GameState(enum.Enum):
    """The phases a round goes through."""

    INACTIVE = "inactive"
    ACTIVE = "active"
    GAME_OVER = "game_over"


@dataclass
class Game:
    """Data belonging to the current round."""

    score: int = 0


class Timer:
    """A countdown that reports when it runs out, optionally repeating."""

    def __init__(self, duration: float, repeating: bool = True) -> None:
        if duration <= 0:
            raise ValueError(f"timer duration must be positive, got {duration}")
        self.duration = float(duration)
        self.repeating = repeating
        self.elapsed = 0.0
        self.finished = False
        self.times_finished = 0

    @property
    def just_finished(self) -> bool:
        """Whether the last tick made the timer run out."""
        return self.times_finished > 0

    def tick(self, dt: float) -> int:
        """Advance by ``dt`` seconds; return how many times the timer ran out."""
        if dt < 0:
            raise ValueError(f"cannot tick a timer backwards by {dt}")
        if self.finished and not self.repeating:
            self.times_finished = 0
            return 0
        self.elapsed += dt
        if self.elapsed >= self.duration:
            if self.repeating:
                self.times_finished = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished = 1
                self.elapsed = self.duration
            self.finished = True
        else:
            self.times_finished = 0
            if self.repeating:
                self.finished = False
        return self.times_finished

    def reset(self) -> None:
        """Start the countdown again from zero."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished = 0


@dataclass
class GameSpeed:
    """Scrolling speed that grows the longer a round lasts."""

    base_speed: float = 150.0
    current_multiplier: float = 1.0
    time_elapsed: float = 0.0
    speed_increase_interval: float = 10.0
    speed_increase_amount: float = 0.05
    max_multiplier: float = 3.0

    def current_speed(self) -> float:
        """The scrolling speed in pixels per second."""
        return self.base_speed * self.current_multiplier

    def reset(self) -> None:
        """Go back to the starting speed."""
        self.current_multiplier = 1.0
        self.time_elapsed = 0.0

    def advance(self, dt: float) -> bool:
        """Let ``dt`` seconds pass; return True if the speed went up."""
        self.time_elapsed += dt
        if self.time_elapsed < self.speed_increase_interval:
            return False
        self.current_multiplier *= 1.0 + self.speed_increase_amount
        self.time_elapsed = 0.0
        self.current_multiplier = min(self.current_multiplier, self.max_multiplier)
        _log.info("Speed increased! Current multiplier: %.1fx", self.current_multiplier)
        return True