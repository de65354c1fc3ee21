# effects.py
"""
Transitional effects shown between particle bursts.

The Loader is a radial wipe that fills like a pie chart. The Exploader is
a disc that pulls back slightly, then shrinks to nothing.
"""
import logging
from typing import Any
from constants import (
    LOADER_RADIUS, LOADER_COLOR, EXPLOADER_START_RADIUS, EXPLOADER_DURATION,
    EXPLOADER_COLOR, COMPLETION_EPSILON, HALF_PI, TWO_PI
)
from easing import in_back, advance_clock

# --- Data Contracts ---
#
# class Loader:
#   - set_progress(self, value: float) -> None:
#     - Side Effects: stores value clamped to [0, 1].
#     - Invariants: is_complete is True iff progress == 1.
#
# class Exploader:
#   - update(self, time_step: float) -> None:
#     - Side Effects: advances elapsed (never beyond duration) and derives
#       progress via in_back. progress may leave [0, 1] transiently.
#   - draw(self, context) -> None:
#     - Invariants: the radius passed to the context is never negative.

class Loader:
    """
    A pie slice swept clockwise from twelve o'clock as progress grows.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y
        self.radius = LOADER_RADIUS
        self.color = LOADER_COLOR
        self._progress = 0.0
        self.is_complete = False

    @property
    def progress(self) -> float:
        return self._progress

    def set_progress(self, value: float) -> None:
        """Stores progress clamped to [0, 1] and refreshes is_complete."""
        if value < 0.0:
            value = 0.0
        elif value > 1.0 - COMPLETION_EPSILON:
            value = 1.0
        self._progress = value
        self.is_complete = self._progress == 1.0

    def advance(self, step: float) -> None:
        self.set_progress(self._progress + step)

    def reset(self) -> None:
        self.set_progress(0.0)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def draw(self, context: Any) -> None:
        if self._progress <= 0.0:
            return
        start_angle = -HALF_PI
        context.fill_style = self.color
        context.begin_path()
        context.move_to(self.x, self.y)
        context.arc(self.x, self.y, self.radius, start_angle, start_angle + self._progress * TWO_PI)
        context.close_path()
        context.fill()


class Exploader:
    """
    A disc that shrinks from start_radius to nothing, eased with in_back.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y
        self.start_radius = EXPLOADER_START_RADIUS
        self.duration = EXPLOADER_DURATION
        self.color = EXPLOADER_COLOR
        self.reset()

    def reset(self) -> None:
        self.elapsed = 0.0
        self.progress = 0.0
        self.is_complete = False

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def update(self, time_step: float) -> None:
        self.elapsed, self.is_complete = advance_clock(self.elapsed, time_step, self.duration)
        self.progress = in_back(self.elapsed, 0, 1, self.duration)

    @property
    def radius(self) -> float:
        # in_back overshoots past 1 at the end, which would give a negative radius.
        return max(0.0, self.start_radius * (1.0 - self.progress))

    def draw(self, context: Any) -> None:
        radius = self.radius
        if radius <= 0.0:
            logging.debug("Exploader radius collapsed to zero; nothing to draw.")
            return
        context.fill_style = self.color
        context.begin_path()
        context.arc(self.x, self.y, radius, 0, TWO_PI)
        context.fill()
