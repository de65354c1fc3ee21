# particle.py
"""
A single sprite of the burst.

Each particle flies along its own cubic Bézier path from the centre of the
viewport to a point below its bottom edge. Timing is eased with out_cubic,
and the sprite flutters by flipping its vertical scale as it travels.
"""
import math
import numpy as np
from typing import Any, Tuple
from numba import jit
from constants import (
    PARTICLE_WIDTH, PARTICLE_HEIGHT, PARTICLE_MIN_DURATION,
    PARTICLE_DURATION_RANGE, PARTICLE_FLUTTER_HALF_CYCLES
)
from easing import _out_cubic_numba, advance_clock
from geometry import Point, _cubic_bezier_numba, heading, random_color

# --- Data Contracts ---
#
# class Particle:
#   - __init__(self, start, control1, control2, end, rng):
#     - Inputs:
#       - start, control1, control2, end: Points defining the motion path.
#       - rng: numpy Generator; duration and color are sampled from it once.
#     - Invariants:
#       - 3 <= duration < 5, fixed after construction.
#       - color is a "#RRGGBB" string, fixed after construction.
#
#   - update(self, time_step: float) -> None:
#     - Side Effects: advances elapsed (never beyond duration) and derives
#       position, rotation and vertical_scale.
#     - Invariants: is_complete is True iff elapsed == duration.
#
#   - draw(self, context) -> None:
#     - Side Effects: paints onto the context only.

@jit(nopython=True)
def _path_sample_numba(elapsed, duration, p0x, p0y, c0x, c0y, c1x, c1y, p3x, p3y, half_cycles):
    """
    Eases the clock, samples the path and computes the flutter in one call,
    so a particle update crosses into compiled code once.
    """
    f = _out_cubic_numba(elapsed, 0.0, 1.0, duration)
    x, y = _cubic_bezier_numba(p0x, p0y, c0x, c0y, c1x, c1y, p3x, p3y, f)
    return x, y, math.sin(math.pi * f * half_cycles)

class Particle:
    """
    One rectangle following a Bézier path with eased timing.
    """
    def __init__(self, start: Point, control1: Point, control2: Point, end: Point,
                 rng: np.random.Generator):
        self.start = start
        self.control1 = control1
        self.control2 = control2
        self.end = end
        self._path_coords: Tuple[float, ...] = tuple(
            float(v) for point in (start, control1, control2, end) for v in point
        )

        self.elapsed = 0.0
        self.duration = PARTICLE_MIN_DURATION + rng.random() * PARTICLE_DURATION_RANGE
        self.color = random_color(rng)

        self.position = start
        self.rotation = 0.0
        self.vertical_scale = 0.0
        self.width = PARTICLE_WIDTH
        self.height = PARTICLE_HEIGHT

        self.is_complete = False

    def update(self, time_step: float) -> None:
        self.elapsed, self.is_complete = advance_clock(self.elapsed, time_step, self.duration)

        x, y, self.vertical_scale = _path_sample_numba(
            float(self.elapsed), float(self.duration),
            *self._path_coords, float(PARTICLE_FLUTTER_HALF_CYCLES)
        )
        p = Point(x, y)

        # A zero-length move keeps the previous heading.
        self.rotation = heading(self.position, p, fallback=self.rotation)
        self.position = p

    def draw(self, context: Any) -> None:
        context.save()
        context.translate(self.position.x, self.position.y)
        context.rotate(self.rotation)
        # A negative scale flips the sprite, which reads as tumbling.
        context.scale(1, self.vertical_scale)

        context.fill_style = self.color
        context.fill_rect(-self.width * 0.5, -self.height * 0.5, self.width, self.height)

        context.restore()
