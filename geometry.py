# geometry.py
"""
2D point type and the curve helpers built on it.

Points are immutable values. Paths are cubic Bézier curves evaluated by a
Numba kernel, one coordinate at a time.
"""
import math
import numpy as np
from typing import NamedTuple
from numba import jit
from constants import HALF_PI, MAX_COLOR_VALUE

# --- Data Contracts ---
#
# cubic_bezier(p0, c0, c1, p3, t) -> Point:
#   - Inputs: four Points and t in [0, 1].
#   - Invariants: t == 0 returns p0 and t == 1 returns p3 exactly.
#
# heading(previous, current, fallback=0.0) -> float:
#   - Outputs: atan2(dy, dx) + pi/2 in radians, or `fallback` when the two
#     points coincide. Never NaN for finite inputs.
#
# random_color(rng) -> str:
#   - Outputs: "#RRGGBB", always six lowercase hex digits.

class Point(NamedTuple):
    """A 2D coordinate."""
    x: float = 0.0
    y: float = 0.0

@jit(nopython=True)
def _cubic_bezier_numba(p0x, p0y, c0x, c0y, c1x, c1y, p3x, p3y, t):
    nt = 1.0 - t
    w0 = nt * nt * nt
    w1 = 3.0 * nt * nt * t
    w2 = 3.0 * nt * t * t
    w3 = t * t * t
    return (
        w0 * p0x + w1 * c0x + w2 * c1x + w3 * p3x,
        w0 * p0y + w1 * c0y + w2 * c1y + w3 * p3y,
    )

def cubic_bezier(p0: Point, c0: Point, c1: Point, p3: Point, t: float) -> Point:
    """Evaluates the cubic Bézier curve (p0, c0, c1, p3) at parameter t."""
    x, y = _cubic_bezier_numba(
        float(p0.x), float(p0.y), float(c0.x), float(c0.y),
        float(c1.x), float(c1.y), float(p3.x), float(p3.y), float(t)
    )
    return Point(x, y)

def heading(previous: Point, current: Point, fallback: float = 0.0) -> float:
    """
    Returns the sprite rotation that points along the move previous -> current.

    The sprite's long axis is vertical, hence the quarter turn.
    """
    dx = current.x - previous.x
    dy = current.y - previous.y
    if dx == 0 and dy == 0:
        return fallback
    return math.atan2(dy, dx) + HALF_PI

def random_point(rng: np.random.Generator, width: float, height: float) -> Point:
    """Samples a point uniformly inside the [0, width) x [0, height) viewport."""
    return Point(rng.uniform(0, width), rng.uniform(0, height))

def random_color(rng: np.random.Generator) -> str:
    """Samples an opaque color as a zero-padded "#RRGGBB" string."""
    return f"#{int(rng.integers(0, MAX_COLOR_VALUE)):06x}"
