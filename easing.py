# easing.py
"""
Easing functions and the saturating entity clock.

Every easing function shares the classic `(t, b, c, d)` signature:
elapsed time, base value, change in value and total duration. The numeric
kernels are compiled with Numba because they run for every particle on
every tick.
"""
from typing import Tuple
from numba import jit
from constants import BACK_OVERSHOOT, COMPLETION_EPSILON

# --- Data Contracts ---
#
# out_cubic(t, b, c, d) -> float:
#   - Decelerating cubic. out_cubic(0, b, c, d) == b and
#     out_cubic(d, b, c, d) == b + c. Monotonic for c > 0 over [0, d].
#
# in_back(t, b, c, d, overshoot=1.70158) -> float:
#   - Anticipation curve. Dips below b for small t/d before rising to
#     b + c at t == d. Callers must tolerate values outside [b, b + c].
#
# advance_clock(elapsed, time_step, duration) -> (float, bool):
#   - Invariants: the returned elapsed never exceeds duration. The flag is
#     True iff the returned elapsed equals duration exactly.
#
# d (duration) is always positive by construction; zero is not guarded.

@jit(nopython=True)
def _out_cubic_numba(t, b, c, d):
    t = t / d - 1.0
    return c * (t * t * t + 1.0) + b

@jit(nopython=True)
def _in_back_numba(t, b, c, d, s):
    t = t / d
    # (s + 1) * t - s, arranged so that t == 1 lands exactly on b + c.
    return c * t * t * (t + s * (t - 1.0)) + b

def out_cubic(t: float, b: float, c: float, d: float) -> float:
    """Cubic ease-out: fast start, decelerating to zero velocity at t == d."""
    return _out_cubic_numba(float(t), float(b), float(c), float(d))

def in_back(t: float, b: float, c: float, d: float, overshoot: float = BACK_OVERSHOOT) -> float:
    """Back ease-in: pulls back below the base value, then accelerates."""
    return _in_back_numba(float(t), float(b), float(c), float(d), float(overshoot))

def advance_clock(elapsed: float, time_step: float, duration: float) -> Tuple[float, bool]:
    """
    Advances a local clock by one time step, saturating at duration.

    A clock that lands within COMPLETION_EPSILON of its cap is pinned onto
    it, so completion is reported on the tick the cap is first reached even
    when the step does not divide the duration exactly in binary.
    """
    elapsed = min(duration, elapsed + time_step)
    if duration - elapsed < COMPLETION_EPSILON:
        elapsed = duration
    return elapsed, elapsed == duration
