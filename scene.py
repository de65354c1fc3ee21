# scene.py
"""
Owns the phase state machine that ties the animation together.

The Scene is the only mutator of the phase, the two transitional effects
and the particle field. Each tick it updates whatever the current phase
needs, then draws it. The cycle repeats forever:

    LOADING -> EXPLODING -> PARTICLES -> LOADING -> ...
"""
import enum
import logging
import numpy as np
from typing import Any, Callable, List, Optional, Tuple
from constants import (
    TIME_STEP, LOADER_STEP, PARTICLE_COUNT, PARTICLE_EXIT_OFFSET
)
from effects import Loader, Exploader
from geometry import Point, random_point
from particle import Particle

# --- Data Contracts ---
#
# class Scene:
#   - __init__(self, context, viewport_size, seed=None, time_step=TIME_STEP):
#     - Inputs:
#       - context: canvas-style drawing context.
#       - viewport_size: callable returning (width, height).
#       - seed: master seed for every random draw of the scene.
#       - time_step: logical time advanced per tick. Must be positive.
#     - Side Effects: caches the viewport size and centres both effects.
#
#   - step(self) -> None:
#     - Side Effects: updates every active entity, then draws them.
#     - Invariants: no entity is drawn before all updates of the tick ran.
#       Viewport dimensions are only sampled at reset points.
#
#   - on_viewport_resized(self) -> None:
#     - Side Effects: refreshes the cached viewport size only.

class Phase(enum.Enum):
    LOADING = "loading"
    EXPLODING = "exploding"
    PARTICLES = "particles"


class Scene:
    """
    The animated scene: one Loader, one Exploader and a field of particles.
    """
    def __init__(self, context: Any, viewport_size: Callable[[], Tuple[float, float]],
                 seed: Optional[int] = None, time_step: float = TIME_STEP):
        if time_step <= 0:
            msg = f"Configuration error: time_step must be positive, got {time_step}."
            logging.critical(msg)
            raise ValueError(msg)

        self.context = context
        self.viewport_size = viewport_size
        self.time_step = time_step

        # All randomness is driven by a single master seed.
        self.rng = np.random.default_rng(seed)

        self.width, self.height = self._read_viewport()
        self.phase = Phase.LOADING
        self.loader = Loader()
        self.exploader = Exploader()
        self.particles: List[Particle] = []
        self.ticks = 0
        self.transitions: List[Tuple[int, Phase]] = [(0, Phase.LOADING)]

        self._driver = None
        self.running = False

        self._center_effects()

        logging.info(
            f"Scene initialized on a {self.width}x{self.height} viewport "
            f"(time step {self.time_step:.4f}, seed {seed})."
        )

    # --- Viewport ---

    def _read_viewport(self) -> Tuple[float, float]:
        width, height = self.viewport_size()
        if width <= 0 or height <= 0:
            msg = f"Viewport must have a positive size, got {width}x{height}."
            logging.critical(msg)
            raise ValueError(msg)
        return width, height

    def on_viewport_resized(self) -> None:
        """Refreshes the cached viewport. Paths already in flight keep their shape."""
        self.width, self.height = self._read_viewport()
        logging.info(f"Viewport resized to {self.width}x{self.height}.")

    @property
    def center(self) -> Point:
        return Point(self.width * 0.5, self.height * 0.5)

    def _center_effects(self) -> None:
        center = self.center
        self.loader.move_to(center.x, center.y)
        self.exploader.move_to(center.x, center.y)

    # --- Particle field ---

    def create_particles(self) -> None:
        """Populates the field with PARTICLE_COUNT particles leaving the bottom edge."""
        start = self.center
        for _ in range(PARTICLE_COUNT):
            control1 = random_point(self.rng, self.width, self.height)
            control2 = random_point(self.rng, self.width, self.height)
            end = Point(self.rng.uniform(0, self.width), self.height + PARTICLE_EXIT_OFFSET)
            self.particles.append(Particle(start, control1, control2, end, self.rng))

        logging.debug(f"Generated {len(self.particles)} particles from {start}.")

    # --- State machine ---

    def _set_phase(self, phase: Phase) -> None:
        logging.info(f"Tick {self.ticks}: {self.phase.value} -> {phase.value}")
        self.phase = phase
        self.transitions.append((self.ticks, phase))

    def _reset_cycle(self) -> None:
        self.exploader.reset()
        self.loader.reset()
        self.particles.clear()
        self._center_effects()

    def update(self) -> None:
        self.ticks += 1

        if self.phase is Phase.LOADING:
            self.loader.advance(LOADER_STEP)
            if self.loader.is_complete:
                self._set_phase(Phase.EXPLODING)

        elif self.phase is Phase.EXPLODING:
            self.exploader.update(self.time_step)
            if self.exploader.is_complete:
                self.create_particles()
                self._set_phase(Phase.PARTICLES)

        elif self.phase is Phase.PARTICLES:
            for particle in self.particles:
                particle.update(self.time_step)
            if all(particle.is_complete for particle in self.particles):
                self._reset_cycle()
                self._set_phase(Phase.LOADING)

    def draw(self) -> None:
        self.context.clear_rect(0, 0, self.width, self.height)

        if self.phase is Phase.LOADING:
            self.loader.draw(self.context)
        elif self.phase is Phase.EXPLODING:
            self.exploader.draw(self.context)
        elif self.phase is Phase.PARTICLES:
            # List order is draw order: later particles land on top.
            for particle in self.particles:
                particle.draw(self.context)

    def step(self) -> None:
        """Advances the scene by one tick: update everything, then draw."""
        self.update()
        self.draw()

    # --- Frame driver ---

    def start(self, driver: Any) -> None:
        """Hands the scene's tick to a frame driver exposing request_next_tick."""
        self._driver = driver
        self.running = True
        driver.request_next_tick(self._tick)
        logging.info("Scene started.")

    def stop(self) -> None:
        """Stops rescheduling ticks. A tick already requested becomes a no-op."""
        if self.running:
            logging.info(f"Scene stopped after {self.ticks} ticks.")
        self.running = False

    def _tick(self) -> None:
        if not self.running:
            return
        self.step()
        if self.running:
            self._driver.request_next_tick(self._tick)
