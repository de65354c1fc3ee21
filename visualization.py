# visualization.py
"""
Hosts the animation in a Pygame window.

SurfaceContext gives a pygame Surface the small canvas-style drawing API
the entities draw against: a transform stack, rectangles and filled paths.
Visualizer owns the window and exposes the host services the Scene relies
on: the drawing context, the viewport size, resize notifications and the
frame driver.
"""
import logging
import math
import pygame
import numpy as np
from typing import Any, Callable, List, Optional, Tuple
from constants import BACKGROUND_COLOR, FPS, ARC_SEGMENTS, TWO_PI

# --- Data Contracts ---
#
# class SurfaceContext:
#   - __init__(self, surface: pygame.Surface, background=BACKGROUND_COLOR)
#   - fill_style: "#RRGGBB" string or RGB tuple used by fill_rect and fill.
#   - save/restore: push/pop the transform and fill_style.
#   - translate/rotate/scale: post-multiply the current transform.
#   - arc(x, y, radius, start, end):
#     - Raises ValueError for a negative radius.
#   - fill_rect/fill:
#     - Side Effects: paints a polygon. A singular transform paints nothing.
#
# class Visualizer:
#   - request_next_tick(self, callback) -> None:
#     - Side Effects: schedules callback for the next display refresh.
#       Only one callback is pending at a time; run() invokes it at most
#       once per frame, in request order.
#   - run(self, max_steps=0, log_throttle=600) -> int:
#     - Outputs: the number of ticks executed.
#     - Side Effects: pumps window events and paces the loop at FPS until
#       nothing requests another tick, the window closes or max_steps ticks
#       have run (0 means no limit).

class SurfaceContext:
    """
    A canvas-style 2D drawing context over a pygame Surface.
    """
    def __init__(self, surface: pygame.Surface, background: Tuple[int, int, int] = BACKGROUND_COLOR):
        self.surface = surface
        self.background = pygame.Color(background)
        self.fill_style: Any = "#000000"
        self._matrix = np.identity(3)
        self._stack: List[Tuple[np.ndarray, Any]] = []
        self._path: List[Tuple[float, float]] = []

    # --- State ---

    def save(self) -> None:
        self._stack.append((self._matrix.copy(), self.fill_style))

    def restore(self) -> None:
        if self._stack:
            self._matrix, self.fill_style = self._stack.pop()

    # --- Transforms ---

    def _apply(self, matrix: np.ndarray) -> None:
        self._matrix = self._matrix @ matrix

    def translate(self, x: float, y: float) -> None:
        self._apply(np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]]))

    def rotate(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        self._apply(np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]))

    def scale(self, sx: float, sy: float) -> None:
        self._apply(np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]]))

    def _transform(self, points: List[Tuple[float, float]]) -> np.ndarray:
        pts = np.asarray(points, dtype=np.float64)
        homogeneous = np.column_stack([pts, np.ones(len(pts))])
        return (homogeneous @ self._matrix.T)[:, :2]

    def _is_singular(self) -> bool:
        return abs(np.linalg.det(self._matrix[:2, :2])) < 1e-12

    # --- Drawing ---

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Paints the background over an axis-aligned rectangle in surface space."""
        self.surface.fill(self.background, pygame.Rect(int(x), int(y), math.ceil(width), math.ceil(height)))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        if self._is_singular():
            return
        corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        self._fill_polygon(self._transform(corners))

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path.append((x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.append((x, y))

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        """Appends a clockwise arc (in screen space, y down) to the current path."""
        if radius < 0:
            raise ValueError(f"The radius provided ({radius}) is negative.")
        sweep = end_angle - start_angle
        segments = max(2, math.ceil(ARC_SEGMENTS * abs(sweep) / TWO_PI))
        for i in range(segments + 1):
            angle = start_angle + sweep * i / segments
            self._path.append((x + radius * math.cos(angle), y + radius * math.sin(angle)))

    def close_path(self) -> None:
        # Filled polygons are closed implicitly.
        pass

    def fill(self) -> None:
        if len(self._path) < 3 or self._is_singular():
            return
        self._fill_polygon(self._transform(self._path))

    def _fill_polygon(self, points: np.ndarray) -> None:
        pygame.draw.polygon(self.surface, pygame.Color(self.fill_style), [tuple(p) for p in points])


class Visualizer:
    """
    The pygame host: window, resize events and the frame clock.
    """
    def __init__(self, width: int, height: int, caption: str = "Bezier Burst"):
        """
        Initializes Pygame and opens a resizable window.
        """
        if width <= 0 or height <= 0:
            msg = f"Configuration error: window size must be positive, got {width}x{height}."
            logging.critical(msg)
            raise ValueError(msg)

        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()

        self.context = SurfaceContext(self.screen)
        self._resize_callbacks: List[Callable[[], None]] = []
        self._pending: Optional[Callable[[], None]] = None

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    # --- Host services ---

    def get_drawing_context(self) -> SurfaceContext:
        return self.context

    def viewport_size(self) -> Tuple[int, int]:
        return self.screen.get_size()

    def on_resize(self, callback: Callable[[], None]) -> None:
        self._resize_callbacks.append(callback)

    def request_next_tick(self, callback: Callable[[], None]) -> None:
        self._pending = callback

    # --- Loop ---

    def _handle_resize(self) -> None:
        # pygame 2 may hand back a new display surface after a resize.
        self.screen = pygame.display.get_surface()
        self.context.surface = self.screen
        for callback in self._resize_callbacks:
            callback()

    def _pump_events(self) -> bool:
        """Handles window events. Returns False if the user has quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                return False
            if event.type == pygame.VIDEORESIZE:
                self._handle_resize()
        return True

    def run(self, max_steps: int = 0, log_throttle: int = 600) -> int:
        """
        Drives requested ticks at FPS until nothing is pending or the user quits.
        """
        step_num = 0
        while self._pending is not None:
            if not self._pump_events():
                break

            callback, self._pending = self._pending, None
            callback()
            pygame.display.flip()
            step_num += 1

            # Hot loops must throttle logs
            if log_throttle and step_num % log_throttle == 0:
                logging.info(f"Frame {step_num} | {self.clock.get_fps():.1f} FPS")

            if max_steps and step_num >= max_steps:
                logging.info(f"Reached max_steps ({max_steps}). Stopping frame driver.")
                break

            self.clock.tick(FPS)

        self._pending = None
        return step_num

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()
