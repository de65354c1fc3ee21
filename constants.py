# constants.py
"""
Application-level constants.

These values are fixed for every run of the animation. They describe the
timing of each phase, the look of each entity and the rendering defaults
of the host window. Only logging, seeding and window setup live in
config.json.
"""
import math

# Timing
FPS = 60
# Logical time advanced per tick, in abstract time-units.
TIME_STEP = 1 / 60
# The loader fills in 45 ticks (~0.75s at 60 ticks/sec).
LOADER_STEP = 1 / 45
# Accumulated clocks closer than this to their cap snap onto it.
COMPLETION_EPSILON = 1e-9

# Default window size
DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 350
BACKGROUND_COLOR = (24, 24, 24) # Dark Gray

# Particle field
PARTICLE_COUNT = 128
PARTICLE_WIDTH = 8
PARTICLE_HEIGHT = 6
PARTICLE_MIN_DURATION = 3.0
PARTICLE_DURATION_RANGE = 2.0
# Particles end this far below the visible bottom edge.
PARTICLE_EXIT_OFFSET = 64
# Half-cycles of the flutter over a particle's lifetime.
PARTICLE_FLUTTER_HALF_CYCLES = 10
# Upper bound (exclusive) for random particle colors.
MAX_COLOR_VALUE = 0xFFFFFF

# Loader / Exploader
LOADER_RADIUS = 24
LOADER_COLOR = (255, 255, 255)
EXPLOADER_START_RADIUS = 24
EXPLOADER_DURATION = 0.4
EXPLOADER_COLOR = (255, 255, 255)

# Easing
BACK_OVERSHOOT = 1.70158

# Rendering
HALF_PI = math.pi * 0.5
TWO_PI = math.pi * 2
# Polygon segments used to approximate a full circle.
ARC_SEGMENTS = 64
