from dataclasses import dataclass
from typing import Tuple

# Canvas defaults (px)
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
CANVAS_RADIUS_FRACTION = 0.4  # largest ring bound as a share of min(width, height)

# Interaction
HIT_TOLERANCE = 20.0          # px either side of a ring that still grabs it
ANGLE_STEP_DEG = 5.0          # keyboard rotation step
RADIUS_STEP_FRACTION = 0.05   # keyboard radius step as a share of max_radius
MIN_SEPARATION_DEG = 10.0     # default spacing for angle collision checks


@dataclass
class RingParams:
    # Handles
    spokes: int = 3              # synchronized handles around the ring
    speed_cap: float = 30.0      # knots at max_radius

    # Bounds as fractions of the canvas base size (min(w, h) * CANVAS_RADIUS_FRACTION)
    min_fraction: float = 0.4
    max_fraction: float = 1.0

    # Initial pose before the first resize
    angle_deg: float = 0.0       # 0 = east, clockwise on screen
    radius: float = 180.0        # px
    min_radius: float = 80.0     # px
    max_radius: float = 250.0    # px

    color: Tuple[int, int, int] = (0, 102, 255)


# Predefined ring configurations

# True wind: three spokes, up to 30 kn
WIND_RING = RingParams(
    spokes=3,
    speed_cap=30.0,
    min_fraction=0.4,
    max_fraction=1.0,
    angle_deg=0.0,       # blowing toward the east
    radius=180.0,
    min_radius=80.0,
    max_radius=250.0,
    color=(0, 102, 255),  # blue
)

# Boat course: four spokes, up to 20 kn, sits inside the wind ring
BOAT_RING = RingParams(
    spokes=4,
    speed_cap=20.0,
    min_fraction=0.3,
    max_fraction=0.8,
    angle_deg=45.0,
    radius=120.0,
    min_radius=60.0,
    max_radius=180.0,
    color=(255, 107, 107),  # red
)
