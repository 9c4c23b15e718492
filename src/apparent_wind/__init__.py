"""
Apparent wind - interactive wind triangle diagram.

This package provides:
- wind: Pure geometry kernel (polar/cartesian, vectors, apparent wind law, angle collisions)
- SailingState: Ring state model owning the wind and boat rings and the derived apparent wind
- InteractionController: Pointer/keyboard/resize gestures mapped onto the state
- RingParams: Ring configuration and predefined ring presets
- Interactive pygame visualization (main.py entry point)

Predefined ring configurations:
- WIND_RING: True wind (3 spokes, up to 30 kn)
- BOAT_RING: Boat course (4 spokes, up to 20 kn)
"""

from .wind import WindData, BoatData, Vector2D, PolarCoords, calculate_apparent_wind
from .ring_params import RingParams, WIND_RING, BOAT_RING
from .state import SailingState, Ring, CanvasFrame, HandlePosition, WIND, BOAT
from .controller import InteractionController, PointerEvent, KeyEvent, ResizeEvent

__all__ = [
    "WindData", "BoatData", "Vector2D", "PolarCoords", "calculate_apparent_wind",
    "RingParams", "WIND_RING", "BOAT_RING",
    "SailingState", "Ring", "CanvasFrame", "HandlePosition", "WIND", "BOAT",
    "InteractionController", "PointerEvent", "KeyEvent", "ResizeEvent",
]

__version__ = "0.1.0"
