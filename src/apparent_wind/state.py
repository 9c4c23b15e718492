import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .ring_params import (
    RingParams, WIND_RING, BOAT_RING, CANVAS_WIDTH, CANVAS_HEIGHT,
    CANVAS_RADIUS_FRACTION, ANGLE_STEP_DEG, RADIUS_STEP_FRACTION,
)
from .wind import (
    Vector2D, WindData, BoatData, calculate_apparent_wind, normalize_angle,
    deg_to_rad, rad_to_deg, clamp, distance, angle_from_center, TWO_PI,
)

logger = logging.getLogger(__name__)

WIND = "wind"
BOAT = "boat"
RING_IDS = (WIND, BOAT)


@dataclass
class Ring:
    """One control input: a single angle/radius pair shown through several spokes."""
    angle: float             # rad, [0, 2π)
    radius: float            # px, [min_radius, max_radius]
    spokes: int
    min_radius: float
    max_radius: float
    speed_cap: float         # knots at max_radius

    @classmethod
    def from_params(cls, p: RingParams) -> "Ring":
        return cls(
            angle=normalize_angle(deg_to_rad(p.angle_deg)),
            radius=clamp(p.radius, p.min_radius, p.max_radius),
            spokes=p.spokes,
            min_radius=p.min_radius,
            max_radius=p.max_radius,
            speed_cap=p.speed_cap,
        )


@dataclass
class HandlePosition:
    x: float
    y: float
    theta: float             # absolute spoke angle, normalized


@dataclass
class CanvasFrame:
    width: float = float(CANVAS_WIDTH)
    height: float = float(CANVAS_HEIGHT)
    center_x: float = CANVAS_WIDTH / 2
    center_y: float = CANVAS_HEIGHT / 2

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.center_x, self.center_y)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class SailingState:
    """
    Owns the wind and boat rings, the canvas frame, the drag session and the
    derived apparent wind.

    Every public mutation leaves both rings inside their bounds with a
    normalized angle and recomputes the apparent wind before returning, so a
    reader never sees a stale value. Unknown ring ids are ignored.
    """

    def __init__(self, wind_params: RingParams = WIND_RING, boat_params: RingParams = BOAT_RING):
        self.params: Dict[str, RingParams] = {WIND: wind_params, BOAT: boat_params}
        self.wind_ring = Ring.from_params(wind_params)
        self.boat_ring = Ring.from_params(boat_params)
        self.canvas = CanvasFrame()

        # Interaction session
        self.selected_ring: Optional[str] = None
        self.is_dragging = False
        self.drag_anchor: Optional[Vector2D] = None

        self.apparent_wind = WindData()
        self.recompute_apparent_wind()

    # ----- Lookups and derived values

    def ring(self, ring_id: Optional[str]) -> Optional[Ring]:
        if ring_id == WIND:
            return self.wind_ring
        if ring_id == BOAT:
            return self.boat_ring
        return None

    @staticmethod
    def speed_of(ring: Ring) -> float:
        """Linear map of radius onto [0, speed_cap]; 0 when the bounds have collapsed."""
        span = ring.max_radius - ring.min_radius
        if span <= 0.0:
            return 0.0
        return (ring.radius - ring.min_radius) / span * ring.speed_cap

    def ring_handle_positions(self, ring: Ring) -> List[HandlePosition]:
        handles = []
        for i in range(ring.spokes):
            theta = ring.angle + i * TWO_PI / ring.spokes
            handles.append(HandlePosition(
                x=self.canvas.center_x + ring.radius * math.cos(theta),
                y=self.canvas.center_y + ring.radius * math.sin(theta),
                theta=normalize_angle(theta),
            ))
        return handles

    @property
    def wind_handles(self) -> List[HandlePosition]:
        return self.ring_handle_positions(self.wind_ring)

    @property
    def boat_handles(self) -> List[HandlePosition]:
        return self.ring_handle_positions(self.boat_ring)

    @property
    def wind_speed(self) -> float:
        return self.speed_of(self.wind_ring)

    @property
    def boat_speed(self) -> float:
        return self.speed_of(self.boat_ring)

    @property
    def true_wind(self) -> WindData:
        return WindData(self.wind_ring.angle, self.wind_speed)

    @property
    def boat(self) -> BoatData:
        return BoatData(self.boat_ring.angle, self.boat_speed)

    @property
    def wind_angle_degrees(self) -> int:
        return _round_half_up(rad_to_deg(self.wind_ring.angle))

    @property
    def boat_heading_degrees(self) -> int:
        return _round_half_up(rad_to_deg(self.boat_ring.angle))

    @property
    def apparent_wind_angle_degrees(self) -> int:
        return _round_half_up(rad_to_deg(self.apparent_wind.angle))

    # ----- Mutations

    def update_canvas_dimensions(self, width: float, height: float) -> None:
        width = max(0.0, float(width))
        height = max(0.0, float(height))
        self.canvas = CanvasFrame(width, height, width / 2, height / 2)

        base = min(width, height) * CANVAS_RADIUS_FRACTION
        for ring_id in RING_IDS:
            ring = self.ring(ring_id)
            p = self.params[ring_id]
            ring.max_radius = base * p.max_fraction
            ring.min_radius = base * p.min_fraction
            ring.radius = clamp(ring.radius, ring.min_radius, ring.max_radius)

        logger.debug("Canvas resized to %.0fx%.0f (ring base %.1f px)", width, height, base)
        self.recompute_apparent_wind()

    def recompute_apparent_wind(self) -> WindData:
        self.apparent_wind = calculate_apparent_wind(self.true_wind, self.boat)
        return self.apparent_wind

    def select_ring(self, ring_id: Optional[str]) -> None:
        if ring_id is not None and self.ring(ring_id) is None:
            logger.debug("Ignoring selection of unknown ring %r", ring_id)
            return
        if ring_id != self.selected_ring:
            # a drag never outlives its ring's selection
            self.end_drag()
            logger.debug("Selected ring: %s", ring_id)
        self.selected_ring = ring_id

    def start_drag(self, ring_id: str, point: Vector2D) -> None:
        if self.ring(ring_id) is None:
            logger.debug("Ignoring drag on unknown ring %r", ring_id)
            return
        self.select_ring(ring_id)
        self.is_dragging = True
        self.drag_anchor = point
        logger.debug("Drag started on %s ring at (%.1f, %.1f)", ring_id, point.x, point.y)

    def update_drag(self, point: Vector2D) -> None:
        """Snap the selected ring onto the pointer: angle and radius both come from the point."""
        ring = self.ring(self.selected_ring)
        if ring is None or not self.is_dragging:
            return

        center = self.canvas.center
        ring.radius = clamp(distance(center, point), ring.min_radius, ring.max_radius)
        ring.angle = normalize_angle(angle_from_center(center, point))
        self.drag_anchor = point

        self.recompute_apparent_wind()

    def end_drag(self) -> None:
        if self.is_dragging:
            logger.debug("Drag ended on %s ring", self.selected_ring)
        # selection stays for keyboard follow-up
        self.is_dragging = False
        self.drag_anchor = None

    def move_selected(self, direction: str, angle_step: float = deg_to_rad(ANGLE_STEP_DEG),
                      radius_step_fraction: float = RADIUS_STEP_FRACTION) -> None:
        ring = self.ring(self.selected_ring)
        if ring is None:
            return

        if direction == "left":
            ring.angle = normalize_angle(ring.angle - angle_step)
        elif direction == "right":
            ring.angle = normalize_angle(ring.angle + angle_step)
        elif direction == "up":
            ring.radius = clamp(ring.radius + ring.max_radius * radius_step_fraction,
                                ring.min_radius, ring.max_radius)
        elif direction == "down":
            ring.radius = clamp(ring.radius - ring.max_radius * radius_step_fraction,
                                ring.min_radius, ring.max_radius)
        else:
            logger.debug("Ignoring unknown direction %r", direction)
            return

        self.recompute_apparent_wind()
