"""
Geometry and wind-triangle kernel.

Pure functions only: angle conversion and normalization, polar/cartesian
transforms, vector arithmetic and the apparent wind law

    apparent = true_wind - boat_velocity

All angles are radians, 0 = east, growing clockwise in screen space
(y points down). Degrees only appear at display boundaries.
"""

import math
from dataclasses import dataclass
from typing import Iterable

TWO_PI = 2.0 * math.pi
KNOTS_TO_MS = 0.514444


@dataclass(frozen=True)
class Vector2D:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class PolarCoords:
    angle: float = 0.0      # rad
    magnitude: float = 0.0


@dataclass(frozen=True)
class WindData:
    angle: float = 0.0      # rad, direction the wind vector points to
    speed: float = 0.0      # knots


@dataclass(frozen=True)
class BoatData:
    heading: float = 0.0    # rad
    speed: float = 0.0      # knots


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def normalize_angle(angle: float) -> float:
    """Map an angle into [0, 2π). Negative angles wrap forward."""
    a = angle % TWO_PI
    # tiny negative inputs round up to exactly 2π
    if a >= TWO_PI:
        a = 0.0
    return a


def wrap_deg(a: float) -> float:
    """Wrap angle to [-180, 180) degrees."""
    return (a + 180.0) % 360.0 - 180.0


def polar_to_cartesian(polar: PolarCoords) -> Vector2D:
    return Vector2D(polar.magnitude * math.cos(polar.angle),
                    polar.magnitude * math.sin(polar.angle))


def cartesian_to_polar(vector: Vector2D) -> PolarCoords:
    """
    Angle is atan2(y, x) in (-π, π], not normalized.
    The zero vector maps to angle 0 (atan2(0, 0) == 0).
    """
    return PolarCoords(math.atan2(vector.y, vector.x), math.hypot(vector.x, vector.y))


def add_vectors(a: Vector2D, b: Vector2D) -> Vector2D:
    return Vector2D(a.x + b.x, a.y + b.y)


def subtract_vectors(a: Vector2D, b: Vector2D) -> Vector2D:
    """a - b"""
    return Vector2D(a.x - b.x, a.y - b.y)


def scale_vector(vector: Vector2D, factor: float) -> Vector2D:
    return Vector2D(vector.x * factor, vector.y * factor)


def knots_to_ms(knots: float) -> float:
    return knots * KNOTS_TO_MS


def ms_to_knots(ms: float) -> float:
    return ms / KNOTS_TO_MS


def calculate_apparent_wind(true_wind: WindData, boat: BoatData) -> WindData:
    """
    Apparent wind felt aboard a moving boat.

    Both vectors go to cartesian, the boat velocity is subtracted from the
    true wind and the result comes back as a normalized angle plus a speed
    floored at zero.
    """
    true_vec = polar_to_cartesian(PolarCoords(true_wind.angle, true_wind.speed))
    boat_vec = polar_to_cartesian(PolarCoords(boat.heading, boat.speed))
    apparent = cartesian_to_polar(subtract_vectors(true_vec, boat_vec))
    return WindData(normalize_angle(apparent.angle), max(0.0, apparent.magnitude))


def angular_distance(a1: float, a2: float) -> float:
    """Shortest way around the circle between two angles, in [0, π]."""
    diff = abs(normalize_angle(a1) - normalize_angle(a2))
    return min(diff, TWO_PI - diff)


def angle_collision(angle1: float, angle2: float,
                    min_separation: float = deg_to_rad(10.0)) -> bool:
    """True when the two angles are closer than min_separation (wraps at 0/2π)."""
    return angular_distance(angle1, angle2) < min_separation


def constrain_angle(proposed: float, existing_angles: Iterable[float],
                    min_separation: float = deg_to_rad(10.0)) -> float:
    """
    Push a proposed angle clear of existing ones.

    Each existing angle that collides with the current (possibly already
    moved) proposal snaps it to the nearer of existing ± min_separation.
    Deterministic, not globally optimal when many angles crowd together.
    """
    constrained = normalize_angle(proposed)
    for existing in existing_angles:
        if angle_collision(constrained, existing, min_separation):
            base = normalize_angle(existing)
            above = normalize_angle(base + min_separation)
            below = normalize_angle(base - min_separation)
            if angular_distance(constrained, above) <= angular_distance(constrained, below):
                constrained = above
            else:
                constrained = below
    return constrained


def distance(a: Vector2D, b: Vector2D) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def angle_from_center(center: Vector2D, point: Vector2D) -> float:
    """Raw atan2 angle of point seen from center, in (-π, π]."""
    return math.atan2(point.y - center.y, point.x - center.x)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)
