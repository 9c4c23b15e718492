from typing import Dict

import pandas as pd

from ..wind import WindData, BoatData, calculate_apparent_wind, deg_to_rad, rad_to_deg, wrap_deg


def sweep_headings(true_wind: WindData, boat_speed: float, step_deg: float = 5.0) -> pd.DataFrame:
    """
    Apparent wind for every boat heading in [0, 360) at a fixed boat speed.

    relative_angle_deg is the apparent wind direction measured from the bow,
    wrapped to [-180, 180).
    """
    if step_deg <= 0:
        raise ValueError(f"step_deg must be positive, got {step_deg}")
    rows = []
    heading_deg = 0.0
    while heading_deg < 360.0 - 1e-12:
        aw = calculate_apparent_wind(true_wind, BoatData(deg_to_rad(heading_deg), boat_speed))
        apparent_deg = rad_to_deg(aw.angle)
        rows.append({
            "heading_deg": heading_deg,
            "apparent_angle_deg": apparent_deg,
            "apparent_speed": aw.speed,
            "relative_angle_deg": wrap_deg(apparent_deg - heading_deg),
        })
        heading_deg += step_deg
    return pd.DataFrame(rows)


def strongest_apparent_wind(true_wind: WindData, boat_speed: float, step_deg: float = 1.0) -> Dict[str, float]:
    df = sweep_headings(true_wind, boat_speed, step_deg)
    return df.loc[df["apparent_speed"].idxmax()].to_dict()
