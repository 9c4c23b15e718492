#!/usr/bin/env python3
"""
Unit tests for the apparent wind heading sweep.
"""

import unittest
import math
import sys
import os

# Add the src directory to the path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from apparent_wind.reference import sweep_headings, strongest_apparent_wind
from apparent_wind.wind import WindData, deg_to_rad


class TestWindTable(unittest.TestCase):
    """Test the apparent wind table over boat headings."""

    def setUp(self):
        # 12 kn true wind blowing toward the east
        self.true_wind = WindData(deg_to_rad(0.0), 12.0)

    def test_one_row_per_heading(self):
        df = sweep_headings(self.true_wind, 6.0, step_deg=10.0)
        self.assertEqual(len(df), 36)
        self.assertEqual(list(df.columns),
                         ["heading_deg", "apparent_angle_deg", "apparent_speed", "relative_angle_deg"])
        self.assertAlmostEqual(df["heading_deg"].iloc[-1], 350.0)

    def test_running_downwind(self):
        df = sweep_headings(self.true_wind, 6.0, step_deg=90.0)
        row = df[df["heading_deg"] == 0.0].iloc[0]
        self.assertAlmostEqual(row["apparent_speed"], 6.0)
        self.assertAlmostEqual(row["relative_angle_deg"], 0.0, places=6)

    def test_strongest_when_sailing_into_the_wind(self):
        best = strongest_apparent_wind(self.true_wind, 6.0)
        self.assertAlmostEqual(best["heading_deg"], 180.0)
        self.assertAlmostEqual(best["apparent_speed"], 18.0)

    def test_relative_angle_range(self):
        df = sweep_headings(self.true_wind, 4.0, step_deg=15.0)
        self.assertTrue(((df["relative_angle_deg"] >= -180.0) & (df["relative_angle_deg"] < 180.0)).all())
        self.assertTrue((df["apparent_speed"] >= 0.0).all())

    def test_stationary_boat_matches_true_wind(self):
        df = sweep_headings(self.true_wind, 0.0, step_deg=45.0)
        for speed in df["apparent_speed"]:
            self.assertTrue(math.isclose(speed, 12.0))

    def test_rejects_bad_step(self):
        with self.assertRaises(ValueError):
            sweep_headings(self.true_wind, 5.0, step_deg=0.0)


if __name__ == "__main__":
    unittest.main()
