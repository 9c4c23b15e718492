"""
Reference analysis tools.

Table-building helpers used for checking and exploring the wind triangle,
not by the interactive diagram itself.
"""

from .wind_table import sweep_headings, strongest_apparent_wind

__all__ = ["sweep_headings", "strongest_apparent_wind"]
