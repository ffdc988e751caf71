"""Artificial satellite observer geometry, apparent motion, designations, ephemeris formatting, tracklets and TLE list tools."""

__version__ = "0.1.0"

__all__ = [
    "designations",
    "ephem_format",
    "geometry",
    "observations",
    "observe",
    "outcomp",
    "satutil",
    "tlefile",
    "topocentric",
    "tracklets",
]