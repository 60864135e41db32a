"""
GCJ-02 <-> BD-09 conversion.

BD-09 is a polar-coordinate warp on top of GCJ-02 with a small harmonic
perturbation and a fixed shift. The inverse evaluates the perturbation on the
BD-09 input rather than re-solving for the GCJ-02 point, so it is approximate;
existing consumers depend on that exact output.
"""

from __future__ import annotations

from math import atan2, cos, pi, sin, sqrt

# Angular frequency of the harmonic perturbation (radians per degree).
PI_X = pi * 3000.0 / 180.0

LAT_SHIFT = 0.006
LON_SHIFT = 0.0065


def gcj02_to_bd09(lat: float, lon: float) -> tuple[float, float]:
    """Convert a GCJ-02 coordinate into BD-09."""
    z = sqrt(lon * lon + lat * lat) + 0.00002 * sin(PI_X * lat)
    theta = atan2(lat, lon) + 0.000003 * cos(PI_X * lon)
    return z * sin(theta) + LAT_SHIFT, z * cos(theta) + LON_SHIFT


def bd09_to_gcj02(lat: float, lon: float) -> tuple[float, float]:
    """Convert a BD-09 coordinate into GCJ-02."""
    lat, lon = lat - LAT_SHIFT, lon - LON_SHIFT
    z = sqrt(lon * lon + lat * lat) - 0.00002 * sin(PI_X * lat)
    theta = atan2(lat, lon) - 0.000003 * cos(PI_X * lon)
    return z * sin(theta), z * cos(theta)
