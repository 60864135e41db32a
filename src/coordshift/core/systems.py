"""
Geodetic systems and the conversion dispatcher.

`GeodeticSystem` is the closed set of supported systems. `convert` picks the
pairwise function for a `(source, target)` pair; BD-09 <-> WGS-84 goes through
GCJ-02.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from coordshift.core.regional import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE_DEG,
    gcj02_to_wgs84,
    wgs84_to_gcj02,
)
from coordshift.core.vendor import bd09_to_gcj02, gcj02_to_bd09
from coordshift.errors import UnknownSystemError, UnsupportedConversionError


class GeodeticSystem(str, Enum):
    """Supported coordinate systems."""

    WGS84 = "wgs84"
    GCJ02 = "gcj02"
    BD09 = "bd09"

    @classmethod
    def parse(cls, value: GeodeticSystem | str) -> GeodeticSystem:
        """Accept a member or a case-insensitive name/alias (e.g. `gcj`, `BD-09`)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "").replace("_", "")
        system = _ALIASES.get(key)
        if system is None:
            choices = ", ".join(s.value for s in cls)
            raise UnknownSystemError(f"Unknown geodetic system '{value}'; expected one of: {choices}")
        return system

    def convert_to(self, target: GeodeticSystem | str, lat: float, lon: float) -> tuple[float, float]:
        """Convert a coordinate from this system to `target`."""
        return convert(self, target, lat, lon)


_ALIASES: dict[str, GeodeticSystem] = {
    "wgs84": GeodeticSystem.WGS84,
    "wgs": GeodeticSystem.WGS84,
    "gps": GeodeticSystem.WGS84,
    "gcj02": GeodeticSystem.GCJ02,
    "gcj": GeodeticSystem.GCJ02,
    "bd09": GeodeticSystem.BD09,
    "bd": GeodeticSystem.BD09,
}


def bd09_to_wgs84(
    lat: float,
    lon: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> tuple[float, float]:
    """Convert a BD-09 coordinate into WGS-84 (via GCJ-02)."""
    lat, lon = bd09_to_gcj02(lat, lon)
    return gcj02_to_wgs84(lat, lon, tolerance=tolerance, max_iterations=max_iterations)


def wgs84_to_bd09(lat: float, lon: float) -> tuple[float, float]:
    """Convert a WGS-84 coordinate into BD-09 (via GCJ-02)."""
    lat, lon = wgs84_to_gcj02(lat, lon)
    return gcj02_to_bd09(lat, lon)


Route = Callable[[float, float], tuple[float, float]]

# Routes that run the inverse solver and therefore accept solver knobs.
_SOLVER_ROUTES: dict[tuple[GeodeticSystem, GeodeticSystem], Callable[..., tuple[float, float]]] = {
    (GeodeticSystem.GCJ02, GeodeticSystem.WGS84): gcj02_to_wgs84,
    (GeodeticSystem.BD09, GeodeticSystem.WGS84): bd09_to_wgs84,
}

_CLOSED_FORM_ROUTES: dict[tuple[GeodeticSystem, GeodeticSystem], Route] = {
    (GeodeticSystem.WGS84, GeodeticSystem.GCJ02): wgs84_to_gcj02,
    (GeodeticSystem.WGS84, GeodeticSystem.BD09): wgs84_to_bd09,
    (GeodeticSystem.GCJ02, GeodeticSystem.BD09): gcj02_to_bd09,
    (GeodeticSystem.BD09, GeodeticSystem.GCJ02): bd09_to_gcj02,
}


def convert(
    source: GeodeticSystem | str,
    target: GeodeticSystem | str,
    lat: float,
    lon: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> tuple[float, float]:
    """Convert `(lat, lon)` from `source` to `target`.

    Same-system conversion returns the input untouched. `tolerance` and
    `max_iterations` only affect routes ending in WGS-84 from an obfuscated system.
    """
    src = GeodeticSystem.parse(source)
    dst = GeodeticSystem.parse(target)
    if src is dst:
        return lat, lon

    key = (src, dst)
    if key in _SOLVER_ROUTES:
        return _SOLVER_ROUTES[key](lat, lon, tolerance=tolerance, max_iterations=max_iterations)
    if key in _CLOSED_FORM_ROUTES:
        return _CLOSED_FORM_ROUTES[key](lat, lon)

    # Unreachable while GeodeticSystem has exactly three members.
    raise UnsupportedConversionError(f"No conversion route from {src.value} to {dst.value}")
