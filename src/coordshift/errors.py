"""
Exception types.

The numerical core never raises for finite input. These errors cover the edges:
parsing system names, the opt-in rejection of NaN/infinity, and the dispatcher's
unreachable branch.
"""

from __future__ import annotations

from math import isfinite


class CoordShiftError(ValueError):
    """Base class for all coordshift errors."""


class UnknownSystemError(CoordShiftError):
    """Raised when a geodetic system name cannot be parsed."""


class NonFiniteCoordinateError(CoordShiftError):
    """Raised when NaN/infinity input is rejected by configuration."""


class UnsupportedConversionError(CoordShiftError):
    """Raised when no conversion route exists for a (source, target) pair."""


def ensure_finite(lat: float, lon: float) -> tuple[float, float]:
    """Return `(lat, lon)` unchanged, or raise if either value is NaN/infinite."""
    if not isfinite(lat) or not isfinite(lon):
        raise NonFiniteCoordinateError(f"Coordinate must be finite, got lat={lat!r} lon={lon!r}")
    return lat, lon
