"""
coordshift: convert coordinates between WGS-84, GCJ-02 and BD-09.

Most callers only need `convert` and `GeodeticSystem`; the pairwise functions are
exported for code that knows its systems statically.
"""

from coordshift.core.regional import gcj02_to_wgs84, is_outside_region, wgs84_to_gcj02
from coordshift.core.systems import GeodeticSystem, bd09_to_wgs84, convert, wgs84_to_bd09
from coordshift.core.vendor import bd09_to_gcj02, gcj02_to_bd09
from coordshift.errors import (
    CoordShiftError,
    NonFiniteCoordinateError,
    UnknownSystemError,
    UnsupportedConversionError,
)

__version__ = "0.1.0"

__all__ = [
    "CoordShiftError",
    "GeodeticSystem",
    "NonFiniteCoordinateError",
    "UnknownSystemError",
    "UnsupportedConversionError",
    "bd09_to_gcj02",
    "bd09_to_wgs84",
    "convert",
    "gcj02_to_bd09",
    "gcj02_to_wgs84",
    "is_outside_region",
    "wgs84_to_bd09",
    "wgs84_to_gcj02",
]
