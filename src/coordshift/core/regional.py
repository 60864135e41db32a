"""
WGS-84 <-> GCJ-02 conversion.

The forward direction is a closed-form perturbation applied only inside a
bounding box around mainland China. There is no closed-form inverse, so
`gcj02_to_wgs84` recovers the original point by fixed-point iteration over the
forward transform.

Non-finite inputs are not rejected here: NaN fails every bounding-box comparison,
so it is treated as in-region and propagates through the arithmetic. Callers that
want to reject such values use `coordshift.errors.ensure_finite`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import cos, pi, sin, sqrt

from coordshift.core.offset import offset

logger = logging.getLogger(__name__)

# Krasovsky 1940 ellipsoid: a = 6378245.0, 1/f = 298.3, ee = (a^2 - b^2) / a^2
KRASOVSKY_A = 6378245.0
KRASOVSKY_EE = 0.00669342162296594323

# Center of the offset model's re-centered frame.
ORIGIN_LAT = 35.0
ORIGIN_LON = 105.0

DEFAULT_TOLERANCE_DEG = 1e-7
DEFAULT_MAX_ITERATIONS = 10


@dataclass(frozen=True)
class RegionBounds:
    """Inclusive lat/lon bounding box (decimal degrees)."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, lat: float, lon: float) -> bool:
        # NaN is never contained.
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon


REGION = RegionBounds(min_lat=0.8293, max_lat=55.8271, min_lon=72.004, max_lon=137.8347)


def is_outside_region(lat: float, lon: float) -> bool:
    """True when the obfuscation does not apply to this WGS-84 point.

    NaN fails every comparison here, so it counts as inside and propagates
    through `wgs84_to_gcj02`.
    """
    return lat < REGION.min_lat or lat > REGION.max_lat or lon < REGION.min_lon or lon > REGION.max_lon


def wgs84_to_gcj02(lat: float, lon: float) -> tuple[float, float]:
    """Convert a WGS-84 coordinate into GCJ-02.

    Points outside the region are returned unchanged.
    """
    if is_outside_region(lat, lon):
        return lat, lon

    lat_rad = pi / 180.0 * lat
    magic = 1.0 - KRASOVSKY_EE * sin(lat_rad) ** 2

    lat_t, lon_t = offset(lat - ORIGIN_LAT, lon - ORIGIN_LON)
    lat_d = (lat_t * 180.0) / (pi * KRASOVSKY_A * (1.0 - KRASOVSKY_EE) / (magic * sqrt(magic)))
    lon_d = (lon_t * 180.0) / (pi * KRASOVSKY_A / sqrt(magic) * cos(lat_rad))

    return lat + lat_d, lon + lon_d


def _validate_solver_args(tolerance: float, max_iterations: int) -> None:
    if not tolerance > 0:
        raise ValueError(f"tolerance must be > 0, got {tolerance!r}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations!r}")


def gcj02_to_wgs84(
    lat: float,
    lon: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> tuple[float, float]:
    """Convert a GCJ-02 coordinate into WGS-84.

    Starts from the GCJ-02 point itself and repeatedly corrects the estimate by
    the residual between the target and the forward-converted estimate. Stops
    once both residual components are below `tolerance` (degrees) or after
    `max_iterations` rounds; in the latter case the last estimate is returned.

    Near the north and east edges of the region a WGS-84 point can be inside
    while its GCJ-02 image is outside (e.g. 30.0, 137.832). The first forward
    step is then a passthrough, so the GCJ-02 point comes back unchanged and the
    round trip is off by the full offset (a few thousandths of a degree).
    """
    _validate_solver_args(tolerance, max_iterations)

    est_lat, est_lon = lat, lon
    d_lat = d_lon = float("inf")
    for _ in range(max_iterations):
        cur_lat, cur_lon = wgs84_to_gcj02(est_lat, est_lon)
        d_lat = lat - cur_lat
        d_lon = lon - cur_lon
        if abs(d_lat) < tolerance and abs(d_lon) < tolerance:
            return est_lat, est_lon

        est_lat += d_lat
        est_lon += d_lon

    logger.debug(
        "GCJ-02 inverse did not converge after %s iterations for (%s, %s); residual=(%g, %g)",
        max_iterations,
        lat,
        lon,
        d_lat,
        d_lon,
    )
    return est_lat, est_lon
