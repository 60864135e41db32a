"""
Settings-aware conversion façade.

`coordshift.core` is pure and uses fixed defaults. This module wires it to
`Settings` (solver knobs, non-finite policy) and to the Pydantic models used by
the CLI and JSON output.
"""

from __future__ import annotations

import logging

from coordshift.config.settings import Settings, get_settings
from coordshift.core.regional import REGION
from coordshift.core.systems import GeodeticSystem, convert
from coordshift.domain.models import ConversionRequest, ConversionResult, GeoPoint
from coordshift.errors import ensure_finite

logger = logging.getLogger(__name__)


def convert_with_settings(
    source: GeodeticSystem | str,
    target: GeodeticSystem | str,
    lat: float,
    lon: float,
    *,
    settings: Settings | None = None,
) -> tuple[float, float]:
    """Like `coordshift.convert`, but with solver/input policy taken from settings."""
    settings = settings or get_settings()
    if settings.input.non_finite == "reject":
        ensure_finite(lat, lon)
    return convert(
        source,
        target,
        lat,
        lon,
        tolerance=settings.solver.tolerance_deg,
        max_iterations=settings.solver.max_iterations,
    )


def _wgs84_side(request: ConversionRequest, output: GeoPoint, settings: Settings) -> tuple[float, float]:
    if request.source is GeodeticSystem.WGS84:
        return request.point.as_tuple()
    if request.target is GeodeticSystem.WGS84:
        return output.as_tuple()
    return convert_with_settings(
        request.source, GeodeticSystem.WGS84, request.point.lat, request.point.lon, settings=settings
    )


def convert_point(request: ConversionRequest, *, settings: Settings | None = None) -> ConversionResult:
    """Convert a validated request and report whether the point lies in the obfuscated region."""
    settings = settings or get_settings()
    lat, lon = convert_with_settings(
        request.source, request.target, request.point.lat, request.point.lon, settings=settings
    )
    output = GeoPoint(lat=lat, lon=lon)
    in_region = REGION.contains(*_wgs84_side(request, output, settings))
    if not in_region:
        logger.debug(
            "Point (%s, %s) lies outside the GCJ-02 region; WGS-84 <-> GCJ-02 is a passthrough there.",
            request.point.lat,
            request.point.lon,
        )
    return ConversionResult(
        source=request.source,
        target=request.target,
        input=request.point,
        output=output,
        in_region=in_region,
    )
