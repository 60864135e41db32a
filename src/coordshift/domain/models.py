"""
Domain models (Pydantic).

These types are the contract between the conversion core and its callers
(CLI, applications that prefer validated objects over bare tuples):
- `ConversionRequest`: what to convert and between which systems
- `ConversionResult`: the converted point plus a little context for display/JSON

The core functions themselves work on plain floats; these models are a thin,
validated wrapper around them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from coordshift.core.systems import GeodeticSystem


class GeoPoint(BaseModel):
    """A latitude/longitude pair in decimal degrees.

    Values are not range-checked: the conversion core accepts any float.
    """

    # NaN/inf propagate through the core; JSON has no token for them.
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="null")

    lat: float
    lon: float

    def as_tuple(self) -> tuple[float, float]:
        return self.lat, self.lon


class ConversionRequest(BaseModel):
    """A single conversion between two geodetic systems."""

    source: GeodeticSystem
    target: GeodeticSystem
    point: GeoPoint

    @field_validator("source", "target", mode="before")
    @classmethod
    def _parse_system(cls, value: object) -> GeodeticSystem:
        return GeodeticSystem.parse(value)  # type: ignore[arg-type]


class ConversionResult(BaseModel):
    """Converted point plus the request that produced it."""

    model_config = ConfigDict(ser_json_inf_nan="null")

    source: GeodeticSystem
    target: GeodeticSystem
    input: GeoPoint
    output: GeoPoint
    in_region: bool
