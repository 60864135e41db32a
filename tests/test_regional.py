import math

import pytest

from coordshift.core.offset import offset
from coordshift.core.regional import REGION, gcj02_to_wgs84, is_outside_region, wgs84_to_gcj02


def _assert_close(actual, expected, eps=1e-6):
    lat, lon = actual
    assert abs(lat - expected[0]) < eps, f"lat = {lat}, {expected[0]} expected"
    assert abs(lon - expected[1]) < eps, f"lon = {lon}, {expected[1]} expected"


# Interior grid: well inside the region so the GCJ-02 output stays inside too.
IN_REGION = [(lat, lon) for lat in (5.0, 18.5, 31.23, 39.9, 45.0, 53.0) for lon in (75.0, 91.1, 104.0, 116.4, 121.47, 135.0)]


def test_wgs84_to_gcj02_reference_vector():
    _assert_close(wgs84_to_gcj02(39.0, 116.0), (39.000886, 116.006018))


def test_gcj02_to_wgs84_reference_vector():
    _assert_close(gcj02_to_wgs84(39.0, 116.0), (38.999133, 115.994002))


def test_outside_region_is_passthrough():
    assert wgs84_to_gcj02(60.0, 100.0) == (60.0, 100.0)
    assert gcj02_to_wgs84(60.0, 100.0) == (60.0, 100.0)
    # Southern hemisphere / western longitudes are outside as well.
    assert wgs84_to_gcj02(-33.86, 151.21) == (-33.86, 151.21)
    assert wgs84_to_gcj02(40.71, -74.0) == (40.71, -74.0)


def test_region_bounds_are_inclusive():
    assert not is_outside_region(REGION.min_lat, REGION.min_lon)
    assert not is_outside_region(REGION.max_lat, REGION.max_lon)
    assert is_outside_region(REGION.max_lat + 1e-9, 100.0)
    assert is_outside_region(30.0, REGION.min_lon - 1e-9)


def test_forward_shift_is_small_but_nonzero_inside_region():
    for lat, lon in IN_REGION:
        g_lat, g_lon = wgs84_to_gcj02(lat, lon)
        assert (g_lat, g_lon) != (lat, lon)
        # Offsets are at most a few kilometers.
        assert abs(g_lat - lat) < 0.05
        assert abs(g_lon - lon) < 0.05


@pytest.mark.parametrize("lat, lon", IN_REGION)
def test_round_trip_recovers_original_point(lat, lon):
    _assert_close(gcj02_to_wgs84(*wgs84_to_gcj02(lat, lon)), (lat, lon))


def test_inverse_terminates_and_stays_finite_across_region():
    for i in range(12):
        for j in range(12):
            lat = REGION.min_lat + (REGION.max_lat - REGION.min_lat) * i / 11
            lon = REGION.min_lon + (REGION.max_lon - REGION.min_lon) * j / 11
            w_lat, w_lon = gcj02_to_wgs84(lat, lon)
            assert math.isfinite(w_lat) and math.isfinite(w_lon)


def test_single_iteration_returns_first_correction():
    # One round: estimate starts at the input and receives a single residual step.
    g_lat, g_lon = wgs84_to_gcj02(39.0, 116.0)
    expected = (39.0 + (39.0 - g_lat), 116.0 + (116.0 - g_lon))
    assert gcj02_to_wgs84(39.0, 116.0, max_iterations=1) == expected


def test_tighter_tolerance_still_converges():
    _assert_close(gcj02_to_wgs84(39.0, 116.0, tolerance=1e-12, max_iterations=50), (38.999133, 115.994002))


@pytest.mark.parametrize("kwargs", [{"tolerance": 0.0}, {"tolerance": -1e-7}, {"max_iterations": 0}])
def test_inverse_rejects_invalid_solver_knobs(kwargs):
    with pytest.raises(ValueError):
        gcj02_to_wgs84(39.0, 116.0, **kwargs)


def test_non_finite_input_propagates():
    lat, lon = wgs84_to_gcj02(math.nan, 116.0)
    assert math.isnan(lat) and math.isnan(lon)

    lat, lon = gcj02_to_wgs84(39.0, math.nan)
    assert math.isnan(lat) and math.isnan(lon)

    # Infinity fails the bounding-box check and is passed through.
    assert wgs84_to_gcj02(math.inf, 116.0) == (math.inf, 116.0)


def test_offset_model_at_reference_origin():
    # At the re-centered origin every sine and polynomial term vanishes except the constants.
    assert offset(0.0, 0.0) == (-100.0, 300.0)


def test_region_contains_rejects_nan_while_core_lets_it_through():
    assert not REGION.contains(math.nan, 116.0)
    assert not REGION.contains(39.0, math.nan)
    assert not is_outside_region(math.nan, 116.0)


def test_round_trip_breaks_when_gcj02_image_leaves_region():
    # Inside the region, but the eastward shift pushes the GCJ-02 point past 137.8347.
    wgs = (30.0, 137.832)
    assert not is_outside_region(*wgs)
    gcj = wgs84_to_gcj02(*wgs)
    assert is_outside_region(*gcj)

    # The solver's first forward step is a passthrough, so the GCJ-02 point comes back as-is.
    assert gcj02_to_wgs84(*gcj) == gcj
    assert abs(gcj[1] - wgs[1]) > 1e-3
