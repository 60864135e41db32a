from coordshift.core.vendor import bd09_to_gcj02, gcj02_to_bd09


def _assert_close(actual, expected, eps=1e-6):
    assert abs(actual[0] - expected[0]) < eps, f"lat = {actual[0]}, {expected[0]} expected"
    assert abs(actual[1] - expected[1]) < eps, f"lon = {actual[1]}, {expected[1]} expected"


def test_gcj02_to_bd09_reference_vector():
    _assert_close(gcj02_to_bd09(39.0, 116.0), (39.005826, 116.006558))


def test_bd09_to_gcj02_reference_vector():
    _assert_close(bd09_to_gcj02(39.0, 116.0), (38.994267, 115.993417))


def test_bd09_round_trip_stays_close():
    # The inverse evaluates its perturbation on the BD-09 input, so it is only approximate.
    lat, lon = bd09_to_gcj02(*gcj02_to_bd09(31.2304, 121.4737))
    assert abs(lat - 31.2304) < 5e-4
    assert abs(lon - 121.4737) < 5e-4


def test_bd09_applies_everywhere():
    # Unlike GCJ-02 there is no regional passthrough.
    lat, lon = gcj02_to_bd09(60.0, 100.0)
    assert (lat, lon) != (60.0, 100.0)
