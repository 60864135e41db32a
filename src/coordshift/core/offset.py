"""
Empirical offset model behind the GCJ-02 obfuscation.

The published formulas are sums of sine harmonics plus a low-degree polynomial,
evaluated on a coordinate re-centered at (35N, 105E). The output is in the
polynomial's own units; `coordshift.core.regional` scales it into degrees.
"""

from __future__ import annotations

from math import pi, sin, sqrt


def offset(x: float, y: float) -> tuple[float, float]:
    """Return the raw `(lat_t, lon_t)` perturbation for a re-centered coordinate.

    `x` is `lat - 35` and `y` is `lon - 105`. The two terms are deliberately
    asymmetric in `x`/`y`; keep them exactly as written so results match the
    reference vectors.
    """
    r = 20.0 * sin(6.0 * pi * y) + 20.0 * sin(2.0 * pi * y)

    x_p = 20.0 * sin(pi * x) + 40.0 * sin(pi / 3.0 * x)
    x_q = 160.0 * sin(pi / 12.0 * x) + 320.0 * sin(pi / 30.0 * x)
    x_t = (
        -100.0
        + 2.0 * y
        + 3.0 * x
        + 0.2 * x * x
        + 0.1 * x * y
        + 0.2 * sqrt(abs(y))
        + 2.0 / 3.0 * (r + x_p + x_q)
    )

    y_p = 20.0 * sin(pi * y) + 40.0 * sin(pi / 3.0 * y)
    y_q = 150.0 * sin(pi / 12.0 * y) + 300.0 * sin(pi / 30.0 * y)
    y_t = (
        300.0
        + y
        + 2.0 * x
        + 0.1 * y * y
        + 0.1 * x * y
        + 0.1 * sqrt(abs(y))
        + 2.0 / 3.0 * (r + y_p + y_q)
    )

    return x_t, y_t
