# -*- coding: utf-8 -*-
"""
Monotonic Cubic Spline - Fritsch-Carlson monotonicity-preserving Hermite.

Knot slopes start as the mean of the two adjacent secants (the secant
itself at either end). Where the data change direction or are flat the
slope is set to zero, and each pair of slopes around a secant ``delta``
is rescaled whenever

    alpha^2 + beta^2 > 9,    alpha = m[k] / delta, beta = m[k+1] / delta

so the cubic on that segment cannot overshoot. Monotone input therefore
gives monotone output.

Reference
---------
F. N. Fritsch and R. E. Carlson, "Monotone Piecewise Cubic
Interpolation," SIAM J. Numer. Anal., vol. 17, no. 2, pp. 238-246,
1980.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import logging

# Third-party
import numpy as np

# Uniresample internal
from uniresample.splines.base import HermiteSplineResampler

logger = logging.getLogger(__name__)


def fritsch_carlson_slopes(y: np.ndarray) -> np.ndarray:
    """Monotonicity-preserving knot slopes.

    Parameters
    ----------
    y : np.ndarray
        Knot values, shape ``(N,)`` with ``N >= 2``.

    Returns
    -------
    np.ndarray
        Slopes, shape ``(N,)``.
    """
    delta = np.diff(y)
    n = len(y)

    slopes = np.empty(n, dtype=np.float64)
    slopes[0] = delta[0]
    slopes[-1] = delta[-1]
    slopes[1:-1] = 0.5 * (delta[:-1] + delta[1:])

    # Local extrema keep a flat tangent
    slopes[1:-1][delta[:-1] * delta[1:] <= 0.0] = 0.0

    # Sequential: rescaling segment k changes the slope segment k+1 sees
    for k in range(n - 1):
        if delta[k] == 0.0:
            slopes[k] = 0.0
            slopes[k + 1] = 0.0
            continue
        alpha = slopes[k] / delta[k]
        beta = slopes[k + 1] / delta[k]
        radius2 = alpha * alpha + beta * beta
        if radius2 > 9.0:
            tau = 3.0 / np.sqrt(radius2)
            slopes[k] = tau * alpha * delta[k]
            slopes[k + 1] = tau * beta * delta[k]

    return slopes


class MonotonicCubicSpline(HermiteSplineResampler):
    """Fritsch-Carlson monotonic cubic resampler.

    Passes through every sample and never introduces extrema that are
    absent from the data. C1 continuous.
    """

    name = 'monotonic_cubic'

    def fit(self, y: np.ndarray) -> np.ndarray:
        """Compute monotonicity-preserving slopes for knots ``y``."""
        logger.debug("Fitting monotonic cubic to %d knots", len(y))
        return fritsch_carlson_slopes(y)


def monotonic_cubic_resampler() -> MonotonicCubicSpline:
    """Create a monotonic cubic resampler.

    Convenience factory function. See :class:`MonotonicCubicSpline`.
    """
    return MonotonicCubicSpline()
