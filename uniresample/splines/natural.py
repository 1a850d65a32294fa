# -*- coding: utf-8 -*-
"""
Natural Cubic Spline - C2 interpolating spline with free ends.

The second derivatives ``M`` at the knots ``x = 0 .. N-1`` satisfy the
tridiagonal system

    M[i-1] + 4 M[i] + M[i+1] = 6 (y[i+1] - 2 y[i] + y[i-1])

for the interior knots, with ``M[0] = M[N-1] = 0`` (natural boundary
conditions). Segment ``j`` is then

    S_j(dx) = a[j] + b[j] dx + c[j] dx^2 + d[j] dx^3,   dx in [0, 1]

    a[j] = y[j]
    b[j] = y[j+1] - y[j] - (2 M[j] + M[j+1]) / 6
    c[j] = M[j] / 2
    d[j] = (M[j+1] - M[j]) / 6

Dependencies
------------
scipy

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
from dataclasses import dataclass

# Third-party
import numpy as np
from scipy.linalg import solve_banded

# Uniresample internal
from uniresample.splines.base import SplineResampler, segment_offsets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CubicSplineCoefficients:
    """Per-segment power-basis coefficients, each shape ``(N - 1,)``."""

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    d: np.ndarray


def natural_second_derivatives(y: np.ndarray) -> np.ndarray:
    """Solve for knot second derivatives under natural end conditions.

    Parameters
    ----------
    y : np.ndarray
        Knot values, shape ``(N,)`` with ``N >= 2``.

    Returns
    -------
    np.ndarray
        Second derivatives, shape ``(N,)``, zero at both ends.
    """
    n = len(y)
    m2 = np.zeros(n, dtype=np.float64)
    if n < 3:
        return m2

    interior = n - 2
    # Banded storage (upper, diagonal, lower) for solve_banded
    ab = np.zeros((3, interior), dtype=np.float64)
    ab[0, 1:] = 1.0
    ab[1, :] = 4.0
    ab[2, :-1] = 1.0
    rhs = 6.0 * (y[2:] - 2.0 * y[1:-1] + y[:-2])

    m2[1:-1] = solve_banded((1, 1), ab, rhs)
    return m2


class NaturalCubicSpline(SplineResampler):
    """Natural cubic spline resampler.

    Passes through every sample with continuous first and second
    derivatives. The fit is a single O(N) banded solve per call.

    Examples
    --------
    >>> spline = NaturalCubicSpline()
    >>> y_new = spline(y_old, 100)
    """

    name = 'cubic_spline'

    def fit(self, y: np.ndarray) -> CubicSplineCoefficients:
        """Compute per-segment coefficients for knots ``y``."""
        logger.debug("Fitting natural cubic spline to %d knots", len(y))
        m2 = natural_second_derivatives(y)
        return CubicSplineCoefficients(
            a=y[:-1].copy(),
            b=np.diff(y) - (2.0 * m2[:-1] + m2[1:]) / 6.0,
            c=m2[:-1] / 2.0,
            d=np.diff(m2) / 6.0,
        )

    def _evaluate(self, y: np.ndarray, fitted: CubicSplineCoefficients,
                  pos: np.ndarray) -> np.ndarray:
        seg, dx = segment_offsets(pos, len(y))
        return fitted.a[seg] + dx * (
            fitted.b[seg] + dx * (fitted.c[seg] + dx * fitted.d[seg])
        )


def natural_cubic_resampler() -> NaturalCubicSpline:
    """Create a natural cubic spline resampler.

    Convenience factory function. See :class:`NaturalCubicSpline`.
    """
    return NaturalCubicSpline()
