# -*- coding: utf-8 -*-
"""
Akima Spline - Outlier-robust piecewise cubic Hermite.

The secant slopes ``s`` are extended by two extrapolated values at each
end (``s[-1] = 2 s[0] - s[1]``, ``s[-2] = 2 s[-1] - s[0]``, likewise on
the right). The slope at knot ``k`` is the weighted mean of the two
secants meeting there,

    m[k] = (w1 s[k-1] + w2 s[k]) / (w1 + w2)
    w1 = |s[k+1] - s[k]|,  w2 = |s[k-1] - s[k-2]|

so a slope break on one side suppresses that side's influence. When
both weights vanish the plain mean of the two secants is used. With
fewer than three knots the secant slopes are used directly.

Reference
---------
H. Akima, "A New Method of Interpolation and Smooth Curve Fitting Based
on Local Procedures," J. ACM, vol. 17, no. 4, pp. 589-602, 1970.

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

_WEIGHT_EPS = 1e-12


def akima_slopes(y: np.ndarray) -> np.ndarray:
    """Akima knot slopes.

    Parameters
    ----------
    y : np.ndarray
        Knot values, shape ``(N,)`` with ``N >= 2``.

    Returns
    -------
    np.ndarray
        Slopes, shape ``(N,)``.
    """
    secants = np.diff(y)
    n = len(y)
    if n < 3:
        return np.full(n, secants[0], dtype=np.float64)

    # s_ext[i + 2] == secants[i]
    s_ext = np.empty(n + 3, dtype=np.float64)
    s_ext[2:-2] = secants
    s_ext[1] = 2.0 * s_ext[2] - s_ext[3]
    s_ext[0] = 2.0 * s_ext[1] - s_ext[2]
    s_ext[-2] = 2.0 * s_ext[-3] - s_ext[-4]
    s_ext[-1] = 2.0 * s_ext[-2] - s_ext[-3]

    left = s_ext[1:-2]      # s[k-1]
    right = s_ext[2:-1]     # s[k]
    w1 = np.abs(s_ext[3:] - right)      # |s[k+1] - s[k]|
    w2 = np.abs(left - s_ext[:-3])      # |s[k-1] - s[k-2]|

    total = w1 + w2
    flat = total < _WEIGHT_EPS
    safe_total = np.where(flat, 1.0, total)
    return np.where(
        flat,
        0.5 * (left + right),
        (w1 * left + w2 * right) / safe_total,
    )


class AkimaSpline(HermiteSplineResampler):
    """Akima spline resampler.

    Passes through every sample; local slope weighting keeps isolated
    outliers from causing wide oscillations. C1 continuous.
    """

    name = 'akima'

    def fit(self, y: np.ndarray) -> np.ndarray:
        """Compute Akima slopes for knots ``y``."""
        logger.debug("Fitting Akima spline to %d knots", len(y))
        return akima_slopes(y)


def akima_resampler() -> AkimaSpline:
    """Create an Akima spline resampler.

    Convenience factory function. See :class:`AkimaSpline`.
    """
    return AkimaSpline()
