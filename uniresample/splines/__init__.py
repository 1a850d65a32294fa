# -*- coding: utf-8 -*-
"""
Splines - Whole-sequence spline resamplers.

Spline resamplers fit the entire input once per call and evaluate each
output on its enclosing segment. They share the
``(samples, out_samples) -> resampled`` signature of every
:class:`~uniresample.engine.Resampler`.

Available splines:

- ``NaturalCubicSpline`` / ``natural_cubic_resampler`` — C2, natural
  boundary conditions, banded tridiagonal solve.
- ``MonotonicCubicSpline`` / ``monotonic_cubic_resampler`` —
  Fritsch-Carlson, never overshoots monotone data.
- ``AkimaSpline`` / ``akima_resampler`` — outlier-robust slope
  weighting.

Base classes:

- ``SplineResampler`` — fit-then-evaluate template.
- ``HermiteSplineResampler`` — cubic Hermite evaluation from knot
  slopes.

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

from uniresample.splines.base import (
    SplineResampler,
    HermiteSplineResampler,
    hermite_basis,
)
from uniresample.splines.natural import (
    CubicSplineCoefficients,
    NaturalCubicSpline,
    natural_cubic_resampler,
    natural_second_derivatives,
)
from uniresample.splines.monotonic import (
    MonotonicCubicSpline,
    fritsch_carlson_slopes,
    monotonic_cubic_resampler,
)
from uniresample.splines.akima import (
    AkimaSpline,
    akima_resampler,
    akima_slopes,
)

__all__ = [
    'SplineResampler',
    'HermiteSplineResampler',
    'hermite_basis',
    'CubicSplineCoefficients',
    'NaturalCubicSpline',
    'natural_cubic_resampler',
    'natural_second_derivatives',
    'MonotonicCubicSpline',
    'fritsch_carlson_slopes',
    'monotonic_cubic_resampler',
    'AkimaSpline',
    'akima_resampler',
    'akima_slopes',
]
