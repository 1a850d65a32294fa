# -*- coding: utf-8 -*-
"""
Hermite Kernels - Piecewise Hermite interpolation with estimated slopes.

Every segment is a Hermite polynomial through its two end samples with
derivatives estimated by central differences, giving a C1 (or better)
interpolating curve.

- ``Hermite4Kernel`` — cubic, slopes ``(y[+1] - y[-1]) / 2``. This is
  the Catmull-Rom spline.
- ``Hermite6_3Kernel`` — cubic, 4th-order slopes
  ``(y[-2] - 8 y[-1] + 8 y[+1] - y[+2]) / 12``.
- ``Hermite6_5Kernel`` — quintic, the same 4th-order slopes plus
  second derivatives ``y[+1] - 2 y[0] + y[-1]``, making the curve C2.

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

# Uniresample internal
from uniresample.kernels.base import PiecewiseKernel


# ── 4-point, 3rd order (Catmull-Rom) ────────────────────────────────────


def _hermite4_inner(x):
    return 1.0 + x * x * (-2.5 + 1.5 * x)


def _hermite4_outer(x):
    return 2.0 + x * (-4.0 + x * (2.5 - 0.5 * x))


# ── 6-point, 3rd order ──────────────────────────────────────────────────


def _hermite6_3_inner(x):
    return 1.0 + x * x * (-7.0 / 3.0 + 4.0 / 3.0 * x)


def _hermite6_3_middle(x):
    t = x - 1.0
    return t * (-2.0 / 3.0 + t * (5.0 / 4.0 - 7.0 / 12.0 * t))


def _hermite6_3_outer(x):
    t = x - 2.0
    return t * (1.0 - t) * (1.0 - t) / 12.0


# ── 6-point, 5th order ──────────────────────────────────────────────────


def _hermite6_5_inner(x):
    return 1.0 + x * x * (
        -1.0 + x * (-23.0 / 6.0 + x * (19.0 / 3.0 - 2.5 * x)))


def _hermite6_5_middle(x):
    t = x - 1.0
    return t * (
        -2.0 / 3.0 + t * (
            0.5 + t * (13.0 / 6.0 + t * (-13.0 / 4.0 + 1.25 * t))))


def _hermite6_5_outer(x):
    t = x - 2.0
    return t * (1.0 / 12.0 + t * t * (-0.5 + t * (2.0 / 3.0 - 0.25 * t)))


class Hermite4Kernel(PiecewiseKernel):
    """4-point, 3rd-order Hermite (Catmull-Rom) kernel.

    Pieces: ``1 - 5x^2/2 + 3x^3/2`` on ``[0, 1)`` and
    ``2 - 4x + 5x^2/2 - x^3/2`` on ``[1, 2)``.
    """

    name = 'hermite4'
    pieces = (_hermite4_inner, _hermite4_outer)


class Hermite6_3Kernel(PiecewiseKernel):
    """6-point, 3rd-order Hermite kernel."""

    name = 'hermite6_3'
    pieces = (_hermite6_3_inner, _hermite6_3_middle, _hermite6_3_outer)


class Hermite6_5Kernel(PiecewiseKernel):
    """6-point, 5th-order Hermite kernel."""

    name = 'hermite6_5'
    pieces = (_hermite6_5_inner, _hermite6_5_middle, _hermite6_5_outer)
