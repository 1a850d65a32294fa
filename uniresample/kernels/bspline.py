# -*- coding: utf-8 -*-
"""
B-Spline Kernels - Cubic and quintic B-spline basis functions.

B-spline kernels are smooth (C2 for the cubic, C4 for the quintic) and
form a partition of unity, but they do not interpolate: the peak value
is below one and neighbouring samples contribute at integer offsets, so
the resampled curve passes near rather than through the data.

The pieces are the expanded forms of

    cubic:    ((2 - x)^3 - 4 (1 - x)^3_+) / 6
    quintic:  ((3 - x)^5 - 6 (2 - x)^5_+ + 15 (1 - x)^5_+) / 120

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


# ── Cubic ───────────────────────────────────────────────────────────────


def _bspline3_inner(x):
    return 2.0 / 3.0 + x * x * (-1.0 + x * 0.5)


def _bspline3_outer(x):
    return 4.0 / 3.0 + x * (-2.0 + x * (1.0 - x / 6.0))


# ── Quintic ─────────────────────────────────────────────────────────────


def _bspline5_inner(x):
    x2 = x * x
    return 11.0 / 20.0 + x2 * (-0.5 + x2 * (0.25 - x / 12.0))


def _bspline5_middle(x):
    return 17.0 / 40.0 + x * (
        5.0 / 8.0 + x * (
            -7.0 / 4.0 + x * (
                5.0 / 4.0 + x * (-3.0 / 8.0 + x / 24.0))))


def _bspline5_outer(x):
    return 81.0 / 40.0 + x * (
        -27.0 / 8.0 + x * (
            9.0 / 4.0 + x * (
                -3.0 / 4.0 + x * (1.0 / 8.0 - x / 120.0))))


class BSpline3Kernel(PiecewiseKernel):
    """Cubic B-spline kernel, 4 taps.

    ``k(0) = 2/3``, ``k(1) = 1/6``, zero for ``|x| >= 2``.
    """

    name = 'bspline3'
    interpolating = False
    pieces = (_bspline3_inner, _bspline3_outer)


class BSpline5Kernel(PiecewiseKernel):
    """Quintic B-spline kernel, 6 taps.

    ``k(0) = 11/20``, ``k(1) = 13/60``, ``k(2) = 1/120``, zero for
    ``|x| >= 3``.
    """

    name = 'bspline5'
    interpolating = False
    pieces = (_bspline5_inner, _bspline5_middle, _bspline5_outer)
