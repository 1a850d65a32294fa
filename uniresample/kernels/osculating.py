# -*- coding: utf-8 -*-
"""
Osculating Kernels - 5th-order, 2nd-order-osculating interpolation.

Each segment between two samples is a quintic Hermite polynomial that
matches the sample values plus first and second derivatives estimated
from central differences. Adjacent segments share those estimates, so
the resampled curve is C2 and passes through every sample.

- 4-point: ``y' = (y[+1] - y[-1]) / 2``,
  ``y'' = y[+1] - 2 y[0] + y[-1]``.
- 6-point: ``y' = (y[-2] - 8 y[-1] + 8 y[+1] - y[+2]) / 12``,
  ``y'' = (-y[-2] + 16 y[-1] - 30 y[0] + 16 y[+1] - y[+2]) / 12``.

Outer pieces are written in the local offset ``t = |x| - k`` of their
unit interval.

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


# ── 4-point ─────────────────────────────────────────────────────────────


def _osculating4_inner(x):
    return 1.0 + x * x * (-1.0 + x * (-4.5 + x * (7.5 - 3.0 * x)))


def _osculating4_outer(x):
    t = x - 1.0
    return t * (-0.5 + t * (0.5 + t * (1.5 + t * (-2.5 + t))))


# ── 6-point ─────────────────────────────────────────────────────────────


def _osculating6_inner(x):
    return 1.0 + x * x * (
        -5.0 / 4.0 + x * (-35.0 / 12.0 + x * (21.0 / 4.0 - 25.0 / 12.0 * x)))


def _osculating6_middle(x):
    t = x - 1.0
    return t * (
        -2.0 / 3.0 + t * (
            2.0 / 3.0 + t * (
                13.0 / 8.0 + t * (-8.0 / 3.0 + 25.0 / 24.0 * t))))


def _osculating6_outer(x):
    t = x - 2.0
    return t * (
        1.0 / 12.0 + t * (
            -1.0 / 24.0 + t * (
                -3.0 / 8.0 + t * (13.0 / 24.0 - 5.0 / 24.0 * t))))


class Osculating4Kernel(PiecewiseKernel):
    """4-point, 5th-order, 2nd-order-osculating kernel."""

    name = 'osculating4'
    pieces = (_osculating4_inner, _osculating4_outer)


class Osculating6Kernel(PiecewiseKernel):
    """6-point, 5th-order, 2nd-order-osculating kernel."""

    name = 'osculating6'
    pieces = (_osculating6_inner, _osculating6_middle, _osculating6_outer)
