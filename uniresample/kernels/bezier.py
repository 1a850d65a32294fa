# -*- coding: utf-8 -*-
"""
Bezier Kernel - Smoothstep-like cubic with a quadratic outer lobe.

The inner piece is a cubic with zero slope at the origin, falling to
zero at ``|x| = 1`` the way a smoothstep does. The outer piece is a
small negative quadratic lobe vanishing at ``|x| = 1`` and ``|x| = 2``.
Its depth is tied to the inner cubic so the kernel is a partition of
unity:

    k(x) = 1 - 7x^2/2 + 5x^3/2           0 <= |x| < 1
    k(x) = -(x - 1)(x - 2) / 4           1 <= |x| < 2

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


def _bezier_inner(x):
    return 1.0 + x * x * (-3.5 + 2.5 * x)


def _bezier_outer(x):
    return -0.25 * (x - 1.0) * (x - 2.0)


class BezierKernel(PiecewiseKernel):
    """4-point Bezier kernel, interpolating and C1 at the origin."""

    name = 'bezier'
    pieces = (_bezier_inner, _bezier_outer)
