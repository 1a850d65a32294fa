# -*- coding: utf-8 -*-
"""
Quadratic Kernels - Watte tri-linear and parabolic 2x.

Two 4-point, 2nd-order kernels. Both are cheap and form a partition of
unity. Watte passes through the samples; parabolic 2x peaks at 1/2 and
is only approximating, trading accuracy for a smoother response that
suits 2x oversampled input.

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


def _watte_inner(x):
    return 1.0 - 0.5 * x * (1.0 + x)


def _watte_outer(x):
    return 1.0 + x * (-1.5 + 0.5 * x)


def _parabolic2x_inner(x):
    return 0.5 - 0.25 * x * x


def _parabolic2x_outer(x):
    return 1.0 + x * (-1.0 + 0.25 * x)


class WatteKernel(PiecewiseKernel):
    """Watte tri-linear kernel.

    Pieces: ``1 - x/2 - x^2/2`` on ``[0, 1)`` and
    ``1 - 3x/2 + x^2/2`` on ``[1, 2)``.
    """

    name = 'watte'
    pieces = (_watte_inner, _watte_outer)


class Parabolic2xKernel(PiecewiseKernel):
    """Parabolic 2x kernel.

    Pieces: ``1/2 - x^2/4`` on ``[0, 1)`` and ``1 - x + x^2/4`` on
    ``[1, 2)``.
    """

    name = 'parabolic2x'
    interpolating = False
    pieces = (_parabolic2x_inner, _parabolic2x_outer)
