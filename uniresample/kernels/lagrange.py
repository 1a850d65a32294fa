# -*- coding: utf-8 -*-
"""
Lagrange Kernels - 4-point cubic and 6-point quintic Lagrange.

Impulse responses of Lagrange polynomial interpolation through the
``L`` samples nearest the output position (nodes ``-L/2 + 1 .. L/2``
around ``floor(pos)``). The piece on ``[k, k+1)`` is the Lagrange basis
polynomial of the node at distance ``k`` written in the absolute
distance ``x``:

    l(x) = prod_{i != k} (x - i') / (k - i')

Both kernels are interpolating and reproduce polynomials up to their
order, but only C0 at integer offsets.

Reference
---------
T. I. Laakso, V. Valimaki, M. Karjalainen, and U. K. Laine,
"Splitting the Unit Delay — Tools for fractional delay filter design,"
IEEE Signal Processing Magazine, vol. 13, no. 1, pp. 30-60, Jan. 1996.

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


# ── 4-point, 3rd order ──────────────────────────────────────────────────


def _lagrange4_inner(x):
    # (x + 1)(x - 1)(x - 2) / 2
    return 1.0 + x * (-0.5 + x * (-1.0 + x * 0.5))


def _lagrange4_outer(x):
    # -(x - 1)(x - 2)(x - 3) / 6
    return 1.0 + x * (-11.0 / 6.0 + x * (1.0 - x / 6.0))


# ── 6-point, 5th order ──────────────────────────────────────────────────


def _lagrange6_inner(x):
    return -(x * x - 1.0) * (x * x - 4.0) * (x - 3.0) / 12.0


def _lagrange6_middle(x):
    return (x + 1.0) * (x - 1.0) * (x - 2.0) * (x - 3.0) * (x - 4.0) / 24.0


def _lagrange6_outer(x):
    return -(x - 1.0) * (x - 2.0) * (x - 3.0) * (x - 4.0) * (x - 5.0) / 120.0


class Lagrange4Kernel(PiecewiseKernel):
    """4-point, 3rd-order Lagrange kernel."""

    name = 'lagrange4'
    pieces = (_lagrange4_inner, _lagrange4_outer)


class Lagrange6Kernel(PiecewiseKernel):
    """6-point, 5th-order Lagrange kernel."""

    name = 'lagrange6'
    pieces = (_lagrange6_inner, _lagrange6_middle, _lagrange6_outer)
