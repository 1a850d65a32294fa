# -*- coding: utf-8 -*-
"""
Kernels - Impulse responses for uniform-grid resampling.

Every kernel is a callable ``kernel(x) -> weight`` over signed distance
``x`` in sample-spacing units. Kernels are even, zero for
``|x| >= radius``, and vectorized over numpy arrays.

Available kernels:

- ``DropSampleKernel`` — nearest neighbour, radius 1.
- ``LinearKernel`` — triangle, radius 1.
- ``BSpline3Kernel`` / ``BSpline5Kernel`` — cubic / quintic B-spline
  basis (approximating), radius 2 / 3.
- ``Lagrange4Kernel`` / ``Lagrange6Kernel`` — cubic / quintic
  Lagrange, radius 2 / 3.
- ``WatteKernel`` / ``Parabolic2xKernel`` — 4-point quadratics.
- ``Osculating4Kernel`` / ``Osculating6Kernel`` — quintic,
  2nd-order osculating.
- ``Hermite4Kernel`` (Catmull-Rom), ``Hermite6_3Kernel``,
  ``Hermite6_5Kernel`` — Hermite with estimated slopes.
- ``LanczosKernel`` / ``lanczos_kernel`` — Lanczos-windowed sinc.
- ``BezierKernel`` — smoothstep-like cubic with quadratic outer lobe.

Base classes:

- ``Kernel`` — ABC for all kernels.
- ``PiecewiseKernel`` — template for piecewise-polynomial kernels.

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

from uniresample.kernels.base import Kernel, PiecewiseKernel
from uniresample.kernels.simple import DropSampleKernel, LinearKernel
from uniresample.kernels.bspline import BSpline3Kernel, BSpline5Kernel
from uniresample.kernels.lagrange import Lagrange4Kernel, Lagrange6Kernel
from uniresample.kernels.quadratic import WatteKernel, Parabolic2xKernel
from uniresample.kernels.osculating import (
    Osculating4Kernel,
    Osculating6Kernel,
)
from uniresample.kernels.hermite import (
    Hermite4Kernel,
    Hermite6_3Kernel,
    Hermite6_5Kernel,
)
from uniresample.kernels.lanczos import LanczosKernel, lanczos_kernel
from uniresample.kernels.bezier import BezierKernel

__all__ = [
    'Kernel',
    'PiecewiseKernel',
    'DropSampleKernel',
    'LinearKernel',
    'BSpline3Kernel',
    'BSpline5Kernel',
    'Lagrange4Kernel',
    'Lagrange6Kernel',
    'WatteKernel',
    'Parabolic2xKernel',
    'Osculating4Kernel',
    'Osculating6Kernel',
    'Hermite4Kernel',
    'Hermite6_3Kernel',
    'Hermite6_5Kernel',
    'LanczosKernel',
    'lanczos_kernel',
    'BezierKernel',
]
