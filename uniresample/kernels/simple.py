# -*- coding: utf-8 -*-
"""
Simple Kernels - Drop-sample (nearest neighbour) and linear.

The two 1-point-radius kernels. Drop-sample holds the nearest input
sample; linear is the triangular impulse response connecting adjacent
samples with straight lines.

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
from typing import Tuple

# Third-party
import numpy as np

# Uniresample internal
from uniresample.kernels.base import PiecewiseKernel


def _drop_sample_inner(x):
    return np.ones_like(x)


def _linear_inner(x):
    return 1.0 - x


class DropSampleKernel(PiecewiseKernel):
    """Drop-sample (zero-order) kernel.

    Kernel: ``1`` for ``|x| < 1``, zero otherwise.

    The box is as wide as the sample spacing, so convolving it over a
    symmetric window would add two neighbours. Instead the window is a
    single tap at the nearest input index (rounding half up), which
    yields nearest-neighbour resampling.
    """

    name = 'drop_sample'
    interpolating = False
    pieces = (_drop_sample_inner,)

    def window(self, pos: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        anchor = np.floor(pos + 0.5).astype(np.intp)
        return anchor, np.zeros(1, dtype=np.intp)


class LinearKernel(PiecewiseKernel):
    """Linear (triangular) kernel.

    Kernel: ``1 - |x|`` for ``|x| < 1``, zero otherwise.
    """

    name = 'linear'
    pieces = (_linear_inner,)
