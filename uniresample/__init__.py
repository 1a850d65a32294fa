# -*- coding: utf-8 -*-
"""
Uniresample - Kernel-based resampling of uniformly spaced sequences.

Resamples a sequence of uniformly spaced samples to an arbitrary output
length with one of twenty interpolation methods: drop-sample, linear,
B-spline, Lagrange, Watte, parabolic, osculating, Hermite, Lanczos,
Bezier, and the whole-sequence natural cubic, monotonic cubic and Akima
splines. Used for audio resampling and curve visualization.

Entry points:

- ``interpolate(samples, out_samples, kernel_type)`` — real sequences.
- ``interpolate_int(samples, out_samples, kernel_type)`` — integer
  sequences, rounded half away from zero.

Dependencies
------------
numpy
scipy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from uniresample.exceptions import UniresampleError, ValidationError
from uniresample.vocabulary import KernelType
from uniresample.engine import (
    Resampler,
    IdentityResampler,
    KernelResampler,
    kernel_resampler,
    sample_positions,
)
from uniresample.dispatch import (
    available_kernels,
    get_resampler,
    interpolate,
    interpolate_int,
    round_half_away,
)

__all__ = [
    'UniresampleError',
    'ValidationError',
    'KernelType',
    'Resampler',
    'IdentityResampler',
    'KernelResampler',
    'kernel_resampler',
    'sample_positions',
    'available_kernels',
    'get_resampler',
    'interpolate',
    'interpolate_int',
    'round_half_away',
]
