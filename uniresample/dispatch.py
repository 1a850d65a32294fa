# -*- coding: utf-8 -*-
"""
Dispatch - Kernel selector to resampler mapping and public entry points.

``interpolate`` resamples a real sequence to a requested length with the
method named by a :class:`~uniresample.vocabulary.KernelType`.
``interpolate_int`` wraps it for integer sequences, rounding results
half away from zero.

Every ``KernelType`` member is registered. Resamplers hold no per-call
state, so the registered instances are shared and safe to call from
several threads at once.

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
import logging
from typing import Dict, List, Union

# Third-party
import numpy as np

# Uniresample internal
from uniresample.engine import (
    IdentityResampler,
    KernelResampler,
    Resampler,
    as_samples,
    check_out_samples,
)
from uniresample.exceptions import ValidationError
from uniresample.kernels import (
    BezierKernel,
    BSpline3Kernel,
    BSpline5Kernel,
    DropSampleKernel,
    Hermite4Kernel,
    Hermite6_3Kernel,
    Hermite6_5Kernel,
    Lagrange4Kernel,
    Lagrange6Kernel,
    LanczosKernel,
    LinearKernel,
    Osculating4Kernel,
    Osculating6Kernel,
    Parabolic2xKernel,
    WatteKernel,
)
from uniresample.splines import (
    AkimaSpline,
    MonotonicCubicSpline,
    NaturalCubicSpline,
)
from uniresample.vocabulary import KernelType

logger = logging.getLogger(__name__)

KernelSelector = Union[KernelType, str]

_RESAMPLERS: Dict[KernelType, Resampler] = {
    KernelType.NONE: IdentityResampler(),
    KernelType.DROP_SAMPLE: KernelResampler(DropSampleKernel()),
    KernelType.LINEAR: KernelResampler(LinearKernel()),
    KernelType.BSPLINE3: KernelResampler(BSpline3Kernel()),
    KernelType.BSPLINE5: KernelResampler(BSpline5Kernel()),
    KernelType.LAGRANGE4: KernelResampler(Lagrange4Kernel()),
    KernelType.LAGRANGE6: KernelResampler(Lagrange6Kernel()),
    KernelType.WATTE: KernelResampler(WatteKernel()),
    KernelType.PARABOLIC2X: KernelResampler(Parabolic2xKernel()),
    KernelType.OSCULATING4: KernelResampler(Osculating4Kernel()),
    KernelType.OSCULATING6: KernelResampler(Osculating6Kernel()),
    KernelType.HERMITE4: KernelResampler(Hermite4Kernel()),
    KernelType.HERMITE6_3: KernelResampler(Hermite6_3Kernel()),
    KernelType.HERMITE6_5: KernelResampler(Hermite6_5Kernel()),
    KernelType.CUBIC_SPLINE: NaturalCubicSpline(),
    KernelType.MONOTONIC_CUBIC: MonotonicCubicSpline(),
    KernelType.LANCZOS2: KernelResampler(LanczosKernel(a=2), normalize=True),
    KernelType.LANCZOS3: KernelResampler(LanczosKernel(a=3), normalize=True),
    KernelType.BEZIER: KernelResampler(BezierKernel()),
    KernelType.AKIMA: AkimaSpline(),
}


def available_kernels() -> List[KernelType]:
    """Return every registered kernel selector."""
    return list(_RESAMPLERS)


def get_resampler(kernel_type: KernelSelector) -> Resampler:
    """Look up the resampler for a kernel selector.

    Parameters
    ----------
    kernel_type : KernelType or str
        Selector member, or its value or name (case-insensitive).

    Returns
    -------
    Resampler
        Callable ``(samples, out_samples) -> np.ndarray``.

    Raises
    ------
    ValidationError
        If ``kernel_type`` is not a known selector.
    """
    return _RESAMPLERS[KernelType.resolve(kernel_type)]


def interpolate(
    samples,
    out_samples: int,
    kernel_type: KernelSelector = KernelType.NONE,
) -> np.ndarray:
    """Resample a uniformly spaced sequence to ``out_samples`` points.

    Output sample ``i`` approximates the input at fractional index
    ``i * (N - 1) / (out_samples - 1)``, so the first and last outputs
    align with the first and last inputs.

    Parameters
    ----------
    samples : array_like
        Input samples, shape ``(N,)``. Never modified.
    out_samples : int
        Requested output length, >= 0. Ignored by ``KernelType.NONE``.
    kernel_type : KernelType or str
        Resampling method. ``KernelType.NONE`` (default) returns a
        copy of the input.

    Returns
    -------
    np.ndarray
        Newly allocated ``float64`` array of length ``out_samples``
        (``N`` for ``NONE``, 0 for empty input).

    Raises
    ------
    ValidationError
        For a negative or non-integer ``out_samples``, non-1-D
        ``samples``, or an unknown ``kernel_type``.

    Examples
    --------
    >>> interpolate([0.0, 2.0, 4.0], 5, KernelType.LINEAR)
    array([0., 1., 2., 3., 4.])
    """
    resampler = get_resampler(kernel_type)
    y = as_samples(samples)
    m = check_out_samples(out_samples)
    logger.debug("Resampling %d -> %d samples with %r", len(y), m, resampler)
    return resampler(y, m)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, ties away from zero."""
    values = np.asarray(values, dtype=np.float64)
    return np.where(
        values >= 0.0, np.floor(values + 0.5), np.ceil(values - 0.5)
    )


def interpolate_int(
    samples,
    out_samples: int,
    kernel_type: KernelSelector = KernelType.NONE,
) -> np.ndarray:
    """Resample an integer sequence, rounding results to integers.

    The input is converted to ``float64`` once, resampled with
    :func:`interpolate`, and rounded half away from zero.

    Parameters
    ----------
    samples : array_like of int
        Input samples, shape ``(N,)``. Float arrays are accepted when
        every value is integral.
    out_samples : int
        Requested output length, >= 0.
    kernel_type : KernelType or str
        Resampling method. Default is ``KernelType.NONE``.

    Returns
    -------
    np.ndarray
        ``int64`` array of length ``out_samples`` (``N`` for ``NONE``,
        0 for empty input).

    Raises
    ------
    ValidationError
        For invalid arguments (see :func:`interpolate`) or non-integral
        input values.
    """
    KernelType.resolve(kernel_type)
    m = check_out_samples(out_samples)
    x = np.asarray(samples)
    if x.ndim != 1:
        raise ValidationError(
            f"samples must be 1-D, got array with shape {x.shape}"
        )
    if x.size == 0:
        return np.zeros(0, dtype=np.int64)

    y = x.astype(np.float64)
    if not np.issubdtype(x.dtype, np.integer):
        if not np.all(np.isfinite(y)) or np.any(y != np.round(y)):
            raise ValidationError("samples must contain only integers")

    return round_half_away(interpolate(y, m, kernel_type)).astype(np.int64)
