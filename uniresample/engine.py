# -*- coding: utf-8 -*-
"""
Resampling Engine - Position mapping and windowed kernel convolution.

Defines the ``Resampler`` ABC (callable interface
``(samples, out_samples) -> resampled``), the output-to-input position
mapping shared by every method, ``KernelResampler`` (applies a local
kernel by windowed convolution) and ``IdentityResampler``.

Position mapping stretches the output grid over the input grid so the
first and last outputs land exactly on the first and last inputs:

    pos(i) = i * (n - 1) / (m - 1)        m > 1
    pos(i) = 0                            m <= 1

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
from abc import ABC, abstractmethod
from typing import Optional

# Third-party
import numpy as np

# Uniresample internal
from uniresample.exceptions import ValidationError
from uniresample.kernels.base import Kernel


def as_samples(samples) -> np.ndarray:
    """Convert a 1-D sample sequence to a float64 array.

    Parameters
    ----------
    samples : array_like
        Uniformly spaced samples, shape ``(N,)``.

    Returns
    -------
    np.ndarray
        Samples as ``float64``. May share memory with ``samples``;
        callers must not write to it.

    Raises
    ------
    ValidationError
        If ``samples`` is not one-dimensional.
    """
    y = np.asarray(samples, dtype=np.float64)
    if y.ndim != 1:
        raise ValidationError(
            f"samples must be 1-D, got array with shape {y.shape}"
        )
    return y


def check_out_samples(out_samples) -> int:
    """Validate a requested output length.

    Raises
    ------
    ValidationError
        If ``out_samples`` is not a non-negative integer.
    """
    if isinstance(out_samples, (bool, np.bool_)) or not isinstance(
        out_samples, (int, np.integer)
    ):
        raise ValidationError(
            f"out_samples must be an integer, got {out_samples!r}"
        )
    if out_samples < 0:
        raise ValidationError(
            f"out_samples must be >= 0, got {out_samples}"
        )
    return int(out_samples)


def sample_positions(n_in: int, n_out: int) -> np.ndarray:
    """Fractional input-index position of every output sample.

    Parameters
    ----------
    n_in : int
        Input length. Must be >= 1.
    n_out : int
        Output length. Must be >= 0.

    Returns
    -------
    np.ndarray
        Positions, shape ``(n_out,)``. ``pos[0] == 0`` and, when
        ``n_out > 1``, ``pos[-1] == n_in - 1`` exactly.
    """
    if n_in < 1:
        raise ValidationError(f"n_in must be >= 1, got {n_in}")
    n_out = check_out_samples(n_out)
    if n_out <= 1:
        return np.zeros(n_out, dtype=np.float64)
    # Multiply before dividing so integer positions come out exact.
    return np.arange(n_out, dtype=np.float64) * (n_in - 1) / (n_out - 1)


class Resampler(ABC):
    """Abstract base class for 1D uniform-grid resamplers.

    All resamplers are callable with signature
    ``(samples, out_samples) -> resampled`` and never modify or alias
    ``samples``.

    Parameters
    ----------
    samples : array_like
        Uniformly spaced input samples, shape ``(N,)``.
    out_samples : int
        Requested output length M >= 0.

    Returns
    -------
    np.ndarray
        Newly allocated ``float64`` array, shape ``(M,)`` (``(0,)`` for
        empty input).
    """

    def __call__(self, samples, out_samples: int) -> np.ndarray:
        """Resample ``samples`` to ``out_samples`` points."""
        y = as_samples(samples)
        m = check_out_samples(out_samples)
        return self._resample(y, m)

    @abstractmethod
    def _resample(self, y: np.ndarray, m: int) -> np.ndarray:
        """Resample validated samples ``y`` to ``m`` points."""
        ...

    @staticmethod
    def _degenerate(y: np.ndarray, m: int) -> Optional[np.ndarray]:
        """Result for empty or single-sample input, else None."""
        if len(y) == 0:
            return np.zeros(0, dtype=np.float64)
        if len(y) == 1:
            return np.full(m, y[0], dtype=np.float64)
        return None


class IdentityResampler(Resampler):
    """Return a copy of the input, ignoring ``out_samples``."""

    def _resample(self, y: np.ndarray, m: int) -> np.ndarray:
        return np.array(y, dtype=np.float64, copy=True)

    def __repr__(self) -> str:
        return "IdentityResampler()"


class KernelResampler(Resampler):
    """Resample by windowed convolution with a local kernel.

    For each output position the kernel chooses its tap window (see
    :meth:`Kernel.window`), weights are evaluated at the signed
    distances from the position to each tap, and the weighted taps are
    summed. Taps beyond either end repeat the boundary sample, so no
    energy is lost at the edges. Work is O(M * R).

    Parameters
    ----------
    kernel : Kernel
        Impulse response to apply.
    normalize : bool
        If True, scale each output's weights to sum to one. Needed for
        kernels that are not a partition of unity (windowed sinc) to
        preserve DC level. Default is False.

    Examples
    --------
    >>> from uniresample.kernels import LinearKernel
    >>> KernelResampler(LinearKernel())([0.0, 2.0, 4.0], 5)
    array([0., 1., 2., 3., 4.])
    """

    def __init__(self, kernel: Kernel, normalize: bool = False) -> None:
        if not isinstance(kernel, Kernel):
            raise ValidationError(
                f"kernel must be a Kernel, got {type(kernel).__name__}"
            )
        self.kernel = kernel
        self.normalize = normalize

    def _resample(self, y: np.ndarray, m: int) -> np.ndarray:
        trivial = self._degenerate(y, m)
        if trivial is not None:
            return trivial

        n = len(y)
        pos = sample_positions(n, m)

        # Neighbor index matrix: (M, taps)
        anchor, offsets = self.kernel.window(pos)
        neighbor_idx = anchor[:, np.newaxis] + offsets[np.newaxis, :]

        # Weights use the unclamped distances
        weights = self.kernel(pos[:, np.newaxis] - neighbor_idx)

        if self.normalize:
            row_sums = np.sum(weights, axis=1, keepdims=True)
            row_sums = np.where(np.abs(row_sums) < 1e-15, 1.0, row_sums)
            weights = weights / row_sums

        # Clamp to valid range (edge samples repeat)
        y_neighbors = y[np.clip(neighbor_idx, 0, n - 1)]

        return np.sum(weights * y_neighbors, axis=1)

    def __repr__(self) -> str:
        return (
            f"KernelResampler({self.kernel!r}, normalize={self.normalize})"
        )


def kernel_resampler(
    kernel: Kernel,
    normalize: bool = False,
) -> KernelResampler:
    """Create a kernel resampler.

    Convenience factory function. See :class:`KernelResampler` for full
    documentation.

    Parameters
    ----------
    kernel : Kernel
        Impulse response to apply.
    normalize : bool
        Normalize weights per output. Default is False.

    Returns
    -------
    KernelResampler
        Callable resampler.
    """
    return KernelResampler(kernel, normalize=normalize)
