# -*- coding: utf-8 -*-
"""
Kernel Base Classes - ABCs for interpolation impulse responses.

Defines the ``Kernel`` ABC (a total, even, compactly supported function
of signed distance) and ``PiecewiseKernel`` (template for kernels given
as a table of closed-form polynomial pieces over the unit intervals
``[k, k+1)`` of ``|x|``).

A kernel also decides which input samples feed an output position. The
default window is anchored at ``floor(pos)`` and spans offsets
``[-(R - 1), R]``, which is exactly the set of integer indices ``j``
with ``|pos - j| < R``.

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
from typing import Callable, Tuple, Union

# Third-party
import numpy as np

# Uniresample internal
from uniresample.exceptions import ValidationError


class Kernel(ABC):
    """Abstract base class for interpolation kernels.

    Kernels are callable with a scalar or an array of signed distances
    (in sample-spacing units) and return the interpolation weight. The
    value depends only on ``|x|`` and is zero for ``|x| >= radius``.

    Parameters
    ----------
    radius : int
        Support radius R. The kernel is zero outside ``(-R, R)``.

    Attributes
    ----------
    name : str
        Short identifier of the kernel family.
    interpolating : bool
        True if ``k(0) == 1`` and ``k(j) == 0`` for every nonzero
        integer ``j``, i.e. resampling at the original positions
        reproduces the input.
    """

    name = 'kernel'
    interpolating = True

    def __init__(self, radius: int) -> None:
        if radius < 1:
            raise ValidationError(f"radius must be >= 1, got {radius}")
        self.radius = radius

    @abstractmethod
    def _evaluate(self, ax: np.ndarray) -> np.ndarray:
        """Evaluate the kernel at absolute distances.

        Parameters
        ----------
        ax : np.ndarray
            Absolute distances, all strictly inside ``[0, radius)``.

        Returns
        -------
        np.ndarray
            Kernel weights, same shape as ``ax``.
        """
        ...

    def __call__(
        self,
        x: Union[float, np.ndarray],
    ) -> Union[float, np.ndarray]:
        """Evaluate the kernel at signed distance(s) ``x``.

        Parameters
        ----------
        x : float or np.ndarray
            Signed distance(s) from the sample index.

        Returns
        -------
        float or np.ndarray
            A float for scalar input, otherwise an array shaped like
            ``x``.
        """
        x = np.asarray(x, dtype=np.float64)
        ax = np.abs(np.atleast_1d(x))
        out = np.zeros(ax.shape, dtype=np.float64)
        inside = ax < self.radius
        if np.any(inside):
            out[inside] = self._evaluate(ax[inside])
        if x.ndim == 0:
            return float(out[0])
        return out

    def window(self, pos: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Anchor indices and tap offsets covering the kernel support.

        Parameters
        ----------
        pos : np.ndarray
            Fractional output positions in input-index space, shape
            ``(M,)``.

        Returns
        -------
        anchor : np.ndarray
            Integer anchor index per output position, shape ``(M,)``.
        offsets : np.ndarray
            Tap offsets relative to the anchor, shape ``(taps,)``.
        """
        anchor = np.floor(pos).astype(np.intp)
        offsets = np.arange(1 - self.radius, self.radius + 1)
        return anchor, offsets

    def __repr__(self) -> str:
        return f"{type(self).__name__}(radius={self.radius})"


PiecewiseFn = Callable[[np.ndarray], np.ndarray]


class PiecewiseKernel(Kernel):
    """Base class for piecewise-polynomial kernels.

    Subclasses set ``pieces`` to a tuple of functions; ``pieces[k]`` is
    the closed form on ``|x|`` in ``[k, k+1)``, written in terms of the
    absolute distance. The support radius equals ``len(pieces)``.
    """

    pieces: Tuple[PiecewiseFn, ...] = ()

    def __init__(self) -> None:
        super().__init__(radius=len(self.pieces))

    def piece(self, k: int, x: Union[float, np.ndarray]) -> np.ndarray:
        """Evaluate polynomial piece ``k`` at absolute distance(s) ``x``.

        The piece is evaluated outside its own interval as well, which
        is what boundary-continuity checks need.
        """
        if not 0 <= k < len(self.pieces):
            raise ValidationError(
                f"piece index must be in [0, {len(self.pieces)}), got {k}"
            )
        return self.pieces[k](np.asarray(x, dtype=np.float64))

    def _evaluate(self, ax: np.ndarray) -> np.ndarray:
        """Select the polynomial piece by integer part of ``|x|``."""
        out = np.empty_like(ax)
        segment = np.floor(ax).astype(np.intp)
        for k, fn in enumerate(self.pieces):
            mask = segment == k
            if np.any(mask):
                out[mask] = fn(ax[mask])
        return out
