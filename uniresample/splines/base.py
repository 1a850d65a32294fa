# -*- coding: utf-8 -*-
"""
Spline Base Classes - Whole-sequence spline resamplers.

Splines differ from local kernels in that their coefficients depend on
the entire input. ``SplineResampler`` fits the knots (samples at
``x = 0 .. N-1``) once per call, then evaluates every output position
on its enclosing segment. ``HermiteSplineResampler`` specializes this
for piecewise cubic Hermite curves where only the knot slopes need to
be computed.

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
from abc import abstractmethod
from typing import Any, Tuple

# Third-party
import numpy as np

# Uniresample internal
from uniresample.engine import Resampler, sample_positions


def segment_offsets(pos: np.ndarray, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Enclosing segment index and local offset for each position.

    The last knot belongs to the last segment, so ``pos == n - 1``
    maps to segment ``n - 2`` with offset 1.

    Parameters
    ----------
    pos : np.ndarray
        Positions in ``[0, n - 1]``.
    n : int
        Number of knots, >= 2.

    Returns
    -------
    seg : np.ndarray
        Segment indices in ``[0, n - 2]``.
    t : np.ndarray
        Offsets ``pos - seg`` in ``[0, 1]``.
    """
    seg = np.clip(np.floor(pos).astype(np.intp), 0, n - 2)
    return seg, pos - seg


def hermite_basis(t: np.ndarray) -> Tuple[np.ndarray, ...]:
    """Cubic Hermite basis functions ``h00, h10, h01, h11`` at ``t``."""
    t2 = t * t
    t3 = t2 * t
    h00 = 2.0 * t3 - 3.0 * t2 + 1.0
    h10 = t3 - 2.0 * t2 + t
    h01 = -2.0 * t3 + 3.0 * t2
    h11 = t3 - t2
    return h00, h10, h01, h11


class SplineResampler(Resampler):
    """Base class for whole-sequence spline resamplers.

    Handles empty and single-sample input and the position mapping.
    Subclasses implement :meth:`fit` (run once per call, O(N)) and
    :meth:`_evaluate` (O(1) per output).
    """

    name = 'spline'

    @abstractmethod
    def fit(self, y: np.ndarray) -> Any:
        """Compute the coefficient set for knots ``y`` (``N >= 2``)."""
        ...

    @abstractmethod
    def _evaluate(self, y: np.ndarray, fitted: Any,
                  pos: np.ndarray) -> np.ndarray:
        """Evaluate the fitted spline at positions ``pos``."""
        ...

    def _resample(self, y: np.ndarray, m: int) -> np.ndarray:
        trivial = self._degenerate(y, m)
        if trivial is not None:
            return trivial
        pos = sample_positions(len(y), m)
        return self._evaluate(y, self.fit(y), pos)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HermiteSplineResampler(SplineResampler):
    """Piecewise cubic Hermite spline with data-derived knot slopes.

    Subclasses implement :meth:`fit` returning the slope at every knot,
    shape ``(N,)``. Segment ``k`` is

        y[k] h00(t) + m[k] h10(t) + y[k+1] h01(t) + m[k+1] h11(t)
    """

    def _evaluate(self, y: np.ndarray, fitted: np.ndarray,
                  pos: np.ndarray) -> np.ndarray:
        seg, t = segment_offsets(pos, len(y))
        h00, h10, h01, h11 = hermite_basis(t)
        return (
            h00 * y[seg]
            + h10 * fitted[seg]
            + h01 * y[seg + 1]
            + h11 * fitted[seg + 1]
        )
