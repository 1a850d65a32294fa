# -*- coding: utf-8 -*-
"""
Tests for natural cubic, monotonic cubic, and Akima spline resamplers.

Reference results come from ``scipy.interpolate`` where scipy implements
the same construction.

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

# Third-party
import numpy as np
import pytest
from scipy.interpolate import Akima1DInterpolator, CubicSpline

# Uniresample internal
from uniresample.engine import Resampler, sample_positions
from uniresample.splines import (
    AkimaSpline,
    CubicSplineCoefficients,
    HermiteSplineResampler,
    MonotonicCubicSpline,
    NaturalCubicSpline,
    SplineResampler,
    akima_resampler,
    akima_slopes,
    fritsch_carlson_slopes,
    hermite_basis,
    monotonic_cubic_resampler,
    natural_cubic_resampler,
    natural_second_derivatives,
)


SPLINES = [NaturalCubicSpline(), MonotonicCubicSpline(), AkimaSpline()]


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def rough():
    """Irregular test data with 14 knots."""
    rng = np.random.default_rng(1234)
    return rng.normal(size=14)


@pytest.fixture
def monotone():
    """Non-decreasing data with plateaus and sharp steps."""
    return np.array([0.0, 1.0, 1.0, 1.0, 3.0, 10.0, 10.5, 20.0, 20.0, 21.0])


# ── Shared behaviour ────────────────────────────────────────────────────


class TestSplineCommon:
    """Behaviour shared by every spline resampler."""

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_empty(self, spline):
        assert spline([], 7).shape == (0,)

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_single_sample(self, spline):
        np.testing.assert_array_equal(spline([5.0], 3), [5.0, 5.0, 5.0])

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_two_samples_linear(self, spline):
        result = spline([1.0, 3.0], 5)
        np.testing.assert_allclose(result, [1.0, 1.5, 2.0, 2.5, 3.0],
                                   atol=1e-12)

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_passes_through_knots(self, spline, rough):
        n = len(rough)
        result = spline(rough, 2 * n - 1)
        np.testing.assert_allclose(result[::2], rough, atol=1e-12)

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_output_length(self, spline, rough):
        for m in [0, 1, 2, 9, 140]:
            assert len(spline(rough, m)) == m

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_input_not_modified(self, spline, rough):
        before = rough.copy()
        spline(rough, 50)
        np.testing.assert_array_equal(rough, before)

    @pytest.mark.parametrize("spline", SPLINES, ids=lambda s: s.name)
    def test_is_resampler(self, spline):
        assert isinstance(spline, SplineResampler)
        assert isinstance(spline, Resampler)

    def test_hermite_basis_partition(self):
        t = np.linspace(0.0, 1.0, 11)
        h00, _, h01, _ = hermite_basis(t)
        np.testing.assert_allclose(h00 + h01, 1.0, atol=1e-15)

    def test_factories(self):
        assert isinstance(natural_cubic_resampler(), NaturalCubicSpline)
        assert isinstance(monotonic_cubic_resampler(), MonotonicCubicSpline)
        assert isinstance(akima_resampler(), AkimaSpline)
        assert isinstance(akima_resampler(), HermiteSplineResampler)


# ── Natural cubic spline ────────────────────────────────────────────────


class TestNaturalCubicSpline:
    """Test the natural cubic spline against scipy."""

    def test_matches_scipy(self, rough):
        n, m = len(rough), 101
        result = NaturalCubicSpline()(rough, m)
        reference = CubicSpline(np.arange(n), rough, bc_type='natural')
        np.testing.assert_allclose(result, reference(sample_positions(n, m)),
                                   atol=1e-10)

    def test_natural_ends(self, rough):
        m2 = natural_second_derivatives(rough)
        assert m2[0] == 0.0
        assert m2[-1] == 0.0

    def test_three_knots(self):
        # Single interior equation: 4 M1 = 6 (y2 - 2 y1 + y0)
        m2 = natural_second_derivatives(np.array([0.0, 1.0, 0.0]))
        np.testing.assert_allclose(m2, [0.0, -3.0, 0.0])

    def test_coefficients(self):
        y = np.array([0.0, 1.0, 0.0, 2.0])
        coeffs = NaturalCubicSpline().fit(y)
        assert isinstance(coeffs, CubicSplineCoefficients)
        assert coeffs.a.shape == (3,)
        # Each segment ends at the next knot
        ends = coeffs.a + coeffs.b + coeffs.c + coeffs.d
        np.testing.assert_allclose(ends, y[1:], atol=1e-12)

    def test_reproduces_line(self):
        y = 2.0 * np.arange(8) - 1.0
        result = NaturalCubicSpline()(y, 30)
        expected = 2.0 * sample_positions(8, 30) - 1.0
        np.testing.assert_allclose(result, expected, atol=1e-12)


# ── Monotonic cubic ─────────────────────────────────────────────────────


class TestMonotonicCubic:
    """Test the Fritsch-Carlson monotonicity guarantee."""

    @pytest.mark.parametrize("m", [11, 25, 200, 1001])
    def test_monotone_output(self, monotone, m):
        result = MonotonicCubicSpline()(monotone, m)
        assert np.all(np.diff(result) >= -1e-12)

    def test_decreasing_output(self, monotone):
        result = MonotonicCubicSpline()(monotone[::-1], 300)
        assert np.all(np.diff(result) <= 1e-12)

    def test_no_overshoot(self, monotone):
        result = MonotonicCubicSpline()(monotone, 500)
        assert result.min() >= monotone.min() - 1e-12
        assert result.max() <= monotone.max() + 1e-12

    def test_plateau_stays_flat(self, monotone):
        # Knots 1..3 are all 1.0
        n, m = len(monotone), 901
        pos = sample_positions(n, m)
        result = MonotonicCubicSpline()(monotone, m)
        on_plateau = (pos >= 1.0) & (pos <= 3.0)
        np.testing.assert_allclose(result[on_plateau], 1.0, atol=1e-12)

    def test_flat_segment_slopes_zero(self):
        slopes = fritsch_carlson_slopes(np.array([0.0, 2.0, 2.0, 5.0]))
        assert slopes[1] == 0.0
        assert slopes[2] == 0.0

    def test_rescaled_slopes_bounded(self):
        y = np.array([0.0, 0.01, 10.0, 10.01, 10.02])
        slopes = fritsch_carlson_slopes(y)
        delta = np.diff(y)
        for k in range(len(delta)):
            alpha = slopes[k] / delta[k]
            beta = slopes[k + 1] / delta[k]
            assert alpha * alpha + beta * beta <= 9.0 + 1e-9


# ── Akima ───────────────────────────────────────────────────────────────


class TestAkima:
    """Test the Akima spline against scipy and for outlier robustness."""

    def test_matches_scipy(self, rough):
        n, m = len(rough), 97
        result = AkimaSpline()(rough, m)
        reference = Akima1DInterpolator(np.arange(n), rough)
        np.testing.assert_allclose(result, reference(sample_positions(n, m)),
                                   atol=1e-10)

    def test_outlier_stays_local(self):
        y = np.array([0.0, 0.0, 0.0, 0.0, 5.0, 0.0, 0.0, 0.0, 0.0])
        n, m = len(y), 81
        pos = sample_positions(n, m)
        result = AkimaSpline()(y, m)
        far = (pos <= 2.0) | (pos >= 6.0)
        np.testing.assert_array_equal(result[far], 0.0)

    def test_two_knot_slopes_are_secant(self):
        np.testing.assert_array_equal(
            akima_slopes(np.array([1.0, 4.0])), [3.0, 3.0],
        )

    def test_line_slopes(self):
        slopes = akima_slopes(1.5 * np.arange(6))
        np.testing.assert_allclose(slopes, 1.5)

    def test_equal_weights_fall_back_to_mean(self):
        # Constant secants on both sides give zero weights everywhere
        y = np.array([0.0, 1.0, 2.0, 3.0])
        slopes = akima_slopes(y)
        np.testing.assert_allclose(slopes, 1.0)
