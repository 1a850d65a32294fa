# -*- coding: utf-8 -*-
"""
Tests for position mapping and windowed kernel convolution.

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

# Uniresample internal
from uniresample.engine import (
    IdentityResampler,
    KernelResampler,
    Resampler,
    kernel_resampler,
    sample_positions,
)
from uniresample.exceptions import ValidationError
from uniresample.kernels import (
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
)


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def ramp():
    """Linear ramp with 20 samples."""
    return np.arange(20, dtype=np.float64) * 0.75 - 3.0


# ── Position mapping ────────────────────────────────────────────────────


class TestSamplePositions:
    """Test the output-to-input position mapping."""

    def test_stretch(self):
        np.testing.assert_array_equal(sample_positions(5, 3), [0.0, 2.0, 4.0])

    def test_upsample(self):
        np.testing.assert_allclose(
            sample_positions(3, 5), [0.0, 0.5, 1.0, 1.5, 2.0],
        )

    def test_single_output_maps_to_zero(self):
        np.testing.assert_array_equal(sample_positions(10, 1), [0.0])

    def test_no_outputs(self):
        assert sample_positions(10, 0).shape == (0,)

    @pytest.mark.parametrize("n, m", [(2, 2), (7, 3), (13, 101), (100, 7)])
    def test_endpoints_exact(self, n, m):
        pos = sample_positions(n, m)
        assert pos[0] == 0.0
        assert pos[-1] == float(n - 1)

    def test_empty_input_rejected(self):
        with pytest.raises(ValidationError):
            sample_positions(0, 5)

    def test_negative_output_rejected(self):
        with pytest.raises(ValidationError):
            sample_positions(5, -1)


# ── Convolution ─────────────────────────────────────────────────────────


class TestKernelResampler:
    """Test windowed convolution with local kernels."""

    def test_linear_upsample(self):
        result = KernelResampler(LinearKernel())([0.0, 2.0, 4.0], 5)
        np.testing.assert_allclose(result, [0.0, 1.0, 2.0, 3.0, 4.0],
                                   atol=1e-9)

    def test_output_length(self):
        resample = KernelResampler(Hermite4Kernel())
        y = np.sin(np.linspace(0, 3, 11))
        for m in [1, 2, 10, 11, 57]:
            assert len(resample(y, m)) == m

    def test_drop_sample_nearest(self):
        result = KernelResampler(DropSampleKernel())([0.0, 10.0], 5)
        np.testing.assert_array_equal(result, [0.0, 0.0, 10.0, 10.0, 10.0])

    def test_drop_sample_same_length(self):
        y = [1.0, 2.0, 3.0, 4.0]
        result = KernelResampler(DropSampleKernel())(y, 4)
        np.testing.assert_array_equal(result, y)

    @pytest.mark.parametrize("kernel", [
        BSpline3Kernel(), BSpline5Kernel(), Hermite4Kernel(),
        Lagrange6Kernel(), Osculating6Kernel(),
    ], ids=lambda k: k.name)
    def test_constant_preserved_at_edges(self, kernel):
        """Clamped taps repeat the boundary sample, so edges don't fade."""
        y = np.full(6, 3.0)
        result = KernelResampler(kernel)(y, 31)
        np.testing.assert_allclose(result, 3.0, atol=1e-12)

    @pytest.mark.parametrize("kernel", [
        LinearKernel(), Lagrange4Kernel(), Lagrange6Kernel(),
        Osculating4Kernel(), Osculating6Kernel(), Hermite4Kernel(),
        Hermite6_3Kernel(), Hermite6_5Kernel(),
    ], ids=lambda k: k.name)
    def test_ramp_reproduced_in_interior(self, kernel, ramp):
        n, m = len(ramp), 77
        pos = sample_positions(n, m)
        result = KernelResampler(kernel)(ramp, m)
        interior = (pos >= kernel.radius - 1) & (pos <= n - 1 - kernel.radius)
        expected = pos * 0.75 - 3.0
        np.testing.assert_allclose(result[interior], expected[interior],
                                   atol=1e-10)

    def test_lagrange6_reproduces_quintic(self):
        x = np.arange(16, dtype=np.float64)
        poly = np.poly1d([1e-3, -2e-2, 0.1, -0.5, 2.0, 1.0])
        m = 61
        pos = sample_positions(16, m)
        result = KernelResampler(Lagrange6Kernel())(poly(x), m)
        interior = (pos >= 2) & (pos <= 12)
        np.testing.assert_allclose(result[interior], poly(pos[interior]),
                                   rtol=1e-9, atol=1e-9)

    def test_input_not_modified(self):
        y = np.array([1.0, -2.0, 3.5, 0.0])
        before = y.copy()
        KernelResampler(Hermite4Kernel())(y, 9)
        np.testing.assert_array_equal(y, before)

    def test_empty_input(self):
        assert KernelResampler(LinearKernel())([], 5).shape == (0,)

    def test_single_sample(self):
        result = KernelResampler(BSpline5Kernel())([5.0], 3)
        np.testing.assert_array_equal(result, [5.0, 5.0, 5.0])

    def test_zero_outputs(self):
        assert KernelResampler(LinearKernel())([1.0, 2.0], 0).shape == (0,)

    def test_rejects_non_kernel(self):
        with pytest.raises(ValidationError):
            KernelResampler(lambda x: x)

    def test_factory(self):
        resampler = kernel_resampler(LinearKernel(), normalize=True)
        assert isinstance(resampler, KernelResampler)
        assert resampler.normalize


# ── Normalization ───────────────────────────────────────────────────────


class TestNormalization:
    """Test per-output weight normalization for windowed sinc."""

    def test_lanczos_normalized_preserves_dc(self):
        y = np.full(12, -4.25)
        result = KernelResampler(LanczosKernel(a=3), normalize=True)(y, 40)
        np.testing.assert_allclose(result, -4.25, atol=1e-12)

    def test_lanczos_unnormalized_ripples(self):
        y = np.ones(12)
        result = KernelResampler(LanczosKernel(a=3))(y, 40)
        assert np.max(np.abs(result - 1.0)) > 1e-6

    def test_lanczos_passes_through_samples(self):
        y = np.sin(np.linspace(0, 4, 9))
        result = KernelResampler(LanczosKernel(a=2), normalize=True)(y, 17)
        np.testing.assert_allclose(result[::2], y, atol=1e-12)


# ── Validation ──────────────────────────────────────────────────────────


class TestValidation:
    """Test argument validation shared by all resamplers."""

    def test_negative_count(self):
        with pytest.raises(ValidationError, match="out_samples must be >= 0"):
            KernelResampler(LinearKernel())([1.0, 2.0], -1)

    def test_non_integer_count(self):
        with pytest.raises(ValidationError):
            KernelResampler(LinearKernel())([1.0, 2.0], 2.5)

    def test_bool_count(self):
        with pytest.raises(ValidationError):
            KernelResampler(LinearKernel())([1.0, 2.0], True)

    def test_numpy_integer_count(self):
        result = KernelResampler(LinearKernel())([1.0, 2.0], np.int32(3))
        np.testing.assert_allclose(result, [1.0, 1.5, 2.0])

    def test_two_dimensional_rejected(self):
        with pytest.raises(ValidationError, match="1-D"):
            KernelResampler(LinearKernel())(np.ones((2, 3)), 4)


# ── ABC ─────────────────────────────────────────────────────────────────


class TestABC:
    """Test abstract base class contracts."""

    def test_cannot_instantiate_resampler(self):
        with pytest.raises(TypeError):
            Resampler()

    def test_kernel_resampler_is_resampler(self):
        assert isinstance(KernelResampler(LinearKernel()), Resampler)

    def test_identity_copies(self):
        y = np.array([1.0, 2.0, 3.0])
        result = IdentityResampler()(y, 10)
        np.testing.assert_array_equal(result, y)
        result[0] = 99.0
        assert y[0] == 1.0
