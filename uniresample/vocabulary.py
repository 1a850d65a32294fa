# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical kernel selector enum for uniresample.

Defines the single source of truth for the closed set of resampling
methods. Every member maps to exactly one resampler in
:mod:`uniresample.dispatch`; ``NONE`` is the identity escape hatch that
returns a copy of the input unchanged.

Author
------
Steven Siebert

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

from enum import Enum
from typing import Union

from uniresample.exceptions import ValidationError


class KernelType(Enum):
    """Supported resampling kernels.

    Local kernels are applied by windowed convolution; ``CUBIC_SPLINE``,
    ``MONOTONIC_CUBIC`` and ``AKIMA`` fit the whole sequence once per
    call before evaluating.
    """

    NONE = "none"
    DROP_SAMPLE = "drop_sample"
    LINEAR = "linear"
    BSPLINE3 = "bspline3"
    BSPLINE5 = "bspline5"
    LAGRANGE4 = "lagrange4"
    LAGRANGE6 = "lagrange6"
    WATTE = "watte"
    PARABOLIC2X = "parabolic2x"
    OSCULATING4 = "osculating4"
    OSCULATING6 = "osculating6"
    HERMITE4 = "hermite4"
    HERMITE6_3 = "hermite6_3"
    HERMITE6_5 = "hermite6_5"
    CUBIC_SPLINE = "cubic_spline"
    MONOTONIC_CUBIC = "monotonic_cubic"
    LANCZOS2 = "lanczos2"
    LANCZOS3 = "lanczos3"
    BEZIER = "bezier"
    AKIMA = "akima"

    @classmethod
    def resolve(cls, kernel_type: Union['KernelType', str]) -> 'KernelType':
        """Coerce a member, value, or name into a ``KernelType``.

        Strings are matched case-insensitively against member values and
        names, so ``"hermite6_3"``, ``"HERMITE6_3"`` and
        ``KernelType.HERMITE6_3`` are equivalent.

        Raises
        ------
        ValidationError
            If ``kernel_type`` names no member.
        """
        if isinstance(kernel_type, cls):
            return kernel_type
        if isinstance(kernel_type, str):
            key = kernel_type.strip().lower()
            for member in cls:
                if key == member.value or key == member.name.lower():
                    return member
        raise ValidationError(
            f"Unknown kernel type {kernel_type!r}. Valid options: "
            f"{[m.value for m in cls]}"
        )
