# -*- coding: utf-8 -*-
"""
Uniresample Exception Hierarchy - Domain-specific exceptions for resampling.

Provides a small exception hierarchy that lets callers catch resampling
errors distinctly from Python built-in exceptions. All library exceptions
subclass both ``UniresampleError`` and the appropriate built-in exception
so existing ``except ValueError`` handlers keep working.

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


class UniresampleError(Exception):
    """Base exception for all uniresample errors."""


class ValidationError(UniresampleError, ValueError):
    """Invalid input data, parameters, or kernel selector.

    Raised for negative output counts, multi-dimensional sample arrays,
    non-integral values handed to the integer adapter, unknown kernel
    names, and out-of-range kernel parameters.
    """
