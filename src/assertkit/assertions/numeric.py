"""Floating-point equality within a tolerance."""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from assertkit.diagnostics import Diagnostic, render_float_padded
from assertkit.errors import AssertionFailure

logger = logging.getLogger(__name__)


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


def equals_floating(expected: Any, actual: Any, variance: Any) -> bool:
    """Return whether two floating values are equal within ``variance``.

    NaN only equals NaN, and an infinity only equals the infinity of the same
    sign. ``0.0`` and ``-0.0`` compare equal.
    """
    e = _as_float(expected, "expected")
    a = _as_float(actual, "actual")
    v = _as_float(variance, "variance")
    if math.isnan(v) or v < 0:
        raise ValueError(f"variance must be a non-negative number, got {variance!r}")

    if math.isnan(e) or math.isnan(a):
        return math.isnan(e) and math.isnan(a)
    if math.isinf(e) or math.isinf(a):
        return e == a
    return abs(e - a) <= v


def equal_with_variance(expected: Any, actual: Any, variance: Any) -> None:
    """Assert that ``expected`` and ``actual`` differ by at most ``variance``."""
    if equals_floating(expected, actual, variance):
        return

    diagnostic = Diagnostic(
        expected=render_float_padded(expected),
        actual=render_float_padded(actual),
    )
    message = (
        f"Values differ by more than variance {variance}\n"
        f"Expected: {diagnostic.expected}\n"
        f"Actual:   {diagnostic.actual}"
    )
    logger.debug(message)
    raise AssertionFailure(message, diagnostic)
