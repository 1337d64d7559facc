"""Ordered sequence, set and text equality assertions."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Sequence

import numpy as np

from assertkit.diagnostics import (
    MAX_DIFFS_TO_SHOW,
    Diagnostic,
    Difference,
    render_joined,
    render_value,
)
from assertkit.errors import AssertionFailure

logger = logging.getLogger(__name__)


def _is_array(value: Any) -> bool:
    return isinstance(value, np.ndarray)


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def _items_equal(expected: Any, actual: Any) -> bool:
    """Element equality where NaN equals NaN."""
    return expected == actual or (_is_nan(expected) and _is_nan(actual))


def _whole_sequence_equal(expected: Sequence[Any], actual: Sequence[Any]) -> bool:
    if _is_array(expected) or _is_array(actual):
        expected_arr, actual_arr = np.asarray(expected), np.asarray(actual)
        equal_nan = expected_arr.dtype.kind in "fc" and actual_arr.dtype.kind in "fc"
        return bool(np.array_equal(expected_arr, actual_arr, equal_nan=equal_nan))
    if type(expected) is type(actual) and expected == actual:
        return True
    expected_items, actual_items = list(expected), list(actual)
    return len(expected_items) == len(actual_items) and all(map(_items_equal, expected_items, actual_items))


def _fail(message: str, diagnostic: Diagnostic | None = None) -> AssertionFailure:
    logger.debug(message)
    return AssertionFailure(message, diagnostic)


def sequence_equal(expected: Sequence[Any], actual: Sequence[Any]) -> None:
    """Assert that two ordered sequences hold equal elements at every position.

    The whole-sequence comparison runs first. Positions are only tracked once
    that fails; the message lists at most ``MAX_DIFFS_TO_SHOW`` of them plus
    the total count.
    """
    if _whole_sequence_equal(expected, actual):
        return

    if _is_array(expected) or _is_array(actual):
        expected, actual = np.asarray(expected), np.asarray(actual)
        if expected.shape != actual.shape and expected.size == actual.size:
            diagnostic = Diagnostic(
                expected=f"Span of shape {expected.shape}",
                actual=f"Span of shape {actual.shape}",
            )
            raise _fail(f"Expected: {diagnostic.expected}\nActual: {diagnostic.actual}", diagnostic)
        expected = expected.ravel()
        actual = actual.ravel()

    if len(expected) != len(actual):
        diagnostic = Diagnostic(
            expected=f"Span of length {len(expected)}",
            actual=f"Span of length {len(actual)}",
        )
        raise _fail(f"Expected: {diagnostic.expected}\nActual: {diagnostic.actual}", diagnostic)

    differences: list[Difference] = []
    diff_count = 0
    for i, (e, a) in enumerate(zip(expected, actual)):
        if not _items_equal(e, a):
            diff_count += 1
            if diff_count <= MAX_DIFFS_TO_SHOW:
                differences.append(Difference(i, e, a))

    if diff_count == 0:
        return

    lines = [f"Showing first {MAX_DIFFS_TO_SHOW} differences"]
    lines.extend(f"  {d.render()}" for d in differences)
    lines.append(f"Total number of differences: {diff_count} out of {len(expected)}")

    diagnostic = Diagnostic(
        expected=render_joined(expected),
        actual=render_joined(actual),
        differences=differences,
        total_differences=diff_count,
        total_length=len(expected),
    )
    raise _fail("\n".join(lines), diagnostic)


def array_equal(expected: Sequence[Any], actual: Sequence[Any]) -> None:
    """Assert sequence equality, rendering both sides in full on failure.

    Prefer :func:`sequence_equal` for long inputs; it reports where they differ.
    """
    if _whole_sequence_equal(expected, actual):
        return
    diagnostic = Diagnostic(expected=render_joined(expected), actual=render_joined(actual))
    raise _fail(
        f"Values differ\nExpected: {diagnostic.expected}\nActual:   {diagnostic.actual}",
        diagnostic,
    )


def set_equal(expected: Iterable[Any], actual: Iterable[Any]) -> None:
    """Assert that two sets contain the same elements, rendering both in full."""
    expected_set = set(expected)
    actual_set = set(actual)
    if expected_set == actual_set:
        return
    diagnostic = Diagnostic(expected=render_joined(expected_set), actual=render_joined(actual_set))
    raise _fail(f"Expected: {diagnostic.expected}\nActual: {diagnostic.actual}", diagnostic)


def filled_with(expected: Any, actual: Iterable[Any]) -> None:
    """Assert that every element of ``actual`` equals ``expected``."""
    for i, item in enumerate(actual):
        if item != expected:
            raise _fail(f"Expected {render_value(expected)} at position {i}; actual {render_value(item)}")


def at_least_one_equals(expected1: Any, expected2: Any, value: Any) -> None:
    """Assert that ``value`` equals one of two accepted values."""
    if value == expected1 or value == expected2:
        return
    raise _fail(f"Expected: {expected1} || {expected2}\nActual: {value}")


def _first_mismatch(expected: str, actual: str) -> int:
    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            return i
    return min(len(expected), len(actual))


def text_equal(expected: str | None, actual: str | None) -> None:
    """Assert string equality, logging the entire content of both on failure."""
    if expected == actual:
        return

    if expected is None or actual is None:
        headline = "Strings differ"
    else:
        headline = f"Strings differ at index {_first_mismatch(expected, actual)}"

    diagnostic = Diagnostic(expected=render_value(expected), actual=render_value(actual))
    raise _fail(
        f"{headline}\n\nExpected:\n{diagnostic.expected}\n\nActual:\n{diagnostic.actual}\n",
        diagnostic,
    )


def contains(value: str | None, substring: str | None) -> None:
    """Assert that ``value`` contains ``substring`` (ordinal comparison).

    Fails when either argument is ``None``.
    """
    if value is None:
        raise _fail("Expected: a string value\nActual: null")
    if substring is None:
        raise _fail("Expected: a substring to search for\nActual: null")
    if substring not in value:
        raise _fail(f"Sub-string not found\nString:     {value!r}\nNot found:  {substring!r}")
