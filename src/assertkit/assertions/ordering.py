"""Ordering assertions over totally-ordered values.

``None`` sorts before every non-null value. Two nulls are incomparable for the
strict checks (they fail) and equal for the non-strict ones (they pass).
"""

from __future__ import annotations

import logging
from typing import Any

from assertkit.diagnostics import add_user_message
from assertkit.errors import AssertionFailure

logger = logging.getLogger(__name__)


def _compare(actual: Any, bound: Any) -> int:
    """Three-way compare a non-null ``actual`` against ``bound``."""
    if bound is None:
        return 1
    if actual < bound:
        return -1
    if actual > bound:
        return 1
    return 0


def _fail(message: str, user_message: str | None) -> AssertionFailure:
    full = add_user_message(message, user_message)
    logger.debug(full)
    return AssertionFailure(full)


def greater_than(actual: Any, bound: Any, user_message: str | None = None) -> None:
    """Assert that ``actual`` is strictly greater than ``bound``."""
    if actual is None:
        if bound is None:
            raise _fail("Expected: <null> to be greater than <null>.", user_message)
        raise _fail(f"Expected: <null> to be greater than {bound}.", user_message)

    if _compare(actual, bound) <= 0:
        raise _fail(f"Expected: {actual} to be greater than {bound}", user_message)


def less_than(actual: Any, bound: Any, user_message: str | None = None) -> None:
    """Assert that ``actual`` is strictly less than ``bound``."""
    if actual is None:
        if bound is None:
            raise _fail("Expected: <null> to be less than <null>.", user_message)
        return

    if _compare(actual, bound) >= 0:
        raise _fail(f"Expected: {actual} to be less than {bound}", user_message)


def less_than_or_equal(actual: Any, bound: Any, user_message: str | None = None) -> None:
    """Assert that ``actual`` is less than or equal to ``bound``."""
    if actual is None:
        return

    if _compare(actual, bound) > 0:
        raise _fail(f"Expected: {actual} to be less than or equal to {bound}", user_message)


def greater_than_or_equal(actual: Any, bound: Any, user_message: str | None = None) -> None:
    """Assert that ``actual`` is greater than or equal to ``bound``."""
    if actual is None:
        if bound is None:
            return
        raise _fail(f"Expected: <null> to be greater than or equal to {bound}.", user_message)

    if _compare(actual, bound) < 0:
        raise _fail(f"Expected: {actual} to be greater than or equal to {bound}", user_message)
