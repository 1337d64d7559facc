"""Evaluate declared checks into pass/fail results."""

from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import BaseModel

from assertkit.assertions.base import AssertionResult
from assertkit.assertions.collections import KeyComparer, collection_equal
from assertkit.assertions.numeric import equal_with_variance
from assertkit.assertions.ordering import (
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
)
from assertkit.assertions.sequences import contains, sequence_equal, text_equal
from assertkit.errors import AssertionFailure

_ORDERING: dict[str, Callable[..., None]] = {
    "greater_than": greater_than,
    "less_than": less_than,
    "less_than_or_equal": less_than_or_equal,
    "greater_than_or_equal": greater_than_or_equal,
}


def _casefold(item: Any) -> Any:
    return item.casefold() if isinstance(item, str) else item


_CHECK_TYPES = frozenset(
    {"sequence_equal", "collection_equal", "equal_with_variance", "contains", "text_equal", *_ORDERING}
)


def _run_check(ctype: str, value: dict[str, Any]) -> None:
    if ctype == "sequence_equal":
        sequence_equal(value["expected"], value["actual"])
    elif ctype == "collection_equal":
        comparer = KeyComparer(_casefold) if value.get("ignore_case") else None
        collection_equal(value["expected"], value["actual"], comparer)
    elif ctype == "equal_with_variance":
        equal_with_variance(value["expected"], value["actual"], value.get("variance", 0.0))
    elif ctype in _ORDERING:
        _ORDERING[ctype](value.get("actual"), value.get("bound"), value.get("message"))
    elif ctype == "contains":
        contains(value["value"], value["substring"])
    elif ctype == "text_equal":
        text_equal(value["expected"], value["actual"])


def check_type(check: dict[str, Any] | BaseModel) -> str:
    """Return the check's type key, e.g. ``sequence_equal``."""
    keys = type(check).model_fields if isinstance(check, BaseModel) else check
    return next(k for k in keys if k != "weight")


def evaluate_check(
    check: dict[str, Any] | BaseModel,
    *,
    name: str | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Dispatch a check dict to the matching assertion.

    Supported formats:
        {"sequence_equal": {"expected": [...], "actual": [...]}}
        {"collection_equal": {"expected": [...], "actual": [...], "ignore_case": false}}
        {"equal_with_variance": {"expected": 1.0, "actual": 1.1, "variance": 0.2}}
        {"greater_than": {"actual": 3, "bound": 2, "message": "..."}}
        {"contains": {"value": "haystack", "substring": "hay"}}
        {"text_equal": {"expected": "a", "actual": "a"}}

    All check types support an optional ``weight`` field (default 1.0).
    An assertion failure becomes a failed result, and so does a TypeError or
    ValueError raised while comparing the values. An unknown check type
    raises ValueError.
    """
    if not check:
        raise ValueError("Empty check dict")

    if isinstance(check, BaseModel):
        check = check.model_dump()

    if logger is None:
        logger = logging.getLogger(__name__)

    weight = check.get("weight", 1.0)
    ctype = check_type(check)
    if ctype not in _CHECK_TYPES:
        raise ValueError(f"Unknown check type: '{ctype}'")
    value = check[ctype]
    name = name or ctype

    logger.info(f"Evaluating {name}")
    try:
        _run_check(ctype, value)
    except AssertionFailure as exc:
        logger.info(f"{name} failed: {exc.message}")
        return AssertionResult(name=name, passed=False, message=exc.message, score=0.0, weight=weight)
    except (TypeError, ValueError) as e:
        logger.error(f"{name} could not be evaluated: {e}")
        return AssertionResult(
            name=name, passed=False, message=f"error evaluating {name}: {e}", score=0.0, weight=weight
        )

    logger.info(f"{name} passed")
    return AssertionResult(name=name, passed=True, message="passed", score=1.0, weight=weight)
