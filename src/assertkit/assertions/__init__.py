"""Assertion helpers: each returns on success and raises AssertionFailure on mismatch."""

from assertkit.assertions.base import AssertionResult
from assertkit.assertions.collections import EqualityComparer, KeyComparer, collection_equal
from assertkit.assertions.dispatch import evaluate_check
from assertkit.assertions.exceptions import (
    canceled,
    canceled_async,
    throws,
    throws_any,
    throws_async,
    throws_contains,
    throws_if,
    throws_kind_variant,
    throws_message,
    throws_param,
    throws_returning,
    throws_variant,
)
from assertkit.assertions.numeric import equal_with_variance, equals_floating
from assertkit.assertions.ordering import (
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
)
from assertkit.assertions.sequences import (
    array_equal,
    at_least_one_equals,
    contains,
    filled_with,
    sequence_equal,
    set_equal,
    text_equal,
)

__all__ = [
    "AssertionResult",
    "EqualityComparer",
    "KeyComparer",
    "array_equal",
    "at_least_one_equals",
    "canceled",
    "canceled_async",
    "collection_equal",
    "contains",
    "equal_with_variance",
    "equals_floating",
    "evaluate_check",
    "filled_with",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
    "sequence_equal",
    "set_equal",
    "text_equal",
    "throws",
    "throws_any",
    "throws_async",
    "throws_contains",
    "throws_if",
    "throws_kind_variant",
    "throws_message",
    "throws_param",
    "throws_returning",
    "throws_variant",
]
