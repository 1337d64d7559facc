"""Order-independent (multiset) collection equality."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, TypeVar

from assertkit.errors import AssertionFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EqualityComparer(Generic[T]):
    """Equivalence relation used to match collection items.

    ``equals`` must be consistent with ``hash``: items that are equal must
    hash alike.
    """

    def equals(self, left: T, right: T) -> bool:
        return left == right

    def hash(self, item: T) -> int:
        return hash(item)


class KeyComparer(EqualityComparer[T]):
    """Compare items by a derived, hashable key."""

    def __init__(self, key: Callable[[T], Hashable]):
        self.key = key

    def equals(self, left: T, right: T) -> bool:
        return self.key(left) == self.key(right)

    def hash(self, item: T) -> int:
        return hash(self.key(item))


_DEFAULT_COMPARER: EqualityComparer[Any] = EqualityComparer()
_UNHASHABLE_BUCKET = 0


class _Keyed:
    """Dictionary key that routes hashing and equality through a comparer."""

    __slots__ = ("item", "comparer", "_hash")

    def __init__(self, item: Any, comparer: EqualityComparer[Any]):
        self.item = item
        self.comparer = comparer
        try:
            self._hash = comparer.hash(item)
        except TypeError:
            # Unhashable items share one bucket and are matched through equals().
            self._hash = _UNHASHABLE_BUCKET

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Keyed):
            return NotImplemented
        return self.comparer.equals(self.item, other.item)


@dataclass
class ItemCount:
    """Occurrences of one distinct item in the actual collection."""

    original: int
    remain: int


def collection_equal(
    expected: Iterable[T],
    actual: Iterable[T],
    comparer: EqualityComparer[T] | None = None,
) -> None:
    """Assert that two collections hold the same items with the same multiplicity.

    Order is ignored. On failure the message reports either the differing
    counts, the first expected item missing from ``actual``, or the first item
    that ``actual`` holds too few copies of.
    """
    if comparer is None:
        comparer = _DEFAULT_COMPARER

    counts: dict[_Keyed, ItemCount] = {}
    actual_count = 0
    for item in actual:
        key = _Keyed(item, comparer)
        info = counts.get(key)
        if info is None:
            counts[key] = ItemCount(1, 1)
        else:
            info.original += 1
            info.remain += 1
        actual_count += 1

    expected_items = list(expected)
    if len(expected_items) != actual_count:
        message = f"Expected count: {len(expected_items)}\nActual count: {actual_count}"
        logger.debug(message)
        raise AssertionFailure(message)

    for item in expected_items:
        info = counts.get(_Keyed(item, comparer))
        if info is None:
            message = f"Expected: {item} but not found"
            logger.debug(message)
            raise AssertionFailure(message)
        if info.remain == 0:
            message = (
                "Collections are not equal.\n"
                f"Totally {info.original} {item} in actual collection but expect more {item}"
            )
            logger.debug(message)
            raise AssertionFailure(message)
        info.remain -= 1
