"""Ambient culture and a scope that swaps it temporarily.

The ambient culture lives in context variables, so each thread and each
asyncio task sees its own value.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

T = TypeVar("T")

_NAME_RE = re.compile(r"^[a-z]{2,3}(-[A-Z]{2})?$")


@dataclass(frozen=True)
class Culture:
    """A named culture such as ``fr-FR``; the invariant culture has an empty name."""

    name: str = ""

    def __post_init__(self) -> None:
        if self.name and not _NAME_RE.match(self.name):
            raise ValueError(f"Invalid culture name: {self.name!r}")

    @classmethod
    def invariant(cls) -> Culture:
        return cls("")

    @classmethod
    def create_specific(cls, name: str) -> Culture:
        language, _, region = name.replace("_", "-").partition("-")
        normalized = language.lower() + (f"-{region.upper()}" if region else "")
        return cls(normalized)

    @property
    def is_invariant(self) -> bool:
        return not self.name

    def __str__(self) -> str:
        return self.name or "(invariant)"


INVARIANT = Culture.invariant()

_culture: ContextVar[Culture] = ContextVar("assertkit_culture", default=INVARIANT)
_ui_culture: ContextVar[Culture] = ContextVar("assertkit_ui_culture", default=INVARIANT)


def current_culture() -> Culture:
    return _culture.get()


def current_ui_culture() -> Culture:
    return _ui_culture.get()


@contextmanager
def culture_scope(culture: Culture | str, ui_culture: Culture | str | None = None) -> Iterator[Culture]:
    """Set the ambient culture (and optionally UI culture) for the ``with`` block.

    Both are restored on every exit path, including exceptions.
    """
    if isinstance(culture, str):
        culture = Culture.create_specific(culture)
    if isinstance(ui_culture, str):
        ui_culture = Culture.create_specific(ui_culture)

    culture_token = _culture.set(culture)
    ui_token = _ui_culture.set(ui_culture) if ui_culture is not None else None
    try:
        yield culture
    finally:
        if ui_token is not None:
            _ui_culture.reset(ui_token)
        _culture.reset(culture_token)


def with_culture(culture: Culture | str, fn: Callable[[], T]) -> T:
    """Run ``fn`` under ``culture`` and return its result."""
    with culture_scope(culture):
        return fn()
