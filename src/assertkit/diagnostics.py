"""Structured failure diagnostics and value rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

MAX_DIFFS_TO_SHOW = 10
FLOAT_FIELD_WIDTH = 10


@dataclass(frozen=True)
class Difference:
    """A single mismatching position in a sequence comparison."""

    position: int
    expected: Any
    actual: Any

    def render(self) -> str:
        return f"Position {self.position}: Expected: {render_value(self.expected)}, Actual: {render_value(self.actual)}"


@dataclass
class Diagnostic:
    """Rendered expected/actual values attached to an assertion failure.

    Attributes:
        expected: Rendered expected value.
        actual: Rendered actual value.
        differences: Positional differences, never longer than
            ``MAX_DIFFS_TO_SHOW``.
        total_differences: Number of differing positions found overall
            (sequence comparisons only).
        total_length: Length of the compared sequences (sequence
            comparisons only).
    """

    expected: str
    actual: str
    differences: list[Difference] = field(default_factory=list)
    total_differences: int | None = None
    total_length: int | None = None

    def __post_init__(self) -> None:
        if len(self.differences) > MAX_DIFFS_TO_SHOW:
            self.differences = self.differences[:MAX_DIFFS_TO_SHOW]


def add_user_message(message: str, user_message: str | None) -> str:
    if user_message is None:
        return message
    return f"{message} {user_message}"


def render_value(value: Any) -> str:
    """Render a value for a diagnostic line; ``None`` becomes ``null``."""
    if value is None:
        return "null"
    return str(value)


def render_joined(values: Iterable[Any]) -> str:
    return ", ".join(render_value(v) for v in values)


def render_result(value: Any, is_text: bool | None = None) -> str:
    """Render the value returned by an operation that was expected to raise.

    Text results are quoted so that empty and whitespace strings stay visible.
    """
    if value is None:
        return "(null)"
    if is_text is None:
        is_text = isinstance(value, str)
    rendered = str(value)
    if is_text:
        return f'"{rendered}"'
    return rendered


def render_float_padded(value: Any) -> str:
    """Render a floating value left-padded to a fixed width.

    NaN, the infinities and both signed zeros get explicit spellings so that
    they stay distinguishable in aligned output.
    """
    number = float(value)
    if math.isnan(number):
        text = "NaN"
    elif math.isinf(number):
        text = "+∞" if number > 0 else "-∞"
    elif number == 0.0:
        text = "-0.0" if math.copysign(1.0, number) < 0 else "+0.0"
    else:
        text = format(number, ".9G")
    return text.rjust(FLOAT_FIELD_WIDTH)
