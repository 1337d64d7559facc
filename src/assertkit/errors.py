"""Failure signals raised by assertions and by converters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assertkit.diagnostics import Diagnostic


class AssertionFailure(AssertionError):
    """Raised when an asserted property does not hold.

    Attributes:
        message: Human-readable explanation of the mismatch.
        diagnostic: Structured rendering of expected/actual values, when the
            assertion produces one.
    """

    def __init__(self, message: str, diagnostic: Diagnostic | None = None):
        super().__init__(message)
        self.message = message
        self.diagnostic = diagnostic


class ResultAssertionFailure(AssertionFailure):
    """An operation expected to raise returned a value instead."""

    def __init__(self, rendered_result: str):
        super().__init__(f"Result: {rendered_result}")
        self.rendered_result = rendered_result


class ArgumentError(ValueError):
    """A ``ValueError`` naming the offending parameter."""

    def __init__(self, message: str = "", param_name: str | None = None):
        if param_name is not None:
            full = f"{message} (Parameter '{param_name}')" if message else f"Parameter '{param_name}'"
        else:
            full = message
        super().__init__(full)
        self.param_name = param_name


class ArgumentNullError(ArgumentError):
    def __init__(self, param_name: str | None = None, message: str = "Value cannot be null."):
        super().__init__(message, param_name)


class ArgumentOutOfRangeError(ArgumentError):
    def __init__(self, param_name: str | None = None, message: str = "Specified argument was out of the range of valid values."):
        super().__init__(message, param_name)


class UnsupportedConversion(TypeError):
    """A converter was asked to convert from or to a type it does not handle.

    ``direction`` is ``"from"`` or ``"to"``; both share this one exception type.
    """

    def __init__(self, converter: str, direction: str, type_name: str):
        super().__init__(f"{converter} cannot convert {direction} {type_name}.")
        self.converter = converter
        self.direction = direction
        self.type_name = type_name
