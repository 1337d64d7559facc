"""Deterministic assertion helpers with informative failure diagnostics."""

from assertkit.errors import AssertionFailure, ResultAssertionFailure, UnsupportedConversion

__version__ = "0.1.0"

__all__ = ["AssertionFailure", "ResultAssertionFailure", "UnsupportedConversion", "__version__"]
