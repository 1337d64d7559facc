"""Base data structures for reporting assertion outcomes."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Outcome of evaluating one declared check.

    Attributes:
        name: Identifier for the check (e.g. "sequence_equal[0]").
        passed: Whether the check held.
        message: Failure diagnostic, or a short confirmation on success.
        score: 1.0 when passed, 0.0 otherwise.
        weight: Relative importance of this check for the weighted score.
            Defaults to 1.0 (equal weight).
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
    weight: float = 1.0
