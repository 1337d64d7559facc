"""Runtime variant selection for behaviour that differs between runtimes.

Some operations raise a different exception type, or name a different
parameter, depending on which runtime implementation is active. The variant is
resolved at call time and picks between the two expectations.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

VARIANT_ENV_VAR = "ASSERTKIT_RUNTIME_VARIANT"

T = TypeVar("T")


class RuntimeVariant(str, Enum):
    CURRENT = "current"
    LEGACY = "legacy"


def current_variant() -> RuntimeVariant:
    """Return the active variant from the environment (default ``current``)."""
    raw = os.environ.get(VARIANT_ENV_VAR, RuntimeVariant.CURRENT.value)
    try:
        return RuntimeVariant(raw.strip().lower())
    except ValueError:
        allowed = ", ".join(v.value for v in RuntimeVariant)
        raise ValueError(f"Invalid {VARIANT_ENV_VAR} {raw!r}. Allowed: {allowed}") from None


def resolve_variant(variant: RuntimeVariant | str | None) -> RuntimeVariant:
    if variant is None:
        return current_variant()
    return RuntimeVariant(variant)


@dataclass(frozen=True)
class ExpectedFailure:
    """The exception kind and parameter name one variant is expected to produce.

    ``param_name`` of ``None`` means the parameter name is not checked.
    """

    kind: type[BaseException]
    param_name: str | None = None


def select(variant: RuntimeVariant | str | None, current: T, legacy: T) -> T:
    """Pick the value that belongs to ``variant``."""
    return legacy if resolve_variant(variant) is RuntimeVariant.LEGACY else current
