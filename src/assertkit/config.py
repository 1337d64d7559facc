from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from assertkit.culture import Culture


class SequencePair(BaseModel):
    model_config = ConfigDict(extra="forbid")
    expected: list[Any]
    actual: list[Any]


class CollectionPair(SequencePair):
    ignore_case: bool = False


class SequenceEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sequence_equal: SequencePair
    weight: float = 1.0


class CollectionEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    collection_equal: CollectionPair
    weight: float = 1.0


class VarianceSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    expected: float
    actual: float
    variance: float = Field(default=0.0, ge=0.0)


class EqualWithVarianceCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    equal_with_variance: VarianceSpec
    weight: float = 1.0


class OrderingSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    actual: Any = None
    bound: Any = None
    message: str | None = None


class GreaterThanCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    greater_than: OrderingSpec
    weight: float = 1.0


class LessThanCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    less_than: OrderingSpec
    weight: float = 1.0


class LessThanOrEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    less_than_or_equal: OrderingSpec
    weight: float = 1.0


class GreaterThanOrEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    greater_than_or_equal: OrderingSpec
    weight: float = 1.0


class ContainsSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    value: str | None
    substring: str | None


class ContainsCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    contains: ContainsSpec
    weight: float = 1.0


class TextPair(BaseModel):
    model_config = ConfigDict(extra="forbid")
    expected: str | None
    actual: str | None


class TextEqualCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    text_equal: TextPair
    weight: float = 1.0


Check = (
    SequenceEqualCheck
    | CollectionEqualCheck
    | EqualWithVarianceCheck
    | GreaterThanCheck
    | LessThanCheck
    | LessThanOrEqualCheck
    | GreaterThanOrEqualCheck
    | ContainsCheck
    | TextEqualCheck
)


class CaseConfig(BaseModel):
    name: str
    checks: list[Check]

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[Check]) -> list[Check]:
        if not v:
            raise ValueError("checks must not be empty")
        return v


class SuiteConfig(BaseModel):
    culture: str | None = None
    cases: list[CaseConfig]

    @field_validator("culture")
    @classmethod
    def normalize_culture(cls, v: str | None) -> str | None:
        if v is None or v == "":
            return None
        return Culture.create_specific(v).name

    @model_validator(mode="after")
    def case_names_must_be_unique(self) -> SuiteConfig:
        if not self.cases:
            raise ValueError("cases must not be empty")
        seen: set[str] = set()
        for case in self.cases:
            if case.name in seen:
                raise ValueError(f"Duplicate case name '{case.name}'")
            seen.add(case.name)
        return self

    def resolved_culture(self) -> Culture:
        if self.culture is None:
            return Culture.invariant()
        return Culture(self.culture)


def load_config(path: Path) -> SuiteConfig:
    """Load and validate a check suite from a YAML file.

    ``${VAR}`` and ``${VAR:-default}`` references in ``culture`` are expanded
    from the environment.
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    culture = raw.get("culture")
    if isinstance(culture, str):
        raw["culture"] = expandvars(culture)

    return SuiteConfig(**raw)
