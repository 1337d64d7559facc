"""Generate JSON Schema and docs for the check suite YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from assertkit.config import SuiteConfig

_CHECK_MODELS = [
    "SequenceEqualCheck",
    "CollectionEqualCheck",
    "EqualWithVarianceCheck",
    "GreaterThanCheck",
    "LessThanCheck",
    "LessThanOrEqualCheck",
    "GreaterThanOrEqualCheck",
    "ContainsCheck",
    "TextEqualCheck",
]


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return SuiteConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")


def _spec_fields(defs: dict, prop: dict) -> list[str]:
    ref = prop.get("$ref", "")
    spec = defs.get(ref.removeprefix("#/$defs/"), {})
    return list(spec.get("properties", {}).keys())


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})

    lines: list[str] = [
        "# assertkit suite YAML Schema",
        "",
        "This doc is generated from the Pydantic models.",
        "",
        "## Top-level keys",
        "- `culture`: string (optional) - culture name such as `fr-FR`; `${VAR}` references are expanded",
        "- `cases`: list of cases, each with a unique `name` and a non-empty `checks` list.",
        "",
        "## Checks",
        "Every check accepts an optional `weight` (default 1.0).",
    ]
    for model_name in _CHECK_MODELS:
        props = defs.get(model_name, {}).get("properties", {})
        top_key = next((k for k in props if k != "weight"), None)
        if top_key is None:
            continue
        fields = _spec_fields(defs, props[top_key])
        lines.append(f"- `{top_key}`: {{ {', '.join(fields)} }}")

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
