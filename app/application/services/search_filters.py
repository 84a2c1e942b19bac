"""Parses and validates the flat search filter map into typed per-entity filters.

Callers send one object whose keys are entity-specific (systemType,
riskTier, minResidualScore, ...). Keys are accepted in camelCase or
snake_case. The map is validated against a JSON schema built from the
filter table below, so unknown keys and wrongly shaped values are
rejected before any store query runs.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import jsonschema

from app.application.dtos.search import (
    AISystemFilters,
    AssessmentFilters,
    EvidenceFilters,
    RiskFilters,
    SearchFilters,
)
from app.domain.enums import (
    AISystemType,
    AssessmentStatus,
    EvidenceStatus,
    LifecycleStatus,
    RiskCategory,
    RiskTier,
    SearchEntityType,
    TreatmentStatus,
)
from app.domain.exceptions import FilterValidationException


@dataclass(frozen=True)
class _FilterField:
    """One accepted filter key: owning entity, target attribute, and value shape."""

    entity_type: SearchEntityType
    attribute: str
    enum: type[Enum] | None = None
    kind: str = "enum"  # enum | string | number


_FILTER_FIELDS: dict[str, _FilterField] = {
    "systemType": _FilterField(SearchEntityType.AI_SYSTEM, "system_type", AISystemType),
    "lifecycleStatus": _FilterField(
        SearchEntityType.AI_SYSTEM, "lifecycle_status", LifecycleStatus
    ),
    "riskTier": _FilterField(SearchEntityType.AI_SYSTEM, "risk_tier", RiskTier),
    "status": _FilterField(SearchEntityType.ASSESSMENT, "status", AssessmentStatus),
    "frameworkId": _FilterField(
        SearchEntityType.ASSESSMENT, "framework_id", kind="string"
    ),
    "category": _FilterField(SearchEntityType.RISK, "category", RiskCategory),
    "treatmentStatus": _FilterField(
        SearchEntityType.RISK, "treatment_status", TreatmentStatus
    ),
    "minResidualScore": _FilterField(
        SearchEntityType.RISK, "min_residual_score", kind="number"
    ),
    "reviewStatus": _FilterField(
        SearchEntityType.EVIDENCE, "review_status", EvidenceStatus
    ),
    "mimeType": _FilterField(SearchEntityType.EVIDENCE, "mime_type", kind="string"),
}

# snake_case aliases (status and category are identical in both spellings)
_ALIASES: dict[str, str] = {
    f.attribute: key for key, f in _FILTER_FIELDS.items() if f.attribute != key
}


def _value_schema(field_def: _FilterField) -> dict[str, Any]:
    if field_def.kind == "number":
        return {"type": ["number", "null"]}
    if field_def.kind == "string":
        return {"type": ["string", "null"], "minLength": 1}
    return {"enum": [*field_def.enum.values(), None]}  # type: ignore[union-attr]


def _build_schema() -> dict[str, Any]:
    properties = {key: _value_schema(f) for key, f in _FILTER_FIELDS.items()}
    for alias, key in _ALIASES.items():
        properties[alias] = properties[key]
    return {
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }


FILTERS_SCHEMA: dict[str, Any] = _build_schema()
_validator = jsonschema.Draft202012Validator(FILTERS_SCHEMA)


def _first_error(raw: Mapping[str, Any]) -> jsonschema.ValidationError | None:
    errors = sorted(_validator.iter_errors(dict(raw)), key=lambda e: list(e.path))
    return errors[0] if errors else None


def parse_search_filters(raw: Mapping[str, Any] | None) -> SearchFilters:
    """Validate a raw filter map and return typed per-entity filters.

    Args:
        raw: Mapping from filter key to value (e.g. parsed JSON), or None.

    Returns:
        SearchFilters with one filter object per entity type. Null values
        are treated as absent.

    Raises:
        FilterValidationException: If raw is not a mapping, a key is unknown,
            a key is given twice (camelCase and snake_case), or a value has the
            wrong shape.
    """
    if raw is None:
        return SearchFilters()
    if not isinstance(raw, Mapping):
        raise FilterValidationException("Filters must be a JSON object", value=raw)

    for key in raw:
        if not isinstance(key, str) or (key not in _FILTER_FIELDS and key not in _ALIASES):
            raise FilterValidationException(f"Unknown filter: {key}", field=str(key))

    error = _first_error(raw)
    if error is not None:
        field_name = str(error.path[0]) if error.path else None
        value = raw.get(field_name) if field_name else None
        raise FilterValidationException(
            f"Invalid value for filter {field_name}: {error.message}",
            field=field_name,
            value=value,
        )

    values: dict[SearchEntityType, dict[str, Any]] = {et: {} for et in SearchEntityType}
    seen: dict[str, str] = {}
    for key, value in raw.items():
        canonical = _ALIASES.get(key, key)
        if canonical in seen:
            raise FilterValidationException(
                f"Filter given twice: {seen[canonical]} and {key}", field=key
            )
        seen[canonical] = key
        if value is None:
            continue
        field_def = _FILTER_FIELDS[canonical]
        if field_def.kind == "number":
            if not math.isfinite(value):
                raise FilterValidationException(
                    f"Invalid value for filter {key}: must be a finite number",
                    field=key,
                    value=value,
                )
            value = float(value)
        elif field_def.kind == "enum":
            value = field_def.enum(value)  # type: ignore[misc]
        values[field_def.entity_type][field_def.attribute] = value

    return SearchFilters(
        ai_system=AISystemFilters(**values[SearchEntityType.AI_SYSTEM]),
        assessment=AssessmentFilters(**values[SearchEntityType.ASSESSMENT]),
        risk=RiskFilters(**values[SearchEntityType.RISK]),
        evidence=EvidenceFilters(**values[SearchEntityType.EVIDENCE]),
    )
