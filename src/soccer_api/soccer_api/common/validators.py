"""Generic request-body validation.

A request kind is described by a `RuleSet` value (data, not a decorated
class). `check()` runs every rule and collects every violation; it never stops
at the first failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Mapping, Optional, Sequence

from flask import request

from ..core.constants import MAX_DB_INT, MIN_DB_INT
from ..core.enums import FieldKind
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


@dataclass(frozen=True)
class Field:
    name: str
    kind: FieldKind = FieldKind.STRING
    required: bool = True
    min_length: Optional[int] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None


@dataclass(frozen=True)
class RuleSet:
    name: str
    fields: Sequence[Field]
    require_any: bool = False

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


@dataclass(frozen=True)
class ValidationResult:
    payload: dict[str, Any] = field(default_factory=dict)
    violations: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def required(name: str, kind: FieldKind = FieldKind.STRING, **limits: Optional[int]) -> Field:
    return Field(name=name, kind=kind, required=True, **limits)


def optional(name: str, kind: FieldKind = FieldKind.STRING, **limits: Optional[int]) -> Field:
    return Field(name=name, kind=kind, required=False, **limits)


def _check_value(rule: Field, value: Any) -> tuple[Any, Optional[str]]:
    if rule.kind == FieldKind.INTEGER:
        if isinstance(value, bool) or not isinstance(value, int):
            return None, f"{rule.name} must be an integer number"
        minimum = MIN_DB_INT if rule.minimum is None else rule.minimum
        maximum = MAX_DB_INT if rule.maximum is None else rule.maximum
        if value < minimum:
            return None, f"{rule.name} must not be less than {minimum}"
        if value > maximum:
            return None, f"{rule.name} must not be greater than {maximum}"
        return value, None

    if not isinstance(value, str):
        if rule.kind == FieldKind.ISO_DATE:
            return None, f"{rule.name} must be a valid ISO 8601 date string"
        return None, f"{rule.name} must be a string"

    if rule.kind == FieldKind.ISO_DATE:
        try:
            return parse_iso_date(value), None
        except ValueError:
            return None, f"{rule.name} must be a valid ISO 8601 date string"

    if rule.min_length is not None and len(value) < rule.min_length:
        return None, f"{rule.name} must be longer than or equal to {rule.min_length} characters"
    return value, None


def check(payload: Any, rules: RuleSet) -> ValidationResult:
    """Check `payload` against `rules` without raising.

    Absent and null values count as missing. Keys not declared in the rule set
    are dropped from the accepted payload. Every other accepted value keeps its
    value, except ISO-8601 fields: they are parsed to a `date`, so the time part
    of a full datetime string is discarded (the columns are DATE).
    """

    if not isinstance(payload, Mapping):
        return ValidationResult(violations=["request body must be a JSON object"])

    accepted: dict[str, Any] = {}
    violations: list[str] = []

    for rule in rules.fields:
        value = payload.get(rule.name)
        if value is None:
            if rule.required:
                violations.append(f"{rule.name} should not be null or undefined")
            continue

        coerced, problem = _check_value(rule, value)
        if problem:
            violations.append(problem)
        else:
            accepted[rule.name] = coerced

    if rules.require_any and not accepted and not violations:
        violations.append(f"at least one of {', '.join(rules.field_names)} must be provided")

    if violations:
        return ValidationResult(violations=violations)
    return ValidationResult(payload=accepted)


def validate(payload: Any, rules: RuleSet) -> dict[str, Any]:
    result = check(payload, rules)
    if not result.ok:
        raise ValidationError(f"Invalid {rules.name} request", result.violations)
    return result.payload


def validated_body(rules: RuleSet):
    """View decorator: validate the JSON body and hand it over as `payload`."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            body = request.get_json(silent=True)
            kwargs["payload"] = validate(body, rules)
            return view(*args, **kwargs)

        return wrapper

    return decorator
