"""Input Validator — evaluates a RuleSet against path params and JSON body.

Invariants:
    - validate_input is PURE: no IO, returns an ordered list of Violation
    - Order of violations follows rule declaration order, then check order
    - ensure_valid raises RequestValidationFailed iff the list is non-empty
"""

from dataclasses import dataclass
from typing import Any, Mapping

from product_api.core.errors import RequestValidationFailed
from product_api.core.validation_rules import MISSING, Location, RuleSet


@dataclass(frozen=True)
class Violation:
    """A single failed check, shaped for the {"errors": [...]} body."""
    field: str
    location: Location
    message: str
    value: Any = MISSING

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            data["value"] = self.value
        data["msg"] = self.message
        data["path"] = self.field
        data["location"] = self.location.value
        return data


def validate_input(
    rule_set: RuleSet,
    params: Mapping[str, Any],
    body: Mapping[str, Any],
) -> list[Violation]:
    """Run every check of every rule; collect the failures."""
    sources = {Location.PARAMS: params, Location.BODY: body}
    violations: list[Violation] = []
    for rule in rule_set.rules:
        value = sources[rule.location].get(rule.field, MISSING)
        for check in rule.checks:
            if not check.predicate(value):
                violations.append(
                    Violation(rule.field, rule.location, check.message, value),
                )
    return violations


def ensure_valid(
    rule_set: RuleSet,
    params: Mapping[str, Any],
    body: Mapping[str, Any],
) -> None:
    violations = validate_input(rule_set, params, body)
    if violations:
        raise RequestValidationFailed(violations)
