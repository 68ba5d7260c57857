"""Validation Rule Sets — named, declarative constraints per product route.

Invariants:
    - A RuleSet is plain data: FieldRule entries evaluated in declaration order
    - Every check of every field runs (no short-circuit); the count of
      violations per request is part of the API contract
    - Checks are PURE predicates over the raw JSON value (MISSING when absent)

Design Decisions:
    - Checks read values the way form validators do: the value is stringified
      first (None/missing -> "", True -> "true", 420.0 -> "420", 1e21 ->
      "1e+21"), so numeric strings are numbers and booleans are never numbers
    - The "> 0" check compares numerically and fails for anything non-numeric
      or non-finite, which is why a missing, textual or overflowing price also
      reports "price not valid"
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Location(str, Enum):
    """Where a field is read from."""
    PARAMS = "params"
    BODY = "body"


# ─── Checks ──────────────────────────────────────────────────────

_INT_PATTERN = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
_NUMERIC_PATTERN = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "0", "1"})
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 10 ** 21


def _to_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def number_text(value: float) -> str:
    """Format a number the way JSON clients print it.

    Positional notation for 1e-6 <= |value| < 1e21 ("0.00001", "420"),
    exponent notation outside that range ("1e+21", "1.5e-7").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if _POSITIONAL_MIN <= abs(value) < _POSITIONAL_MAX:
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    mantissa, _, exponent = repr(value).partition("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def as_text(value: Any) -> str:
    """Stringify a raw request value for pattern checks."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if abs(value) < _POSITIONAL_MAX:
            return str(value)
        return number_text(_to_float(value))
    if isinstance(value, float):
        return number_text(value)
    return str(value)


def finite_number(value: Any) -> float | None:
    """The value as a finite float, or None when it has no such reading."""
    if isinstance(value, (bool, dict, list)) or value is MISSING or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def is_int(value: Any) -> bool:
    return bool(_INT_PATTERN.match(as_text(value)))


def is_not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_numeric(value: Any) -> bool:
    if isinstance(value, (dict, list)):
        return False
    return bool(_NUMERIC_PATTERN.match(as_text(value)))


def is_positive(value: Any) -> bool:
    """Finite and > 0; out-of-range and non-numeric values fail."""
    if isinstance(value, bool):
        return value
    number = finite_number(value)
    return number is not None and number > 0


def is_boolean(value: Any) -> bool:
    if isinstance(value, (dict, list)):
        return False
    return as_text(value) in _BOOLEAN_STRINGS


def is_absent_or_boolean(value: Any) -> bool:
    return value is MISSING or is_boolean(value)


# ─── Rule set structure ──────────────────────────────────────────

@dataclass(frozen=True)
class Check:
    """One predicate plus the message reported when it fails."""
    predicate: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRule:
    field: str
    location: Location
    checks: tuple[Check, ...]


@dataclass(frozen=True)
class RuleSet:
    name: str
    rules: tuple[FieldRule, ...]

    def __add__(self, other: "RuleSet") -> "RuleSet":
        return RuleSet(f"{self.name}+{other.name}", self.rules + other.rules)


# ─── Product rules ───────────────────────────────────────────────

_ID_RULE = FieldRule("id", Location.PARAMS, (
    Check(is_int, "Invalid Id"),
))

_NAME_RULE = FieldRule("name", Location.BODY, (
    Check(is_not_empty, "name is required"),
))

_PRICE_RULE = FieldRule("price", Location.BODY, (
    Check(is_numeric, "price must be a number"),
    Check(is_not_empty, "price is required"),
    Check(is_positive, "price not valid"),
))

_AVAILABILITY_RULE = FieldRule("availability", Location.BODY, (
    Check(is_boolean, "Invalid disponibility"),
))

# Create defaults availability to true, so only a present value is checked
_OPTIONAL_AVAILABILITY_RULE = FieldRule("availability", Location.BODY, (
    Check(is_absent_or_boolean, "Invalid disponibility"),
))

PRODUCT_ID_RULES = RuleSet("product_id", (_ID_RULE,))
CREATE_PRODUCT_RULES = RuleSet(
    "create_product", (_NAME_RULE, _PRICE_RULE, _OPTIONAL_AVAILABILITY_RULE),
)
UPDATE_PRODUCT_RULES = PRODUCT_ID_RULES + RuleSet(
    "update_product", (_NAME_RULE, _PRICE_RULE, _AVAILABILITY_RULE),
)
