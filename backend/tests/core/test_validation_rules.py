"""Validation checks — pure predicates behind the product rule sets.

Invariants:
    - Missing values (MISSING) and None fail every check except the optional
      availability check on create
    - Numeric strings count as numbers; booleans never do
    - "> 0" fails for anything that is not a positive number
"""

import pytest

from product_api.core.validation_rules import (
    CREATE_PRODUCT_RULES,
    MISSING,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
    Location,
    as_text,
    is_boolean,
    is_int,
    is_not_empty,
    is_numeric,
    is_positive,
)


# ─── as_text ─────────────────────────────────────────────────────

@pytest.mark.parametrize("value, expected", [
    (MISSING, ""),
    (None, ""),
    (True, "true"),
    (False, "false"),
    (420.0, "420"),
    (4.5, "4.5"),
    (0.00001, "0.00001"),
    (1.5e-6, "0.0000015"),
    (1e-7, "1e-7"),
    (1.5e-7, "1.5e-7"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (-2.5e22, "-2.5e+22"),
    (10 ** 21, "1e+21"),
    (10 ** 400, "Infinity"),
    (12, "12"),
    ("Hola", "Hola"),
])
def test_as_text_stringifies_like_form_values(value, expected):
    assert as_text(value) == expected


# ─── is_int ──────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["1", "2000", "-3", "+7", "0"])
def test_is_int_accepts_integer_strings(value):
    assert is_int(value)


@pytest.mark.parametrize("value", ["not-valid-url", "1.5", "", "01", "1a", MISSING])
def test_is_int_rejects_non_integers(value):
    assert not is_int(value)


# ─── is_not_empty ────────────────────────────────────────────────

def test_is_not_empty_rejects_missing_none_and_empty_string():
    assert not is_not_empty(MISSING)
    assert not is_not_empty(None)
    assert not is_not_empty("")


def test_is_not_empty_accepts_zero_and_whitespace():
    assert is_not_empty(0)
    assert is_not_empty("  ")


# ─── is_numeric ──────────────────────────────────────────────────

@pytest.mark.parametrize("value", [0, 420, 3.5, 0.00001, 1e20, "420", "-1", ".5", "10.25"])
def test_is_numeric_accepts_numbers_and_numeric_strings(value):
    assert is_numeric(value)


@pytest.mark.parametrize("value", [
    "Hola", "", "5.", True, None, MISSING, [1], {"a": 1}, 1e21, 1e-7, 10 ** 400,
])
def test_is_numeric_rejects_everything_else(value):
    assert not is_numeric(value)


# ─── is_positive ─────────────────────────────────────────────────

@pytest.mark.parametrize("value", [1, 0.01, 0.00001, 1e21, "420", "3.5"])
def test_is_positive_accepts_positive_numbers(value):
    assert is_positive(value)


@pytest.mark.parametrize("value", [
    0, -5, "0", "Hola", "", None, MISSING, False,
    10 ** 400, "1" + "0" * 400, "inf", float("nan"), [1],
])
def test_is_positive_rejects_zero_negative_non_numeric_and_non_finite(value):
    assert not is_positive(value)


# ─── is_boolean ──────────────────────────────────────────────────

@pytest.mark.parametrize("value", [True, False, "true", "false", "0", "1", 0, 1])
def test_is_boolean_accepts_boolean_spellings(value):
    assert is_boolean(value)


@pytest.mark.parametrize("value", ["yes", "True ", 2, None, MISSING, []])
def test_is_boolean_rejects_other_values(value):
    assert not is_boolean(value)


# ─── rule sets ───────────────────────────────────────────────────

def test_id_rules_read_from_path_params():
    (rule,) = PRODUCT_ID_RULES.rules
    assert rule.field == "id"
    assert rule.location is Location.PARAMS
    assert [c.message for c in rule.checks] == ["Invalid Id"]


def test_create_rules_declare_name_price_then_optional_availability():
    assert [r.field for r in CREATE_PRODUCT_RULES.rules] == [
        "name", "price", "availability",
    ]
    price = CREATE_PRODUCT_RULES.rules[1]
    assert [c.message for c in price.checks] == [
        "price must be a number", "price is required", "price not valid",
    ]
    (availability,) = CREATE_PRODUCT_RULES.rules[2].checks
    assert availability.message == "Invalid disponibility"
    assert availability.predicate(MISSING)
    assert not availability.predicate("yes")


def test_update_rules_start_with_id_and_end_with_availability():
    fields = [r.field for r in UPDATE_PRODUCT_RULES.rules]
    assert fields == ["id", "name", "price", "availability"]
    assert UPDATE_PRODUCT_RULES.rules[-1].checks[0].message == "Invalid disponibility"
