"""Tests for cross-field, conditional and composite rules."""

from datetime import date

from formstate.validators.advanced import (
    StrengthConfig,
    composite_strength,
    conditional_on,
    confirm_password,
    cross_field_equals,
    end_date_after_start,
    mexican_phone,
    password_strength,
)
from formstate.validators.basic import required


def test_cross_field_equals_matching_and_mismatching():
    """Test confirmation passes on a match and reports the configured message."""
    rule = cross_field_equals("password", "Passwords must match")
    values = {"password": "Abc12345!", "confirmPassword": "Abc12345!"}
    assert rule(values["confirmPassword"], values) is None

    values["confirmPassword"] = "mismatch"
    assert rule(values["confirmPassword"], values) == "Passwords must match"


def test_cross_field_equals_missing_other_field_fails_present_values():
    """Test a reference to a missing field fails deterministically."""
    rule = cross_field_equals("nope")
    assert rule("anything", {}) == "Values do not match"
    assert rule("", {}) is None


def test_confirm_password_defaults():
    rule = confirm_password()
    assert rule.depends_on == ("password",)
    assert rule("x", {"password": "y"}) == "Passwords do not match"


def test_conditional_on_only_runs_when_condition_matches():
    """Test the inner rule is inactive unless the other field matches."""
    rule = conditional_on("contact", "email", required("Email needed"))
    assert rule("", {"contact": "email"}) == "Email needed"
    assert rule("", {"contact": "phone"}) is None
    assert rule("", {}) is None
    assert rule.depends_on == ("contact",)


def test_conditional_on_collects_inner_dependencies():
    rule = conditional_on("country", "Mexico", cross_field_equals("phone"))
    assert rule.depends_on == ("country", "phone")


def test_mexican_phone_active_only_for_mexico():
    """Test the phone format applies for Mexico and is skipped otherwise."""
    rule = mexican_phone()
    assert rule("abc", {"country": "Mexico", "phone": "abc"}) == "Invalid Mexican phone number format"
    assert rule("abc", {"country": "USA", "phone": "abc"}) is None


def test_mexican_phone_accepts_spaces_and_prefix():
    rule = mexican_phone()
    mexico = {"country": "Mexico"}
    assert rule("55 1234 5678", mexico) is None
    assert rule("+52 5512345678", mexico) is None
    assert rule("551234567", mexico) is not None
    assert rule("", mexico) is None


def test_end_date_after_start():
    """Test end date ordering with strings and date objects."""
    rule = end_date_after_start()
    assert rule("2024-01-01", {"startDate": "2024-01-02"}) == "The end date must be after the start date"
    assert rule("2024-01-02", {"startDate": "2024-01-02"}) is not None
    assert rule("2024-01-03", {"startDate": "2024-01-02"}) is None
    assert rule(date(2024, 1, 3), {"startDate": date(2024, 1, 2)}) is None
    assert rule.depends_on == ("startDate",)


def test_end_date_after_start_ignores_unparseable_or_missing():
    rule = end_date_after_start("from")
    assert rule("garbage", {"from": "2024-01-01"}) is None
    assert rule("2024-01-01", {"from": "garbage"}) is None
    assert rule("2024-01-01", {}) is None
    assert rule("", {"from": "2024-01-01"}) is None


def test_composite_strength_default_messages_in_order():
    """Test each predicate reports its own message, first failure first."""
    rule = composite_strength()
    assert rule("abc", {}) == "Must be at least 8 characters."
    assert rule("abcdefgh", {}) == "Must contain at least one uppercase letter."
    assert rule("ABCDEFGH", {}) == "Must contain at least one lowercase letter."
    assert rule("Abcdefgh", {}) == "Must contain at least one number."
    assert rule("Abcdefg1", {}) == "Must contain at least one symbol (!@#$%^&*)."
    assert rule("Abcdefg1!", {}) is None
    assert rule("", {}) is None


def test_composite_strength_single_override_message():
    rule = password_strength(message="Weak password")
    assert rule("abc", {}) == "Weak password"
    assert rule("Abcdefg1", {}) == "Weak password"
    assert rule("Abcdefg1!", {}) is None


def test_composite_strength_config():
    """Test disabled predicates are skipped."""
    no_symbols = composite_strength(StrengthConfig(require_symbols=False))
    assert no_symbols("Abcdefg1", {}) is None

    no_length = composite_strength(StrengthConfig(min_length=None))
    assert no_length("Ab1!", {}) is None

    longer = composite_strength(StrengthConfig(min_length=12))
    assert longer("Abcdefg1!", {}) == "Must be at least 12 characters."


def test_composite_strength_failures_lists_everything():
    rule = composite_strength()
    assert len(rule.failures("a")) == 4
