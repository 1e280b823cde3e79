"""Tests for the single-field rule library."""

import re

import pytest

from formstate.validators.basic import email, max_length, min_length, numeric, pattern, required, url


@pytest.mark.parametrize("value", [None, False, "", "   ", "\t\n"])
def test_required_fails_on_empty_values(value):
    """Test required rejects None, False and whitespace-only strings."""
    assert required()(value, {}) == "This field is required"


@pytest.mark.parametrize("value", [0, 0.0, "a", " a ", True])
def test_required_passes_on_meaningful_values(value):
    """Test required accepts zero and non-blank values."""
    assert required()(value, {}) is None


def test_required_custom_message():
    assert required("Name please")("", {}) == "Name please"


def test_min_length():
    """Test min_length bounds and its no-op on empty values."""
    rule = min_length(3)
    assert rule("ab", {}) == "Must be at least 3 characters"
    assert rule("abc", {}) is None
    assert rule("", {}) is None
    assert rule(None, {}) is None


def test_max_length():
    rule = max_length(5, "Too long")
    assert rule("abcdef", {}) == "Too long"
    assert rule("abcde", {}) is None
    assert rule("", {}) is None


def test_pattern_accepts_string_or_compiled_regex():
    """Test pattern with both regex forms; empty values are skipped."""
    for regex in (r"^\d{3}$", re.compile(r"^\d{3}$")):
        rule = pattern(regex, "Three digits")
        assert rule("12a", {}) == "Three digits"
        assert rule("123", {}) is None
        assert rule("", {}) is None


def test_email():
    rule = email()
    assert rule("ana@example.com", {}) is None
    assert rule("ana@example", {}) == "Invalid email address"
    assert rule("ana maria@example.com", {}) == "Invalid email address"
    assert rule("ana@example.com\n", {}) == "Invalid email address"
    assert rule("", {}) is None


@pytest.mark.parametrize("value", ["https://example.com", "http://localhost:8000/a?b=1", "mailto:ana@example.com"])
def test_url_valid(value):
    assert url()(value, {}) is None


@pytest.mark.parametrize("value", ["example.com", "http://", "not a url"])
def test_url_invalid(value):
    assert url("Bad URL")(value, {}) == "Bad URL"


def test_numeric():
    """Test numeric parsing, including NaN rejection."""
    rule = numeric()
    assert rule("12.5", {}) is None
    assert rule("-3", {}) is None
    assert rule(7, {}) is None
    assert rule("abc", {}) == "The value must be numeric"
    assert rule("nan", {}) == "The value must be numeric"
    assert rule("", {}) is None


@pytest.mark.parametrize("value", [" 42 ", "1e3", ".5", "5.", "+7", "-Infinity", "0x1F", "0b101", "0o17", 3.5, True])
def test_numeric_accepts_number_literals(value):
    """Test signed, exponent, Infinity and prefixed integer forms are numbers."""
    assert numeric()(value, {}) is None


@pytest.mark.parametrize("value", ["1_000", "infinity", "inf", "NaN", "1,000", "12px", "0x", float("nan")])
def test_numeric_rejects_non_number_literals(value):
    """Test digit separators, lowercase infinity and NaN are not numbers."""
    assert numeric("Numbers only")(value, {}) == "Numbers only"


def test_rules_do_not_mutate_snapshot():
    """Test rules leave the value snapshot untouched."""
    values = {"name": "Ana"}
    for rule in (required(), min_length(2), max_length(9), email(), url(), numeric()):
        rule(values["name"], values)
    assert values == {"name": "Ana"}
