"""Advanced rules — checks that read other fields or combine several predicates.

Cross-field rules list the fields they read in ``depends_on`` so the
controller can find dependents when a referenced field changes. A rule that
names a field missing from the form compares against None: it passes on an
empty value and fails on any present one. Nothing here reads the clock.
"""

from datetime import date, datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from formstate.validators.base import Rule, rule_dependencies
from formstate.validators.basic import Pattern
from formstate.validators.models import RuleFn
from formstate.validators import reference_data as ref


class CrossFieldEquals(Rule):
    """Fails when a present value differs from another field's value."""

    def __init__(self, other_field: str, message: Optional[str] = None):
        self.other_field = other_field
        self.message = message or ref.MISMATCH_MESSAGE
        self.depends_on = (other_field,)

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        if value != all_values.get(self.other_field):
            return self.message
        return None


class ConditionalOn(Rule):
    """Runs the inner rule only when another field holds an expected value."""

    def __init__(self, other_field: str, expected: Any, inner: RuleFn):
        self.other_field = other_field
        self.expected = expected
        self.inner = inner
        self.depends_on = (other_field,) + tuple(
            f for f in rule_dependencies(inner) if f != other_field
        )

    @property
    def name(self) -> str:
        inner = getattr(self.inner, "name", None) or getattr(self.inner, "__name__", "rule")
        return f"ConditionalOn({self.other_field}={self.expected!r}, {inner})"

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if all_values.get(self.other_field) != self.expected:
            return None
        return self.inner(value, all_values)


class PhonePattern(Pattern):
    """Pattern match after all whitespace is removed."""

    def prepare(self, value: Any) -> str:
        return "".join(str(value).split())


class EndDateAfterStart(Rule):
    """Fails when the end date is on or before the start date.

    Values may be date/datetime objects or ISO 8601 strings. Anything that
    does not parse is left alone.
    """

    def __init__(self, start_field: str = "startDate", message: Optional[str] = None):
        self.start_field = start_field
        self.message = message or ref.END_DATE_MESSAGE
        self.depends_on = (start_field,)

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        end = _parse_date(value)
        start = _parse_date(all_values.get(self.start_field))
        if end is None or start is None:
            return None
        try:
            if end <= start:
                return self.message
        except TypeError:
            # Naive vs. aware datetimes are not comparable
            return None
        return None


class StrengthConfig(BaseModel):
    """Password strength requirements. A falsy min_length disables the length check."""

    min_length: Optional[int] = ref.DEFAULT_PASSWORD_MIN_LENGTH
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_symbols: bool = True
    symbols: str = ref.DEFAULT_SYMBOLS


class CompositeStrength(Rule):
    """Several independent predicates (length, case classes, digit, symbol).

    Without an override message each failing predicate reports its own
    message, checked in declaration order. With one, the whole set is a
    single pass/fail.
    """

    def __init__(self, config: Optional[StrengthConfig] = None, message: Optional[str] = None):
        self.config = config or StrengthConfig()
        self.message = message

    def failures(self, value: str) -> list[str]:
        """Messages for every predicate the value fails, in order."""
        cfg = self.config
        found = []
        if cfg.min_length and len(value) < cfg.min_length:
            found.append(ref.STRENGTH_LENGTH_TEMPLATE.format(n=cfg.min_length))
        if cfg.require_uppercase and not ref.UPPERCASE_PATTERN.search(value):
            found.append(ref.STRENGTH_UPPERCASE_MESSAGE)
        if cfg.require_lowercase and not ref.LOWERCASE_PATTERN.search(value):
            found.append(ref.STRENGTH_LOWERCASE_MESSAGE)
        if cfg.require_numbers and not ref.DIGIT_PATTERN.search(value):
            found.append(ref.STRENGTH_NUMBER_MESSAGE)
        if cfg.require_symbols and not any(ch in cfg.symbols for ch in value):
            found.append(ref.STRENGTH_SYMBOL_TEMPLATE.format(symbols=cfg.symbols))
        return found

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        found = self.failures(str(value))
        if not found:
            return None
        return self.message or found[0]


def _parse_date(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


# ── Constructors ──


def cross_field_equals(other_field: str, message: Optional[str] = None) -> CrossFieldEquals:
    return CrossFieldEquals(other_field, message)


def confirm_password(message: Optional[str] = None) -> CrossFieldEquals:
    """Confirmation field must equal the ``password`` field."""
    return CrossFieldEquals("password", message or ref.PASSWORD_MISMATCH_MESSAGE)


def conditional_on(other_field: str, expected: Any, inner: RuleFn) -> ConditionalOn:
    return ConditionalOn(other_field, expected, inner)


def mexican_phone(
    message: Optional[str] = None,
    country_field: str = "country",
    country: str = "Mexico",
) -> ConditionalOn:
    """Mexican phone format, enforced only while the country field is Mexico."""
    inner = PhonePattern(ref.MEXICAN_PHONE_PATTERN, message or ref.MEXICAN_PHONE_MESSAGE)
    return ConditionalOn(country_field, country, inner)


def end_date_after_start(start_field: str = "startDate", message: Optional[str] = None) -> EndDateAfterStart:
    return EndDateAfterStart(start_field, message)


def composite_strength(config: Optional[StrengthConfig] = None, message: Optional[str] = None) -> CompositeStrength:
    return CompositeStrength(config, message)


password_strength = composite_strength
