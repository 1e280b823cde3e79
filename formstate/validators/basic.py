"""Basic rules — single-field checks with no cross-field dependencies.

Every rule except Required passes on an empty value, so a chain decides
whether a field is mandatory by including ``required()`` first.
"""

import math
import re
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlparse

from formstate.validators.base import Rule
from formstate.validators import reference_data as ref


class Required(Rule):
    """Fails on None, False, and whitespace-only strings. Passes on 0."""

    def __init__(self, message: Optional[str] = None):
        self.message = message or ref.REQUIRED_MESSAGE

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if value is None or value is False:
            return self.message
        if isinstance(value, str) and value.strip() == "":
            return self.message
        return None


class MinLength(Rule):
    def __init__(self, n: int, message: Optional[str] = None):
        self.n = n
        self.message = message or ref.MIN_LENGTH_TEMPLATE.format(n=n)

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        if _length(value) < self.n:
            return self.message
        return None


class MaxLength(Rule):
    def __init__(self, n: int, message: Optional[str] = None):
        self.n = n
        self.message = message or ref.MAX_LENGTH_TEMPLATE.format(n=n)

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        if _length(value) > self.n:
            return self.message
        return None


class Pattern(Rule):
    """Generic format check. The regex is searched, so anchor it if needed."""

    def __init__(self, regex: Union[str, re.Pattern], message: Optional[str] = None):
        self.regex = re.compile(regex) if isinstance(regex, str) else regex
        self.message = message or ref.PATTERN_MESSAGE

    def prepare(self, value: Any) -> str:
        """Normalise the value before matching. Subclasses may strip or fold."""
        return str(value)

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        if not self.regex.search(self.prepare(value)):
            return self.message
        return None


class Email(Pattern):
    def __init__(self, message: Optional[str] = None):
        super().__init__(ref.EMAIL_PATTERN, message or ref.EMAIL_MESSAGE)


class Url(Rule):
    """Absolute URL check: a scheme is required, and web schemes need a host."""

    def __init__(self, message: Optional[str] = None):
        self.message = message or ref.URL_MESSAGE

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        text = str(value).strip()
        try:
            parsed = urlparse(text)
        except ValueError:
            return self.message
        if not parsed.scheme or not ref.URL_SCHEME_PATTERN.match(parsed.scheme):
            return self.message
        if parsed.scheme.lower() in ref.HIERARCHICAL_SCHEMES and not parsed.netloc:
            return self.message
        if not (parsed.netloc or parsed.path):
            return self.message
        return None


class Numeric(Rule):
    """The value must be a number. Strings must match NUMBER_PATTERN; NaN fails."""

    def __init__(self, message: Optional[str] = None):
        self.message = message or ref.NUMERIC_MESSAGE

    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        if self._is_empty(value):
            return None
        if isinstance(value, str):
            text = value.strip()
            if text and not ref.NUMBER_PATTERN.fullmatch(text):
                return self.message
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return self.message
        if math.isnan(number):
            return self.message
        return None


def _length(value: Any) -> int:
    try:
        return len(value)
    except TypeError:
        return len(str(value))


# ── Constructors ──


def required(message: Optional[str] = None) -> Required:
    return Required(message)


def min_length(n: int, message: Optional[str] = None) -> MinLength:
    return MinLength(n, message)


def max_length(n: int, message: Optional[str] = None) -> MaxLength:
    return MaxLength(n, message)


def pattern(regex: Union[str, re.Pattern], message: Optional[str] = None) -> Pattern:
    return Pattern(regex, message)


def email(message: Optional[str] = None) -> Email:
    return Email(message)


def url(message: Optional[str] = None) -> Url:
    return Url(message)


def numeric(message: Optional[str] = None) -> Numeric:
    return Numeric(message)
