"""Reference data for the rule library — default messages and patterns.

Kept in one place so every rule constructor and every form definition agrees
on wording. Messages are English only.
"""

import re

# ── Default messages ──

REQUIRED_MESSAGE = "This field is required"
EMAIL_MESSAGE = "Invalid email address"
URL_MESSAGE = "Invalid URL"
NUMERIC_MESSAGE = "The value must be numeric"
PATTERN_MESSAGE = "Invalid format"
MISMATCH_MESSAGE = "Values do not match"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"
END_DATE_MESSAGE = "The end date must be after the start date"
MEXICAN_PHONE_MESSAGE = "Invalid Mexican phone number format"

# Used when a rule raises instead of returning; the field fails closed
RULE_CRASHED_MESSAGE = "This field could not be validated"

MIN_LENGTH_TEMPLATE = "Must be at least {n} characters"
MAX_LENGTH_TEMPLATE = "Must be no more than {n} characters"

# Per-check password strength messages, in evaluation order
STRENGTH_LENGTH_TEMPLATE = "Must be at least {n} characters."
STRENGTH_UPPERCASE_MESSAGE = "Must contain at least one uppercase letter."
STRENGTH_LOWERCASE_MESSAGE = "Must contain at least one lowercase letter."
STRENGTH_NUMBER_MESSAGE = "Must contain at least one number."
STRENGTH_SYMBOL_TEMPLATE = "Must contain at least one symbol ({symbols})."

# ── Patterns ──

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")

# 10 digits, optionally prefixed with +52; matched after whitespace is stripped
MEXICAN_PHONE_PATTERN = re.compile(r"^(\+52\s?)?[0-9]{10}\Z")

URL_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*\Z")

# Numeric strings: decimals with optional exponent, signed Infinity, and
# 0x/0b/0o integer literals. Digit separators and "inf"/"nan" are not numbers.
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity)"
    r"|0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+"
)

# Schemes that are meaningless without a host
HIERARCHICAL_SCHEMES = {"http", "https", "ftp", "ftps", "ws", "wss"}

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")

DEFAULT_SYMBOLS = "!@#$%^&*"
DEFAULT_PASSWORD_MIN_LENGTH = 8

# Checkbox strings that coerce to True
TRUTHY_STRINGS = {"true", "on", "1", "yes"}
