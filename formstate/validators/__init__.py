"""Rule library and validation engine.

Usage:
    from formstate.validators import ValidationEngine, required, min_length

    engine = ValidationEngine({"name": [required(), min_length(3)]})
    report = engine.validate_all({"name": "Al"})
"""

from formstate.validators.engine import ValidationEngine
from formstate.validators.base import Rule
from formstate.validators.models import (
    ErrorMap,
    FieldKind,
    FieldValue,
    RuleChain,
    RuleFn,
    RuleTable,
    ValidationReport,
)
from formstate.validators.basic import (
    email,
    max_length,
    min_length,
    numeric,
    pattern,
    required,
    url,
)
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

__all__ = [
    "ValidationEngine",
    "Rule",
    "ErrorMap",
    "FieldKind",
    "FieldValue",
    "RuleChain",
    "RuleFn",
    "RuleTable",
    "ValidationReport",
    "StrengthConfig",
    "required",
    "min_length",
    "max_length",
    "pattern",
    "email",
    "url",
    "numeric",
    "cross_field_equals",
    "confirm_password",
    "conditional_on",
    "mexican_phone",
    "end_date_after_start",
    "composite_strength",
    "password_strength",
]
