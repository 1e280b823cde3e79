"""Validation models — field kinds, error maps, and the report structure.

All validation is deterministic: same values in, same report out.
"""

from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field

# Scalar held by a single field
FieldValue = Union[str, bool, int, float, None]

# Rule contract: (field value, full value snapshot) -> failure message or None
RuleFn = Callable[[Any, Mapping[str, Any]], Optional[str]]
RuleChain = Sequence[RuleFn]
RuleTable = Mapping[str, RuleChain]

ErrorMap = dict[str, Optional[str]]


class FieldKind(str, Enum):
    """Declared input kind of a field, fixed at form-definition time."""

    TEXT = "text"
    CHECKBOX = "checkbox"  # Coerced to bool
    SELECT = "select"
    NUMBER = "number"      # Still held as the raw string; use numeric() to validate

    @classmethod
    def infer(cls, initial: Any) -> "FieldKind":
        """Resolve a kind from an initial value when none was declared."""
        if isinstance(initial, bool):
            return cls.CHECKBOX
        return cls.TEXT


class ValidationReport(BaseModel):
    """Result of validating every field in a rule table."""

    passed: bool = Field(description="True if every field passed its rule chain")
    errors: ErrorMap = Field(default_factory=dict)
    failed_fields: list[str] = Field(default_factory=list)

    @classmethod
    def build(cls, errors: ErrorMap) -> "ValidationReport":
        """Build a report from a per-field error map."""
        failed = [name for name, message in errors.items() if message is not None]
        return cls(passed=not failed, errors=dict(errors), failed_fields=failed)
