"""Base rule — abstract class every library rule derives from.

Each rule is a small value object: its configuration is fixed at
construction and ``check()`` is a pure function of the field value and the
full value snapshot. Plain callables with the same signature are accepted
anywhere a rule is, so custom rules need not subclass this.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class Rule(ABC):
    """Abstract base for all field rules.

    Contract:
        - check() is deterministic: same (value, all_values) → same result
        - check() never mutates its inputs
        - check() returns a failure message, or None when the value passes
    """

    #: Names of other fields this rule reads from the snapshot
    depends_on: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def check(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        """Evaluate the rule.

        Args:
            value: Current value of the field being validated
            all_values: Snapshot of every field value in the form

        Returns:
            Failure message, or None if the value passes
        """
        ...

    def __call__(self, value: Any, all_values: Mapping[str, Any]) -> Optional[str]:
        return self.check(value, all_values)

    def __repr__(self) -> str:
        return f"<{self.name}>"

    # ── Helper Methods ──

    @staticmethod
    def _is_empty(value: Any) -> bool:
        """Absent or empty-string values are left to required()."""
        return value is None or value == ""


def rule_name(rule: Any) -> str:
    """Best-effort name for any rule callable, for log context."""
    if isinstance(rule, Rule):
        return rule.name
    return getattr(rule, "__name__", type(rule).__name__)


def rule_dependencies(rule: Any) -> tuple[str, ...]:
    """Other fields a rule reads; plain callables declare none."""
    return tuple(getattr(rule, "depends_on", ()))
