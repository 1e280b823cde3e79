"""Validation Engine — runs per-field rule chains and produces error maps.

A chain runs front-to-back and stops at the first failing rule, so a field
reports exactly one problem at a time.

Usage:
    engine = ValidationEngine({"email": [required(), email()]})
    message = engine.validate_field("email", "nope", values)
    report = engine.validate_all(values)
    if not report.passed:
        # report.errors holds one message (or None) per field
"""

import time
from typing import Any, Mapping, Optional

import structlog

from formstate.validators.base import rule_dependencies, rule_name
from formstate.validators.models import RuleFn, RuleTable, ValidationReport
from formstate.validators.reference_data import RULE_CRASHED_MESSAGE

logger = structlog.get_logger()


class ValidationEngine:
    """Evaluates fields against ordered rule chains.

    Design principles:
        - Deterministic: same values → same errors
        - Cross-field aware: every rule sees the full value snapshot
        - Never raises for well-typed input: a crashing rule fails its field
    """

    def __init__(self, rules: Optional[RuleTable] = None):
        """Initialize with a rule table.

        Args:
            rules: Mapping of field name to ordered rule list. Copied.
        """
        self.rules: dict[str, list[RuleFn]] = {
            name: list(chain) for name, chain in (rules or {}).items()
        }

    def validate_field(
        self,
        name: str,
        value: Any,
        all_values: Mapping[str, Any],
        rules: Optional[RuleTable] = None,
    ) -> Optional[str]:
        """Run one field's chain and return the first failure message.

        Args:
            name: Field to validate
            value: Value to validate (may differ from all_values[name] mid-update)
            all_values: Full value snapshot for cross-field rules
            rules: Optional table to use instead of the engine's own

        Returns:
            Message of the first failing rule, or None if every rule passes
        """
        table = self.rules if rules is None else rules
        for rule in table.get(name, ()):
            try:
                message = rule(value, all_values)
            except Exception as e:
                logger.error(
                    "rule_crashed",
                    field=name,
                    rule=rule_name(rule),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return RULE_CRASHED_MESSAGE
            if message:
                return message
        return None

    def validate_all(
        self,
        all_values: Mapping[str, Any],
        rules: Optional[RuleTable] = None,
    ) -> ValidationReport:
        """Validate every field in the rule table.

        Fields without a chain are always valid and do not appear in the report.

        Args:
            all_values: Full value snapshot
            rules: Optional table to use instead of the engine's own

        Returns:
            ValidationReport with one entry per rule-table field
        """
        start_time = time.perf_counter()
        table = self.rules if rules is None else rules

        errors = {
            name: self.validate_field(name, all_values.get(name), all_values, table)
            for name in table
        }
        report = ValidationReport.build(errors)

        logger.debug(
            "validation_complete",
            passed=report.passed,
            fields=len(errors),
            failed_fields=report.failed_fields,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return report

    def dependents_of(self, name: str) -> list[str]:
        """Fields whose chains read ``name`` through a cross-field rule."""
        return [
            field
            for field, chain in self.rules.items()
            if field != name and any(name in rule_dependencies(rule) for rule in chain)
        ]

    def add_rule(self, name: str, rule: RuleFn) -> None:
        """Append a rule to a field's chain, creating the chain if needed."""
        self.rules.setdefault(name, []).append(rule)

    def remove_field(self, name: str) -> None:
        """Drop a field's chain; the field becomes always valid."""
        self.rules.pop(name, None)
