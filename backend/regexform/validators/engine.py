"""Validation Engine — runs each field's constraint chain and aggregates the outcome.

This is the main entry point for form validation. The form UI collects the
current input values into a record and calls the engine on submit, and
optionally per keystroke or blur for live feedback.

Usage:
    engine = ValidationEngine()
    result = engine.validate({"name": "Jo", "email": "a@b.com", "password": "Abcdef1!"})
    if not result.is_valid:
        # Show result.errors next to the inputs
"""

import time
from typing import Any, Mapping, Optional, Sequence, Union

import structlog
from pydantic import BaseModel

from regexform.exceptions import RuleConfigurationError
from regexform.validators.models import (
    FieldInvalid,
    FieldRule,
    SubmissionOutcome,
    ValidationResult,
    coerce_text,
)
from regexform.validators.rules import SIGNUP_RULES

logger = structlog.get_logger()

Record = Union[Mapping[str, Any], BaseModel]


class ValidationEngine:
    """Evaluates an immutable rule set against candidate records.

    Design principles:
        - Deterministic: same record → same result
        - Short-circuit per field: the first failing constraint's message wins
        - Independent across fields: one failing field never blocks another
        - Stateless: nothing is retained between calls, safe to share
    """

    def __init__(self, rules: Optional[Sequence[FieldRule]] = None):
        """Initialize with the signup rules or a custom rule set.

        Args:
            rules: Optional ordered field rules. If None, uses SIGNUP_RULES.

        Raises:
            RuleConfigurationError: If the rule set is malformed
        """
        self.rules: tuple[FieldRule, ...] = tuple(rules) if rules is not None else SIGNUP_RULES
        self._rules_by_key = self._index_rules(self.rules)

    @staticmethod
    def _index_rules(rules: tuple[FieldRule, ...]) -> dict[str, FieldRule]:
        """Check the rule set and map every field name and alias to its rule."""
        if not rules:
            raise RuleConfigurationError("Rule set must declare at least one field")

        index: dict[str, FieldRule] = {}
        for rule in rules:
            if not rule.constraints:
                raise RuleConfigurationError(f"Field '{rule.field}' has no constraints")
            for constraint in rule.constraints:
                if not constraint.message.strip():
                    raise RuleConfigurationError(
                        f"Field '{rule.field}' has a constraint ({constraint.code.value}) with a blank message"
                    )
            for key in (rule.field, *rule.aliases):
                if key in index:
                    raise RuleConfigurationError(f"Field name '{key}' is declared more than once")
                index[key] = rule
        return index

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(rule.field for rule in self.rules)

    def validate(self, record: Record) -> ValidationResult:
        """Evaluate every field of the record.

        Args:
            record: Mapping of field name to raw value, or a SignupRecord.
                Missing fields and None values count as empty strings.

        Returns:
            ValidationResult with one entry per rule field and the overall verdict
        """
        start_time = time.perf_counter()

        values = self._extract_values(record)
        messages: dict[str, Optional[str]] = {}
        failures: list[FieldInvalid] = []

        for rule in self.rules:
            failure = self._run_rule(rule, values[rule.field])
            messages[rule.field] = failure.message if failure else None
            if failure:
                failures.append(failure)

        result = ValidationResult(messages=messages, failures=failures)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            valid=result.is_valid,
            failed_fields=[f.field for f in failures],
            error_codes=[f.code for f in failures],
            duration_ms=round(total_duration, 3),
        )

        return result

    def validate_field(self, field: str, value: Any) -> Optional[str]:
        """Live feedback for a single input.

        Args:
            field: Field name or one of its aliases
            value: Current raw value of the input

        Returns:
            The field's error message, or None if the value is valid

        Raises:
            KeyError: If no rule is declared for ``field``
        """
        try:
            rule = self._rules_by_key[field]
        except KeyError:
            raise KeyError(f"No rule declared for field '{field}'") from None

        failure = self._run_rule(rule, coerce_text(value))
        logger.debug(
            "field_validated",
            field=rule.field,
            valid=failure is None,
            error_code=failure.code if failure else None,
        )
        return failure.message if failure else None

    def submit(self, record: Record) -> SubmissionOutcome:
        """Validate and gate the submission.

        Accepted submissions carry the record data for the caller to confirm;
        rejected ones carry only the per-field messages.
        """
        result = self.validate(record)

        if not result.is_valid:
            logger.info("submission_rejected", failed_fields=list(result.errors))
            return SubmissionOutcome(accepted=False, errors=result.errors)

        logger.info("submission_accepted", fields=list(self.fields))
        return SubmissionOutcome(accepted=True, data=self._extract_values(record))

    # ── Helper Methods ──

    @staticmethod
    def _run_rule(rule: FieldRule, value: str) -> Optional[FieldInvalid]:
        """Run a field's constraints in declared order, stopping at the first failure."""
        for constraint in rule.constraints:
            if not constraint.check(value):
                return FieldInvalid(field=rule.field, message=constraint.message, code=constraint.code)
        return None

    def _extract_values(self, record: Record) -> dict[str, str]:
        """Pick each rule field from the record, honouring aliases."""
        data = record.model_dump() if isinstance(record, BaseModel) else record

        values: dict[str, str] = {}
        for rule in self.rules:
            raw = None
            for key in (rule.field, *rule.aliases):
                if key in data:
                    raw = data[key]
                    break
            values[rule.field] = coerce_text(raw)
        return values


# Module-level default engine, built from the fixed signup rules
validation_engine = ValidationEngine()
