"""Form Validator — deterministic validation layer for the signup form.

Usage:
    from regexform.validators import validation_engine

    result = validation_engine.validate(record)
    if not result.is_valid:
        # Render result.errors next to the inputs
"""

from regexform.validators.engine import ValidationEngine, validation_engine
from regexform.validators.models import (
    ValidationResult,
    SubmissionOutcome,
    SignupRecord,
    FieldInvalid,
    FieldRule,
    Constraint,
    ConstraintKind,
    ErrorCode,
)
from regexform.validators.patterns import Pattern, MatchMode
from regexform.validators.rules import SIGNUP_RULES

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "ValidationResult",
    "SubmissionOutcome",
    "SignupRecord",
    "FieldInvalid",
    "FieldRule",
    "Constraint",
    "ConstraintKind",
    "ErrorCode",
    "Pattern",
    "MatchMode",
    "SIGNUP_RULES",
]
