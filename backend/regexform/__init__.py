"""regexform — validation engine for the name / email / password signup form.

Usage:
    from regexform import validation_engine

    result = validation_engine.validate({"name": "Juan Perez", "email": "juan@mail.com", "password": "Abcdef1!"})
    if not result.is_valid:
        # Render result.errors next to each input
"""

from regexform.exceptions import RegexFormError, RuleConfigurationError
from regexform.logging_config import configure_logging
from regexform.validators import (
    ValidationEngine,
    validation_engine,
    ValidationResult,
    SubmissionOutcome,
    SignupRecord,
    FieldInvalid,
    ErrorCode,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "ValidationResult",
    "SubmissionOutcome",
    "SignupRecord",
    "FieldInvalid",
    "ErrorCode",
    "RegexFormError",
    "RuleConfigurationError",
    "configure_logging",
]
