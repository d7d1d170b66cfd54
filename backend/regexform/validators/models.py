"""Validation models — constraint and rule types, records, and result structure.

All validation is deterministic: same record → same result, no I/O, no hidden state.
"""

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from regexform.validators.patterns import Pattern


class ConstraintKind(str, Enum):
    """The kind of predicate a constraint applies."""

    MIN_LENGTH = "min_length"
    EMAIL_FORMAT = "email_format"
    PATTERN = "pattern"


class ErrorCode(str, Enum):
    """Stable error codes, one per constraint of the signup form.

    Naming convention: FIELD_SPECIFIC_ISSUE
    """

    NAME_TOO_SHORT = "NAME_TOO_SHORT"
    NAME_INVALID_CHARACTERS = "NAME_INVALID_CHARACTERS"

    EMAIL_INVALID_FORMAT = "EMAIL_INVALID_FORMAT"
    EMAIL_PATTERN_MISMATCH = "EMAIL_PATTERN_MISMATCH"

    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    PASSWORD_TOO_WEAK = "PASSWORD_TOO_WEAK"


def coerce_text(value: Any) -> str:
    """Normalize a raw form value: missing/None is the empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class Constraint(BaseModel):
    """A single pass/fail rule with the message surfaced when it fails."""

    kind: ConstraintKind
    code: ErrorCode
    message: str
    predicate: Callable[[str], bool]
    length: Optional[int] = None       # MIN_LENGTH only
    pattern: Optional[Pattern] = None  # PATTERN and EMAIL_FORMAT

    model_config = {"frozen": True}

    def check(self, value: str) -> bool:
        return bool(self.predicate(value))


class FieldRule(BaseModel):
    """Ordered constraint chain for one field. First failing constraint wins."""

    field: str
    constraints: tuple[Constraint, ...]
    aliases: tuple[str, ...] = ()  # Alternative record keys for the same field

    model_config = {"frozen": True}


class SignupRecord(BaseModel):
    """Typed record of the three signup fields.

    The original form posts the name as ``nombre``; both keys are accepted.
    """

    name: str = Field(default="", validation_alias=AliasChoices("name", "nombre"))
    email: str = ""
    password: str = ""

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> str:
        return coerce_text(value)


class FieldInvalid(BaseModel):
    """A failed field: the only outcome kind for bad input. Never raised."""

    field: str
    message: str
    code: ErrorCode

    model_config = {"frozen": True, "use_enum_values": True}


class ValidationResult(BaseModel):
    """Outcome of one validation call — owned by the caller, never cached."""

    messages: dict[str, Optional[str]] = Field(
        description="Every rule field in declared order; None means valid",
    )
    failures: list[FieldInvalid] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return all(message is None for message in self.messages.values())

    @property
    def errors(self) -> dict[str, str]:
        """Only the failing fields, for rendering next to the inputs."""
        return {field: message for field, message in self.messages.items() if message is not None}

    def error_for(self, field: str) -> Optional[str]:
        return self.messages.get(field)


class SubmissionOutcome(BaseModel):
    """Submit gate result: accepted data, or the messages blocking acceptance."""

    accepted: bool
    data: Optional[dict[str, str]] = None
    errors: dict[str, str] = Field(default_factory=dict)
