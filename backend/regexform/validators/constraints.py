"""Constraint factories — build the predicate closures a FieldRule chains together."""

from regexform.validators.models import Constraint, ConstraintKind, ErrorCode
from regexform.validators.patterns import EMAIL_FORMAT_PATTERN, Pattern


def text_length(value: str) -> int:
    """Length as a browser form counts it: UTF-16 code units."""
    return len(value.encode("utf-16-le")) // 2


def min_length(length: int, message: str, code: ErrorCode) -> Constraint:
    """Value must have at least ``length`` UTF-16 code units (astral characters count 2)."""
    return Constraint(
        kind=ConstraintKind.MIN_LENGTH,
        code=code,
        message=message,
        predicate=lambda value: text_length(value) >= length,
        length=length,
    )


def matches(pattern: Pattern, message: str, code: ErrorCode) -> Constraint:
    """Value must satisfy ``pattern`` in the pattern's own match mode."""
    return Constraint(
        kind=ConstraintKind.PATTERN,
        code=code,
        message=message,
        predicate=pattern.matches,
        pattern=pattern,
    )


def email_format(message: str, code: ErrorCode) -> Constraint:
    """General email address shape check. No DNS lookup."""
    return Constraint(
        kind=ConstraintKind.EMAIL_FORMAT,
        code=code,
        message=message,
        predicate=EMAIL_FORMAT_PATTERN.matches,
        pattern=EMAIL_FORMAT_PATTERN,
    )
