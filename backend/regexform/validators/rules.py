"""Signup rule set — the fixed, process-wide validation configuration.

Built once at import time. Field order here is the order fields appear in
every ValidationResult. Messages are part of the contract with the form UI
and must stay verbatim.
"""

from regexform.validators.constraints import email_format, matches, min_length
from regexform.validators.models import ErrorCode, FieldRule
from regexform.validators.patterns import EMAIL_PATTERN, NAME_PATTERN, PASSWORD_PATTERN

# ──────────────────────────────────────────────────────────────────────
# MESSAGES
# ──────────────────────────────────────────────────────────────────────

NAME_TOO_SHORT_MESSAGE = "El nombre debe tener mínimo 3 caracteres"
NAME_INVALID_CHARACTERS_MESSAGE = "Solo se permiten letras y espacios"

EMAIL_INVALID_FORMAT_MESSAGE = "Formato de correo inválido"
EMAIL_PATTERN_MISMATCH_MESSAGE = "Correo no válido"

PASSWORD_TOO_SHORT_MESSAGE = "Mínimo 6 caracteres"
PASSWORD_TOO_WEAK_MESSAGE = "Debe incluir mayúscula, minúscula, número y caracter especial (@$!%*?&)"

NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6

# ──────────────────────────────────────────────────────────────────────
# RULES
# ──────────────────────────────────────────────────────────────────────

NAME_RULE = FieldRule(
    field="name",
    aliases=("nombre",),
    constraints=(
        min_length(NAME_MIN_LENGTH, NAME_TOO_SHORT_MESSAGE, ErrorCode.NAME_TOO_SHORT),
        matches(NAME_PATTERN, NAME_INVALID_CHARACTERS_MESSAGE, ErrorCode.NAME_INVALID_CHARACTERS),
    ),
)

EMAIL_RULE = FieldRule(
    field="email",
    constraints=(
        email_format(EMAIL_INVALID_FORMAT_MESSAGE, ErrorCode.EMAIL_INVALID_FORMAT),
        matches(EMAIL_PATTERN, EMAIL_PATTERN_MISMATCH_MESSAGE, ErrorCode.EMAIL_PATTERN_MISMATCH),
    ),
)

PASSWORD_RULE = FieldRule(
    field="password",
    constraints=(
        min_length(PASSWORD_MIN_LENGTH, PASSWORD_TOO_SHORT_MESSAGE, ErrorCode.PASSWORD_TOO_SHORT),
        matches(PASSWORD_PATTERN, PASSWORD_TOO_WEAK_MESSAGE, ErrorCode.PASSWORD_TOO_WEAK),
    ),
)

SIGNUP_RULES: tuple[FieldRule, ...] = (NAME_RULE, EMAIL_RULE, PASSWORD_RULE)
