"""Patterns — immutable regular-expression matching rules over a text value.

A pattern either matches the whole value (``MatchMode.FULL``) or only needs to
match starting at position 0 (``MatchMode.PREFIX``). The literal source is kept
so rule sets stay inspectable.
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, PrivateAttr

from regexform.exceptions import RuleConfigurationError


class MatchMode(str, Enum):
    """How much of the value a pattern must cover."""

    FULL = "full"      # Entire value, a trailing newline never satisfies `$`
    PREFIX = "prefix"  # Match anchored at position 0, rest of the value unchecked


class Pattern(BaseModel):
    """A compiled-once, read-only regular expression."""

    source: str
    mode: MatchMode = MatchMode.FULL
    ascii_only: bool = True  # `\w` and `\d` match ASCII characters only

    model_config = {"frozen": True}

    _compiled: re.Pattern = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        try:
            self._compiled = re.compile(self.source, re.ASCII if self.ascii_only else 0)
        except re.error as e:
            raise RuleConfigurationError(f"Invalid pattern {self.source!r}: {e}") from e

    def matches(self, value: str) -> bool:
        if self.mode == MatchMode.FULL:
            return self._compiled.fullmatch(value) is not None
        return self._compiled.match(value) is not None

    def __str__(self) -> str:
        return self.source


# ──────────────────────────────────────────────────────────────────────
# SIGNUP FORM PATTERNS
# ──────────────────────────────────────────────────────────────────────

# Whitespace as a browser regex `\s` defines it; Python's `\s` also takes \x1c-\x1f and \x85 but not U+FEFF
WHITESPACE_CLASS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# Letters and whitespace only. Accented letters are rejected.
NAME_PATTERN = Pattern(source=rf"^[A-Za-z{WHITESPACE_CLASS}]+$")

# General address shape: no leading dot, no "..", dotted domain labels
# that start alphanumeric, alphabetic TLD of 2+ letters
EMAIL_FORMAT_PATTERN = Pattern(
    source=r"^(?!\.)(?!.*\.\.)([A-Za-z0-9_'+\-\.]*)[A-Za-z0-9_+-]@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}$",
)

# local part of word chars, dots or dashes; domain; TLD of 2+ letters
EMAIL_PATTERN = Pattern(source=r"^[\w.-]+@[A-Za-z\d.-]+\.[A-Za-z]{2,}$")

# Uppercase, lowercase, digit and one of @$!%*?& present somewhere in the value.
# Other characters are allowed and the length is not anchored here.
PASSWORD_PATTERN = Pattern(
    source=r"^(?=.*[A-Z])(?=.*[a-z])(?=.*\d)(?=.*[@$!%*?&])",
    mode=MatchMode.PREFIX,
)
