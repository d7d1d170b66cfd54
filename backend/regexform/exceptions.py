"""Exceptions raised by regexform.

Bad user input is never an exception: it is reported as a ``FieldInvalid``
inside the ``ValidationResult``. Exceptions here signal programming errors.
"""


class RegexFormError(Exception):
    """Base class for all regexform errors."""


class RuleConfigurationError(RegexFormError, ValueError):
    """A rule set is malformed (empty constraint chain, duplicate field, blank message)."""
