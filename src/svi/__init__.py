"""svi: string variable interpolation with value redaction."""

from svi.errors import (
    InterpolationError,
    RepeatedOpenerError,
    UndefinedVariableError,
    UnterminatedPlaceholderError,
)
from svi.interpolation import interpolate
from svi.models import DELIMITERS, Delimiters, DelimiterStyle, Replacer
from svi.redaction import RedactingFilter, Redactor, redact

__all__ = [
    "DELIMITERS",
    "DelimiterStyle",
    "Delimiters",
    "InterpolationError",
    "RedactingFilter",
    "Redactor",
    "RepeatedOpenerError",
    "Replacer",
    "UndefinedVariableError",
    "UnterminatedPlaceholderError",
    "interpolate",
    "redact",
]
