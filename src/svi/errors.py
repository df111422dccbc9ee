"""Exceptions raised by the interpolator.

Messages carry placeholder keys and positions only, never variable values,
so they are safe to log.
"""

from __future__ import annotations


class InterpolationError(ValueError):
    """Base class for every interpolation failure."""


class UnterminatedPlaceholderError(InterpolationError):
    """An opener was found with no matching closer before end of input."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"no closing delimiter for placeholder at index {position}")


class UndefinedVariableError(InterpolationError):
    """A well-formed placeholder names a key absent from the mapping."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"no value found for variable {key!r}")


class RepeatedOpenerError(InterpolationError):
    """Four or more opener characters in a row cannot be interpreted."""

    def __init__(self, opener: str, position: int) -> None:
        self.opener = opener
        self.position = position
        super().__init__(
            f"found repeated opener '{opener}{opener}' at index {position}; "
            f"use three opener characters to escape a literal '{opener}'"
        )
