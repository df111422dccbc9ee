"""Core data models for svi."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DelimiterStyle(enum.StrEnum):
    """Bracket pair recognised as placeholder syntax during a scan."""

    DOUBLE_BRACKETS = "double_brackets"
    DOUBLE_CURLY_BRACES = "double_curly_braces"


class Delimiters(BaseModel):
    """Opening and closing sequences for a delimiter style.

    Both sequences are two repetitions of the same character, which is what
    makes the three-character escape run unambiguous.
    """

    model_config = ConfigDict(frozen=True)

    opener: str = Field(description="Opening sequence, e.g. '[['")
    closer: str = Field(description="Closing sequence, e.g. ']]'")

    @field_validator("opener", "closer")
    @classmethod
    def doubled_char(cls, value: str) -> str:
        if len(value) != 2 or value[0] != value[1]:
            raise ValueError(f"delimiter must be a doubled character, got {value!r}")
        return value

    @property
    def open_char(self) -> str:
        return self.opener[0]

    @property
    def close_char(self) -> str:
        return self.closer[0]


DELIMITERS: MappingProxyType[DelimiterStyle, Delimiters] = MappingProxyType(
    {
        DelimiterStyle.DOUBLE_BRACKETS: Delimiters(opener="[[", closer="]]"),
        DelimiterStyle.DOUBLE_CURLY_BRACES: Delimiters(opener="{{", closer="}}"),
    }
)


class Replacer(BaseModel):
    """A substituted value and the placeholder key it came from.

    Replacers are what a caller keeps after interpolation in order to mask
    the values again in derived text, without holding the variable mapping.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Placeholder key, trimmed of whitespace")
    value: str = Field(description="Value substituted for the placeholder")

    @property
    def mask(self) -> str:
        """Default masked form of this replacer, e.g. '<mongo_password>'."""
        return f"<{self.key}>"

    def __repr_args__(self) -> Iterator[tuple[str, str]]:
        # Keep secrets out of tracebacks and debug output.
        yield "key", self.key
        yield "value", "***"
