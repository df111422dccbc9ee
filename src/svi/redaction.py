"""Masking of substituted values in derived text.

A Redactor is built from the replacers returned by interpolate() and needs
nothing else, so it can live in places that must not hold secrets, such as
a logging filter.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from svi.models import Replacer

DEFAULT_MASK_FORMAT = "<{key}>"


class Redactor:
    """Replaces every occurrence of known values with a masked placeholder.

    Longer values are matched before shorter ones, so a value that contains
    another is masked whole. Values of equal length keep their recorded
    order, and when two keys share a value the first key names the mask.
    Matching happens in one regex pass, so masks are never rescanned.

    Example:
        output, replacers = interpolate("user=[[user]]", {"user": "root"})
        Redactor(replacers).redact(output)
        # 'user=<user>'
    """

    def __init__(
        self,
        replacers: Iterable[Replacer],
        mask_format: str = DEFAULT_MASK_FORMAT,
    ) -> None:
        self._masks: dict[str, str] = {}
        for replacer in replacers:
            # An empty value would match between every character.
            if replacer.value and replacer.value not in self._masks:
                self._masks[replacer.value] = mask_format.format(key=replacer.key)

        self._pattern: re.Pattern[str] | None = None
        if self._masks:
            ordered = sorted(self._masks, key=len, reverse=True)
            self._pattern = re.compile("|".join(re.escape(value) for value in ordered))

    def redact(self, text: str) -> str:
        """Return text with every known value replaced by its mask."""
        if self._pattern is None:
            return text
        return self._pattern.sub(lambda match: self._masks[match.group(0)], text)

    def __len__(self) -> int:
        return len(self._masks)

    def __bool__(self) -> bool:
        return bool(self._masks)


def redact(
    text: str,
    replacers: Iterable[Replacer],
    mask_format: str = DEFAULT_MASK_FORMAT,
) -> str:
    """Mask substituted values in a string.

    Args:
        text: Any string, typically derived from interpolated output.
        replacers: Replacers returned by interpolate().
        mask_format: Format string for the mask, with a {key} field.

    Returns:
        The text with each substituted value replaced by its mask.
    """
    return Redactor(replacers, mask_format).redact(text)


class RedactingFilter(logging.Filter):
    """Logging filter that masks substituted values in every record.

    The message is formatted with its arguments first, so values passed as
    log arguments are masked as well. Exception and stack text attached to
    the record is formatted and masked too.
    """

    def __init__(self, redactor: Redactor, name: str = "") -> None:
        super().__init__(name)
        self.redactor = redactor

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        message = record.getMessage()
        redacted = self.redactor.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self.redactor.redact(record.exc_text)
        if record.stack_info:
            record.stack_info = self.redactor.redact(record.stack_info)
        return True
