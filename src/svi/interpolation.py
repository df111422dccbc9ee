"""Placeholder interpolation with replacer tracking.

Replaces [[variable]] (or {{variable}}) placeholders with values from a
mapping in a single left-to-right pass, and records which values were
substituted so they can be masked again later with svi.redaction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from svi.errors import RepeatedOpenerError, UndefinedVariableError, UnterminatedPlaceholderError
from svi.models import DELIMITERS, DelimiterStyle, Replacer

logger = logging.getLogger(__name__)

ESCAPE_RUN = 3


def _run_length(text: str, start: int, char: str) -> int:
    end = start
    while end < len(text) and text[end] == char:
        end += 1
    return end - start


def interpolate(
    text: str,
    variables: Mapping[str, str],
    style: DelimiterStyle | str = DelimiterStyle.DOUBLE_BRACKETS,
    *,
    fail_on_missing: bool = True,
) -> tuple[str, list[Replacer]]:
    """Substitute placeholders in a string with values from a mapping.

    Escaping:
        - Three opener characters emit one literal opener: '[[[x' -> '[[x'
        - Three closer characters outside a placeholder emit one literal
          closer: 'x]]]' -> 'x]]'
        - Single opener or closer characters are ordinary text.

    Inside a placeholder the first closer ends it, so '[[key]]]' resolves
    'key' and keeps the trailing ']'. Substituted values are never scanned
    for placeholders.

    Args:
        text: The input string with placeholders.
        variables: Mapping of placeholder keys to values.
        style: Delimiter style, or its string value.
        fail_on_missing: Raise on unknown keys. When False the placeholder is
            left in the output as written, so a later pass can fill it.

    Returns:
        Tuple of (interpolated string, replacers). Replacers hold one entry
        per distinct key, in order of first appearance.

    Raises:
        UnterminatedPlaceholderError: An opener has no closer.
        UndefinedVariableError: A key is missing and fail_on_missing is set.
        RepeatedOpenerError: Four or more opener characters in a row.
    """
    delimiters = DELIMITERS[DelimiterStyle(style)]
    opener, closer = delimiters.opener, delimiters.closer
    open_char, close_char = delimiters.open_char, delimiters.close_char
    escaped_closer = close_char * ESCAPE_RUN

    output: list[str] = []
    replacers: list[Replacer] = []
    seen: set[str] = set()
    placeholders = 0
    cursor = 0

    while cursor < len(text):
        char = text[cursor]

        if char == open_char:
            run = _run_length(text, cursor, open_char)
            if run == 1:
                output.append(char)
                cursor += 1
                continue
            if run == ESCAPE_RUN:
                output.append(opener)
                cursor += ESCAPE_RUN
                continue
            if run > ESCAPE_RUN:
                raise RepeatedOpenerError(opener, cursor)

            start = cursor + len(opener)
            end = text.find(closer, start)
            if end == -1:
                raise UnterminatedPlaceholderError(cursor)

            key = text[start:end].strip()
            after = end + len(closer)
            placeholders += 1

            if key in variables:
                value = variables[key]
                output.append(value)
                if key not in seen:
                    seen.add(key)
                    replacers.append(Replacer(key=key, value=value))
            elif fail_on_missing:
                raise UndefinedVariableError(key)
            else:
                logger.debug("Leaving undefined variable %r in place", key)
                output.append(text[cursor:after])

            cursor = after
        elif char == close_char and text.startswith(escaped_closer, cursor):
            output.append(closer)
            cursor += ESCAPE_RUN
        else:
            output.append(char)
            cursor += 1

    logger.debug(
        "Interpolated %d placeholder(s) using %d variable(s)", placeholders, len(replacers)
    )
    return "".join(output), replacers
