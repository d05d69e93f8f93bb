"""Text matching against literal and regular-expression patterns."""

from __future__ import annotations

import re
from typing import TypeAlias

Pattern: TypeAlias = str | re.Pattern[str]


def matches(body: str, pattern: Pattern) -> bool:
    """Return True if ``pattern`` occurs anywhere in ``body``.

    A ``str`` pattern is a case-sensitive literal substring. A compiled regex is
    searched (not anchored).
    """
    if isinstance(pattern, str):
        return pattern in body
    if isinstance(pattern, re.Pattern):
        return pattern.search(body) is not None
    raise TypeError(f"pattern must be str or re.Pattern, got {type(pattern).__name__}")


def normalize_newlines(text: str) -> str:
    """Convert CRLF line endings to LF. A lone CR is kept."""
    return text.replace("\r\n", "\n")


def text_equal(value: str, expected: str) -> bool:
    """Return True if the strings are equal once CRLF line endings become LF."""
    return normalize_newlines(value) == normalize_newlines(expected)


def describe_pattern(pattern: Pattern) -> str:
    """Render a pattern for failure messages."""
    if isinstance(pattern, re.Pattern):
        return f"/{pattern.pattern}/"
    return pattern
