"""Assertions over generated files and text."""

from __future__ import annotations

import difflib
import os
from typing import Any

from genassert import probe
from genassert.assertions.base import Assertion, AssertionResult, _truncate
from genassert.config import get_config
from genassert.matching import Pattern, describe_pattern, matches, normalize_newlines, text_equal


class FileExists(Assertion):
    """Assertion that a file or directory exists at the given path."""

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        path = os.fspath(actual)
        return self._result(path, probe.exists(path), f"{path}, no such file or directory")


class FileMissing(Assertion):
    """Assertion that nothing exists at the given path."""

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        path = os.fspath(actual)
        return self._result(path, not probe.exists(path), f"{path} exists")


def _body_excerpt(body: str) -> str:
    limit = get_config().max_body_chars
    if limit is None or len(body) <= limit:
        return body
    return body[:limit] + f"\n... ({len(body) - limit} more characters)"


class FileContent(Assertion):
    """Assertion that a file's content matches a literal string or regex."""

    def __init__(self, pattern: Pattern):
        self.pattern = pattern
        self.name = f"FileContent({_truncate(describe_pattern(pattern))})"

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        """Require the file to exist, then search its content for the pattern."""
        path = os.fspath(actual)
        FileExists()(path)
        body = probe.read(path)
        return self._result(
            path,
            matches(body, self.pattern),
            f"{path} did not match '{describe_pattern(self.pattern)}'. Contained:\n\n{_body_excerpt(body)}",
            expected=self.pattern,
        )


class NoFileContent(Assertion):
    """Assertion that a file's content does not match a literal string or regex."""

    def __init__(self, pattern: Pattern):
        self.pattern = pattern
        self.name = f"NoFileContent({_truncate(describe_pattern(pattern))})"

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        path = os.fspath(actual)
        FileExists()(path)
        body = probe.read(path)
        return self._result(
            path,
            not matches(body, self.pattern),
            f"{path} matched '{describe_pattern(self.pattern)}'.",
            expected=self.pattern,
        )


class TextEqual(Assertion):
    """Assertion that two strings are equal once CRLF line endings become LF."""

    def __init__(self, expected: str):
        self.expected = expected
        self.name = f"TextEqual({_truncate(expected)})"

    def evaluate(self, actual: Any) -> AssertionResult:
        passed = text_equal(actual, self.expected)

        message = None
        if not passed:
            diff = difflib.unified_diff(
                normalize_newlines(self.expected).splitlines(),
                normalize_newlines(actual).splitlines(),
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
            message = f"Expected: {self.expected!r}, Got: {actual!r}\n" + "\n".join(diff)

        return self._result(actual, passed, message, expected=self.expected)


class EqualsFileContent(Assertion):
    """Assertion that a file's whole content equals the expected text."""

    def __init__(self, expected: str):
        self.expected = expected
        self.name = f"EqualsFileContent({_truncate(expected)})"

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        path = os.fspath(actual)
        FileExists()(path)
        result = TextEqual(self.expected).evaluate(probe.read(path))
        return self._result(path, result.passed, f"{path} content differs. {result.message}", expected=self.expected)
