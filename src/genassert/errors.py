"""Error types raised by genassert."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from genassert.assertions.base import AssertionResult


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.metadata.assertion_name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)


class FixtureParseError(ValueError):
    """Raised when a file requested as JSON cannot be parsed.

    Not an AssertionError: test runners report it as an error, not a failure.
    """

    def __init__(self, path: str | os.PathLike[str], cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause

        message = f"{os.fspath(path)} is not valid JSON"
        if cause:
            message += f": {cause}"

        super().__init__(message)
