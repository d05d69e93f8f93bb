"""Structural assertions over in-memory objects and JSON files."""

from __future__ import annotations

import os
from typing import Any

from genassert import probe
from genassert.assertions.base import Assertion, AssertionResult, _truncate
from genassert.assertions.files import FileExists
from genassert.capabilities import missing_capabilities, present_capabilities
from genassert.compare import find_mismatches


class Implements(Assertion):
    """Assertion that an object exposes every callable named by an interface."""

    def __init__(self, spec: Any):
        self.spec = spec
        self.name = f"Implements({_truncate(spec)})"

    def evaluate(self, actual: Any) -> AssertionResult:
        missing = missing_capabilities(actual, self.spec)
        return self._result(
            actual,
            not missing,
            f"expected object to implement methods named: {', '.join(missing)}",
            expected=self.spec,
        )


class NotImplements(Assertion):
    """Assertion that an object exposes none of the callables named by an interface."""

    def __init__(self, spec: Any):
        self.spec = spec
        self.name = f"NotImplements({_truncate(spec)})"

    def evaluate(self, actual: Any) -> AssertionResult:
        present = present_capabilities(actual, self.spec)
        return self._result(
            actual,
            not present,
            f"expected object to not implement any methods named: {', '.join(present)}",
            expected=self.spec,
        )


class ObjectContent(Assertion):
    """Assertion that an object recursively contains a partial structure."""

    def __init__(self, content: Any):
        self.content = content
        self.name = f"ObjectContent({_truncate(content)})"

    def evaluate(self, actual: Any) -> AssertionResult:
        offending = find_mismatches(actual, self.content)
        return self._result(
            actual,
            not offending,
            f"object does not match expected content at: {', '.join(offending)}",
            expected=self.content,
        )


class NoObjectContent(Assertion):
    """Assertion that none of a partial structure's leaf values appear in an object.

    Checked key by key: ``{"a": {}}`` passes against ``{"a": {"b": "foo"}}``
    because the nested key is absent.
    """

    def __init__(self, content: Any):
        self.content = content
        self.name = f"NoObjectContent({_truncate(content)})"

    def evaluate(self, actual: Any) -> AssertionResult:
        offending = find_mismatches(actual, self.content, negate=True)
        return self._result(
            actual,
            not offending,
            f"object unexpectedly matches content at: {', '.join(offending)}",
            expected=self.content,
        )


class JSONFileContent(Assertion):
    """Assertion that a JSON file's parsed content contains a partial structure."""

    def __init__(self, content: Any):
        self.content = content
        self.name = f"JSONFileContent({_truncate(content)})"

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        path = os.fspath(actual)
        FileExists()(path)
        result = ObjectContent(self.content).evaluate(probe.read(path, as_json=True))
        return self._result(path, result.passed, f"{path}: {result.message}", expected=self.content)


class NoJSONFileContent(Assertion):
    """Assertion that a JSON file's parsed content excludes a partial structure."""

    def __init__(self, content: Any):
        self.content = content
        self.name = f"NoJSONFileContent({_truncate(content)})"

    def evaluate(self, actual: str | os.PathLike[str]) -> AssertionResult:
        path = os.fspath(actual)
        FileExists()(path)
        result = NoObjectContent(self.content).evaluate(probe.read(path, as_json=True))
        return self._result(path, result.passed, f"{path}: {result.message}", expected=self.content)
