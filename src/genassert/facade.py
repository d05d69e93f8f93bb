"""Assertion helpers for generated files and objects.

Every helper returns None on success and raises AssertionFailedError on
failure. File helpers accept either a single item or a batch:

    assert_file("package.json")
    assert_file(["package.json", "README.md"])
    assert_file_content("README.md", re.compile(r"^# my-app", re.M))
    assert_file_content([("README.md", "my-app"), ("LICENSE", "MIT")])
"""

from __future__ import annotations

import os
from typing import Any

from genassert.args import to_work_items
from genassert.assertions import (
    EqualsFileContent,
    FileContent,
    FileExists,
    FileMissing,
    Implements,
    JSONFileContent,
    NoFileContent,
    NoJSONFileContent,
    NoObjectContent,
    NotImplements,
    ObjectContent,
    TextEqual,
)


def assert_file(*paths: Any) -> None:
    """Assert that a path, or each path of a list, exists."""
    for path in to_work_items(paths):
        FileExists()(path)


def assert_no_file(*paths: Any) -> None:
    """Assert that a path, or each path of a list, does not exist."""
    for path in to_work_items(paths):
        FileMissing()(path)


def assert_file_content(*pairs: Any) -> None:
    """Assert that a file's content matches a string or compiled regex.

    Called as ``(path, pattern)`` or with a list of ``(path, pattern)`` pairs.
    """
    for path, pattern in to_work_items(pairs):
        FileContent(pattern)(path)


def assert_no_file_content(*pairs: Any) -> None:
    """Assert that a file's content does not match a string or compiled regex."""
    for path, pattern in to_work_items(pairs):
        NoFileContent(pattern)(path)


def assert_equals_file_content(*pairs: Any) -> None:
    """Assert that a file's content equals the expected text, ignoring CRLF/LF differences."""
    for path, expected in to_work_items(pairs):
        EqualsFileContent(expected)(path)


def assert_text_equal(value: str, expected: str) -> None:
    TextEqual(expected)(value)


def assert_implement(subject: Any, spec: Any) -> None:
    """Assert that ``subject`` has a callable member for every name in ``spec``.

    ``spec`` is a list of names, a mapping (its callable-valued keys), or a
    class / protocol (its public methods).
    """
    Implements(spec)(subject)


def assert_not_implement(subject: Any, spec: Any) -> None:
    """Assert that ``subject`` has no callable member named in ``spec``."""
    NotImplements(spec)(subject)


def assert_object_content(obj: Any, content: Any) -> None:
    """Assert that ``obj`` recursively contains the keys and values of ``content``."""
    ObjectContent(content)(obj)


def assert_no_object_content(obj: Any, content: Any) -> None:
    """Assert that no leaf value of ``content`` is found at its key in ``obj``."""
    NoObjectContent(content)(obj)


def assert_json_file_content(path: str | os.PathLike[str], content: Any) -> None:
    """Assert that a JSON file's parsed content contains ``content``."""
    JSONFileContent(content)(path)


def assert_no_json_file_content(path: str | os.PathLike[str], content: Any) -> None:
    """Assert that a JSON file's parsed content does not contain ``content``."""
    NoJSONFileContent(content)(path)


assert_JSON_file_content = assert_json_file_content
assert_no_JSON_file_content = assert_no_json_file_content
