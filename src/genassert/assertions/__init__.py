"""Assertion classes for generated artifacts and in-memory objects."""

from .base import Assertion, AssertionMetadata, AssertionResult
from .files import EqualsFileContent, FileContent, FileExists, FileMissing, NoFileContent, TextEqual
from .objects import (
    Implements,
    JSONFileContent,
    NoJSONFileContent,
    NoObjectContent,
    NotImplements,
    ObjectContent,
)

__all__ = [
    "Assertion",
    "AssertionMetadata",
    "AssertionResult",
    # Files and text
    "FileExists",
    "FileMissing",
    "FileContent",
    "NoFileContent",
    "EqualsFileContent",
    "TextEqual",
    # Objects
    "Implements",
    "NotImplements",
    "ObjectContent",
    "NoObjectContent",
    "JSONFileContent",
    "NoJSONFileContent",
]
