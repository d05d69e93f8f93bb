"""Recursive partial containment checks over nested mappings and sequences.

Mappings and sequences are both addressed by key: a sequence index is just a
key, so an expected ``[0]`` is satisfied by a candidate ``[0, "a"]``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Any


class _Missing:
    """Sentinel for a key absent from the candidate."""

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class Kind(Enum):
    """Shape of a value as seen by the comparator."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    MISSING = "missing"


def kind_of(value: Any) -> Kind:
    if value is MISSING:
        return Kind.MISSING
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return Kind.SEQUENCE
    return Kind.SCALAR


def is_nested(value: Any) -> bool:
    return kind_of(value) in (Kind.MAPPING, Kind.SEQUENCE)


def iter_entries(value: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs of a nested value; indices for sequences."""
    match kind_of(value):
        case Kind.MAPPING:
            yield from value.items()
        case Kind.SEQUENCE:
            yield from enumerate(value)
        case _:
            return


def lookup(candidate: Any, key: Any) -> Any:
    """Return ``candidate[key]`` or MISSING when the candidate has no such key."""
    match kind_of(candidate):
        case Kind.MAPPING:
            return candidate.get(key, MISSING)
        case Kind.SEQUENCE if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(candidate):
            return candidate[key]
        case _:
            return MISSING


def strict_equal(actual: Any, expected: Any) -> bool:
    """Equality that keeps bools apart from ints and never matches MISSING."""
    if actual is MISSING or expected is MISSING:
        return False
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    return actual == expected


def _join(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else str(key)


def find_mismatches(candidate: Any, expected: Any, negate: bool = False, _path: str = "") -> list[str]:
    """Return the key paths at which ``candidate`` violates ``expected``.

    With ``negate`` False every expected leaf must be equal in the candidate.
    With ``negate`` True every expected leaf must differ, nested values being
    checked the same way key by key.
    """
    offending: list[str] = []
    for key, expected_value in iter_entries(expected):
        path = _join(_path, key)
        actual_value = lookup(candidate, key)

        if is_nested(expected_value):
            offending.extend(find_mismatches(actual_value, expected_value, negate, path))
            continue

        if strict_equal(actual_value, expected_value) == negate:
            offending.append(path)
    return offending


def contains(candidate: Any, expected: Any) -> bool:
    """Return True if ``candidate`` holds at least the structure of ``expected``."""
    return not find_mismatches(candidate, expected)


def excludes(candidate: Any, expected: Any) -> bool:
    """Return True if no expected leaf value is present at its key in ``candidate``.

    Not the negation of :func:`contains`: a candidate matching some leaves and
    missing others neither contains nor excludes the partial.
    """
    return not find_mismatches(candidate, expected, negate=True)
