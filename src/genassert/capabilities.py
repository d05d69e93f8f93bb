"""Capability (interface) conformance checks."""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from typing import Any, Generic, Protocol


_IGNORED_BASES = (object, Protocol, Generic)


def _public_callables(obj: Any) -> list[str]:
    """Public callable attribute names of an object, in definition order."""
    if inspect.isclass(obj):
        names: list[str] = []
        for base in reversed(obj.__mro__):
            if base in _IGNORED_BASES:
                continue
            names.extend(name for name in vars(base) if name not in names)
    else:
        names = dir(obj)

    return [name for name in names if not name.startswith("_") and callable(getattr(obj, name, None))]


def capability_set(spec: Any) -> list[str]:
    """Derive the member names described by ``spec``.

    ``spec`` may be a single name, an iterable of names (list, tuple, set,
    ``dict.keys()``), a mapping whose callable-valued keys are taken, or a
    class / protocol / instance whose public methods are taken.
    """
    if isinstance(spec, str):
        return [spec]
    if isinstance(spec, Mapping):
        return [name for name, value in spec.items() if callable(value)]
    if isinstance(spec, Iterable) and not inspect.isclass(spec):
        return list(spec)
    return _public_callables(spec)


def has_capability(subject: Any, name: str) -> bool:
    """Return True if ``subject`` exposes ``name`` as a callable member.

    Mapping subjects are looked up by key first. Names of the built-in mapping
    methods (``keys``, ``items``, ...) only count when present as keys.
    """
    if isinstance(subject, Mapping):
        if name in subject:
            return callable(subject[name])
        if hasattr(dict, name):
            return False
    return callable(getattr(subject, name, None))


def missing_capabilities(subject: Any, spec: Any) -> list[str]:
    return [name for name in capability_set(spec) if not has_capability(subject, name)]


def present_capabilities(subject: Any, spec: Any) -> list[str]:
    return [name for name in capability_set(spec) if has_capability(subject, name)]
