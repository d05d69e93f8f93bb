"""Normalisation of single-item and batch call arguments."""

from __future__ import annotations

import os
from typing import Any, TypeAlias

PathArg: TypeAlias = str | os.PathLike[str]
PathPair: TypeAlias = tuple[PathArg, Any] | list[Any]

# A call receives one path, a (path, value) pair spread over two arguments,
# or a single list/tuple holding a batch of either.
WorkItem: TypeAlias = PathArg | PathPair


def to_work_items(args: tuple[Any, ...]) -> list[Any]:
    """Turn the positional arguments of a call into an ordered list of work items.

    - ``f(path, pattern)``: the whole argument tuple is one item.
    - ``f([a, b])`` / ``f((a, b))``: the sequence holds the items.
    - ``f(path)``: a single item.

    Item shapes are not validated here.
    """
    if len(args) > 1:
        return [args]
    if not args:
        return []

    arg = args[0]
    if isinstance(arg, (list, tuple)):
        return list(arg)
    return [arg]
