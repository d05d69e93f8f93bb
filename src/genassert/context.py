"""Recording of assertion results evaluated within a block."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from genassert.assertions.base import AssertionResult


RESULTS_CONTEXT: ContextVar[list[AssertionResult] | None] = ContextVar("results_context", default=None)


@contextmanager
def collect_results() -> Iterator[list[AssertionResult]]:
    """Collect every AssertionResult evaluated inside the block, passed or failed.

    Example:
        with collect_results() as results:
            assert_file("package.json")
        assert results[0].passed
    """
    sink: list[AssertionResult] = []
    token = RESULTS_CONTEXT.set(sink)
    try:
        yield sink
    finally:
        RESULTS_CONTEXT.reset(token)


def record_result(result: AssertionResult) -> None:
    """Append a result to the active collector, if any."""
    sink = RESULTS_CONTEXT.get()
    if sink is not None:
        sink.append(result)
