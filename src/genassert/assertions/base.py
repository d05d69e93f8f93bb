"""Base assertion classes and result types."""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, SerializationInfo, field_serializer

from genassert.config import get_config
from genassert.context import record_result
from genassert.errors import AssertionFailedError

logger = logging.getLogger(__name__)


def _truncate(value: Any, max_len: int = 30) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class AssertionMetadata(BaseModel):
    """Metadata for an assertion.

    Attributes:
    ----------
    assertion_name: str | None
        Name of the assertion that was evaluated
    test_name: str | None
        Name of the test function the assertion ran in, if any
    actual: str
        repr of the subject under check (a path, an object)
    expected: str | None
        repr of the expected value, when the assertion has one
    """
    # Identifiers
    assertion_id: UUID = Field(default_factory=uuid4)
    assertion_name: str | None = None
    test_name: str | None = None

    # Assertion inputs
    actual: str
    expected: str | None = None

    @field_serializer("actual", "expected")
    def _truncate_inputs(self, v: str | None, info: SerializationInfo) -> str | None:
        """Truncate actual and expected when serialising with the ``truncate`` context."""
        ctx = info.context or {}
        if v is None or not ctx.get("truncate"):
            return v
        max_len = get_config().repr_max_len
        if len(v) <= max_len:
            return v
        return v[:max_len] + "..."

    def model_post_init(self, __context) -> None:
        """Auto-fill test_name from the nearest calling ``test_*`` function."""
        if self.test_name:
            return

        frame = inspect.currentframe()

        if frame is None:
            logger.debug("No frame found for test_name")
            return

        frame = frame.f_back
        while frame:
            if frame.f_code.co_name.startswith("test_"):
                self.test_name = frame.f_code.co_name
                break
            frame = frame.f_back


class AssertionResult(BaseModel):
    """Result of evaluating an assertion.

    Attributes:
    ----------
    metadata: AssertionMetadata
        Metadata for the assertion result
    passed: bool
        Whether the assertion passed
    message: str | None
        Optional message explaining the result
    """

    metadata: AssertionMetadata
    passed: bool
    message: str | None = None

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )

    def __bool__(self) -> bool:
        return self.passed


class Assertion(ABC):
    """Base class for genassert assertions.

    The 'name' attribute is automatically set to the class name,
    but can be overridden by defining it explicitly as a class variable
    or per instance.

    Subclasses implement `evaluate()` which returns an AssertionResult.
    Calling the assertion raises AssertionFailedError if the result fails.
    """

    name: str

    def __init_subclass__(cls, **kwargs):
        """Auto-generate name from class name if not provided."""
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    def __call__(self, actual: Any) -> AssertionResult:
        """Evaluate the assertion and raise on failure.

        Parameters
        ----------
        actual : Any
            The subject under check

        Returns:
        -------
        AssertionResult
            Result of the assertion evaluation

        Raises:
        ------
        AssertionFailedError
            If the assertion fails (passed=False)
        """
        result = self.evaluate(actual)
        record_result(result)
        if not result.passed:
            logger.debug("%s failed: %s", self.name, result.message)
            raise AssertionFailedError(result)
        logger.debug("%s passed", self.name)
        return result

    def _result(self, actual: Any, passed: bool, message: str | None = None, expected: Any = None) -> AssertionResult:
        """Build a result for this assertion; ``message`` is dropped on success."""
        metadata = AssertionMetadata(
            assertion_name=self.name,
            actual=actual if isinstance(actual, str) else repr(actual),
            expected=None if expected is None else repr(expected),
        )
        return AssertionResult(metadata=metadata, passed=passed, message=None if passed else message)

    @abstractmethod
    def evaluate(self, actual: Any) -> AssertionResult:
        """Evaluate the assertion.

        Parameters
        ----------
        actual : Any
            The subject under check

        Returns:
        -------
        AssertionResult
            Result of the assertion evaluation
        """
