"""Standard assertion primitives under snake_case names.

The ``unittest.TestCase`` assertion methods are exported unmodified, e.g.
``assertEqual`` as ``assert_equal`` and ``assertRaises`` as ``assert_raises``.
"""

from __future__ import annotations

import unittest
from typing import Any


class _Primitives(unittest.TestCase):
    maxDiff = None

    def runTest(self) -> None:
        pass


_case = _Primitives()


def ok(value: Any, message: str | None = None) -> None:
    """Fail unless ``value`` is truthy."""
    if not value:
        raise AssertionError(message or f"{value!r} is not truthy")


# Truthiness and identity
assert_true = _case.assertTrue
assert_false = _case.assertFalse
assert_is = _case.assertIs
assert_is_not = _case.assertIsNot
assert_is_none = _case.assertIsNone
assert_is_not_none = _case.assertIsNotNone
assert_is_instance = _case.assertIsInstance
assert_not_is_instance = _case.assertNotIsInstance

# Equality and ordering
assert_equal = _case.assertEqual
assert_not_equal = _case.assertNotEqual
assert_almost_equal = _case.assertAlmostEqual
assert_not_almost_equal = _case.assertNotAlmostEqual
assert_greater = _case.assertGreater
assert_greater_equal = _case.assertGreaterEqual
assert_less = _case.assertLess
assert_less_equal = _case.assertLessEqual

# Containers and text
assert_in = _case.assertIn
assert_not_in = _case.assertNotIn
assert_count_equal = _case.assertCountEqual
assert_sequence_equal = _case.assertSequenceEqual
assert_list_equal = _case.assertListEqual
assert_tuple_equal = _case.assertTupleEqual
assert_set_equal = _case.assertSetEqual
assert_dict_equal = _case.assertDictEqual
assert_multi_line_equal = _case.assertMultiLineEqual
assert_regex = _case.assertRegex
assert_not_regex = _case.assertNotRegex

# Exceptions, warnings and logs
assert_raises = _case.assertRaises
assert_raises_regex = _case.assertRaisesRegex
assert_warns = _case.assertWarns
assert_warns_regex = _case.assertWarnsRegex
assert_logs = _case.assertLogs
assert_no_logs = _case.assertNoLogs


__all__ = [
    "ok",
    "assert_true",
    "assert_false",
    "assert_is",
    "assert_is_not",
    "assert_is_none",
    "assert_is_not_none",
    "assert_is_instance",
    "assert_not_is_instance",
    "assert_equal",
    "assert_not_equal",
    "assert_almost_equal",
    "assert_not_almost_equal",
    "assert_greater",
    "assert_greater_equal",
    "assert_less",
    "assert_less_equal",
    "assert_in",
    "assert_not_in",
    "assert_count_equal",
    "assert_sequence_equal",
    "assert_list_equal",
    "assert_tuple_equal",
    "assert_set_equal",
    "assert_dict_equal",
    "assert_multi_line_equal",
    "assert_regex",
    "assert_not_regex",
    "assert_raises",
    "assert_raises_regex",
    "assert_warns",
    "assert_warns_regex",
    "assert_logs",
    "assert_no_logs",
]
