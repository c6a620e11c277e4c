from __future__ import annotations

import logging
import sys
from functools import partial
from typing import TYPE_CHECKING, Any

from typeexpr.compiler.compiled import PredicateTest, ShapeTest
from typeexpr.evaluator.aggregate import ResultAggregator
from typeexpr.result import TestResult
from typeexpr.utils.stringify import DEFAULT_MAX_DEPTH, DEFAULT_MAX_LENGTH, to_display_string
from typeexpr.utils.values import is_object

if TYPE_CHECKING:
    from typeexpr.compiler import CompiledTest
    from typeexpr.types import TestOutcome

if sys.version_info >= (3, 11):
    from typing import assert_never
else:
    from typing_extensions import assert_never

logger = logging.getLogger(__name__)


class Evaluator(ResultAggregator):
    """
    Runs compiled tests against values and normalizes what they return.

    Exceptions raised by test functions never escape: they are logged and turned into a failing
    result.
    """

    def __init__(self, *, max_repr_depth: int = DEFAULT_MAX_DEPTH, max_repr_length: int = DEFAULT_MAX_LENGTH):
        self.stringify = partial(to_display_string, max_depth=max_repr_depth, max_length=max_repr_length)

    def evaluate(self, test: CompiledTest, value: Any, type_expr: str | None = None) -> TestResult:  # noqa: ANN401
        """
        Run `test` against `value`.

        Args:
            test: The compiled test.
            value: The value under test.
            type_expr: Expression named in descriptions. Defaults to the expression the test was
                compiled from.

        Returns:
            The normalized result.
        """
        label = type_expr or test.expr or "*"

        match test:
            case ShapeTest() as shape:
                outcome = self._run(lambda v: is_object(v) and self.every_object_property(v, shape, label), value, label)
            case PredicateTest(fn=fn):
                outcome = self._run(fn, value, label)
            case _:
                assert_never(test)

        return TestResult.from_outcome(outcome)

    @staticmethod
    def _run(fn: Any, value: Any, label: str) -> TestOutcome:  # noqa: ANN401
        try:
            return fn(value)
        except Exception as e:
            logger.exception('Test function for "%s" raised', label)
            return TestResult(value=False, description=f"Test function failed with: {e!r}")
