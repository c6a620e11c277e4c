from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from typeexpr.result import TestResult
from typeexpr.utils.values import own_items

if TYPE_CHECKING:
    from typeexpr.compiler import CompiledTest, ShapeTest


class ResultAggregator(ABC):
    """
    Combine nested results for containers, shapes, unions and intersections.

    Only failing nested results are kept, so the size of a diagnostic follows the number of
    defects rather than the size of the input.
    """

    stringify: Callable[[Any], str]

    @abstractmethod
    def evaluate(self, test: CompiledTest, value: Any, type_expr: str | None = None) -> TestResult:  # noqa: ANN401
        """Run one compiled test against one value."""
        ...

    def every_array_item(
        self,
        items: Iterable[Any],
        item_test: CompiledTest,
        item_type: str,
        type_expr: str,
    ) -> TestResult:
        """
        Every item of a sequence must pass `item_test`.
        """
        failed = tuple(result for item in items if not (result := self.evaluate(item_test, item, item_type)))
        if not failed:
            return TestResult.passed()
        return TestResult(
            value=False,
            description=f'One in "{self.stringify(items)}" failed to test as "{item_type}" in "{type_expr}"',
            failed=failed,
        )

    def every_object_item(  # noqa: PLR0913
        self,
        obj: Any,  # noqa: ANN401
        key_test: CompiledTest,
        value_test: CompiledTest,
        key_type: str,
        value_type: str,
        type_expr: str,
    ) -> TestResult:
        """
        Every key must pass `key_test` and every value `value_test`.

        Keys and values are judged independently and all failures are collected.
        """
        failed: list[TestResult] = []
        for key, value in own_items(obj):
            key_result = self.evaluate(key_test, key, key_type)
            if not key_result:
                failed.append(key_result)
            value_result = self.evaluate(value_test, value, value_type)
            if not value_result:
                failed.append(value_result)

        if not failed:
            return TestResult.passed()
        return TestResult(
            value=False,
            description=f'Object "{self.stringify(obj)}" failed to test as "{type_expr}"',
            failed=tuple(failed),
        )

    def every_object_property(self, obj: Any, shape: ShapeTest, type_expr: str) -> TestResult:  # noqa: ANN401
        """
        Check the properties present on `obj` against a shape.

        Driven by the keys of the value: a property the shape declares but the value lacks is
        not reported.
        """
        failed: list[TestResult] = []
        for raw_key, value in own_items(obj):
            key = raw_key if isinstance(raw_key, str) else str(raw_key)
            prop_test = shape.properties.get(key)
            if prop_test is None:
                if not shape.accept_undefined_properties:
                    failed.append(
                        TestResult(
                            value=False,
                            description=f'Property "{key}" in "{self.stringify(obj)}" was not defined in "{type_expr}"',
                        ),
                    )
                continue

            result = self.evaluate(prop_test, value)
            if not result:
                failed.append(
                    TestResult(
                        value=False,
                        description=f'Property "{key}" in "{self.stringify(obj)}" failed test in "{type_expr}"',
                        failed=(result,),
                    ),
                )

        if not failed:
            return TestResult.passed()
        return TestResult(
            value=False,
            description=f'Object "{self.stringify(obj)}" failed to test as "{type_expr}"',
            failed=tuple(failed),
        )

    def test_union(self, value: Any, tests: Iterable[CompiledTest], type_expr: str) -> TestResult:  # noqa: ANN401
        """
        At least one branch must pass. Stops at the first passing branch.
        """
        failed: list[TestResult] = []
        for test in tests:
            result = self.evaluate(test, value)
            if result:
                return TestResult.passed()
            failed.append(result)
        return TestResult(
            value=False,
            description=f'Value "{self.stringify(value)}" did not match "{type_expr}"',
            failed=tuple(failed),
        )

    def test_intersection(self, value: Any, tests: Iterable[CompiledTest], type_expr: str) -> TestResult:  # noqa: ANN401
        """
        Every branch must pass. All branches run so every failure is reported.
        """
        failed = tuple(result for test in tests if not (result := self.evaluate(test, value)))
        if not failed:
            return TestResult.passed()
        return TestResult(
            value=False,
            description=f'Value "{self.stringify(value)}" did not match "{type_expr}"',
            failed=failed,
        )
