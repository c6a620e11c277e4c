from __future__ import annotations

import logging
from collections.abc import Callable
from functools import reduce
from typing import TYPE_CHECKING, Any

from typeexpr.compiler.compiled import CompiledTest, PredicateTest, ShapeTest, is_shape
from typeexpr.compiler.errs import UnknownTypeError
from typeexpr.compiler.syntax import generic_argument, is_enclosed, split_top_level, unquote
from typeexpr.utils.values import is_array, is_object

if TYPE_CHECKING:
    from typeexpr.evaluator import Evaluator
    from typeexpr.result import TestResult

logger = logging.getLogger(__name__)

WILDCARD = "*"

TypeLookup = Callable[[str], "CompiledTest | None"]


def _always(_: Any) -> bool:  # noqa: ANN401
    return True


class Compiler:
    """
    Recursive-descent compiler from type expression strings to compiled tests.

    Constructs are tried in a fixed order and the first match wins:
    union, intersection, wildcard, `array<T>`, `T[]`, `object<K,V>`, `{}`, `{k:T}`,
    `promise<T>`, grouping parentheses, then registered names.

    Nothing is cached; named types come back as the exact object stored by the registry.
    """

    def __init__(self, *, lookup: TypeLookup, evaluator: Evaluator):
        self.lookup = lookup
        self.evaluator = evaluator
        self._rules: tuple[Callable[[str], CompiledTest | None], ...] = (
            self._compile_union,
            self._compile_intersection,
            self._compile_wildcard,
            self._compile_array_of,
            self._compile_array_shorthand,
            self._compile_map_of,
            self._compile_empty_shape,
            self._compile_shape,
            self._compile_promise_of,
            self._compile_group,
            self._compile_named,
        )

    def compile(self, type_expr: str) -> CompiledTest:
        """
        Compile a type expression.

        Raises:
            UnknownTypeError: If the expression, or any part of it, cannot be compiled.
        """
        expr = type_expr.strip()
        for rule in self._rules:
            compiled = rule(expr)
            if compiled is not None:
                return compiled
        raise UnknownTypeError(expr)

    def _compile_union(self, expr: str) -> CompiledTest | None:
        parts = split_top_level(expr, "|")
        if len(parts) < 2:  # noqa: PLR2004
            return None
        tests = tuple(self.compile(part) for part in parts)
        evaluator = self.evaluator

        def _union(value: Any) -> TestResult:  # noqa: ANN401
            return evaluator.test_union(value, tests, expr)

        return PredicateTest(fn=_union, expr=expr)

    def _compile_intersection(self, expr: str) -> CompiledTest | None:
        parts = split_top_level(expr, "&")
        if len(parts) < 2:  # noqa: PLR2004
            return None
        tests = [self.compile(part) for part in parts]

        shapes = [test for test in tests if is_shape(test)]
        branches: list[CompiledTest] = [test for test in tests if not is_shape(test)]
        if shapes:
            # Left-to-right fold, so the last shape declaring a key decides its test.
            seed = ShapeTest(properties={}, accept_undefined_properties=True, expr=expr)
            branches.insert(0, reduce(lambda acc, shape: acc.merge(shape, expr=expr), shapes, seed))

        evaluator = self.evaluator
        final_branches = tuple(branches)

        def _intersection(value: Any) -> TestResult:  # noqa: ANN401
            return evaluator.test_intersection(value, final_branches, expr)

        return PredicateTest(fn=_intersection, expr=expr)

    @staticmethod
    def _compile_wildcard(expr: str) -> CompiledTest | None:
        if expr != WILDCARD:
            return None
        return PredicateTest(fn=_always, expr=expr)

    def _compile_array_of(self, expr: str) -> CompiledTest | None:
        item_type = generic_argument(expr, "array")
        if item_type is None:
            return None
        return self._array_test(item_type, expr)

    def _compile_array_shorthand(self, expr: str) -> CompiledTest | None:
        if not expr.endswith("[]"):
            return None
        return self._array_test(expr[:-2].strip(), expr)

    def _array_test(self, item_type: str, expr: str) -> CompiledTest:
        item_test = self.compile(item_type)
        evaluator = self.evaluator

        def _array_of(value: Any) -> bool | TestResult:  # noqa: ANN401
            return is_array(value) and evaluator.every_array_item(value, item_test, item_type, expr)

        return PredicateTest(fn=_array_of, expr=expr)

    def _compile_map_of(self, expr: str) -> CompiledTest | None:
        inner = generic_argument(expr, "object")
        if inner is None:
            return None
        parts = split_top_level(inner, ",", maxsplit=1)
        if len(parts) != 2:  # noqa: PLR2004
            return None
        key_type, value_type = parts
        key_test = self.compile(key_type)
        value_test = self.compile(value_type)
        evaluator = self.evaluator

        def _map_of(value: Any) -> bool | TestResult:  # noqa: ANN401
            return is_object(value) and evaluator.every_object_item(
                value,
                key_test,
                value_test,
                key_type,
                value_type,
                expr,
            )

        return PredicateTest(fn=_map_of, expr=expr)

    @staticmethod
    def _compile_empty_shape(expr: str) -> CompiledTest | None:
        if expr.replace(" ", "") != "{}":
            return None
        return PredicateTest(fn=is_object, expr=expr)

    def _compile_shape(self, expr: str) -> CompiledTest | None:
        if not is_enclosed(expr, "{"):
            return None
        properties: dict[str, CompiledTest] = {}
        for entry in split_top_level(expr[1:-1], ","):
            if not entry:
                continue
            key, sep, prop_type = entry.partition(":")
            properties[unquote(key.strip())] = self.compile(prop_type if sep else WILDCARD)
        return ShapeTest(properties=properties, expr=expr)

    def _compile_promise_of(self, expr: str) -> CompiledTest | None:
        result_type = generic_argument(expr, "promise")
        if result_type is None:
            return None
        logger.warning('Tried to assert a promise with asynchronous result type "%s", which is ignored.', result_type)
        return self.compile("promise")

    def _compile_group(self, expr: str) -> CompiledTest | None:
        if not is_enclosed(expr, "("):
            return None
        return self.compile(expr[1:-1])

    def _compile_named(self, expr: str) -> CompiledTest | None:
        return self.lookup(expr)
