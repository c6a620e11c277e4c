from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typeexpr.compiler.errs import TypeExprError

if TYPE_CHECKING:
    from typeexpr.result import TestResult


class UnsupportedDefinitionError(TypeExprError):
    """
    Raised when define_type() is given something that is not a type expression, class, callable or mapping.
    """

    def __init__(self, name: str, definition: Any):  # noqa: ANN401
        self.name = name
        self.definition = definition
        super().__init__(f'Type definition for "{name}" is unknown: {type(definition).__name__}')


class AliasTargetNotFoundError(TypeExprError):
    """
    Raised when an alias points at a type that has not been registered yet.
    """

    def __init__(self, alias: str, target: str):
        self.alias = alias
        self.target = target
        super().__init__(f'Could not find a type "{target}" to define alias "{alias}"')


class TypeAssertionError(TypeError):
    """
    Raised by assert_type() when a value does not match its type.
    """

    def __init__(self, type_expr: str, result: TestResult, fallback: str):
        """
        Args:
            type_expr: The asserted type expression.
            result: The failing result.
            fallback: Message used when the result carries no description.
        """
        self.type_expr = type_expr
        self.result = result

        detail = result.explain() if result.description else fallback
        super().__init__(f"Assertion failed: {detail}")
