from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal, TypeAlias, TypeGuard, final

if TYPE_CHECKING:
    from typeexpr.config import TypeOptions
    from typeexpr.types import TypeTestFn


@dataclass(frozen=True, kw_only=True, slots=True)
@final
class PredicateTest:
    """
    A compiled test backed by a single test function.
    """

    node_type: Literal["predicate"] = field(default="predicate", init=False)
    fn: TypeTestFn
    expr: str | None = field(default=None)


@dataclass(frozen=True, kw_only=True, slots=True, eq=False)
@final
class ShapeTest:
    """
    A compiled object shape: one nested compiled test per property name.
    """

    node_type: Literal["shape"] = field(default="shape", init=False)
    properties: Mapping[str, CompiledTest]
    accept_undefined_properties: bool = field(default=False)
    expr: str | None = field(default=None)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def merge(self, other: ShapeTest, *, expr: str | None = None) -> ShapeTest:
        """
        Combine two shapes property by property. `other` wins on shared keys.

        The result tolerates undefined properties only if both sides do.
        """
        return ShapeTest(
            properties={**self.properties, **other.properties},
            accept_undefined_properties=self.accept_undefined_properties and other.accept_undefined_properties,
            expr=expr,
        )

    def with_options(self, options: TypeOptions, *, expr: str | None = None) -> ShapeTest:
        """
        Copy of this shape carrying the options (and name) of a defined type.
        """
        return replace(
            self,
            accept_undefined_properties=options.accept_undefined_properties,
            expr=expr or self.expr,
        )


CompiledTest: TypeAlias = PredicateTest | ShapeTest


def is_shape(test: Any) -> TypeGuard[ShapeTest]:  # noqa: ANN401
    """
    Check if the given compiled test is an object shape.
    """

    return isinstance(test, ShapeTest)
