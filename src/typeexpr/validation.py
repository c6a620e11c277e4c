"""
Pydantic integration: guard a model field with a type expression.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import AfterValidator

from typeexpr.register import DefaultTypeRegistry, TypeAssertionError

if TYPE_CHECKING:
    from typeexpr.register import TypeRegistry


def conforms_to(type_expr: str, *, registry: TypeRegistry | None = None) -> AfterValidator:
    """
    Build a validator which rejects values not matching `type_expr`.

    Args:
        type_expr: Type expression the field value must satisfy.
        registry: Registry resolving named types. Defaults to DefaultTypeRegistry, looked up when
            the validator runs.

    Examples:
        ```python
        from typing import Annotated, Any

        from pydantic import BaseModel


        class Event(BaseModel):
            payload: Annotated[Any, conforms_to("{id:number, tags:string[]}")]
        ```
    """

    def _validate(value: Any) -> Any:  # noqa: ANN401
        target = registry if registry is not None else DefaultTypeRegistry
        try:
            target.assert_type(value, type_expr)
        except TypeAssertionError as e:
            # pydantic only converts ValueError and AssertionError into validation errors.
            raise ValueError(str(e)) from e
        return value

    return AfterValidator(_validate)
