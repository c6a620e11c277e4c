from typing import Annotated, Any

import pytest
from pydantic import BaseModel, ValidationError

from typeexpr import TypeRegistry, conforms_to


def test_field_guarded_by_type_expression(point_registry: TypeRegistry):
    class Drawing(BaseModel):
        anchor: Annotated[Any, conforms_to("Point", registry=point_registry)]
        layers: Annotated[list[Any], conforms_to("string[]", registry=point_registry)]

    drawing = Drawing(anchor={"x": 1, "y": 2}, layers=["base"])
    assert drawing.anchor == {"x": 1, "y": 2}

    with pytest.raises(ValidationError, match="Assertion failed"):
        Drawing(anchor={"x": "1", "y": 2}, layers=[])

    with pytest.raises(ValidationError, match="failed to test as"):
        Drawing(anchor={"x": 1, "y": 2}, layers=[1])


def test_default_registry_is_used():
    class Measure(BaseModel):
        amount: Annotated[Any, conforms_to("number")]

    assert Measure(amount=3).amount == 3
    with pytest.raises(ValidationError):
        Measure(amount="3")
