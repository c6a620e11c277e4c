from __future__ import annotations

from collections.abc import Callable
from numbers import Number
from typing import Any

from typeexpr.utils.values import is_array, is_object


def class_to_property_types(cls: type) -> dict[str, str]:
    """
    Map the public attributes declared on a class to type names.

    Useful for registering an interface-like class as an object shape:

    Examples:
        >>> class Store:
        ...     name = ""
        ...     def get(self, key): ...
        >>> class_to_property_types(Store)
        {'name': 'string', 'get': 'function'}
    """
    types: dict[str, str] = {}
    for key, value in vars(cls).items():
        if key.startswith("_"):
            continue
        if isinstance(value, (staticmethod, classmethod)) or callable(value):
            types[key] = "function"
        elif isinstance(value, str):
            types[key] = "string"
        elif isinstance(value, bool):
            types[key] = "boolean"
        elif isinstance(value, Number):
            types[key] = "number"
        elif is_array(value):
            types[key] = "array"
        elif is_object(value):
            types[key] = "object"
    return types


def class_to_test(cls: type) -> Callable[[Any], bool]:
    """
    Create a test function for instances of `cls`.
    """

    def _is_instance(value: Any) -> bool:  # noqa: ANN401
        return isinstance(value, cls)

    _is_instance.__qualname__ = f"is_{cls.__name__}"
    return _is_instance
