from .classes import class_to_property_types, class_to_test
from .stringify import to_display_string
from .values import UNDEFINED, is_array, is_object, is_promise, own_items

__all__ = [
    "UNDEFINED",
    "class_to_property_types",
    "class_to_test",
    "is_array",
    "is_object",
    "is_promise",
    "own_items",
    "to_display_string",
]
