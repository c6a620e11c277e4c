import logging

from .compiler import CompiledTest, PredicateTest, ShapeTest, TypeExprError, UnknownTypeError
from .config import TypeOptions, TypeRegistryConfig
from .register import (
    AliasTargetNotFoundError,
    DefaultTypeRegistry,
    TypeAssertionError,
    TypeRegistry,
    UnsupportedDefinitionError,
)
from .result import TestResult
from .utils import UNDEFINED, class_to_property_types, class_to_test, is_promise, to_display_string
from .validation import conforms_to

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "UNDEFINED",
    "AliasTargetNotFoundError",
    "CompiledTest",
    "DefaultTypeRegistry",
    "PredicateTest",
    "ShapeTest",
    "TestResult",
    "TypeAssertionError",
    "TypeExprError",
    "TypeOptions",
    "TypeRegistry",
    "TypeRegistryConfig",
    "UnknownTypeError",
    "UnsupportedDefinitionError",
    "class_to_property_types",
    "class_to_test",
    "conforms_to",
    "is_promise",
    "to_display_string",
]
