from .compiled import CompiledTest, PredicateTest, ShapeTest, is_shape
from .compiler import Compiler
from .errs import TypeExprError, UnknownTypeError

__all__ = [
    "CompiledTest",
    "Compiler",
    "PredicateTest",
    "ShapeTest",
    "TypeExprError",
    "UnknownTypeError",
    "is_shape",
]
