from .errs import AliasTargetNotFoundError, TypeAssertionError, UnsupportedDefinitionError
from .registry import DefaultTypeRegistry, TypeRegistry

__all__ = [
    "AliasTargetNotFoundError",
    "DefaultTypeRegistry",
    "TypeAssertionError",
    "TypeRegistry",
    "UnsupportedDefinitionError",
]
