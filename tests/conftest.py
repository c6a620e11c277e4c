"""
Shared fixtures and value types for typeexpr tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest

from typeexpr import TypeRegistry, TypeRegistryConfig

# ============================================================================
# Value Types (diverse shapes to validate checks work beyond plain dicts)
# ============================================================================


@dataclass
class Point:
    """Dataclass value type."""

    x: float
    y: float


class Color(Enum):
    """Enum members stand in for symbols."""

    RED = "red"
    GREEN = "green"


class Product:
    """Plain class value type."""

    def __init__(self, name: str, price: float, *, in_stock: bool):
        self.name = name
        self.price = price
        self.in_stock = in_stock


class Thenable:
    """Exposes a continuation registrar without being a real future."""

    def then(self, callback):
        return callback(None)


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def registry() -> TypeRegistry:
    """Provides a fresh registry which bootstraps the built-in types on first use."""
    return TypeRegistry("test_registry")


@pytest.fixture
def strict_registry() -> TypeRegistry:
    """Provides a fresh registry which requires an explicit define_defaults() call."""
    return TypeRegistry("strict_registry", config=TypeRegistryConfig(define_defaults_just_in_time=False))


@pytest.fixture
def point_registry(registry: TypeRegistry) -> TypeRegistry:
    """Provides a registry with a `Point` shape defined."""
    registry.define_type("Point", {"x": "number", "y": "number"})
    return registry
