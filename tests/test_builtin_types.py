"""
Test suite for the built-in types registered by define_defaults().

Tests cover:
- Matching and non-matching values for every built-in name
- Capitalised aliases
- Wildcard
"""

from __future__ import annotations

import datetime
from concurrent.futures import Future
from decimal import Decimal

import pytest

from typeexpr import UNDEFINED, TypeRegistry

from .conftest import Color, Point, Product, Thenable

MATCHING = [
    ("string", "hello"),
    ("string", ""),
    ("number", 123),
    ("number", 1.5),
    ("number", Decimal("1.25")),
    ("boolean", True),
    ("boolean", False),
    ("undefined", UNDEFINED),
    ("null", None),
    ("symbol", Color.RED),
    ("function", len),
    ("function", lambda: None),
    ("date", datetime.date(2024, 1, 1)),
    ("date", datetime.datetime(2024, 1, 1, 12, 0)),
    ("array", [1, 2, "test"]),
    ("array", (1, 2)),
    ("array", {1, 2}),
    ("object", {}),
    ("object", []),
    ("object", Point(1, 2)),
    ("object", Product("Cable", 5.0, in_stock=False)),
    ("promise", Future()),
    ("promise", Thenable()),
    ("error", ValueError("bad")),
    ("TypeError", TypeError("bad")),
    ("ValueError", ValueError("bad")),
]

NOT_MATCHING = [
    ("string", 123),
    ("string", None),
    ("number", "123"),
    ("number", True),
    ("boolean", "true"),
    ("boolean", 0),
    ("undefined", None),
    ("undefined", "123"),
    ("null", UNDEFINED),
    ("null", 0),
    ("symbol", "red"),
    ("function", "123"),
    ("function", int),
    ("date", "2024-01-01"),
    ("array", "abc"),
    ("array", {"a": 1}),
    ("object", "123"),
    ("object", 1),
    ("object", None),
    ("object", Color.RED),
    ("promise", "123"),
    ("promise", None),
    ("error", "bad"),
    ("TypeError", ValueError("bad")),
]


@pytest.mark.parametrize(("type_name", "value"), MATCHING)
def test_builtin_type_matches(registry: TypeRegistry, type_name: str, value):
    assert registry.test(value, type_name) is True


@pytest.mark.parametrize(("type_name", "value"), NOT_MATCHING)
def test_builtin_type_rejects(registry: TypeRegistry, type_name: str, value):
    assert registry.test(value, type_name) is False


@pytest.mark.parametrize(
    ("alias", "value", "other"),
    [
        ("String", "hello", 1),
        ("Number", 1, "1"),
        ("Boolean", True, 1),
        ("Symbol", Color.GREEN, "green"),
        ("Function", print, "print"),
        ("Date", datetime.datetime.now(tz=datetime.timezone.utc), "now"),
        ("Array", [1], "1"),
        ("Object", {}, "{}"),
        ("Promise", Future(), 1),
        ("Error", KeyError("k"), "k"),
        ("None", None, 0),
    ],
)
def test_capitalized_aliases(registry: TypeRegistry, alias: str, value, other):
    assert registry.test(value, alias)
    assert not registry.test(other, alias)


@pytest.mark.parametrize("value", ["hello", 0, None, UNDEFINED, [], {}, Point(0, 0)])
def test_wildcard_matches_anything(registry: TypeRegistry, value):
    assert registry.test(value, "*")


def test_coroutine_is_promise(registry: TypeRegistry):
    async def answer() -> int:
        return 42

    coro = answer()
    try:
        assert registry.test(coro, "promise")
    finally:
        coro.close()


def test_defaults_contain_every_builtin(registry: TypeRegistry):
    registry.define_defaults()
    for name in ("string", "number", "boolean", "undefined", "null", "symbol", "function", "date", "array"):
        assert name in registry
    for name in ("object", "promise", "error", "String", "Object", "Promise", "Error"):
        assert name in registry
