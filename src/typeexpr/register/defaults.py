"""
Built-in types registered by TypeRegistry.define_defaults().
"""

from __future__ import annotations

import datetime
import inspect
from enum import Enum
from numbers import Number
from typing import Any

from typeexpr.types import TypeTestFn
from typeexpr.utils.values import UNDEFINED, is_array, is_object, is_promise


def is_string(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, str)


def is_number(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, Number) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, bool)


def is_undefined(value: Any) -> bool:  # noqa: ANN401
    return value is UNDEFINED


def is_null(value: Any) -> bool:  # noqa: ANN401
    return value is None


def is_symbol(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, Enum)


def is_function(value: Any) -> bool:  # noqa: ANN401
    return callable(value) and not inspect.isclass(value)


def is_date(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, (datetime.date, datetime.time))


def is_error(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, BaseException)


def _instance_of(cls: type) -> TypeTestFn:
    def _test(value: Any) -> bool:  # noqa: ANN401
        return isinstance(value, cls)

    return _test


BUILTIN_TESTS: dict[str, TypeTestFn] = {
    "string": is_string,
    "number": is_number,
    "boolean": is_boolean,
    "undefined": is_undefined,
    "null": is_null,
    "symbol": is_symbol,
    "function": is_function,
    "date": is_date,
    "array": is_array,
    "object": is_object,
    "promise": is_promise,
    "error": is_error,
    "TypeError": _instance_of(TypeError),
    "ValueError": _instance_of(ValueError),
    "KeyError": _instance_of(KeyError),
    "RuntimeError": _instance_of(RuntimeError),
}

# Lower-case names which also get a capitalised alias, e.g. `String`.
CAPITALIZED = ("string", "number", "boolean", "symbol", "function", "date", "array", "object", "promise", "error")

EXTRA_ALIASES = {"None": "null"}
