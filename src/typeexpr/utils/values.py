"""
Structural probes shared by the built-in types and the result aggregator.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from numbers import Number
from typing import Any, Final, final


@final
class _Undefined:
    """
    Marker for "no value at all", distinct from None.
    """

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

_TEXT = (str, bytes, bytearray)


def is_array(value: Any) -> bool:  # noqa: ANN401
    """
    Ordered or unordered collections, but not text.
    """
    return isinstance(value, (Sequence, Set)) and not isinstance(value, _TEXT)


def is_object(value: Any) -> bool:  # noqa: ANN401
    """
    Anything with properties: not None, UNDEFINED, text, a number, a bool or an enum member.
    """
    if value is None or value is UNDEFINED:
        return False
    return not isinstance(value, (*_TEXT, Number, bool, Enum))


def is_promise(value: Any) -> bool:  # noqa: ANN401
    """
    Shallow capability check: awaitables, futures and anything exposing a callable `then`.

    The eventual result is never inspected.
    """
    if value is None or value is UNDEFINED:
        return False
    if inspect.isawaitable(value):
        return True
    return callable(getattr(value, "add_done_callback", None)) or callable(getattr(value, "then", None))


def own_items(value: Any) -> list[tuple[Any, Any]]:  # noqa: ANN401
    """
    The (key, value) pairs an object carries itself.
    """
    if isinstance(value, Mapping):
        return list(value.items())
    if is_array(value):
        return [(str(i), item) for i, item in enumerate(value)]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    if isinstance(value, type):
        return [(k, v) for k, v in vars(value).items() if not k.startswith("__")]
    try:
        return list(vars(value).items())
    except TypeError:
        return []
