from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from typeexpr.utils.values import UNDEFINED, is_array, own_items

DEFAULT_MAX_DEPTH = 4
DEFAULT_MAX_LENGTH = 200
ELLIPSIS = "..."

_JSON_SCALARS = (str, int, float, bool, type(None))


def to_display_string(
    value: Any,  # noqa: ANN401
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """
    Stringify a value for use inside a failure description.

    Containers are rendered as JSON. Objects seen before are replaced with a
    `{"$ref": "circular#<n>"}` marker, nesting below `max_depth` collapses into `<type>`, and the
    final text is cut to `max_length` keeping both its head and a trailing fragment.

    Examples:
        >>> to_display_string({"a": [1, 2]})
        '{"a": [1, 2]}'
        >>> loop = []
        >>> loop.append(loop)
        >>> to_display_string(loop)
        '[{"$ref": "circular#0"}]'
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, _JSON_SCALARS):
        text = str(value)
    else:
        simplified = _simplify(value, 0, max_depth, [])
        if isinstance(simplified, str):
            text = simplified
        else:
            text = json.dumps(simplified, ensure_ascii=False, default=repr)

    return truncate(text, max_length)


def truncate(text: str, max_length: int) -> str:
    """
    Cut `text` to `max_length`, marking the cut with an ellipsis.
    """
    if len(text) <= max_length:
        return text
    tail = max(max_length // 4, 1)
    head = max(max_length - tail - len(ELLIPSIS), 1)
    return f"{text[:head]}{ELLIPSIS}{text[-tail:]}"


def _simplify(value: Any, depth: int, max_depth: int, known: list[int]) -> Any:  # noqa: ANN401
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, (Enum, BaseException)):
        return repr(value)

    is_container = isinstance(value, Mapping) or is_array(value) or hasattr(value, "__dict__")
    if not is_container:
        return repr(value)

    # Any object already visited gets a reference marker.
    if id(value) in known:
        return {"$ref": f"circular#{known.index(id(value))}"}
    known.append(id(value))

    if depth >= max_depth:
        return f"<{type(value).__name__}>"

    if isinstance(value, Mapping):
        return {str(k): _simplify(v, depth + 1, max_depth, known) for k, v in value.items()}
    if is_array(value):
        return [_simplify(item, depth + 1, max_depth, known) for item in value]
    if callable(value):
        return f"<{getattr(value, '__qualname__', type(value).__name__)}>"
    return {str(k): _simplify(v, depth + 1, max_depth, known) for k, v in own_items(value)}
