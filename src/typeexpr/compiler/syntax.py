"""
Bracket-aware helpers for slicing type expression strings.
"""

from __future__ import annotations

_PAIRS = {"<": ">", "{": "}", "(": ")", "[": "]"}
_CLOSERS = frozenset(_PAIRS.values())


def split_top_level(expr: str, sep: str, maxsplit: int = -1) -> list[str]:
    """
    Split `expr` on `sep` wherever it is not nested inside brackets.

    Examples:
        >>> split_top_level("array<string|number>|null", "|")
        ['array<string|number>', 'null']
    """
    parts: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(expr):
        if char in _PAIRS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == sep and depth == 0 and (maxsplit < 0 or len(parts) < maxsplit):
            parts.append(expr[start:i])
            start = i + 1
    parts.append(expr[start:])
    return [part.strip() for part in parts]


def is_enclosed(expr: str, opener: str) -> bool:
    """
    True if `expr` starts with `opener` and its matching closer is the last character.
    """
    if len(expr) < 2 or expr[0] != opener or expr[-1] != _PAIRS[opener]:  # noqa: PLR2004
        return False
    depth = 0
    for i, char in enumerate(expr):
        if char in _PAIRS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
            if depth == 0:
                return i == len(expr) - 1
    return False


def generic_argument(expr: str, prefix: str) -> str | None:
    """
    Extract `T` from `prefix<T>`, `Prefix<T>`, `prefix.<T>` or `Prefix.<T>`.

    Examples:
        >>> generic_argument("Array.<number>", "array")
        'number'
        >>> generic_argument("arrays", "array") is None
        True
    """
    head = expr[: len(prefix)]
    if head not in (prefix, prefix.capitalize()):
        return None
    rest = expr[len(prefix) :].strip()
    if rest.startswith("."):
        rest = rest[1:].strip()
    if not is_enclosed(rest, "<"):
        return None
    return rest[1:-1].strip()


def unquote(key: str) -> str:
    """
    Strip one pair of matching quotes around a property name.
    """
    if len(key) >= 2 and key[0] == key[-1] and key[0] in "'\"":  # noqa: PLR2004
        return key[1:-1]
    return key
