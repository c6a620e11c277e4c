from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, Union

if TYPE_CHECKING:
    from typeexpr.result import TestResult

TestOutcome = Union[bool, "TestResult", Mapping[str, Any]]


class TypeTestFn(Protocol):
    """
    A callable that takes a value and reports whether it matches a type.
    """

    def __call__(self, value: Any, /) -> TestOutcome:  # noqa: ANN401
        """
        Take a value and return a boolean or a detailed TestResult.

        Args:
            value: The value under test.

        Examples:
            >>> def is_positive(value) -> bool:
            ...     return isinstance(value, int) and value > 0
            >>> is_positive(3)
            True

        """

        ...
