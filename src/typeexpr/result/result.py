from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typeexpr.types import TestOutcome


class ResultStyle(Protocol):
    """
    Protocol for test result rendering.
    """

    def render(self, result: TestResult, level: int = 0) -> str:
        """
        Render the result object into a string representation with a specified indentation level.

        Returns:
            A string representation of the result and its nested failures.
        """
        ...


class DefaultResultStyle(ResultStyle):
    """
    One line per result, nested failures indented below their aggregate.
    """

    indent = "  "

    def render(self, result: TestResult, level: int = 0) -> str:  # noqa: D102
        status = "ok" if result.value else "failed"
        lines = [f"{self.indent * level}{result.description or status}"]
        for child in result.failed or ():
            lines.append(self.render(child, level + 1))
        return "\n".join(lines)


@dataclass(kw_only=True, slots=True, frozen=True)
class TestResult:
    """
    Outcome of testing one value against one compiled type.

    `description` is only set on failure, `failed` only on aggregate failures and then holds
    the nested results which caused the aggregate to fail.
    """

    __test__ = False

    value: bool
    description: str | None = field(default=None)
    failed: tuple[TestResult, ...] | None = field(default=None)

    def __post_init__(self):
        if self.value and (self.description is not None or self.failed is not None):
            msg = "A passing TestResult carries neither a description nor failed results"
            raise ValueError(msg)
        if self.failed is not None and not isinstance(self.failed, tuple):
            object.__setattr__(self, "failed", tuple(self.failed))

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def passed(cls) -> TestResult:
        """
        A successful result.
        """
        return _PASSED

    @classmethod
    def from_outcome(cls, outcome: TestOutcome) -> TestResult:
        """
        Normalize whatever a test function returned into a TestResult.

        `True` and `False` map to bare results and results pass through unchanged. A mapping with a
        `"value"` key is read as a result, so `{"value": False, "description": ...}` fails.
        Anything else is judged by its truthiness.
        """
        if isinstance(outcome, TestResult):
            return outcome
        if outcome is True:
            return _PASSED
        if outcome is False:
            return _FAILED
        if isinstance(outcome, Mapping) and "value" in outcome:
            if outcome["value"]:
                return _PASSED
            failed = outcome.get("failed")
            return cls(
                value=False,
                description=outcome.get("description"),
                failed=tuple(cls.from_outcome(f) for f in failed) if failed else None,
            )
        return _PASSED if outcome else _FAILED

    def explain(self, style: ResultStyle | None = None) -> str:
        """
        Render this result together with every nested failure.
        """
        return (style or DefaultResultStyle()).render(self)


_PASSED = TestResult(value=True)
_FAILED = TestResult(value=False)
