from .result import DefaultResultStyle, ResultStyle, TestResult

__all__ = [
    "DefaultResultStyle",
    "ResultStyle",
    "TestResult",
]
