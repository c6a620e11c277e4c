from .aggregate import ResultAggregator
from .evaluator import Evaluator

__all__ = [
    "Evaluator",
    "ResultAggregator",
]
