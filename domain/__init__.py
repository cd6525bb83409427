"""Domain models, value objects and errors."""

from .errors import DivisionByZeroError, RatioError, UnknownRatioError
from .models import EvaluationResult, FormulaError, FormulaSpec

__all__ = [
    "DivisionByZeroError",
    "RatioError",
    "UnknownRatioError",
    "EvaluationResult",
    "FormulaError",
    "FormulaSpec",
]
