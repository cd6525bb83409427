"""Domain-level data structures for the ratio catalog."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants import DOMAIN_ERROR_KIND
from utils.math_utils import sanitize_float


class FormulaSpec(BaseModel):
    """Describe one catalog entry: its inputs and what makes it undefined."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    inputs: Tuple[str, ...]
    description: str = ""
    denominator: Optional[str] = None

    @property
    def can_fail(self) -> bool:
        return self.denominator is not None


class FormulaError(BaseModel):
    ratio: str
    message: str
    kind: str = DOMAIN_ERROR_KIND
    label: Optional[str] = None


class EvaluationResult(BaseModel):
    ratio: str
    values: Dict[str, Optional[float]] = Field(default_factory=dict)
    errors: List[FormulaError] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def _sanitize_values(cls, values: Any) -> Dict[str, Optional[float]]:
        return {str(key): sanitize_float(value) for key, value in dict(values).items()}

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_value(self, label: str, value: Optional[float]) -> None:
        self.values[label] = sanitize_float(value)

    def add_error(self, label: str, message: str) -> None:
        self.values[label] = None
        self.errors.append(FormulaError(ratio=self.ratio, message=message, label=label))
