"""Exceptions raised by the ratio catalog."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from constants import DOMAIN_ERROR_KIND


class RatioError(Exception):
    """Base class for ratio catalog errors."""


class DivisionByZeroError(RatioError, ZeroDivisionError):
    """A ratio's denominator evaluated to zero, so the ratio is undefined."""

    kind = DOMAIN_ERROR_KIND

    def __init__(self, ratio: str, labels: Optional[Sequence[Any]] = None) -> None:
        self.ratio = ratio
        self.labels: List[Any] = list(labels) if labels else []
        message = f"{ratio}: denominator is zero"
        if self.labels:
            message += f" for {self.labels}"
        super().__init__(message)


class UnknownRatioError(RatioError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown ratio: {self.name!r}"
