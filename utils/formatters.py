"""Helpers for formatting ratio values and evaluation results."""

from typing import Any, Dict, Optional

import numpy as np

from constants import METRIC_FORMAT
from .math_utils import sanitize_float


def format_metric_value(value: Optional[float]) -> str:
    if value is None:
        return "None"
    if isinstance(value, (float, np.floating)):
        return format(value, METRIC_FORMAT)
    return str(value)


def result_payload(result: Any) -> Dict[str, Any]:
    """Flatten an evaluation result into JSON-friendly primitives."""
    return {
        "ratio": result.ratio,
        "values": {label: sanitize_float(value) for label, value in result.values.items()},
        "errors": [error.model_dump() for error in result.errors],
    }


def result_table(result: Any) -> Dict[str, str]:
    """Render each label's value for display; failed labels show the error kind."""
    failed = {error.label: error.kind for error in result.errors}
    return {
        label: failed.get(label, format_metric_value(value))
        for label, value in result.values.items()
    }
