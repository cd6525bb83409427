"""Utility helpers for the ratio catalog."""

from .math_utils import as_float, is_array_like, sanitize_float, zero_labels
from .formatters import format_metric_value, result_payload, result_table
from .logging_config import get_logger, setup_logging

__all__ = [
    "as_float",
    "is_array_like",
    "sanitize_float",
    "zero_labels",
    "format_metric_value",
    "result_payload",
    "result_table",
    "get_logger",
    "setup_logging",
]
