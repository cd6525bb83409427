"""Numeric helper functions."""

from typing import Any, List, Optional

import numpy as np
import pandas as pd

from constants import FLOAT_DTYPE


def zero_labels(denominator: Any) -> List[Any]:
    """Return the positions (or index labels) where an array-like denominator is zero."""
    if isinstance(denominator, pd.Series):
        mask = (denominator == 0).to_numpy()
        return list(denominator.index[mask])
    mask = np.asarray(denominator) == 0
    return np.flatnonzero(mask).tolist()


def is_array_like(value: Any) -> bool:
    return isinstance(value, (pd.Series, np.ndarray))


def as_float(value: Any):
    """Normalise a formula result to a 64-bit float (or float64 array/Series)."""
    if isinstance(value, pd.Series):
        return value.astype(FLOAT_DTYPE)
    if isinstance(value, np.ndarray):
        return value.astype(FLOAT_DTYPE)
    return float(value)


def sanitize_float(value: Any) -> Optional[float]:
    """Coerce different numeric types to clean floats, returning None for invalid values."""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (np.generic, float, int, np.integer)):
        value = float(value)
        if not np.isfinite(value):
            return None
        return value
    return None
