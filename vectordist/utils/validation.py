"""
Input validation utilities.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from ..core.exceptions import ValidationError


def validate_weights(weights: Any) -> NDArray[np.float64]:
    """
    Validate a per-dimension weights vector.

    Args:
        weights: Sequence or array of weights

    Returns:
        A read-only float64 copy of the weights

    Raises:
        ValidationError: If weights are not a 1-D array of finite,
            non-negative numbers
    """
    try:
        arr = np.array(weights, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Weights must be numeric: {e}") from e

    if arr.ndim != 1:
        raise ValidationError(
            f"Weights must be 1-dimensional, got {arr.ndim} dimensions"
        )

    if not np.all(np.isfinite(arr)):
        raise ValidationError("Weights must be finite")

    if np.any(arr < 0):
        raise ValidationError(
            f"Weights must be non-negative, got minimum {arr.min()}"
        )

    arr.setflags(write=False)
    return arr


def validate_metric_name(name: Any) -> str:
    """
    Validate and normalize a metric name.

    Raises:
        ValidationError: If name is not a non-empty string
    """
    if not isinstance(name, str):
        raise ValidationError(
            f"Metric name must be a string, got {type(name).__name__}"
        )

    normalized = name.strip().lower()
    if not normalized:
        raise ValidationError("Metric name cannot be empty")

    return normalized
