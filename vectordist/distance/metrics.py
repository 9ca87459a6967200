"""
Core distance metric implementations.

Every function takes two equal-length vectors (and, for the weighted
variants, an equal-length weights vector) and returns a single float.
Functions never raise on shape problems: a length mismatch returns NaN.

All functions are pure. Inputs are converted with ``np.asarray`` and are
never modified or retained.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from ..utils.logging import get_logger


# Type aliases
Vector = Union[Sequence[float], NDArray[np.floating]]

NAN = math.nan

logger = get_logger(__name__)


def _as_array(v: Vector) -> NDArray[np.float64]:
    return np.asarray(v, dtype=np.float64)


def _same_length(*vectors: NDArray[np.float64]) -> bool:
    n = len(vectors[0])
    if all(len(v) == n for v in vectors[1:]):
        return True
    logger.debug(
        "Length mismatch: %s, returning NaN", [len(v) for v in vectors]
    )
    return False


# =============================================================================
# EUCLIDEAN
# =============================================================================

def euclidean_distance(a: Vector, b: Vector) -> float:
    """
    Compute Euclidean (L2) distance between two vectors.

    Formula: sqrt(sum((a_i - b_i)^2))

    Args:
        a: First vector
        b: Second vector

    Returns:
        Euclidean distance (>= 0), or NaN if lengths differ

    Example:
        >>> euclidean_distance([1.0, 2.0, 3.0, 4.0], [3.0, 1.0, 4.0, 2.0])
        3.1622776601683795
    """
    a, b = _as_array(a), _as_array(b)
    if not _same_length(a, b):
        return NAN
    with np.errstate(all="ignore"):
        return float(np.sqrt(np.sum((a - b) ** 2)))


def euclidean_distance_weighted(a: Vector, b: Vector, weights: Vector) -> float:
    """
    Compute weighted Euclidean distance.

    Formula: sqrt(sum(w_i * (a_i - b_i)^2))

    Returns:
        Weighted Euclidean distance, or NaN if any length differs
    """
    a, b, w = _as_array(a), _as_array(b), _as_array(weights)
    if not _same_length(a, b, w):
        return NAN
    with np.errstate(all="ignore"):
        return float(np.sqrt(np.sum(w * (a - b) ** 2)))


# =============================================================================
# COSINE
# =============================================================================

def _cosine(a, b, w) -> float:
    # Zero norms give NaN through 0/0
    with np.errstate(all="ignore"):
        dividend = np.sum(w * a * b)
        divisor = np.sqrt(np.sum(w * a ** 2)) * np.sqrt(np.sum(w * b ** 2))
        return float(1.0 - dividend / divisor)


def cosine_distance(a: Vector, b: Vector) -> float:
    """
    Compute cosine distance between two vectors.

    Formula: 1 - (a · b) / (||a|| * ||b||)

    No epsilon is applied to the denominator: if either vector has zero
    norm (including the empty vector) the result is NaN.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Cosine distance in range [0, 2], or NaN

    Example:
        >>> cosine_distance([1.0, 2.0, 3.0, 4.0], [3.0, 1.0, 4.0, 2.0])
        0.16666666666666663
    """
    a, b = _as_array(a), _as_array(b)
    if not _same_length(a, b):
        return NAN
    return _cosine(a, b, 1.0)


def cosine_distance_weighted(a: Vector, b: Vector, weights: Vector) -> float:
    """
    Compute weighted cosine distance.

    Formula: 1 - sum(w_i a_i b_i) / (sqrt(sum(w_i a_i^2)) * sqrt(sum(w_i b_i^2)))
    """
    a, b, w = _as_array(a), _as_array(b), _as_array(weights)
    if not _same_length(a, b, w):
        return NAN
    return _cosine(a, b, w)


# =============================================================================
# MANHATTAN
# =============================================================================

def manhattan_distance(a: Vector, b: Vector) -> float:
    """
    Compute Manhattan (L1) distance between two vectors.

    Formula: sum(|a_i - b_i|)

    Example:
        >>> manhattan_distance([0.0, 0.0], [3.0, 4.0])
        7.0
    """
    a, b = _as_array(a), _as_array(b)
    if not _same_length(a, b):
        return NAN
    with np.errstate(all="ignore"):
        return float(np.sum(np.abs(a - b)))


def manhattan_distance_weighted(a: Vector, b: Vector, weights: Vector) -> float:
    """Compute weighted Manhattan distance: sum(w_i * |a_i - b_i|)."""
    a, b, w = _as_array(a), _as_array(b), _as_array(weights)
    if not _same_length(a, b, w):
        return NAN
    with np.errstate(all="ignore"):
        return float(np.sum(w * np.abs(a - b)))


# =============================================================================
# ROOT MEAN SQUARE ERROR
# =============================================================================

def rmse_distance(a: Vector, b: Vector) -> float:
    """
    Compute root-mean-square error between two vectors.

    Formula: sqrt(sum((a_i - b_i)^2) / n)

    Empty vectors give NaN (0 / 0). There is no weighted variant.

    Example:
        >>> rmse_distance([1.0, 2.0, 3.0, 4.0], [3.0, 1.0, 4.0, 2.0])
        1.5811388300841898
    """
    a, b = _as_array(a), _as_array(b)
    if not _same_length(a, b):
        return NAN
    with np.errstate(all="ignore"):
        return float(np.sqrt(np.sum((a - b) ** 2) / np.float64(len(a))))


def undefined_weighted(a: Vector, b: Vector, weights: Vector) -> float:
    """Weighted form of a metric that has no weighted formula. Always NaN."""
    return NAN
