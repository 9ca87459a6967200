"""
Distance metric registry and dispatch.

Provides a unified interface for selecting a distance function at
runtime, either by ``DistanceMetric`` member or by name.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from .metrics import (
    NAN,
    Vector,
    euclidean_distance,
    euclidean_distance_weighted,
    cosine_distance,
    cosine_distance_weighted,
    manhattan_distance,
    manhattan_distance_weighted,
    rmse_distance,
    undefined_weighted,
)
from ..core.exceptions import ValidationError
from ..utils.logging import get_logger, set_level
from ..utils.validation import validate_metric_name, validate_weights


# Type aliases
DistanceFunction = Callable[[Vector, Vector], float]
WeightedDistanceFunction = Callable[[Vector, Vector, Vector], float]
MetricLike = Union["DistanceMetric", str]

logger = get_logger(__name__)


class DistanceMetric(str, Enum):
    """Enumeration of supported distance metrics."""

    EUCLIDEAN = "euclidean"
    COSINE = "cosine"
    MANHATTAN = "manhattan"
    RMSE = "rmse"

    def __str__(self) -> str:
        return self.value


_DISTANCE_FUNCTIONS: Dict[DistanceMetric, DistanceFunction] = {
    DistanceMetric.EUCLIDEAN: euclidean_distance,
    DistanceMetric.COSINE: cosine_distance,
    DistanceMetric.MANHATTAN: manhattan_distance,
    DistanceMetric.RMSE: rmse_distance,
}

_WEIGHTED_DISTANCE_FUNCTIONS: Dict[DistanceMetric, WeightedDistanceFunction] = {
    DistanceMetric.EUCLIDEAN: euclidean_distance_weighted,
    DistanceMetric.COSINE: cosine_distance_weighted,
    DistanceMetric.MANHATTAN: manhattan_distance_weighted,
    DistanceMetric.RMSE: undefined_weighted,
}

# Every metric must have both an unweighted and a weighted entry
for _table in (_DISTANCE_FUNCTIONS, _WEIGHTED_DISTANCE_FUNCTIONS):
    _missing = set(DistanceMetric) - set(_table)
    if _missing:
        raise RuntimeError(
            f"No distance function for: {sorted(m.value for m in _missing)}"
        )

_ALIASES: Dict[str, DistanceMetric] = {
    "l2": DistanceMetric.EUCLIDEAN,
    "euclidean_distance": DistanceMetric.EUCLIDEAN,
    "cosine_distance": DistanceMetric.COSINE,
    "l1": DistanceMetric.MANHATTAN,
    "cityblock": DistanceMetric.MANHATTAN,
    "taxicab": DistanceMetric.MANHATTAN,
    "rms": DistanceMetric.RMSE,
    "root_mean_square_error": DistanceMetric.RMSE,
}


@dataclass(frozen=True)
class MetricInfo:
    """Information about a distance metric."""

    metric: DistanceMetric
    function: DistanceFunction
    weighted_function: Optional[WeightedDistanceFunction]  # None if undefined
    min_value: float
    max_value: Optional[float]  # None if unbounded
    description: str

    @property
    def name(self) -> str:
        return self.metric.value

    @property
    def supports_weights(self) -> bool:
        return self.weighted_function is not None

    def __repr__(self) -> str:
        return f"MetricInfo(name='{self.name}', supports_weights={self.supports_weights})"


_METRIC_INFO: Dict[DistanceMetric, MetricInfo] = {
    DistanceMetric.EUCLIDEAN: MetricInfo(
        metric=DistanceMetric.EUCLIDEAN,
        function=euclidean_distance,
        weighted_function=euclidean_distance_weighted,
        min_value=0.0,
        max_value=None,
        description="Euclidean (L2) distance",
    ),
    DistanceMetric.COSINE: MetricInfo(
        metric=DistanceMetric.COSINE,
        function=cosine_distance,
        weighted_function=cosine_distance_weighted,
        min_value=0.0,
        max_value=2.0,
        description="Cosine distance (1 - cosine similarity)",
    ),
    DistanceMetric.MANHATTAN: MetricInfo(
        metric=DistanceMetric.MANHATTAN,
        function=manhattan_distance,
        weighted_function=manhattan_distance_weighted,
        min_value=0.0,
        max_value=None,
        description="Manhattan (L1) distance",
    ),
    DistanceMetric.RMSE: MetricInfo(
        metric=DistanceMetric.RMSE,
        function=rmse_distance,
        weighted_function=None,
        min_value=0.0,
        max_value=None,
        description="Root-mean-square error",
    ),
}


# =============================================================================
# LOOKUP
# =============================================================================

def resolve_metric(metric: MetricLike) -> DistanceMetric:
    """
    Resolve a metric member, name or alias to a ``DistanceMetric``.

    Args:
        metric: ``DistanceMetric`` member, canonical name or alias
            (case-insensitive)

    Returns:
        DistanceMetric member

    Raises:
        KeyError: If the name is not a known metric or alias
        ValidationError: If metric is not a string
    """
    if isinstance(metric, DistanceMetric):
        return metric

    name = validate_metric_name(metric)
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return DistanceMetric(name)
    except ValueError:
        available = list_metrics()
        raise KeyError(
            f"Unknown metric: '{metric}'. Available: {available}"
        ) from None


def get_metric(metric: MetricLike) -> MetricInfo:
    """
    Get metric info by member or name.

    Example:
        >>> get_metric("l2").description
        'Euclidean (L2) distance'
    """
    return _METRIC_INFO[resolve_metric(metric)]


def get_metric_fn(metric: MetricLike) -> DistanceFunction:
    """Get the unweighted distance function for a metric."""
    return _DISTANCE_FUNCTIONS[resolve_metric(metric)]


def get_weighted_metric_fn(metric: MetricLike) -> WeightedDistanceFunction:
    """
    Get the weighted distance function for a metric.

    Metrics without a weighted formula (RMSE) return a function that
    always yields NaN.
    """
    return _WEIGHTED_DISTANCE_FUNCTIONS[resolve_metric(metric)]


def list_metrics() -> List[str]:
    """List all metric names."""
    return [m.value for m in DistanceMetric]


def _try_resolve(metric) -> Optional[DistanceMetric]:
    try:
        return resolve_metric(metric)
    except (KeyError, ValidationError) as e:
        logger.debug(f"Unsupported metric selector {metric!r}: {e}, returning NaN")
        return None


def metric_exists(name: str) -> bool:
    """Check if a metric name or alias is known."""
    try:
        resolve_metric(name)
    except (KeyError, ValidationError):
        return False
    return True


# =============================================================================
# DISPATCH
# =============================================================================

def distance(a: Vector, b: Vector, metric: MetricLike) -> float:
    """
    Compute the distance between two vectors using the given metric.

    Args:
        a: First vector
        b: Second vector
        metric: ``DistanceMetric`` member or name

    Returns:
        Distance value, or NaN if the vector lengths differ or the
        metric is not supported

    Example:
        >>> distance([0.0, 0.0], [3.0, 4.0], DistanceMetric.EUCLIDEAN)
        5.0
    """
    resolved = _try_resolve(metric)
    if resolved is None:
        return NAN
    return _DISTANCE_FUNCTIONS[resolved](a, b)


def distance_weighted(
    a: Vector,
    b: Vector,
    weights: Vector,
    metric: MetricLike,
) -> float:
    """
    Compute the weighted distance between two vectors.

    Returns NaN if any length differs, if the metric is not supported,
    and always for ``RMSE``, which has no weighted formula.
    """
    resolved = _try_resolve(metric)
    if resolved is None:
        return NAN
    return _WEIGHTED_DISTANCE_FUNCTIONS[resolved](a, b, weights)


# =============================================================================
# DISTANCE FUNCTION WRAPPER
# =============================================================================

class DistanceCalculator:
    """
    Wrapper class for distance calculations with a fixed metric.

    Optionally binds per-dimension weights, in which case every call uses
    the weighted formula.

    Example:
        >>> calc = DistanceCalculator("cosine")
        >>> dist = calc.distance(vec_a, vec_b)
        >>> weighted = DistanceCalculator("euclidean", weights=[0.5, 1.0])
    """

    def __init__(
        self,
        metric: MetricLike = DistanceMetric.EUCLIDEAN,
        weights: Optional[Vector] = None,
    ):
        """
        Initialize calculator with a specific metric.

        Args:
            metric: Metric member or name
            weights: Optional per-dimension weights

        Raises:
            KeyError: If metric is unknown
            ValidationError: If weights are invalid
        """
        self.metric = resolve_metric(metric)
        self.info = _METRIC_INFO[self.metric]
        self.weights = None if weights is None else validate_weights(weights)

        if self.weights is not None and not self.info.supports_weights:
            logger.warning(
                f"Metric '{self.metric}' has no weighted form; "
                "all distances will be NaN"
            )

        logger.debug(f"Created {self!r}")

    @classmethod
    def from_settings(cls, settings) -> "DistanceCalculator":
        """
        Build a calculator from a ``config.Settings`` object.

        Also applies ``settings.log_level`` to the package logger.
        """
        set_level(settings.log_level)
        return cls(metric=settings.metric, weights=settings.weights)

    @property
    def weighted(self) -> bool:
        return self.weights is not None

    def distance(self, a: Vector, b: Vector) -> float:
        """Compute distance between two vectors."""
        if self.weights is None:
            return _DISTANCE_FUNCTIONS[self.metric](a, b)
        return _WEIGHTED_DISTANCE_FUNCTIONS[self.metric](a, b, self.weights)

    def __call__(self, a: Vector, b: Vector) -> float:
        return self.distance(a, b)

    def __repr__(self) -> str:
        return f"DistanceCalculator(metric='{self.metric}', weighted={self.weighted})"


def is_nan(value: float) -> bool:
    """Check a distance result for the NaN mismatch sentinel."""
    return math.isnan(value)
