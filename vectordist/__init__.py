"""
vectordist - Distance metrics between numeric vectors.

Example:
    >>> from vectordist import distance, DistanceMetric
    >>>
    >>> distance([1.0, 2.0, 3.0, 4.0], [3.0, 1.0, 4.0, 2.0], DistanceMetric.MANHATTAN)
    6.0
    >>> distance([1.0, 2.0], [1.0], "euclidean")
    nan
"""

from .core import (
    VectorDistError,
    ValidationError,
    ConfigurationError,
)

from .distance import (
    # Metrics
    euclidean_distance,
    euclidean_distance_weighted,
    cosine_distance,
    cosine_distance_weighted,
    manhattan_distance,
    manhattan_distance_weighted,
    rmse_distance,
    # Dispatch
    DistanceMetric,
    distance,
    distance_weighted,
    is_nan,
    # Registry
    MetricInfo,
    DistanceCalculator,
    get_metric,
    get_metric_fn,
    get_weighted_metric_fn,
    list_metrics,
    metric_exists,
    resolve_metric,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "VectorDistError",
    "ValidationError",
    "ConfigurationError",
    # Distance functions
    "euclidean_distance",
    "euclidean_distance_weighted",
    "cosine_distance",
    "cosine_distance_weighted",
    "manhattan_distance",
    "manhattan_distance_weighted",
    "rmse_distance",
    "DistanceMetric",
    "distance",
    "distance_weighted",
    "is_nan",
    "MetricInfo",
    "DistanceCalculator",
    "get_metric",
    "get_metric_fn",
    "get_weighted_metric_fn",
    "list_metrics",
    "metric_exists",
    "resolve_metric",
]
