"""
Distance metrics between two equal-length vectors.

Supported Metrics:
    - euclidean: L2 distance
    - cosine: Cosine distance (1 - cosine similarity)
    - manhattan: L1 distance
    - rmse: Root-mean-square error (no weighted form)

Every function returns NaN when vector lengths differ.

Example:
    >>> from vectordist.distance import euclidean_distance, distance, DistanceMetric
    >>>
    >>> a = [1.0, 2.0, 3.0, 4.0]
    >>> b = [3.0, 1.0, 4.0, 2.0]
    >>>
    >>> # Direct function call
    >>> dist = euclidean_distance(a, b)
    >>>
    >>> # Metric chosen at runtime
    >>> dist = distance(a, b, DistanceMetric.COSINE)
"""

from .metrics import (
    Vector,
    euclidean_distance,
    euclidean_distance_weighted,
    cosine_distance,
    cosine_distance_weighted,
    manhattan_distance,
    manhattan_distance_weighted,
    rmse_distance,
)

from .registry import (
    DistanceMetric,
    MetricInfo,
    DistanceCalculator,
    distance,
    distance_weighted,
    get_metric,
    get_metric_fn,
    get_weighted_metric_fn,
    list_metrics,
    metric_exists,
    resolve_metric,
    is_nan,
)

__all__ = [
    "Vector",
    # Single metric functions
    "euclidean_distance",
    "euclidean_distance_weighted",
    "cosine_distance",
    "cosine_distance_weighted",
    "manhattan_distance",
    "manhattan_distance_weighted",
    "rmse_distance",
    # Dispatch
    "DistanceMetric",
    "distance",
    "distance_weighted",
    "is_nan",
    # Registry
    "MetricInfo",
    "get_metric",
    "get_metric_fn",
    "get_weighted_metric_fn",
    "list_metrics",
    "metric_exists",
    "resolve_metric",
    "DistanceCalculator",
]
