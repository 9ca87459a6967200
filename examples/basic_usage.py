"""
Basic usage example for vectordist.
"""

import numpy as np
from vectordist import (
    DistanceMetric,
    DistanceCalculator,
    distance,
    distance_weighted,
    is_nan,
)


def main():
    print("=" * 60)
    print("vectordist Basic Usage Example")
    print("=" * 60)

    a = [1.0, 2.0, 3.0, 4.0]
    b = [3.0, 1.0, 4.0, 2.0]
    weights = [0.2, 0.4, 0.6, 0.8]

    # 1. Every metric, unweighted and weighted
    print("\n1. Distances between", a, "and", b)
    for metric in DistanceMetric:
        plain = distance(a, b, metric)
        weighted = distance_weighted(a, b, weights, metric)
        print(f"   {metric.value:<10} {plain:.6f}   weighted: {weighted:.6f}")

    # 2. Mismatched lengths
    print("\n2. Mismatched lengths...")
    result = distance(a, b[:3], DistanceMetric.EUCLIDEAN)
    print(f"   euclidean -> {result} (is_nan={is_nan(result)})")

    # 3. Nearest neighbour with a calculator
    print("\n3. Nearest neighbour...")
    rng = np.random.default_rng(0)
    points = rng.standard_normal((100, 8))
    query = rng.standard_normal(8)

    calc = DistanceCalculator("cosine")
    nearest = min(range(len(points)), key=lambda i: calc(query, points[i]))
    print(f"   {calc}: nearest index {nearest}, "
          f"distance {calc(query, points[nearest]):.4f}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
