"""
Unit tests for distance metrics.
"""

import math
import warnings

import pytest
import numpy as np
from numpy.testing import assert_almost_equal

from vectordist.distance import (
    euclidean_distance,
    euclidean_distance_weighted,
    cosine_distance,
    cosine_distance_weighted,
    manhattan_distance,
    manhattan_distance_weighted,
    rmse_distance,
)
from vectordist.distance.metrics import undefined_weighted


UNWEIGHTED = [euclidean_distance, cosine_distance, manhattan_distance, rmse_distance]
WEIGHTED = [
    euclidean_distance_weighted,
    cosine_distance_weighted,
    manhattan_distance_weighted,
]


class TestEuclideanDistance:
    """Tests for Euclidean distance."""

    def test_known_distance(self, vec_a, vec_b):
        assert euclidean_distance(vec_a, vec_b) == 3.1622776601683795

    def test_pythagorean(self):
        """Test with known distance (3-4-5 triangle)."""
        assert euclidean_distance([0.0, 0.0], [3.0, 4.0]) == 5.0

    def test_zero_distance(self, vec_a):
        """Same vectors should have zero distance."""
        assert euclidean_distance(vec_a, vec_a) == 0.0

    def test_symmetry(self, random_pair):
        a, b = random_pair
        assert euclidean_distance(a, b) == euclidean_distance(b, a)

    def test_non_negative(self, random_pair):
        a, b = random_pair
        assert euclidean_distance(a, b) >= 0

    def test_weighted_known_distance(self, vec_a, vec_b, weights):
        assert euclidean_distance_weighted(vec_a, vec_b, weights) == 2.23606797749979

    def test_unit_weights_match_unweighted(self, random_pair, dimension):
        a, b = random_pair
        assert_almost_equal(
            euclidean_distance_weighted(a, b, np.ones(dimension)),
            euclidean_distance(a, b),
        )

    def test_returns_python_float(self, vec_a, vec_b):
        assert type(euclidean_distance(np.array(vec_a), np.array(vec_b))) is float


class TestCosineDistance:
    """Tests for cosine distance."""

    def test_known_distance(self, vec_a, vec_b):
        assert cosine_distance(vec_a, vec_b) == 0.16666666666666663

    def test_identical_vectors(self, vec_a):
        assert_almost_equal(cosine_distance(vec_a, vec_a), 0.0)

    def test_opposite_vectors(self):
        assert_almost_equal(cosine_distance([1.0, 0.0], [-1.0, 0.0]), 2.0)

    def test_orthogonal_vectors(self):
        assert_almost_equal(cosine_distance([1.0, 0.0], [0.0, 1.0]), 1.0)

    def test_scale_invariance(self):
        assert_almost_equal(cosine_distance([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]), 0.0)

    def test_range(self):
        """Distance should be in [0, 2]."""
        rng = np.random.default_rng(0)
        for _ in range(100):
            a = rng.standard_normal(10)
            b = rng.standard_normal(10)
            assert 0.0 - 1e-12 <= cosine_distance(a, b) <= 2.0 + 1e-12

    def test_zero_norm_is_nan(self):
        assert math.isnan(cosine_distance([0.0, 0.0], [1.0, 2.0]))
        assert math.isnan(cosine_distance([1.0, 2.0], [0.0, 0.0]))

    def test_zero_norm_emits_no_warning(self, recwarn):
        cosine_distance([0.0, 0.0], [0.0, 0.0])
        assert len(recwarn) == 0

    def test_weighted_known_distance(self, vec_a, vec_b, weights):
        assert cosine_distance_weighted(vec_a, vec_b, weights) == 0.1339745962155614

    def test_weighted_zero_weights_is_nan(self, vec_a, vec_b):
        assert math.isnan(cosine_distance_weighted(vec_a, vec_b, [0.0] * 4))


class TestManhattanDistance:
    """Tests for Manhattan distance."""

    def test_known_distance(self, vec_a, vec_b):
        assert manhattan_distance(vec_a, vec_b) == 6.0

    def test_zero_distance(self, vec_a):
        assert manhattan_distance(vec_a, vec_a) == 0.0

    def test_symmetry(self, random_pair):
        a, b = random_pair
        assert manhattan_distance(a, b) == manhattan_distance(b, a)

    def test_non_negative(self, random_pair):
        a, b = random_pair
        assert manhattan_distance(a, b) >= 0

    def test_weighted(self, vec_a, vec_b, weights):
        # 0.2*2 + 0.4*1 + 0.6*1 + 0.8*2
        assert_almost_equal(manhattan_distance_weighted(vec_a, vec_b, weights), 3.0)

    def test_weighted_weights_length_checked(self, vec_a, vec_b):
        assert math.isnan(manhattan_distance_weighted(vec_a, vec_b, [1.0, 1.0]))


class TestRMSEDistance:
    """Tests for root-mean-square error."""

    def test_known_distance(self, vec_a, vec_b):
        assert rmse_distance(vec_a, vec_b) == 1.5811388300841898

    def test_zero_distance(self, vec_a):
        assert rmse_distance(vec_a, vec_a) == 0.0

    def test_relation_to_euclidean(self, random_pair, dimension):
        a, b = random_pair
        assert_almost_equal(
            rmse_distance(a, b), euclidean_distance(a, b) / math.sqrt(dimension)
        )

    def test_empty_is_nan(self):
        assert math.isnan(rmse_distance([], []))


class TestLengthMismatch:
    """Mismatched lengths return NaN, never raise or return -1."""

    @pytest.mark.parametrize("fn", UNWEIGHTED)
    def test_unweighted(self, fn, vec_a):
        result = fn(vec_a, [3.0, 1.0, 4.0])
        assert math.isnan(result)

    @pytest.mark.parametrize("fn", WEIGHTED)
    def test_weighted_vectors(self, fn, vec_a, weights):
        assert math.isnan(fn(vec_a, [3.0, 1.0, 4.0], weights))

    @pytest.mark.parametrize("fn", WEIGHTED)
    def test_weighted_weights(self, fn, vec_a, vec_b):
        assert math.isnan(fn(vec_a, vec_b, [0.2, 0.4, 0.6]))


class TestNonFiniteInputs:
    """Infinite and overflowing inputs give a float without any warning."""

    @pytest.mark.parametrize("fn", UNWEIGHTED)
    @pytest.mark.parametrize("a,b", [
        ([np.inf, 1.0], [np.inf, 1.0]),
        ([1e200, -1e200], [-1e200, 1e200]),
    ])
    def test_unweighted(self, fn, a, b):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert isinstance(fn(a, b), float)

    @pytest.mark.parametrize("fn", WEIGHTED + [undefined_weighted])
    @pytest.mark.parametrize("a,b,w", [
        ([np.inf, 1.0], [np.inf, 1.0], [1.0, 1.0]),
        ([1.0, 1.0], [1.0, 1.0], [np.inf, 1.0]),
        ([1e200, -1e200], [-1e200, 1e200], [1e200, 1.0]),
    ])
    def test_weighted(self, fn, a, b, w):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert isinstance(fn(a, b, w), float)

    def test_infinite_euclidean_is_nan(self):
        assert math.isnan(euclidean_distance([np.inf], [np.inf]))

    def test_overflow_is_inf(self):
        assert euclidean_distance([1e200], [-1e200]) == np.inf


class TestEmptyVectors:
    """Sums over empty vectors are zero."""

    def test_euclidean(self):
        assert euclidean_distance([], []) == 0.0
        assert euclidean_distance_weighted([], [], []) == 0.0

    def test_manhattan(self):
        assert manhattan_distance([], []) == 0.0
        assert manhattan_distance_weighted([], [], []) == 0.0

    def test_cosine(self):
        assert math.isnan(cosine_distance([], []))
        assert math.isnan(cosine_distance_weighted([], [], []))


class TestInputsNotMutated:

    @pytest.mark.parametrize("fn", WEIGHTED)
    def test_arrays_unchanged(self, fn, random_pair, random_weights):
        a, b = random_pair
        copies = (a.copy(), b.copy(), random_weights.copy())
        fn(a, b, random_weights)
        for original, copy in zip((a, b, random_weights), copies):
            np.testing.assert_array_equal(original, copy)
