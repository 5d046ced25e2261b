"""
Test cases for DBSCAN parameter estimation.
"""

import numpy as np
import pytest

from artspace.config import MIN_EPS
from artspace.embedding_viz import dbscan, estimate_dbscan_params, k_distances
from artspace.models import Point2D


def _random_points(n, seed):
    rng = np.random.default_rng(seed)
    return [Point2D(x=float(x), y=float(y)) for x, y in rng.random((n, 2))]


@pytest.mark.parametrize("n", [0, 1])
def test_fewer_than_two_points_makes_everything_noise(n):
    points = [Point2D(x=0.5, y=0.5)] * n

    params = estimate_dbscan_params(points)

    assert params.eps > 0
    assert params.min_pts == n + 1
    result = dbscan(points, params.eps, params.min_pts)
    assert result.noise_points == list(range(n))
    assert result.clusters == []


def test_coincident_points_get_positive_eps():
    points = [Point2D(x=0.25, y=0.75)] * 10

    params = estimate_dbscan_params(points)

    assert params.eps == MIN_EPS
    assert params.eps > 0


@pytest.mark.parametrize("n,expected", [(2, 2), (3, 3), (4, 4), (10, 4), (100, 5), (1000, 7)])
def test_min_pts_scales_with_log_n_and_never_exceeds_n(n, expected):
    params = estimate_dbscan_params(_random_points(n, seed=n))
    assert params.min_pts == expected
    assert params.min_pts <= n


def test_small_and_large_random_sets():
    small = estimate_dbscan_params(_random_points(10, seed=1))
    large = estimate_dbscan_params(_random_points(100, seed=2))

    assert small.eps > 0 and large.eps > 0
    assert small.min_pts >= 4
    assert large.min_pts >= small.min_pts


def test_eps_sits_between_blob_and_outlier_distances(two_blobs_with_outliers):
    params = estimate_dbscan_params(two_blobs_with_outliers)

    # Blob spacing is ~0.01 and outliers are >= 0.4 from anything else
    assert 0.005 < params.eps < 0.1
    assert params.min_pts == 4


def test_accepts_numpy_coordinates(two_blobs_with_outliers):
    coords = np.array([[p.x, p.y] for p in two_blobs_with_outliers])
    assert estimate_dbscan_params(coords) == estimate_dbscan_params(two_blobs_with_outliers)


def test_k_distances_on_a_line():
    points = [Point2D(x=0.0, y=0.0), Point2D(x=1.0, y=0.0), Point2D(x=3.0, y=0.0)]

    np.testing.assert_allclose(k_distances(points, 1), [1.0, 1.0, 2.0])
    np.testing.assert_allclose(k_distances(points, 2), [3.0, 2.0, 3.0])


def test_k_distances_rejects_out_of_range_k():
    points = [Point2D(x=0.0, y=0.0), Point2D(x=1.0, y=0.0)]
    with pytest.raises(ValueError):
        k_distances(points, 2)
    with pytest.raises(ValueError):
        k_distances(points, 0)
