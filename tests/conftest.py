"""Shared fixtures for artspace tests."""

import numpy as np
import pytest

from artspace.models import Point2D

OUTLIERS = [(0.5, 0.5), (0.1, 0.9), (0.9, 0.1), (0.5, 0.05), (0.05, 0.5)]


def _blob(center, rng):
    """20 points on a jittered 5x4 grid (spacing 0.01) around center."""
    cx, cy = center
    pts = []
    for i in range(5):
        for j in range(4):
            jx, jy = rng.uniform(-0.002, 0.002, size=2)
            pts.append(Point2D(x=cx + (i - 2) * 0.01 + jx, y=cy + (j - 1.5) * 0.01 + jy))
    return pts


@pytest.fixture
def two_blobs_with_outliers():
    """Two tight groups at (0.1, 0.1) and (0.9, 0.9) plus 5 far outliers (indices 40-44)."""
    rng = np.random.default_rng(7)
    points = _blob((0.1, 0.1), rng) + _blob((0.9, 0.9), rng)
    points += [Point2D(x=x, y=y) for x, y in OUTLIERS]
    return points


@pytest.fixture
def random_two_blobs(request):
    """Uniformly scattered variant of two_blobs_with_outliers; the seed comes from indirect parametrization."""
    rng = np.random.default_rng(request.param)
    points = []
    for cx, cy in [(0.1, 0.1), (0.9, 0.9)]:
        offsets = rng.uniform(-0.015, 0.015, size=(20, 2))
        points += [Point2D(x=cx + dx, y=cy + dy) for dx, dy in offsets]
    points += [Point2D(x=x, y=y) for x, y in OUTLIERS]
    return points


@pytest.fixture
def random_points():
    rng = np.random.default_rng(123)
    return [Point2D(x=float(x), y=float(y)) for x, y in rng.random((80, 2))]


@pytest.fixture
def clustered_embeddings():
    """30 vectors in 64 dims drawn around 3 well-separated centers (10 each)."""
    rng = np.random.default_rng(0)
    centers = rng.normal(0.0, 5.0, size=(3, 64))
    return np.vstack([centers[i // 10] + rng.normal(0.0, 0.5, size=64) for i in range(30)])
