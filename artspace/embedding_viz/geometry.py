"""Shared 2D geometry helpers for clustering and hull building."""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

from ..models.cluster import Point2D


def as_coords(points: Any) -> np.ndarray:
    """Convert a sequence of Point2D (or an (n, 2) array) to a float (n, 2) array."""
    if isinstance(points, np.ndarray):
        coords = np.asarray(points, dtype=float)
        if coords.size == 0:
            return np.zeros((0, 2))
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) array, got shape {coords.shape}")
        return coords

    if len(points) == 0:
        return np.zeros((0, 2))
    return np.array([[p.x, p.y] for p in points], dtype=float)


def to_points(coords: np.ndarray) -> List[Point2D]:
    """Convert an (n, 2) array back to Point2D models."""
    return [Point2D(x=float(x), y=float(y)) for x, y in coords]


def pairwise_distances(coords: np.ndarray) -> np.ndarray:
    """Full (n, n) Euclidean distance matrix.

    O(n^2) memory; fine for gallery-sized inputs (a few thousand points).
    The parameter estimator and DBSCAN both read distances from here, so an
    eps taken from one k-distance includes exactly the same neighbors.
    """
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    return np.sqrt(np.sum(diff * diff, axis=-1))


def calculate_distances(points: Sequence[Point2D]) -> List[List[float]]:
    """Pairwise distances as nested lists (debugging / validation aid)."""
    return pairwise_distances(as_coords(points)).tolist()


def centroid(coords: np.ndarray) -> Point2D:
    """Mean position of a non-empty point array."""
    cx, cy = coords.mean(axis=0)
    return Point2D(x=float(cx), y=float(cy))


def cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    """Z component of (a - o) x (b - o); positive when b is counter-clockwise of a."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)
