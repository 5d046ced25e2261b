"""Adaptive DBSCAN parameter estimation from the k-distance curve."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

import numpy as np

from ..config import EPS_PERCENTILE, MIN_EPS, MIN_PTS_FLOOR
from ..models.cluster import DBSCANParams
from .geometry import as_coords, pairwise_distances

logger = logging.getLogger(__name__)


def k_distances(points: Any, k: int) -> np.ndarray:
    """Distance from every point to its k-th nearest other point.

    Args:
        points: Sequence of Point2D or an (n, 2) array, n >= 2.
        k: Neighbor rank, 1 <= k <= n - 1.

    Returns:
        Unsorted array of shape (n,).
    """
    coords = as_coords(points)
    n = coords.shape[0]
    if not 1 <= k <= n - 1:
        raise ValueError(f"k must be in [1, {n - 1}], got {k}")

    dist = pairwise_distances(coords)
    # Push self-distances past every real neighbor, then the k-th smallest
    # in each row is the k-th nearest other point.
    np.fill_diagonal(dist, np.inf)
    return np.partition(dist, k - 1, axis=1)[:, k - 1]


def _elbow_index(sorted_values: np.ndarray) -> Optional[int]:
    """Index of the point lying furthest below the first-to-last chord.

    Returns None when no point lies below the chord (flat or concave curve).
    """
    n = sorted_values.size
    if n < 3:
        return None
    chord = np.linspace(sorted_values[0], sorted_values[-1], n)
    gap = chord - sorted_values
    idx = int(np.argmax(gap))
    if gap[idx] <= 0:
        return None
    return idx


def estimate_dbscan_params(
    points: Any,
    *,
    min_pts_floor: int = MIN_PTS_FLOOR,
    percentile: float = EPS_PERCENTILE,
    min_eps: float = MIN_EPS,
) -> DBSCANParams:
    """Estimate eps and min_pts from the data's own density distribution.

    min_pts grows with ln(n) (never below ``min_pts_floor``, never above n).
    eps is the elbow of the sorted k-distance curve with k = min_pts; when the
    curve has no elbow, the ``percentile`` quantile is used instead.

    Fewer than 2 points yields min_pts = n + 1 so every point ends up noise.
    eps is never below ``min_eps``, which covers all-coincident point sets.
    """
    coords = as_coords(points)
    n = coords.shape[0]
    if n < 2:
        return DBSCANParams(eps=min_eps, min_pts=n + 1)

    min_pts = min(n, max(min_pts_floor, math.ceil(math.log(n))))
    k = min(min_pts, n - 1)

    kd = np.sort(k_distances(coords, k))
    elbow = _elbow_index(kd)
    if elbow is not None:
        eps = float(kd[elbow])
        source = f"elbow@{elbow}"
    else:
        eps = float(kd[min(int(math.floor(n * percentile)), n - 1)])
        source = f"p{int(percentile * 100)}"

    eps = max(eps, min_eps)
    logger.debug("Estimated DBSCAN params for %d points: eps=%.6f (%s), min_pts=%d", n, eps, source, min_pts)
    return DBSCANParams(eps=eps, min_pts=min_pts)
