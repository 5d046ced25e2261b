"""DBSCAN density clustering over 2D layout points."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, List

import numpy as np

from ..models.cluster import NOISE, Cluster, ClusteringResult
from .colors import cluster_color
from .geometry import as_coords, centroid, pairwise_distances

logger = logging.getLogger(__name__)


def dbscan(points: Any, eps: float, min_pts: int) -> ClusteringResult:
    """Partition points into density clusters and noise.

    Standard DBSCAN: points are scanned in index order; a point whose
    eps-neighborhood (inclusive, itself counted) holds at least ``min_pts``
    points is a core point and seeds a new cluster, which then grows through
    every reachable core point. Non-core points reached from a core point join
    as border points but do not propagate. A labeled point is never relabeled,
    so cluster ids follow seed discovery order and results are deterministic
    for a fixed input order.

    The neighbor search is a brute-force distance matrix (O(n^2)); it is meant
    for gallery-sized inputs, not tens of thousands of points.

    Args:
        points: Sequence of Point2D or an (n, 2) array.
        eps: Neighborhood radius (> 0).
        min_pts: Minimum neighborhood size for a core point (>= 1).

    Returns:
        ClusteringResult; label -1 marks noise.
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")
    if min_pts < 1:
        raise ValueError(f"min_pts must be at least 1, got {min_pts}")

    coords = as_coords(points)
    n = coords.shape[0]
    if n == 0:
        return ClusteringResult()

    within = pairwise_distances(coords) <= eps
    labels = [NOISE] * n
    visited = [False] * n
    clusters: List[Cluster] = []

    def region_query(idx: int) -> List[int]:
        return np.flatnonzero(within[idx]).tolist()

    for i in range(n):
        if visited[i]:
            continue
        visited[i] = True

        neighbors = region_query(i)
        if len(neighbors) < min_pts:
            # Tentatively noise; may be claimed later as a border point
            continue

        cluster_id = len(clusters)
        labels[i] = cluster_id
        members = [i]

        queue = deque(neighbors)
        queued = set(neighbors)
        while queue:
            j = queue.popleft()
            if not visited[j]:
                visited[j] = True
                j_neighbors = region_query(j)
                if len(j_neighbors) >= min_pts:
                    for q in j_neighbors:
                        if q not in queued:
                            queued.add(q)
                            queue.append(q)
            if labels[j] == NOISE:
                labels[j] = cluster_id
                members.append(j)

        clusters.append(Cluster(
            id=cluster_id,
            points=members,
            color=cluster_color(cluster_id),
            centroid=centroid(coords[members]),
        ))

    noise_points = [i for i, label in enumerate(labels) if label == NOISE]
    logger.debug(
        "DBSCAN(eps=%.6f, min_pts=%d) on %d points: %d clusters, %d noise",
        eps, min_pts, n, len(clusters), len(noise_points),
    )
    return ClusteringResult(labels=labels, clusters=clusters, noise_points=noise_points)
