"""Convex hull outlines for cluster overlays."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..models.cluster import Point2D
from .geometry import cross

logger = logging.getLogger(__name__)


def _same(a: Point2D, b: Point2D) -> bool:
    return a.x == b.x and a.y == b.y


def _sq_dist(a: Point2D, b: Point2D) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def compute_convex_hull(points: Sequence[Point2D]) -> List[Point2D]:
    """Gift-wrapping (Jarvis march) convex hull.

    Starts at the leftmost point (lowest y on ties) and repeatedly picks the
    next vertex so that no point lies clockwise of the current edge. The
    result is counter-clockwise in a y-up frame and implicitly closed.

    Fewer than 3 points are returned unchanged. The walk is capped at
    len(points) steps, so collinear or duplicate-heavy input always terminates.
    """
    pts = list(points)
    n = len(pts)
    if n < 3:
        return pts

    start = min(range(n), key=lambda i: (pts[i].x, pts[i].y))
    hull: List[Point2D] = []
    current = start

    for _ in range(n):
        hull.append(pts[current])
        here = pts[current]

        candidate = (current + 1) % n
        for i in range(n):
            if i == current:
                continue
            turn = cross(here, pts[candidate], pts[i])
            if (
                _same(pts[candidate], here)
                or turn < 0
                # Collinear: take the farther point so edges span their full length
                or (turn == 0 and _sq_dist(here, pts[i]) > _sq_dist(here, pts[candidate]))
            ):
                candidate = i

        current = candidate
        if _same(pts[current], pts[start]):
            break
    else:
        logger.debug("Convex hull hit the iteration cap on %d points", n)

    return hull
