"""Render-ready gallery layout: projection, clustering, hulls, and colors."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..config import (
    COLOR_BY_OPTIONS,
    DEFAULT_POINT_COLOR,
    NOISE_COLOR,
    RANDOM_STATE,
    REDUCER_METHOD,
    UNKNOWN_CATEGORY,
    YEAR_BUCKET,
)
from ..models.artwork import ArtworkRecord, EmbeddingLayout, LayoutPoint
from ..models.cluster import NOISE, Cluster, DBSCANParams
from .colors import generate_colors
from .dbscan import dbscan
from .geometry import to_points
from .hull import compute_convex_hull
from .params import estimate_dbscan_params
from .projector import project_embeddings

logger = logging.getLogger(__name__)


def category_key(record: ArtworkRecord, color_by: str) -> Optional[str]:
    """Legend category of a record for an attribute-based ``color_by``."""
    if color_by == "artist":
        return record.artist or UNKNOWN_CATEGORY
    if color_by == "medium":
        return record.medium or UNKNOWN_CATEGORY
    if color_by == "year":
        if record.year is None:
            return UNKNOWN_CATEGORY
        return str(math.floor(record.year / YEAR_BUCKET) * YEAR_BUCKET)
    return None


def build_embedding_layout(
    records: Sequence[Union[ArtworkRecord, Mapping[str, Any]]],
    *,
    show_clusters: bool = True,
    color_by: str = "cluster",
    params: Optional[DBSCANParams] = None,
    method: str = REDUCER_METHOD,
    random_state: int = RANDOM_STATE,
    seed: Optional[int] = None,
) -> EmbeddingLayout:
    """Project artworks to 2D and derive everything the scatter plot draws.

    Args:
        records: Artwork records (or dicts of the same shape) with embeddings.
        show_clusters: Run DBSCAN and hull building; when False every point is
            unclustered and no params are estimated.
        color_by: One of artist, year, medium, cluster, none.
        params: Explicit DBSCAN parameters (estimated from the layout if None).
        method: Reducer method, see ``project_embeddings``.
        random_state: Seed for stochastic reducers.
        seed: Seed for category colors (system randomness if None).

    Returns:
        EmbeddingLayout with one LayoutPoint per record, in input order.
    """
    if color_by not in COLOR_BY_OPTIONS:
        raise ValueError(f"Unknown color_by '{color_by}', expected one of {COLOR_BY_OPTIONS}")

    artworks = [r if isinstance(r, ArtworkRecord) else ArtworkRecord(**r) for r in records]
    if not artworks:
        return EmbeddingLayout(color_by=color_by)

    coords = project_embeddings(
        [a.embedding for a in artworks], method=method, random_state=random_state,
    )
    labels = [NOISE] * len(artworks)
    clusters: List[Cluster] = []
    noise_points: List[int] = []

    if show_clusters:
        if params is None:
            params = estimate_dbscan_params(coords)
        result = dbscan(coords, params.eps, params.min_pts)
        labels = result.labels
        noise_points = result.noise_points
        for cluster in result.clusters:
            cluster.hull = compute_convex_hull(to_points(coords[cluster.points]))
        clusters = result.clusters
        logger.info(
            "Layout for %d artworks: %d clusters, %d noise (eps=%.4f, min_pts=%d)",
            len(artworks), len(clusters), len(noise_points), params.eps, params.min_pts,
        )
    else:
        params = None
        noise_points = list(range(len(artworks)))

    colors, categories, legend = _assign_colors(artworks, labels, clusters, color_by, seed)

    points = [
        LayoutPoint(
            id=a.id,
            x=float(coords[i, 0]),
            y=float(coords[i, 1]),
            cluster_id=labels[i],
            color=colors[i],
            category=categories[i],
        )
        for i, a in enumerate(artworks)
    ]

    return EmbeddingLayout(
        color_by=color_by,
        points=points,
        clusters=clusters,
        noise_points=noise_points,
        params=params,
        legend=legend,
    )


def _assign_colors(
    artworks: List[ArtworkRecord],
    labels: List[int],
    clusters: List[Cluster],
    color_by: str,
    seed: Optional[int],
) -> tuple[List[str], List[Optional[str]], Dict[str, str]]:
    """Per-point colors, per-point categories, and the legend mapping."""
    n = len(artworks)

    if color_by == "none":
        return [DEFAULT_POINT_COLOR] * n, [None] * n, {}

    if color_by == "cluster":
        if not clusters:
            return [DEFAULT_POINT_COLOR] * n, [None] * n, {}
        by_id = {c.id: c.color for c in clusters}
        colors = [by_id.get(label, NOISE_COLOR) for label in labels]
        categories = [f"Cluster {label}" if label != NOISE else "Noise" for label in labels]
        legend = {f"Cluster {c.id}": c.color for c in clusters}
        if NOISE in labels:
            legend["Noise"] = NOISE_COLOR
        return colors, categories, legend

    categories = [category_key(a, color_by) for a in artworks]
    # dict preserves first-appearance order
    unique = list(dict.fromkeys(categories))
    legend = dict(zip(unique, generate_colors(len(unique), seed=seed)))
    return [legend[c] for c in categories], categories, legend
