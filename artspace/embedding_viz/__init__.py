"""Embedding visualization: projection, DBSCAN clustering, hulls, and colors."""

from .errors import EmbeddingVizError, EmbeddingValidationError, ReducerUnavailableError
from .projector import project_embeddings, reduce_to_2d, reduce_to_3d, validate_embeddings
from .params import estimate_dbscan_params, k_distances
from .dbscan import dbscan
from .hull import compute_convex_hull
from .colors import generate_colors, cluster_color
from .geometry import calculate_distances
from .layout import build_embedding_layout, category_key

__all__ = [
    "EmbeddingVizError",
    "EmbeddingValidationError",
    "ReducerUnavailableError",
    "project_embeddings",
    "reduce_to_2d",
    "reduce_to_3d",
    "validate_embeddings",
    "estimate_dbscan_params",
    "k_distances",
    "dbscan",
    "compute_convex_hull",
    "generate_colors",
    "cluster_color",
    "calculate_distances",
    "build_embedding_layout",
    "category_key",
]
