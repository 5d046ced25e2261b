"""Pydantic data models for artspace."""

from .cluster import NOISE, Point2D, Point3D, DBSCANParams, Cluster, ClusteringResult
from .artwork import ArtworkRecord, LayoutPoint, EmbeddingLayout

__all__ = [
    "NOISE",
    "Point2D",
    "Point3D",
    "DBSCANParams",
    "Cluster",
    "ClusteringResult",
    "ArtworkRecord",
    "LayoutPoint",
    "EmbeddingLayout",
]
