"""Artwork input records and render-ready layout models."""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, Field

from .cluster import NOISE, Cluster, DBSCANParams


class ArtworkRecord(BaseModel):
    """One artwork with its embedding. ``id`` is passed through untouched."""

    id: str
    embedding: List[float]
    title: str = ""
    artist: Optional[str] = None
    year: Optional[int] = None
    medium: Optional[str] = None


class LayoutPoint(BaseModel):
    """Scatter-plot entry for one artwork."""

    id: str
    x: float
    y: float
    cluster_id: int = NOISE
    color: str = ""
    category: Optional[str] = None


class EmbeddingLayout(BaseModel):
    """Full layout for a gallery: points, clusters with hulls, and legend."""

    color_by: str = "none"
    points: List[LayoutPoint] = Field(default_factory=list)
    clusters: List[Cluster] = Field(default_factory=list)
    noise_points: List[int] = Field(default_factory=list)
    params: Optional[DBSCANParams] = None
    # category -> color, in first-appearance order
    legend: Dict[str, str] = Field(default_factory=dict)

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    def to_dataframe(self) -> pd.DataFrame:
        """Per-point table with columns [id, x, y, cluster_id, color, category]."""
        columns = ["id", "x", "y", "cluster_id", "color", "category"]
        if not self.points:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame([p.model_dump() for p in self.points], columns=columns)
