"""Cluster and geometry data models."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

NOISE = -1


class Point2D(BaseModel):
    """A point in the normalized 2D layout."""

    x: float
    y: float


class Point3D(Point2D):
    """A point in the normalized 3D layout."""

    z: float


class DBSCANParams(BaseModel):
    """Neighborhood radius and core-point threshold for one point set."""

    eps: float = Field(gt=0)
    min_pts: int = Field(ge=1)


class Cluster(BaseModel):
    """A single density cluster."""

    id: int
    points: List[int] = Field(default_factory=list)  # indices into the point set
    color: str = ""
    centroid: Point2D = Field(default_factory=lambda: Point2D(x=0.0, y=0.0))
    hull: List[Point2D] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.points)


class ClusteringResult(BaseModel):
    """Labels, clusters, and noise for one DBSCAN run."""

    labels: List[int] = Field(default_factory=list)  # -1 marks noise
    clusters: List[Cluster] = Field(default_factory=list)
    noise_points: List[int] = Field(default_factory=list)

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    @property
    def noise_count(self) -> int:
        return len(self.noise_points)

    def cluster_sizes(self) -> Dict[int, int]:
        """Mapping of cluster id -> member count."""
        return {c.id: c.size for c in self.clusters}
