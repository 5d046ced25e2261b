"""Embedding projection to a normalized 2D/3D layout."""

from __future__ import annotations

import logging
import numbers
from typing import Any, List

import numpy as np
from sklearn.decomposition import PCA
from sklearn.random_projection import GaussianRandomProjection

from ..config import RANDOM_STATE, REDUCER_METHOD
from ..models.cluster import Point2D, Point3D
from .errors import EmbeddingValidationError, ReducerUnavailableError

logger = logging.getLogger(__name__)

REDUCER_METHODS = ("pca", "random_projection", "umap")


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _check_row(i: int, row: Any) -> None:
    """Reject rows holding anything but real numbers (str, bool, nested sequences)."""
    if isinstance(row, np.ndarray):
        if row.ndim != 1 or row.dtype.kind not in "iuf":
            raise EmbeddingValidationError(
                f"Embedding {i} must be a flat numeric vector, got dtype {row.dtype} and shape {row.shape}"
            )
        return
    for value in row:
        if not _is_real(value):
            raise EmbeddingValidationError(
                f"Embedding {i} contains a non-numeric value {value!r}"
            )


def validate_embeddings(embeddings: Any) -> np.ndarray:
    """Check embeddings and stack them into an (n, dim) float array.

    Raises:
        EmbeddingValidationError: if a vector is empty, has a different length
            than the first one, holds anything other than real numbers
            (strings, booleans, nested sequences), or contains NaN/inf.
    """
    if isinstance(embeddings, np.ndarray) and embeddings.size:
        if embeddings.ndim != 2:
            raise EmbeddingValidationError(
                f"Expected a 2D (n_samples, n_features) array, got shape {embeddings.shape}"
            )
        if embeddings.dtype.kind not in "iuf":
            raise EmbeddingValidationError(f"Embeddings must be numeric, got dtype {embeddings.dtype}")
    rows = list(embeddings)
    if not rows:
        return np.zeros((0, 0))

    try:
        dim = len(rows[0])
    except TypeError as e:
        raise EmbeddingValidationError("Embedding 0 is not a vector") from e
    if dim == 0:
        raise EmbeddingValidationError("Embedding 0 is empty")
    for i, row in enumerate(rows):
        try:
            length = len(row)
        except TypeError as e:
            raise EmbeddingValidationError(f"Embedding {i} is not a vector") from e
        if length != dim:
            raise EmbeddingValidationError(
                f"Embedding {i} has length {length}, expected {dim}"
            )
        _check_row(i, row)

    matrix = np.asarray(rows, dtype=np.float64)
    if matrix.ndim != 2:
        raise EmbeddingValidationError(
            f"Embeddings must stack to (n_samples, n_features), got shape {matrix.shape}"
        )

    finite = np.isfinite(matrix)
    if not finite.all():
        bad_row = int(np.argwhere(~finite)[0][0])
        raise EmbeddingValidationError(f"Embedding {bad_row} contains non-finite values")
    return matrix


def normalize_unit_range(coords: np.ndarray) -> np.ndarray:
    """Min-max scale every column to [0, 1]; a constant column maps to 0."""
    if coords.shape[0] == 0:
        return coords
    mins = coords.min(axis=0)
    ranges = coords.max(axis=0) - mins
    ranges[ranges == 0] = 1.0
    return np.clip((coords - mins) / ranges, 0.0, 1.0)


def project_embeddings(
    embeddings: Any,
    *,
    n_components: int = 2,
    method: str = REDUCER_METHOD,
    random_state: int = RANDOM_STATE,
    n_neighbors: int = 15,
    min_dist: float = 0.1,
    metric: str = "cosine",
) -> np.ndarray:
    """Project high-dimensional embeddings to a normalized low-dimensional layout.

    Args:
        embeddings: Sequence of equal-length vectors, or an (n_samples, n_features) array.
        n_components: Output dimensions (2 for scatter plots, 3 for 3D views).
        method: "pca" (deterministic), "random_projection" or "umap"
            (both seeded with ``random_state``).
        random_state: Random seed for reproducibility of stochastic methods.
        n_neighbors: UMAP locality parameter.
        min_dist: UMAP minimum distance between points in 2D.
        metric: UMAP distance metric.

    Returns:
        numpy array of shape (n_samples, n_components), each axis in [0, 1].
    """
    if method not in REDUCER_METHODS:
        raise ValueError(f"Unknown reducer method '{method}', expected one of {REDUCER_METHODS}")

    matrix = validate_embeddings(embeddings)
    n = matrix.shape[0]
    if n == 0:
        return np.zeros((0, n_components))

    # Identical rows (including a single row) carry no direction to project on
    if n < 2 or np.ptp(matrix, axis=0).max() == 0:
        return np.zeros((n, n_components))

    if method == "pca":
        raw = _project_pca(matrix, n_components)
    elif method == "random_projection":
        raw = _project_random(matrix, n_components, random_state)
    else:
        raw = _project_umap(
            matrix, n_components, random_state,
            n_neighbors=n_neighbors, min_dist=min_dist, metric=metric,
        )

    logger.debug("Projected %d embeddings (dim=%d) with %s", n, matrix.shape[1], method)
    return normalize_unit_range(raw)


def _pad_components(result: np.ndarray, n_components: int) -> np.ndarray:
    if result.shape[1] < n_components:
        pad = np.zeros((result.shape[0], n_components - result.shape[1]))
        result = np.hstack([result, pad])
    return result


def _project_pca(matrix: np.ndarray, n_components: int) -> np.ndarray:
    """Top principal components; sklearn fixes SVD signs so output is deterministic."""
    n_comp = min(n_components, matrix.shape[0], matrix.shape[1])
    pca = PCA(n_components=n_comp, svd_solver="full")
    return _pad_components(pca.fit_transform(matrix), n_components)


def _project_random(matrix: np.ndarray, n_components: int, random_state: int) -> np.ndarray:
    """Seeded Gaussian random projection of the centered data."""
    centered = matrix - matrix.mean(axis=0)
    projector = GaussianRandomProjection(n_components=n_components, random_state=random_state)
    return projector.fit_transform(centered)


def _project_umap(
    matrix: np.ndarray,
    n_components: int,
    random_state: int,
    *,
    n_neighbors: int,
    min_dist: float,
    metric: str,
) -> np.ndarray:
    try:
        import umap
    except ImportError as e:
        raise ReducerUnavailableError(
            "UMAP projection requires umap-learn (pip install 'artspace[umap]')"
        ) from e

    n = matrix.shape[0]
    # UMAP's spectral init needs more samples than output dimensions
    if n <= n_components + 1:
        logger.debug("Too few samples (%d) for UMAP, using PCA", n)
        return _project_pca(matrix, n_components)

    reducer = umap.UMAP(
        n_neighbors=max(2, min(n_neighbors, n - 1)),
        min_dist=min_dist,
        metric=metric,
        n_components=n_components,
        random_state=random_state,
    )
    return reducer.fit_transform(matrix)


def reduce_to_2d(vectors: Any, **kwargs: Any) -> List[Point2D]:
    """Reduce embeddings to 2D points in [0, 1]; point i corresponds to vector i."""
    coords = project_embeddings(vectors, n_components=2, **kwargs)
    return [Point2D(x=float(x), y=float(y)) for x, y in coords]


def reduce_to_3d(vectors: Any, **kwargs: Any) -> List[Point3D]:
    """Reduce embeddings to 3D points in [0, 1]."""
    coords = project_embeddings(vectors, n_components=3, **kwargs)
    return [Point3D(x=float(x), y=float(y), z=float(z)) for x, y, z in coords]
