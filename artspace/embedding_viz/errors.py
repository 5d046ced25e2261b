"""Exceptions raised by the embedding visualization core."""

from __future__ import annotations


class EmbeddingVizError(Exception):
    """Base class for embedding visualization errors."""


class EmbeddingValidationError(EmbeddingVizError, ValueError):
    """Raised when input embeddings are malformed (ragged, empty, or non-finite)."""


class ReducerUnavailableError(EmbeddingVizError, RuntimeError):
    """Raised when the requested reduction method needs a library that is not installed."""
