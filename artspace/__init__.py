"""artspace - Embedding visualization core for artwork galleries."""

# Set environment variables BEFORE any scientific/ML library imports
# to prevent OpenMP conflicts and segfaults on Apple Silicon (M1/M2/M3).
import os as _os
_os.environ.setdefault("KMP_DUPLICATE_LIB_OK", "TRUE")
_os.environ.setdefault("OMP_NUM_THREADS", "1")
_os.environ.setdefault("MKL_NUM_THREADS", "1")
_os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
_os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")
_os.environ.setdefault("NUMEXPR_NUM_THREADS", "1")
del _os

__version__ = "1.0.0"

__all__ = []
