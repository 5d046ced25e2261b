"""
Configuration settings for artspace.

Every setting has a working default; environment variables (or a .env file
in the project root) only override them.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
# Look for .env file in project root (parent of artspace/)
_project_root = Path(__file__).parent.parent
_env_path = _project_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)

# ===================
# Reducer Settings
# ===================

# One of: pca, random_projection, umap
REDUCER_METHOD = os.getenv("ARTSPACE_REDUCER_METHOD", "pca")
RANDOM_STATE = int(os.getenv("ARTSPACE_RANDOM_STATE", "42"))

# ===================
# Clustering Settings
# ===================

MIN_PTS_FLOOR = int(os.getenv("ARTSPACE_MIN_PTS_FLOOR", "4"))
EPS_PERCENTILE = float(os.getenv("ARTSPACE_EPS_PERCENTILE", "0.9"))
MIN_EPS = float(os.getenv("ARTSPACE_MIN_EPS", "1e-6"))

# ===================
# Display Settings
# ===================

DEFAULT_POINT_COLOR = "rgb(59, 130, 246)"  # Primary blue
NOISE_COLOR = "rgb(156, 163, 175)"  # Gray
UNKNOWN_CATEGORY = "Unknown"
YEAR_BUCKET = 50  # years per period when coloring by year

COLOR_BY_OPTIONS = ("artist", "year", "medium", "cluster", "none")

# ===================
# Logging
# ===================

LOG_LEVEL = os.getenv("ARTSPACE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a stream handler to the artspace logger (CLI use only)."""
    logger = logging.getLogger("artspace")
    logger.setLevel(level.upper())

    # Create handler if not already set
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
