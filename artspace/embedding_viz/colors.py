"""Categorical color generation (golden-ratio hue stepping)."""

from __future__ import annotations

import random
from typing import List, Optional

GOLDEN_RATIO = 0.618033988749895


def _hsl(hue: float, saturation: float, lightness: float) -> str:
    return f"hsl({hue * 360:.2f}, {saturation * 100:.1f}%, {lightness * 100:.1f}%)"


def generate_colors(
    count: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Generate ``count`` distinct colors for categories.

    Hues step by the golden ratio from a random start, so neighbouring
    indices land far apart on the color wheel. Saturation (60-80%) and
    lightness (50-60%) vary per color and stay legible on a dark background.

    Args:
        count: Number of colors (>= 0).
        seed: Seed for a private random generator; makes output reproducible.
        rng: Explicit random source (takes precedence over ``seed``).

    Returns:
        List of ``hsl(...)`` strings, all distinct.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if rng is None:
        rng = random.Random(seed)

    colors: List[str] = []
    seen: set[str] = set()
    hue = rng.random()

    while len(colors) < count:
        hue = (hue + GOLDEN_RATIO) % 1
        saturation = 0.6 + rng.random() * 0.2
        lightness = 0.5 + rng.random() * 0.1
        color = _hsl(hue, saturation, lightness)
        # Rounding can collide for very large counts; keep stepping
        if color in seen:
            continue
        seen.add(color)
        colors.append(color)

    return colors


def cluster_color(cluster_id: int) -> str:
    """Deterministic color for a cluster id (stable across runs)."""
    hue = (cluster_id * GOLDEN_RATIO) % 1
    saturation = 0.6 + ((cluster_id * 0.1) % 0.3)
    lightness = 0.5 + ((cluster_id * 0.15) % 0.2)
    return _hsl(hue, saturation, lightness)
