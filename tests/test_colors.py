"""
Test cases for categorical color generation.
"""

import random
import re

import pytest

from artspace.embedding_viz import cluster_color, generate_colors

HSL = re.compile(r"^hsl\(([\d.]+), ([\d.]+)%, ([\d.]+)%\)$")


def _parse(color):
    match = HSL.match(color)
    assert match, color
    return tuple(float(v) for v in match.groups())


@pytest.mark.parametrize("count", [0, 1, 5, 50])
def test_count_and_distinctness(count):
    colors = generate_colors(count)
    assert len(colors) == count
    assert len(set(colors)) == count
    for color in colors:
        _parse(color)


def test_large_counts_stay_distinct():
    colors = generate_colors(2000, seed=1)
    assert len(set(colors)) == 2000


def test_saturation_and_lightness_band():
    for hue, sat, light in map(_parse, generate_colors(100, seed=4)):
        assert 0.0 <= hue <= 360.0
        assert 60.0 <= sat <= 80.0
        assert 50.0 <= light <= 60.0


def test_adjacent_hues_are_far_apart():
    hues = [_parse(c)[0] for c in generate_colors(20, seed=9)]
    for a, b in zip(hues, hues[1:]):
        gap = abs(a - b) % 360
        assert min(gap, 360 - gap) > 100


def test_seed_makes_output_reproducible():
    assert generate_colors(8, seed=42) == generate_colors(8, seed=42)
    assert generate_colors(8, seed=42) != generate_colors(8, seed=43)


def test_explicit_rng():
    assert generate_colors(5, rng=random.Random(3)) == generate_colors(5, seed=3)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        generate_colors(-1)


def test_cluster_color_is_stable():
    assert cluster_color(0) == "hsl(0.00, 60.0%, 50.0%)"
    assert cluster_color(3) == cluster_color(3)
    assert len({cluster_color(i) for i in range(10)}) == 10
