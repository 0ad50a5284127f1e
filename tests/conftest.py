"""
Shared fixtures for the packing tests
"""
import random

import pytest

from rectatlas import RectInput


@pytest.fixture
def make_inputs():
    """Factory for reproducible random rectangle requests"""

    def _make(count=40, min_side=4, max_side=96, seed=1234):
        rng = random.Random(seed)
        return [
            RectInput.of(rng.randint(min_side, max_side), rng.randint(min_side, max_side), i)
            for i in range(count)
        ]

    return _make


@pytest.fixture
def glyph_inputs():
    """Near-uniform heights, like the glyphs of one font size"""
    rng = random.Random(99)
    return [RectInput.of(rng.randint(6, 18), rng.choice([15, 16]), chr(65 + i)) for i in range(26)]
