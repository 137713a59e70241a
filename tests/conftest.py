from __future__ import annotations

import pytest

from autoterra.environment.generators.patches import LayerCompositor
from autoterra.util.noise import NoiseField
from autoterra.util.rng import RandomSource


@pytest.fixture
def rng() -> RandomSource:
    """A fresh random stream with a fixed seed."""
    return RandomSource(42)


@pytest.fixture
def noise() -> NoiseField:
    return NoiseField()


@pytest.fixture
def compositor() -> LayerCompositor:
    return LayerCompositor()
