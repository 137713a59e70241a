"""Tests for the seeded noise sampler."""

from __future__ import annotations

import pytest

from autoterra.config import ConfigError
from autoterra.util.noise import NoiseField, gain_to_hurst

POINTS = [(0.1, 0.2), (1.7, -3.2), (12.5, 4.25), (-6.0, 9.9), (0.33, 0.66)]


class TestSample:
    def test_same_seed_same_values(self) -> None:
        """Two independent fields agree for the same seed."""
        first = [NoiseField().sample(p, 1234) for p in POINTS]
        second = [NoiseField().sample(p, 1234) for p in POINTS]
        assert first == second

    def test_different_seeds_differ(self) -> None:
        field = NoiseField()
        a = [field.sample(p, 1) for p in POINTS]
        b = [field.sample(p, 2) for p in POINTS]
        assert a != b

    def test_values_are_bounded(self) -> None:
        field = NoiseField()
        for x in range(-20, 20):
            for y in range(-20, 20):
                assert abs(field.sample((x * 0.37, y * 0.37), 99)) <= 1.05

    def test_is_spatially_continuous(self) -> None:
        """Tiny steps produce tiny changes."""
        field = NoiseField()
        for x, y in POINTS:
            here = field.sample((x, y), 7)
            near = field.sample((x + 1e-4, y + 1e-4), 7)
            assert abs(here - near) < 0.01


class TestSampleFbm:
    def test_deterministic(self) -> None:
        first = [NoiseField().sample_fbm(p, octaves=3, seed=5) for p in POINTS]
        second = [NoiseField().sample_fbm(p, octaves=3, seed=5) for p in POINTS]
        assert first == second

    def test_octaves_change_the_signal(self) -> None:
        field = NoiseField()
        one = [field.sample_fbm(p, octaves=1, seed=5) for p in POINTS]
        four = [field.sample_fbm(p, octaves=4, seed=5) for p in POINTS]
        assert one != four

    @pytest.mark.parametrize(
        ("octaves", "lacunarity", "gain"),
        [(0, 2.0, 0.5), (3, 1.0, 0.5), (3, 2.0, 0.0), (3, 2.0, 1.0)],
    )
    def test_invalid_parameters_raise(
        self, octaves: int, lacunarity: float, gain: float
    ) -> None:
        with pytest.raises(ConfigError):
            NoiseField().sample_fbm((0.5, 0.5), octaves, lacunarity, gain)


def test_gain_to_hurst() -> None:
    assert gain_to_hurst(2.0, 0.5) == pytest.approx(1.0)
    assert gain_to_hurst(2.0, 0.25) == pytest.approx(2.0)
