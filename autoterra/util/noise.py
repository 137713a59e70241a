"""Seeded 2D coherent noise used to perturb patch outlines.

Wraps ``tcod.noise`` so that callers only deal with positions and seeds.
Values are deterministic for a given (position, seed) pair and vary smoothly
with the position, roughly within [-1, 1].
"""

from __future__ import annotations

import logging
import math

import tcod.noise

from autoterra import config
from autoterra.config import ConfigError
from autoterra.types import NoisePos, NoiseSeed

logger = logging.getLogger(__name__)

# (seed, octaves, lacunarity, hurst); octaves == 0 marks plain simplex
type _NoiseKey = tuple[NoiseSeed, int, float, float]


def gain_to_hurst(lacunarity: float, gain: float) -> float:
    """Convert a per-octave amplitude gain to libtcod's Hurst exponent.

    libtcod scales octave ``i`` by ``lacunarity ** (-i * hurst)``, so a gain
    of ``g`` per octave corresponds to ``hurst = -log(g) / log(lacunarity)``.
    """
    return -math.log(gain) / math.log(lacunarity)


class NoiseField:
    """Simplex noise sampler with one cached generator per seed."""

    def __init__(self) -> None:
        self._generators: dict[_NoiseKey, tcod.noise.Noise] = {}

    def sample(self, position: NoisePos, seed: NoiseSeed) -> float:
        """Sample plain simplex noise at ``position``."""
        generator = self._generator((seed, 0, 0.0, 0.0))
        x, y = position
        return float(generator.get_point(x, y))

    def sample_fbm(
        self,
        position: NoisePos,
        octaves: int,
        lacunarity: float = config.FBM_LACUNARITY,
        gain: float = config.FBM_GAIN,
        seed: NoiseSeed = 0,
    ) -> float:
        """Sample fractal Brownian motion (summed simplex octaves).

        Args:
            position: Point to sample.
            octaves: Number of summed octaves, at least 1.
            lacunarity: Frequency multiplier between octaves, above 1.
            gain: Amplitude multiplier between octaves, within (0, 1).
            seed: Noise seed.

        Raises:
            ConfigError: If any of the fractal parameters is out of range.
        """
        if octaves < 1:
            raise ConfigError(f"octaves must be >= 1, got {octaves}")
        if lacunarity <= 1.0:
            raise ConfigError(f"lacunarity must be > 1, got {lacunarity}")
        if not 0.0 < gain < 1.0:
            raise ConfigError(f"gain must be within (0, 1), got {gain}")

        hurst = gain_to_hurst(lacunarity, gain)
        generator = self._generator((seed, octaves, lacunarity, hurst))
        x, y = position
        return float(generator.get_point(x, y))

    def _generator(self, key: _NoiseKey) -> tcod.noise.Noise:
        generator = self._generators.get(key)
        if generator is None:
            seed, octaves, lacunarity, hurst = key
            if octaves == 0:
                generator = tcod.noise.Noise(
                    dimensions=2,
                    algorithm=tcod.noise.Algorithm.SIMPLEX,
                    implementation=tcod.noise.Implementation.SIMPLE,
                    seed=seed,
                )
            else:
                generator = tcod.noise.Noise(
                    dimensions=2,
                    algorithm=tcod.noise.Algorithm.SIMPLEX,
                    implementation=tcod.noise.Implementation.FBM,
                    hurst=hurst,
                    lacunarity=lacunarity,
                    octaves=octaves,
                    seed=seed,
                )
            logger.debug("Created noise generator seed=%d octaves=%d", seed, octaves)
            self._generators[key] = generator
        return generator
