"""Deterministic random number generation with isolated streams.

Each generation pass (continents, biomes, specials, etc.) gets its own
independent random stream derived from a master seed. A map is fully
determined by its master seed, and a pass that draws more or fewer values
never shifts the sequence seen by another pass.

Usage:
    provider = RNGProvider(master_seed=42)
    rng = provider.get("map.continents")

    radius = rng.uniform_float(3.0, 6.0)
    jitter = rng.uniform_int(-2, 2)

Streams are handed to the code that consumes them. There is no module-level
provider: callers thread the stream through explicitly.

Domain naming convention (hierarchical):
    - "map.continents", "map.biomes"
    - "map.vegetation.forest", "map.relief.hill"
    - "map.specials.fish"
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from autoterra.types import RandomSeed


class RandomSource:
    """Seeded wrapper around ``random.Random`` with range-checked draws.

    The same seed and the same call sequence always produce the same values.
    Malformed ranges are programming errors and raise ``ValueError`` at the
    call site instead of silently swapping the bounds.
    """

    def __init__(self, seed: RandomSeed = None) -> None:
        self.seed = seed
        self._random = Random(seed)

    def uniform_int(self, lo: int, hi: int) -> int:
        """Return random integer N such that lo <= N <= hi."""
        if lo > hi:
            raise ValueError(f"uniform_int range is empty: lo={lo} > hi={hi}")
        return self._random.randint(lo, hi)

    def uniform_float(self, lo: float, hi: float) -> float:
        """Return random float N such that lo <= N <= hi."""
        if lo > hi:
            raise ValueError(f"uniform_float range is empty: lo={lo} > hi={hi}")
        return self._random.uniform(lo, hi)

    def chance(self, p: float) -> bool:
        """Return True with probability ``p``."""
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {p}")
        return self._random.random() < p

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._random.random()


class RNGProvider:
    """Provides isolated random streams for different generation passes.

    Each domain gets its own RandomSource derived deterministically from the
    master seed. Domains are identified by string names. Asking for the same
    domain twice returns the same stream object.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, RandomSource] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RandomSource:
        """Get the random stream for the named domain.

        Args:
            domain: Hierarchical name like "map.continents" or "map.specials.fish"

        Returns:
            The RandomSource owned by that domain.
        """
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: use system entropy for non-deterministic behavior
                self._streams[domain] = RandomSource()
            else:
                # crc32, not hash(): hash() is salted per process
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = RandomSource(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Drop all streams and derive new ones from ``master_seed``.

        Streams handed out before the reset keep their old sequence; callers
        must fetch fresh streams with get().
        """
        self._master_seed = master_seed
        self._streams.clear()
