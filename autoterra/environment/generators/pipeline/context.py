"""Generation context for the world map pipeline.

The GenerationContext is a mutable container that holds all state during map
generation. Each layer in the pipeline receives the same context and modifies
it in place, so the grid is threaded explicitly through every pass and no
generation state lives at module level.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from autoterra import config
from autoterra.environment.generators.patches import LayerCompositor
from autoterra.environment.tile_grid import TileGrid
from autoterra.types import RandomSeed, TileCoord
from autoterra.util.noise import NoiseField
from autoterra.util.rng import RandomSource, RNGProvider


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        grid: The tile grid being built. Starts empty; the first layer fills it.
        rngs: Provider of one isolated random stream per pass.
        noise: Shared noise sampler for patch outlines.
        compositor: Applies the layer placement rules to every write.
        height_threshold: Blob height a cell must exceed to join a patch.
    """

    width: TileCoord
    height: TileCoord
    grid: TileGrid
    rngs: RNGProvider
    noise: NoiseField = field(default_factory=NoiseField)
    compositor: LayerCompositor = field(default_factory=LayerCompositor)
    height_threshold: float = config.HEIGHT_THRESHOLD

    @classmethod
    def create_empty(
        cls,
        width: TileCoord,
        height: TileCoord,
        seed: RandomSeed = None,
        cell_size: int = config.CELL_SIZE,
        height_threshold: float = config.HEIGHT_THRESHOLD,
    ) -> GenerationContext:
        """Create a context with an empty grid and fresh random streams.

        Args:
            width: Map width in tiles.
            height: Map height in tiles.
            seed: Optional random seed for deterministic generation.
            cell_size: Pixel size of one cell, for render positions.
            height_threshold: Blob height threshold used by patch layers.

        Returns:
            A new GenerationContext ready for layer processing.
        """
        return cls(
            width=width,
            height=height,
            grid=TileGrid(width, height, cell_size),
            rngs=RNGProvider(seed),
            height_threshold=height_threshold,
        )

    def rng_for(self, domain: str) -> RandomSource:
        """Return the random stream reserved for ``domain``."""
        return self.rngs.get(domain)
