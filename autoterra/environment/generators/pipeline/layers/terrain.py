"""Base fill layer.

Every pipeline starts here: the grid gets one tile per cell, all carrying the
same terrain (and optionally the same feature). Later layers only overwrite,
so this is what guarantees every cell has terrain.
"""

from __future__ import annotations

from autoterra.environment.generators.pipeline.context import GenerationContext
from autoterra.environment.generators.pipeline.layer import GenerationLayer
from autoterra.environment.kinds import FeatureKind, TerrainKind
from autoterra.environment.tile_grid import TileGrid


class BaseFillLayer(GenerationLayer):
    """Fills the whole map with a single terrain and optional feature.

    The default world starts as seabed under a world-wide ocean, so the
    continent pass can carve land out of it with terrain writes.

    Any tiles already in the context are discarded.
    """

    domain = "map.init"

    def __init__(
        self,
        terrain: TerrainKind = TerrainKind.SEA,
        feature: FeatureKind | None = FeatureKind.OCEAN,
    ) -> None:
        """Initialize the fill layer.

        Args:
            terrain: Terrain written to every cell.
            feature: Feature written to every cell, or None for bare terrain.
        """
        self.terrain = terrain
        self.feature = feature

    def apply(self, ctx: GenerationContext) -> None:
        """Replace the context's grid with a uniformly filled one.

        Args:
            ctx: The generation context to modify.
        """
        ctx.grid = TileGrid.filled(
            ctx.width,
            ctx.height,
            terrain=self.terrain,
            feature=self.feature,
            cell_size=ctx.grid.cell_size,
        )
