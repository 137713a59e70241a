"""Map builder that orchestrates layer-based world generation.

The MapBuilder runs a sequence of GenerationLayers, each transforming a shared
GenerationContext. Passes run strictly in order and later writes overwrite
earlier ones, so the same seed and the same layer list always produce the same
map.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from autoterra import config
from autoterra.environment.generators.base import BaseMapGenerator, GeneratedWorld
from autoterra.environment.tile_grid import MissingTerrainError
from autoterra.types import RandomSeed, TileCoord

from .context import GenerationContext

if TYPE_CHECKING:
    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class MapBuilder(BaseMapGenerator):
    """Map generator that runs layers sequentially on a shared context.

    The builder creates an empty GenerationContext and passes it through each
    layer in order. When every layer has run it checks that each cell carries
    terrain and hands out a frozen snapshot of the grid.

    Example:
        builder = MapBuilder(
            layers=[
                BaseFillLayer(),
                PatchLayer(TerrainKind.PLAIN, continent_config, "map.continents"),
                PatchLayer(FeatureKind.FOREST, forest_config, "map.forest"),
            ],
            map_width=20,
            map_height=20,
            seed=42,
        )
        world = builder.build()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        seed: Optional random seed for reproducible generation.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        map_width: TileCoord,
        map_height: TileCoord,
        seed: RandomSeed = None,
        cell_size: int = config.CELL_SIZE,
        height_threshold: float = config.HEIGHT_THRESHOLD,
    ) -> None:
        """Initialize the map builder.

        Args:
            layers: List of GenerationLayer instances to apply in order.
            map_width: Width of the map in tiles.
            map_height: Height of the map in tiles.
            seed: Optional random seed for deterministic generation.
            cell_size: Pixel size of one cell, for render positions.
            height_threshold: Blob height a cell must exceed to join a patch.

        Raises:
            ConfigError: If the map or cell size is not positive.
        """
        super().__init__(map_width, map_height, cell_size)
        self.layers = layers
        self.seed = seed
        self.height_threshold = height_threshold

    def build(self) -> GeneratedWorld:
        """Generate a map by running all layers in sequence.

        Returns:
            GeneratedWorld holding a frozen snapshot of the grid.

        Raises:
            MissingTerrainError: If some cell has no terrain once all layers ran
                (the pipeline lacks a base fill).
        """
        logger.info(
            "Building %dx%d map, seed=%r, %d layers",
            self.map_width,
            self.map_height,
            self.seed,
            len(self.layers),
        )
        ctx = GenerationContext.create_empty(
            width=self.map_width,
            height=self.map_height,
            seed=self.seed,
            cell_size=self.cell_size,
            height_threshold=self.height_threshold,
        )

        for layer in self.layers:
            logger.debug("Applying %s (%s)", type(layer).__name__, layer.domain)
            layer.apply(ctx)

        missing = ctx.grid.missing_terrain()
        if missing:
            raise MissingTerrainError(
                f"{len(missing)} cells have no terrain, first at {missing[0]}"
            )

        logger.info(
            "Map built: %d writes, %d rejected",
            ctx.compositor.written,
            ctx.compositor.rejected,
        )
        return GeneratedWorld(grid=ctx.grid.snapshot(), seed=self.seed)
