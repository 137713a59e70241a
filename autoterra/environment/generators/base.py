"""Base classes for map generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from autoterra import config
from autoterra.config import ConfigError
from autoterra.environment.autotile import TilePlacement, resolve_layer
from autoterra.environment.kinds import Layer
from autoterra.environment.tile_grid import TileGrid
from autoterra.types import RandomSeed, TileCoord


@dataclass(frozen=True)
class GeneratedWorld:
    """A finished map, ready to be autotiled and drawn.

    Attributes:
        grid: Frozen snapshot of the generated tile grid.
        seed: Seed the map was generated from.
    """

    grid: TileGrid
    seed: RandomSeed

    @property
    def width(self) -> TileCoord:
        return self.grid.width

    @property
    def height(self) -> TileCoord:
        return self.grid.height

    def placements(self, layer: Layer) -> list[TilePlacement]:
        """Autotile every cell that has a kind on ``layer``."""
        return resolve_layer(self.grid, layer)


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        cell_size: int = config.CELL_SIZE,
    ) -> None:
        if map_width <= 0 or map_height <= 0:
            raise ConfigError(
                f"Map size must be positive, got {map_width}x{map_height}"
            )
        if cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {cell_size}")
        self.map_width = map_width
        self.map_height = map_height
        self.cell_size = cell_size

    @abc.abstractmethod
    def build(self) -> GeneratedWorld:
        """Run every generation pass and return the finished map."""
        raise NotImplementedError
