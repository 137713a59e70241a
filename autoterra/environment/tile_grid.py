"""Storage for the generated world map.

`TileGrid` maps coordinates to `Tile` records. It is logically dense over
``[0, width) x [0, height)`` once generated but stored as a dict, so a missing
key is how neighbour lookups detect the map edge.

Tiles are only mutated through their grid. `TileGrid.snapshot()` returns a
frozen copy that rejects further writes; generation hands that copy to the
autotiler and the renderer.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from autoterra import config
from autoterra.environment.kinds import Kind, Layer, TerrainKind, layer_of
from autoterra.types import PixelPos, TileCoord, WorldTilePos


class MissingTerrainError(LookupError):
    """A tile that must carry terrain has none.

    Every tile gets terrain at grid initialization and terrain is only ever
    replaced, never removed, so this signals a broken generation pass.
    """


class FrozenGridError(RuntimeError):
    """Raised when writing to a grid snapshot."""


@dataclass(slots=True)
class Tile:
    """One map cell: its kinds per layer and its cached render position."""

    position: WorldTilePos
    render_position: PixelPos
    _kinds: dict[Layer, Kind] = field(default_factory=dict)

    @property
    def kinds(self) -> Mapping[Layer, Kind]:
        """Read-only view of the layer -> kind entries."""
        return MappingProxyType(self._kinds)

    def get(self, layer: Layer) -> Kind | None:
        return self._kinds.get(layer)

    @property
    def terrain(self) -> TerrainKind:
        """The tile's terrain.

        Raises:
            MissingTerrainError: If no terrain was ever written.
        """
        terrain = self._kinds.get(Layer.TERRAIN)
        if terrain is None:
            raise MissingTerrainError(f"Tile at {self.position} has no terrain")
        return terrain  # type: ignore[return-value]

    def copy(self) -> Tile:
        return Tile(self.position, self.render_position, dict(self._kinds))


class TileGrid:
    """Coordinate -> Tile mapping for a ``width`` x ``height`` map."""

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        cell_size: int = config.CELL_SIZE,
    ) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self._tiles: dict[WorldTilePos, Tile] = {}
        self._frozen = False

    @classmethod
    def filled(
        cls,
        width: TileCoord,
        height: TileCoord,
        terrain: TerrainKind,
        feature: Kind | None = None,
        cell_size: int = config.CELL_SIZE,
    ) -> TileGrid:
        """Create a grid where every cell holds the same base kinds.

        Args:
            width: Map width in tiles.
            height: Map height in tiles.
            terrain: Terrain written to every cell.
            feature: Optional feature written on top of the terrain.
            cell_size: Pixel size of one cell, for render positions.
        """
        grid = cls(width, height, cell_size)
        for x in range(width):
            for y in range(height):
                grid.set_kind((x, y), terrain)
                if feature is not None:
                    grid.set_kind((x, y), feature)
        return grid

    # ------------------------------------------------------------------
    # Mapping interface
    # ------------------------------------------------------------------

    def __getitem__(self, pos: WorldTilePos) -> Tile:
        return self._tiles[pos]

    def __contains__(self, pos: object) -> bool:
        return pos in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[tuple[WorldTilePos, Tile]]:
        """Iterate ``(position, tile)`` pairs, x-major then y."""
        for pos in sorted(self._tiles):
            yield pos, self._tiles[pos]

    def get(self, pos: WorldTilePos) -> Tile | None:
        return self._tiles.get(pos)

    def in_bounds(self, pos: WorldTilePos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, pos: WorldTilePos, layer: Layer) -> Kind | None:
        """Return the kind stored on ``layer`` at ``pos``, or None if absent."""
        tile = self._tiles.get(pos)
        if tile is None:
            return None
        return tile.get(layer)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Raw writes (no composition policy, see LayerCompositor)
    # ------------------------------------------------------------------

    def set_kind(self, pos: WorldTilePos, kind: Kind) -> None:
        """Store ``kind`` on its layer at ``pos``, creating the tile if needed.

        Raises:
            FrozenGridError: If this grid is a snapshot.
            IndexError: If ``pos`` is outside the map.
        """
        self._check_writable(pos)
        tile = self._tiles.get(pos)
        if tile is None:
            x, y = pos
            tile = Tile(pos, (x * self.cell_size, y * self.cell_size))
            self._tiles[pos] = tile
        tile._kinds[layer_of(kind)] = kind

    def clear_layer(self, pos: WorldTilePos, layer: Layer) -> None:
        """Remove whatever is stored on ``layer`` at ``pos``."""
        self._check_writable(pos)
        tile = self._tiles.get(pos)
        if tile is not None:
            tile._kinds.pop(layer, None)

    def _check_writable(self, pos: WorldTilePos) -> None:
        if self._frozen:
            raise FrozenGridError("Cannot modify a grid snapshot")
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} is outside the {self.width}x{self.height} map")

    # ------------------------------------------------------------------
    # Hand-off
    # ------------------------------------------------------------------

    def snapshot(self) -> TileGrid:
        """Return a frozen deep copy of this grid."""
        frozen = TileGrid(self.width, self.height, self.cell_size)
        frozen._tiles = {pos: tile.copy() for pos, tile in self._tiles.items()}
        frozen._frozen = True
        return frozen

    def layer_codes(self, layer: Layer) -> np.ndarray:
        """Return the kinds on ``layer`` as an int16 array of shape (width, height).

        Each cell holds its kind's enum value, or -1 where the layer is empty.
        """
        codes = np.full((self.width, self.height), -1, dtype=np.int16, order="F")
        for (x, y), tile in self._tiles.items():
            kind = tile.get(layer)
            if kind is not None:
                codes[x, y] = kind.value
        return codes

    def kind_counts(self, layer: Layer) -> Counter[Kind]:
        """Count how many cells carry each kind on ``layer``."""
        return Counter(
            kind
            for tile in self._tiles.values()
            if (kind := tile.get(layer)) is not None
        )

    def missing_terrain(self) -> list[WorldTilePos]:
        """Positions inside the map that have no tile or no terrain."""
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self.kind_at((x, y), Layer.TERRAIN) is None
        ]
