from __future__ import annotations

from collections.abc import Mapping, Sequence

from autoterra.environment.kinds import FeatureKind, Kind, SpecialKind, TerrainKind
from autoterra.environment.tile_grid import TileGrid

# One character per cell. "." means nothing on that layer.
TERRAIN_LEGEND: dict[str, Kind] = {
    "P": TerrainKind.PLAIN,
    "D": TerrainKind.DESERT,
    "W": TerrainKind.SEA,
}
FEATURE_LEGEND: dict[str, Kind] = {
    "O": FeatureKind.OCEAN,
    "F": FeatureKind.FOREST,
    "H": FeatureKind.HILL,
    "M": FeatureKind.MOUNTAIN,
}
SPECIAL_LEGEND: dict[str, Kind] = {
    "L": SpecialKind.LUMBER,
    "C": SpecialKind.CORN,
    "S": SpecialKind.FISH,
}


def _paint(grid: TileGrid, rows: Sequence[str], legend: Mapping[str, Kind]) -> None:
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            if symbol != ".":
                grid.set_kind((x, y), legend[symbol])


def grid_from_rows(
    terrain: Sequence[str],
    features: Sequence[str] | None = None,
    specials: Sequence[str] | None = None,
    cell_size: int = 32,
) -> TileGrid:
    """Build a TileGrid from ASCII rows (row index is y, column index is x).

    Example:
        grid_from_rows(
            ["DDD",
             "DPD",
             "DDD"],
        )
    """
    height = len(terrain)
    width = len(terrain[0])
    grid = TileGrid(width, height, cell_size)
    _paint(grid, terrain, TERRAIN_LEGEND)
    if features is not None:
        _paint(grid, features, FEATURE_LEGEND)
    if specials is not None:
        _paint(grid, specials, SPECIAL_LEGEND)
    return grid
