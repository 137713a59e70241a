"""Neighbour-pattern autotiling.

Each cell is drawn with one of the variants of its kind's tileset. The variant
is chosen from which of the 8 surrounding cells carry the same kind on the
same layer:

    NW N NE        bit 0 1 2
    W  .  E            3 . 4
    SW S SE            5 6 7

The resulting 8-bit pattern is matched against `AUTOTILE_RULES`, an ordered
list of partial patterns (each position is match, no-match or don't-care).
The first rule that matches wins. Tilesets are 7 variants wide:

     0  1  2  3  4  5  6       outer corners and edges around the full tile
     7  8  9 10 11 12 13       (0-2, 7-9, 14-16), end caps and strips in
    14 15 16 17 18 19 20       column 3 and row 3, inner corners from 4 on.
    21 22 23 24 25 26 27
    28 29 30 31 32 33 34
    35 36 37 38 39 40 41
    42 43 44 45 46 47 48

Most variants only partly cover the cell. Each rule names the neighbour whose
kind should be drawn underneath (the sea under a coastline edge, say). The
special layer never blends: specials are always drawn as variant 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

from autoterra import config
from autoterra.environment.kinds import Kind, Layer
from autoterra.environment.tile_grid import Tile, TileGrid
from autoterra.types import AtlasCell, Offset, PixelPos, WorldTilePos


class Neighbor(IntEnum):
    """Moore neighbours in pattern order; the value is the pattern bit."""

    NW = 0
    N = 1
    NE = 2
    W = 3
    E = 4
    SW = 5
    S = 6
    SE = 7

    @property
    def offset(self) -> Offset:
        return NEIGHBOR_OFFSETS[self]


# y grows southwards, so north is y - 1.
NEIGHBOR_OFFSETS: dict[Neighbor, Offset] = {
    Neighbor.NW: (-1, -1),
    Neighbor.N: (0, -1),
    Neighbor.NE: (1, -1),
    Neighbor.W: (-1, 0),
    Neighbor.E: (1, 0),
    Neighbor.SW: (-1, 1),
    Neighbor.S: (0, 1),
    Neighbor.SE: (1, 1),
}


@dataclass(frozen=True)
class AutotileRule:
    """One row of the pattern table.

    Attributes:
        mask: Bits that must be set (matching neighbours).
        care: Bits that are checked at all; the rest are wildcards.
        variant: Tileset index selected by this rule.
        background: Neighbour whose kind is drawn beneath the variant, or
            None when the variant covers the whole cell.
    """

    mask: int
    care: int
    variant: int
    background: Neighbor | None

    @classmethod
    def from_pattern(
        cls, pattern: str, variant: int, background: Neighbor | None
    ) -> AutotileRule:
        """Build a rule from 8 characters in NW..SE order: T, F or _."""
        if len(pattern) != 8 or set(pattern) - {"T", "F", "_"}:
            raise ValueError(f"Malformed autotile pattern: {pattern!r}")
        mask = care = 0
        for bit, symbol in enumerate(pattern):
            if symbol == "T":
                mask |= 1 << bit
            if symbol != "_":
                care |= 1 << bit
        return cls(mask, care, variant, background)

    def matches(self, pattern: int) -> bool:
        return pattern & self.care == self.mask


class AutotileResult(NamedTuple):
    variant: int
    background: Kind | None


class TilePlacement(NamedTuple):
    """What the renderer needs to draw one cell of one layer."""

    position: WorldTilePos
    kind: Kind
    variant: int
    background: Kind | None
    render_position: PixelPos


_N, _NE, _E, _SE = Neighbor.N, Neighbor.NE, Neighbor.E, Neighbor.SE
_S, _SW, _W, _NW = Neighbor.S, Neighbor.SW, Neighbor.W, Neighbor.NW

# Pattern order: NW N NE W E SW S SE. Keep the order; first match wins.
AUTOTILE_RULES: tuple[AutotileRule, ...] = tuple(
    AutotileRule.from_pattern(pattern, variant, background)
    for pattern, variant, background in (
        # Outer corners
        ("_F_FT_TT", 0, _N),
        ("_F_TFTT_", 2, _N),
        ("_TTFT_F_", 14, _W),
        ("TT_TF_F_", 16, _E),
        # Edges
        ("_F_TTTTT", 1, _N),
        ("_TTFT_TT", 7, _W),
        ("TT_TFTT_", 9, _E),
        ("TTTTT_F_", 15, _S),
        # Vertical strip: top cap, middle, bottom cap
        ("_F_FF_T_", 3, _N),
        ("_T_FF_T_", 10, _W),
        ("_T_FF_F_", 17, _S),
        # Horizontal strip: left cap, middle, right cap
        ("_F_FT_F_", 21, _W),
        ("_F_TT_F_", 22, _N),
        ("_F_TF_F_", 23, _E),
        # Isolated. Covers the last pattern, so FALLBACK_RESULT is unreachable
        ("_F_FF_F_", 24, _N),
        # Single inner corners
        ("FTTTTTTT", 4, _NW),
        ("TTFTTTTT", 5, _NE),
        ("TTTTTFTT", 11, _SW),
        ("TTTTTTTF", 12, _SE),
        # Double inner corners
        ("FTFTTTTT", 6, _NW),
        ("TTTTTFTF", 13, _SW),
        ("FTTTTFTT", 18, _NW),
        ("TTFTTTTF", 19, _NE),
        ("FTTTTTTF", 20, _NW),
        ("TTFTTFTT", 25, _NE),
        # Triple inner corners
        ("FTFTTFTT", 26, _NW),
        ("FTFTTTTF", 27, _NW),
        ("FTTTTFTF", 28, _NW),
        ("TTFTTFTF", 29, _NE),
        # All four inner corners
        ("FTFTTFTF", 30, _NW),
        # Top edge with inner corners below
        ("_F_TTFTT", 31, _N),
        ("_F_TTTTF", 32, _N),
        ("_F_TTFTF", 33, _N),
        # Bottom edge with inner corners above
        ("FTTTT_F_", 35, _S),
        ("TTFTT_F_", 36, _S),
        ("FTFTT_F_", 37, _S),
        # Left edge with inner corners to the right
        ("_TFFT_TT", 38, _W),
        ("_TTFT_TF", 39, _W),
        ("_TFFT_TF", 40, _W),
        # Right edge with inner corners to the left
        ("FT_TFTT_", 42, _E),
        ("TT_TFFT_", 43, _E),
        ("FT_TFFT_", 44, _E),
        # Outer corner with the opposite inner corner
        ("_F_FT_TF", 45, _N),
        ("_F_TFFT_", 46, _N),
        ("_TFFT_F_", 47, _W),
        ("FT_TF_F_", 48, _E),
        # Full tile
        ("TTTTTTTT", 8, None),
    )
)

SPECIAL_RESULT = AutotileResult(0, None)
FALLBACK_RESULT = AutotileResult(config.FALLBACK_VARIANT, None)


def match_pattern(pattern: int) -> AutotileRule | None:
    """Return the first rule matching an 8-bit pattern, or None."""
    for rule in AUTOTILE_RULES:
        if rule.matches(pattern):
            return rule
    return None


def _own_kind(tile: Tile, layer: Layer) -> Kind | None:
    if layer is Layer.TERRAIN:
        # Raises MissingTerrainError when a pass left the cell bare.
        return tile.terrain
    return tile.get(layer)


def neighbor_kinds(
    grid: TileGrid, coordinate: WorldTilePos, layer: Layer, own: Kind | None
) -> list[Kind | None]:
    """Kinds of the 8 neighbours in pattern order.

    Cells missing from the grid (beyond the map edge) read as ``own``.
    """
    x, y = coordinate
    kinds: list[Kind | None] = []
    for neighbor in Neighbor:
        dx, dy = neighbor.offset
        tile = grid.get((x + dx, y + dy))
        kinds.append(own if tile is None else tile.get(layer))
    return kinds


def build_pattern(own: Kind | None, neighbors: list[Kind | None]) -> int:
    pattern = 0
    for bit, kind in enumerate(neighbors):
        if kind == own:
            pattern |= 1 << bit
    return pattern


def pattern_for(grid: TileGrid, coordinate: WorldTilePos, layer: Layer) -> int:
    """Return the 8-bit match pattern of the cell at ``coordinate``."""
    own = _own_kind(grid[coordinate], layer)
    return build_pattern(own, neighbor_kinds(grid, coordinate, layer, own))


def resolve(
    tile: Tile, grid: TileGrid, coordinate: WorldTilePos, layer: Layer
) -> AutotileResult:
    """Pick the tileset variant and background kind for one cell.

    Must only be called once every generation pass has finished writing
    ``layer``.

    Args:
        tile: The cell being drawn.
        grid: The finished grid the cell belongs to.
        coordinate: Position of ``tile`` in ``grid``.
        layer: Which of the cell's layers is being drawn.

    Returns:
        The variant index and the kind to draw beneath it, if any.

    Raises:
        MissingTerrainError: If ``layer`` is TERRAIN and the tile has none.
    """
    if layer is Layer.SPECIAL:
        return SPECIAL_RESULT

    own = _own_kind(tile, layer)
    neighbors = neighbor_kinds(grid, coordinate, layer, own)
    rule = match_pattern(build_pattern(own, neighbors))
    if rule is None:
        return FALLBACK_RESULT

    background = None if rule.background is None else neighbors[rule.background]
    return AutotileResult(rule.variant, background)


def resolve_layer(grid: TileGrid, layer: Layer) -> list[TilePlacement]:
    """Resolve every cell that carries a kind on ``layer``.

    Placements come out in grid iteration order (x-major). Cells without a
    kind on a feature or special layer are skipped; a missing terrain raises.
    """
    placements: list[TilePlacement] = []
    for pos, tile in grid:
        kind = _own_kind(tile, layer)
        if kind is None:
            continue
        variant, background = resolve(tile, grid, pos, layer)
        placements.append(
            TilePlacement(pos, kind, variant, background, tile.render_position)
        )
    return placements


def atlas_cell(
    variant: int,
    animation_frame: int = 0,
    tileset_width: int = config.TILESET_WIDTH,
    tileset_height: int = config.TILESET_HEIGHT,
) -> AtlasCell:
    """Return the (column, row) of ``variant`` in a row-major tileset image.

    Animated tilesets stack their frames vertically, one full tileset per frame.
    """
    row, column = divmod(variant, tileset_width)
    return column, row + animation_frame * tileset_height

