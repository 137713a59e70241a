"""Tests for neighbour-pattern autotiling."""

from __future__ import annotations

import pytest

from autoterra.environment import autotile
from autoterra.environment.autotile import (
    AUTOTILE_RULES,
    AutotileResult,
    AutotileRule,
    Neighbor,
    atlas_cell,
    match_pattern,
    pattern_for,
    resolve,
    resolve_layer,
)
from autoterra.environment.kinds import FeatureKind, Layer, SpecialKind, TerrainKind
from autoterra.environment.tile_grid import MissingTerrainError, TileGrid
from tests.helpers import grid_from_rows

# A 3x3 plain block in the middle of a desert.
PLAIN_BLOCK = [
    "DDDDD",
    "DPPPD",
    "DPPPD",
    "DPPPD",
    "DDDDD",
]


def resolve_terrain(grid: TileGrid, pos: tuple[int, int]) -> AutotileResult:
    return resolve(grid[pos], grid, pos, Layer.TERRAIN)


class TestRuleTable:
    def test_table_has_one_rule_per_variant(self) -> None:
        variants = [rule.variant for rule in AUTOTILE_RULES]

        assert len(AUTOTILE_RULES) == 47
        assert len(set(variants)) == 47
        assert set(range(49)) - set(variants) == {34, 41}

    def test_every_pattern_matches_exactly_one_rule(self) -> None:
        for pattern in range(256):
            matching = [rule for rule in AUTOTILE_RULES if rule.matches(pattern)]
            assert len(matching) == 1, f"pattern {pattern:08b}"

    def test_fallback_is_unreachable_with_full_table(self) -> None:
        assert all(match_pattern(pattern) is not None for pattern in range(256))
        assert match_pattern(0).variant == 24

    def test_full_rule_is_last(self) -> None:
        full = AUTOTILE_RULES[-1]
        assert full.variant == 8
        assert full.background is None
        assert match_pattern(0xFF) is full

    def test_from_pattern_bits(self) -> None:
        rule = AutotileRule.from_pattern("_F_FT_TT", 0, Neighbor.N)
        # Bits are numbered NW=0 .. SE=7.
        assert rule.mask == (1 << 4) | (1 << 6) | (1 << 7)
        assert rule.care == 0b11011010

    @pytest.mark.parametrize("pattern", ["TTTT", "TTTTTTTX", "TTTTTTTTT"])
    def test_from_pattern_rejects_malformed(self, pattern: str) -> None:
        with pytest.raises(ValueError, match="Malformed"):
            AutotileRule.from_pattern(pattern, 0, None)

    def test_neighbor_offsets_point_north_up(self) -> None:
        assert Neighbor.N.offset == (0, -1)
        assert Neighbor.S.offset == (0, 1)
        assert Neighbor.NE.offset == (1, -1)
        assert Neighbor.SW.offset == (-1, 1)


class TestResolveTerrain:
    def test_block_center_is_full_tile(self) -> None:
        grid = grid_from_rows(PLAIN_BLOCK)
        assert resolve_terrain(grid, (2, 2)) == (8, None)

    @pytest.mark.parametrize(
        ("pos", "variant"),
        [((1, 1), 0), ((3, 1), 2), ((1, 3), 14), ((3, 3), 16)],
    )
    def test_block_corners(self, pos: tuple[int, int], variant: int) -> None:
        grid = grid_from_rows(PLAIN_BLOCK)
        assert resolve_terrain(grid, pos) == (variant, TerrainKind.DESERT)

    def test_block_edges(self) -> None:
        grid = grid_from_rows(PLAIN_BLOCK)

        assert resolve_terrain(grid, (2, 1)) == (1, TerrainKind.DESERT)
        assert resolve_terrain(grid, (1, 2)) == (7, TerrainKind.DESERT)
        assert resolve_terrain(grid, (3, 2)) == (9, TerrainKind.DESERT)
        assert resolve_terrain(grid, (2, 3)) == (15, TerrainKind.DESERT)

    def test_corner_pattern_bits(self) -> None:
        grid = grid_from_rows(PLAIN_BLOCK)
        # E, S and SE match.
        assert pattern_for(grid, (1, 1), Layer.TERRAIN) == 16 + 64 + 128

    def test_inner_corner_draws_the_diagonal_underneath(self) -> None:
        grid = grid_from_rows(PLAIN_BLOCK)
        # Desert corner cell: map edge reads as desert, only SE differs.
        assert resolve_terrain(grid, (0, 0)) == (12, TerrainKind.PLAIN)

    def test_isolated_cell(self) -> None:
        grid = grid_from_rows(["DDD", "DPD", "DDD"])
        assert resolve_terrain(grid, (1, 1)) == (24, TerrainKind.DESERT)

    def test_single_cell_map_is_full(self) -> None:
        """Cells beyond the map edge count as the cell's own kind."""
        grid = grid_from_rows(["P"])
        assert resolve_terrain(grid, (0, 0)) == (8, None)

    def test_map_edge_counts_as_same_kind(self) -> None:
        grid = grid_from_rows(["PDD"])
        assert resolve_terrain(grid, (0, 0)) == (9, TerrainKind.DESERT)

    def test_missing_terrain_raises(self) -> None:
        grid = TileGrid(1, 1)
        grid.set_kind((0, 0), FeatureKind.OCEAN)

        with pytest.raises(MissingTerrainError):
            resolve(grid[(0, 0)], grid, (0, 0), Layer.TERRAIN)
        with pytest.raises(MissingTerrainError):
            resolve_layer(grid, Layer.TERRAIN)

    def test_no_matching_rule_falls_back(self, monkeypatch) -> None:
        monkeypatch.setattr(autotile, "AUTOTILE_RULES", ())
        grid = grid_from_rows(PLAIN_BLOCK)

        assert resolve_terrain(grid, (2, 2)) == (24, None)
        assert resolve_terrain(grid, (1, 1)) == (24, None)


class TestResolveOtherLayers:
    def test_feature_next_to_nothing_has_no_background(self) -> None:
        grid = grid_from_rows(["PPP", "PPP", "PPP"], features=["...", ".F.", "..."])
        result = resolve(grid[(1, 1)], grid, (1, 1), Layer.FEATURE)
        assert result == (24, None)

    def test_feature_edge_against_other_feature(self) -> None:
        grid = grid_from_rows(["PPP"], features=["OOF"])
        result = resolve(grid[(1, 0)], grid, (1, 0), Layer.FEATURE)
        assert result == (9, FeatureKind.FOREST)

    def test_specials_never_blend(self) -> None:
        grid = grid_from_rows(
            ["PPP", "PPP", "PPP"],
            specials=["CCC", "CCC", "CCC"],
        )
        for pos in [(0, 0), (1, 1), (2, 1)]:
            assert resolve(grid[pos], grid, pos, Layer.SPECIAL) == (0, None)


class TestResolveLayer:
    def test_skips_cells_without_the_layer(self) -> None:
        grid = grid_from_rows(
            ["PP", "PP"],
            features=["H.", ".."],
            specials=["..", ".S"],
        )

        features = resolve_layer(grid, Layer.FEATURE)
        specials = resolve_layer(grid, Layer.SPECIAL)

        assert [p.position for p in features] == [(0, 0)]
        assert features[0].kind is FeatureKind.HILL
        assert len(specials) == 1
        assert specials[0].kind is SpecialKind.FISH
        assert (specials[0].variant, specials[0].background) == (0, None)
        assert specials[0].render_position == (32, 32)

    def test_terrain_covers_every_cell(self) -> None:
        grid = grid_from_rows(PLAIN_BLOCK)
        placements = resolve_layer(grid, Layer.TERRAIN)

        assert len(placements) == 25
        assert placements[0].position == (0, 0)
        by_pos = {p.position: p for p in placements}
        assert by_pos[(2, 2)].variant == 8
        assert by_pos[(2, 2)].kind is TerrainKind.PLAIN


class TestAtlasCell:
    def test_row_major_layout(self) -> None:
        assert atlas_cell(0) == (0, 0)
        assert atlas_cell(8) == (1, 1)
        assert atlas_cell(24) == (3, 3)
        assert atlas_cell(48) == (6, 6)

    def test_animation_frames_stack_vertically(self) -> None:
        assert atlas_cell(9, animation_frame=2) == (2, 15)
