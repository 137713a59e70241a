"""Noise-perturbed blob placement.

A *patch* is a roughly disk-shaped region assigned a single kind. Patches are
built in three steps:

1. `place_centers()` lays centers on an evenly spaced lattice and jitters them.
2. `apply_patch()` decides which cells around a center belong to the blob.
   A cell at distance ``d`` from the center has height
   ``radius + noise(dx, dy) * amplitude - d`` and is covered when that height
   exceeds the threshold. Low frequency with high amplitude gives smooth,
   lopsided blobs; high frequency gives ragged edges.
3. `LayerCompositor.write()` stores the kind in each covered cell, subject to
   the layer rules (relief and forest need land, forest needs plain ground,
   terrain wipes features).

Order matters throughout: later patches overwrite earlier ones, so centers and
cell offsets are always visited in the same nested order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from autoterra import config
from autoterra.config import ConfigError
from autoterra.environment.kinds import (
    FeatureKind,
    Kind,
    Layer,
    TerrainKind,
    layer_of,
)
from autoterra.environment.tile_grid import TileGrid
from autoterra.types import FloatRange, NoiseSeed, TileCoord, WorldTilePos
from autoterra.util.noise import NoiseField
from autoterra.util.rng import RandomSource


@dataclass(frozen=True)
class PatchSpec:
    """Everything needed to stamp one patch onto the grid.

    Attributes:
        kind: Kind written to every covered cell.
        center: Center of the blob. May lie outside the map.
        radius: Nominal blob radius in cells.
        frequency_scale: Multiplier applied to offsets before sampling noise.
        amplitude_scale: Multiplier applied to the sampled noise.
        noise_seed: Seed of the noise that perturbs the outline.
        octaves: 1 for plain simplex noise, more for a fractal sum.
    """

    kind: Kind
    center: WorldTilePos
    radius: float
    frequency_scale: float
    amplitude_scale: float
    noise_seed: NoiseSeed
    octaves: int = 1


def _check_range(name: str, value_range: FloatRange, minimum: float = 0.0) -> None:
    lo, hi = value_range
    if hi < lo:
        raise ConfigError(f"{name} max {hi} is below min {lo}")
    if lo < minimum:
        raise ConfigError(f"{name} min {lo} is below {minimum}")


@dataclass(frozen=True)
class PatchPassConfig:
    """Tuning for one pass of patches of a single kind.

    Attributes:
        count_axis: Lattice divisions per axis; the pass places
            ``(count_axis - 1) ** 2`` patches.
        max_jitter: Largest offset, in cells, applied to each center coordinate.
        radius_range: Inclusive range the patch radius is drawn from.
        frequency_range: Inclusive range of the noise frequency scale.
        amplitude_range: Inclusive range of the noise amplitude scale.
        octaves: Noise octaves; above 1 selects fractal noise.

    Raises:
        ConfigError: On construction if any value is out of range.
    """

    count_axis: int
    max_jitter: int
    radius_range: FloatRange
    frequency_range: FloatRange
    amplitude_range: FloatRange
    octaves: int = 1

    def __post_init__(self) -> None:
        if self.count_axis < 2:
            raise ConfigError(f"count_axis must be >= 2, got {self.count_axis}")
        if self.max_jitter < 0:
            raise ConfigError(f"max_jitter must be >= 0, got {self.max_jitter}")
        if self.octaves < 1:
            raise ConfigError(f"octaves must be >= 1, got {self.octaves}")
        _check_range("radius_range", self.radius_range)
        _check_range("frequency_range", self.frequency_range)
        _check_range("amplitude_range", self.amplitude_range)

    @property
    def patch_count(self) -> int:
        return (self.count_axis - 1) ** 2


# =============================================================================
# Placement
# =============================================================================


def place_centers(
    width: TileCoord,
    height: TileCoord,
    count_axis: int,
    max_jitter: int,
    rng: RandomSource,
) -> list[WorldTilePos]:
    """Return ``(count_axis - 1) ** 2`` jittered lattice points.

    Points are produced column by column (x-major, y-minor). For each point the
    x jitter is drawn before the y jitter. Callers rely on this order to get the
    same map from the same seed.
    """
    centers: list[WorldTilePos] = []
    for w in range(1, count_axis):
        for h in range(1, count_axis):
            x = w * width // count_axis + rng.uniform_int(-max_jitter, max_jitter)
            y = h * height // count_axis + rng.uniform_int(-max_jitter, max_jitter)
            centers.append((x, y))
    return centers


# =============================================================================
# Composition
# =============================================================================

# Features that only grow on land.
LAND_FEATURES = frozenset(
    {FeatureKind.FOREST, FeatureKind.HILL, FeatureKind.MOUNTAIN}
)


class LayerCompositor:
    """Applies single-cell writes under the layer placement rules.

    - Forest, hill and mountain are never written on sea terrain.
    - Forest is only written where the terrain is plain.
    - A terrain write removes the cell's feature.
    - Feature and special writes leave the other layers alone.

    The compositor keeps running counts of accepted and rejected writes.
    """

    def __init__(self) -> None:
        self.written = 0
        self.rejected = 0

    def write(self, grid: TileGrid, pos: WorldTilePos, kind: Kind) -> bool:
        """Attempt to write ``kind`` at ``pos``; return whether it was stored."""
        layer = layer_of(kind)

        if kind in LAND_FEATURES:
            terrain = grid.kind_at(pos, Layer.TERRAIN)
            if terrain is TerrainKind.SEA or (
                kind is FeatureKind.FOREST and terrain is not TerrainKind.PLAIN
            ):
                self.rejected += 1
                return False

        grid.set_kind(pos, kind)
        if layer is Layer.TERRAIN:
            grid.clear_layer(pos, Layer.FEATURE)

        self.written += 1
        return True


# =============================================================================
# Shaping
# =============================================================================


def blob_height(patch: PatchSpec, dx: int, dy: int, noise: NoiseField) -> float:
    """Height of the blob at offset ``(dx, dy)`` from its center."""
    position = (dx * patch.frequency_scale, dy * patch.frequency_scale)
    if patch.octaves > 1:
        sample = noise.sample_fbm(position, patch.octaves, seed=patch.noise_seed)
    else:
        sample = noise.sample(position, patch.noise_seed)
    noise_offset = sample * patch.amplitude_scale
    return patch.radius + noise_offset - math.sqrt(dx * dx + dy * dy)


def apply_patch(
    grid: TileGrid,
    patch: PatchSpec,
    compositor: LayerCompositor,
    noise: NoiseField,
    threshold: float = config.HEIGHT_THRESHOLD,
) -> int:
    """Stamp ``patch`` onto ``grid``.

    Offsets within ``ceil(radius) + 1`` of the center are visited dx-major,
    dy-minor. Cells outside the map are skipped. Every other cell whose blob
    height exceeds ``threshold`` gets exactly one write attempt.

    Returns:
        The number of eligible cells (accepted or rejected by the compositor).
    """
    reach = math.ceil(patch.radius) + 1
    cx, cy = patch.center
    eligible = 0
    for dx in range(-reach, reach + 1):
        for dy in range(-reach, reach + 1):
            pos = (cx + dx, cy + dy)
            if not grid.in_bounds(pos):
                continue
            if blob_height(patch, dx, dy, noise) > threshold:
                compositor.write(grid, pos, patch.kind)
                eligible += 1
    return eligible


def generate_multiple_patches(
    grid: TileGrid,
    kind: Kind,
    pass_config: PatchPassConfig,
    rng: RandomSource,
    noise: NoiseField,
    compositor: LayerCompositor,
    threshold: float = config.HEIGHT_THRESHOLD,
) -> list[PatchSpec]:
    """Place and stamp a full pass of ``kind`` patches.

    All centers are placed first. Then, for each center in placement order, the
    radius, frequency, amplitude and noise seed are drawn (in that order) and
    the patch is applied.

    Returns:
        The patches that were applied, in application order.
    """
    centers = place_centers(
        grid.width, grid.height, pass_config.count_axis, pass_config.max_jitter, rng
    )

    patches: list[PatchSpec] = []
    for center in centers:
        patch = PatchSpec(
            kind=kind,
            center=center,
            radius=rng.uniform_float(*pass_config.radius_range),
            frequency_scale=rng.uniform_float(*pass_config.frequency_range),
            amplitude_scale=rng.uniform_float(*pass_config.amplitude_range),
            noise_seed=rng.uniform_int(0, config.MAX_NOISE_SEED),
            octaves=pass_config.octaves,
        )
        apply_patch(grid, patch, compositor, noise, threshold)
        patches.append(patch)
    return patches
