"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.

Currently implemented:
- "world": Ocean world with continents, desert bands, vegetation, relief and
  resource specials
"""

from __future__ import annotations

from autoterra import config
from autoterra.environment.generators.patches import PatchPassConfig
from autoterra.environment.kinds import FeatureKind, SpecialKind, TerrainKind
from autoterra.types import RandomSeed

from .layer import GenerationLayer
from .layers import BaseFillLayer, PatchLayer
from .pipeline import MapBuilder


def create_pipeline(
    name: str,
    width: int,
    height: int,
    seed: RandomSeed = None,
) -> MapBuilder:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "world": Ocean world with continents and biomes

    Args:
        name: Name of the pipeline configuration to use.
        width: Map width in tiles.
        height: Map height in tiles.
        seed: Optional random seed for deterministic generation.

    Returns:
        A configured MapBuilder ready to build maps.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "world":
        return create_world_pipeline(width, height, seed)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_world_layers() -> list[GenerationLayer]:
    """Return the world pipeline's layers in application order.

    Raises:
        ConfigError: If any pass constant in `config` is out of range.
    """
    continents = PatchPassConfig(
        count_axis=config.CONTINENT_COUNT_AXIS,
        max_jitter=config.CONTINENT_MAX_JITTER,
        radius_range=config.CONTINENT_RADIUS,
        frequency_range=config.CONTINENT_FREQUENCY,
        amplitude_range=config.CONTINENT_AMPLITUDE,
        octaves=config.CONTINENT_OCTAVES,
    )
    deserts = PatchPassConfig(
        count_axis=config.DESERT_COUNT_AXIS,
        max_jitter=config.DESERT_MAX_JITTER,
        radius_range=config.DESERT_RADIUS,
        frequency_range=config.DESERT_FREQUENCY,
        amplitude_range=config.DESERT_AMPLITUDE,
    )
    forests = PatchPassConfig(
        count_axis=config.FOREST_COUNT_AXIS,
        max_jitter=config.FOREST_MAX_JITTER,
        radius_range=config.FOREST_RADIUS,
        frequency_range=config.FOREST_FREQUENCY,
        amplitude_range=config.FOREST_AMPLITUDE,
    )
    hills = PatchPassConfig(
        count_axis=config.HILL_COUNT_AXIS,
        max_jitter=config.HILL_MAX_JITTER,
        radius_range=config.HILL_RADIUS,
        frequency_range=config.HILL_FREQUENCY,
        amplitude_range=config.HILL_AMPLITUDE,
    )
    mountains = PatchPassConfig(
        count_axis=config.MOUNTAIN_COUNT_AXIS,
        max_jitter=config.MOUNTAIN_MAX_JITTER,
        radius_range=config.MOUNTAIN_RADIUS,
        frequency_range=config.MOUNTAIN_FREQUENCY,
        amplitude_range=config.MOUNTAIN_AMPLITUDE,
    )
    specials = PatchPassConfig(
        count_axis=config.SPECIAL_COUNT_AXIS,
        max_jitter=config.SPECIAL_MAX_JITTER,
        radius_range=config.SPECIAL_RADIUS,
        frequency_range=config.SPECIAL_FREQUENCY,
        amplitude_range=config.SPECIAL_AMPLITUDE,
    )

    return [
        # 1. Seabed under a world-wide ocean
        BaseFillLayer(TerrainKind.SEA, FeatureKind.OCEAN),
        # 2. Continents: terrain writes clear the ocean
        PatchLayer(TerrainKind.PLAIN, continents, "map.continents"),
        # 3. Biome bands
        PatchLayer(TerrainKind.DESERT, deserts, "map.biomes.desert"),
        # 4. Vegetation and relief (land only; forest only on plain)
        PatchLayer(FeatureKind.FOREST, forests, "map.vegetation.forest"),
        PatchLayer(FeatureKind.HILL, hills, "map.relief.hill"),
        PatchLayer(FeatureKind.MOUNTAIN, mountains, "map.relief.mountain"),
        # 5. Specials
        PatchLayer(SpecialKind.LUMBER, specials, "map.specials.lumber"),
        PatchLayer(SpecialKind.CORN, specials, "map.specials.corn"),
        PatchLayer(SpecialKind.FISH, specials, "map.specials.fish"),
    ]


def create_world_pipeline(
    width: int = config.MAP_WIDTH,
    height: int = config.MAP_HEIGHT,
    seed: RandomSeed = config.RANDOM_SEED,
    cell_size: int = config.CELL_SIZE,
) -> MapBuilder:
    """Create the world pipeline with default configuration.

    The world pipeline generates:
    1. Seabed covered by ocean everywhere (BaseFillLayer)
    2. Plain continents rising out of the ocean
    3. Desert patches on top of them
    4. Forest, hill and mountain features
    5. Lumber, corn and fish specials

    Args:
        width: Map width in tiles.
        height: Map height in tiles.
        seed: Random seed for deterministic generation.
        cell_size: Pixel size of one cell, for render positions.

    Returns:
        A configured MapBuilder.
    """
    return MapBuilder(
        layers=create_world_layers(),
        map_width=width,
        map_height=height,
        seed=seed,
        cell_size=cell_size,
    )
