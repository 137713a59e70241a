"""Pipeline-based world generation.

This package provides a layered architecture for compositional map
generation. Each layer transforms a shared GenerationContext, and the
MapBuilder outputs a GeneratedWorld holding a frozen tile grid.

Example usage:
    from autoterra.environment.generators.pipeline import create_pipeline

    builder = create_pipeline("world", width=20, height=20, seed=42)
    world = builder.build()

The pipeline can also be assembled manually for custom configurations:
    from autoterra.environment.generators.pipeline import (
        BaseFillLayer,
        MapBuilder,
        PatchLayer,
    )

    builder = MapBuilder(
        layers=[
            BaseFillLayer(TerrainKind.DESERT, feature=None),
            PatchLayer(TerrainKind.PLAIN, oasis_config, "map.oases"),
        ],
        map_width=30,
        map_height=30,
        seed="dunes",
    )
"""

from .context import GenerationContext
from .factory import create_pipeline, create_world_layers, create_world_pipeline
from .layer import GenerationLayer
from .layers import BaseFillLayer, PatchLayer
from .pipeline import MapBuilder

__all__ = [
    "BaseFillLayer",
    "GenerationContext",
    "GenerationLayer",
    "MapBuilder",
    "PatchLayer",
    "create_pipeline",
    "create_world_layers",
    "create_world_pipeline",
]
