"""Map generation for autoterra.

The world is built by a layered pipeline (MapBuilder) whose passes stamp
noise-shaped patches of terrain, features and specials onto a TileGrid:

- init: uniform base fill (BaseFillLayer)
- continents, biome bands, vegetation/relief, specials (PatchLayer)

The patch machinery itself lives in `patches`:
- place_centers: jittered lattice of patch centers
- apply_patch: radius + noise blob shaping
- LayerCompositor: layer placement rules applied to every write
"""

from .base import BaseMapGenerator, GeneratedWorld
from .patches import (
    LayerCompositor,
    PatchPassConfig,
    PatchSpec,
    apply_patch,
    generate_multiple_patches,
    place_centers,
)
from .pipeline import (
    BaseFillLayer,
    GenerationContext,
    GenerationLayer,
    MapBuilder,
    PatchLayer,
    create_pipeline,
    create_world_pipeline,
)

__all__ = [
    "BaseFillLayer",
    "BaseMapGenerator",
    "GeneratedWorld",
    "GenerationContext",
    "GenerationLayer",
    "LayerCompositor",
    "MapBuilder",
    "PatchLayer",
    "PatchPassConfig",
    "PatchSpec",
    "apply_patch",
    "create_pipeline",
    "create_world_pipeline",
    "generate_multiple_patches",
    "place_centers",
]
