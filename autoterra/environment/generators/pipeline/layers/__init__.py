"""Generation layers for the world map pipeline.

Each layer transforms the GenerationContext in a specific way:
- Terrain layers: Set up the uniform base fill
- Patch layers: Stamp noise-shaped blobs of terrain, features or specials
"""

from .patches import PatchLayer
from .terrain import BaseFillLayer

__all__ = [
    "BaseFillLayer",
    "PatchLayer",
]
