from __future__ import annotations

# =============================================================================
# SPATIAL TYPES
# =============================================================================

type TileCoord = int  # Always integer tile position

# World coordinates - absolute positions on the generated map
type WorldTileCoord = TileCoord  # Example: x=5, y=3
type WorldTilePos = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on map

# Neighbour offsets - discrete grid steps
type Offset = tuple[int, int]  # Example: (-1, -1) = north-west neighbour

# Pixel coordinates
type PixelCoord = int | float  # Example: px_x=160.0
type PixelPos = tuple[PixelCoord, PixelCoord]  # Example: (160.0, 96.0)

# Noise sampling space (continuous, scaled by a patch's frequency)
type NoisePos = tuple[float, float]

# Tileset cell addressed as (column, row)
type AtlasCell = tuple[int, int]

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "archipelago".
type RandomSeed = int | str | None

# Seed handed to the noise generator for a single patch
type NoiseSeed = int

# Generic min/max ranges used by patch pass tuning
type FloatRange = tuple[float, float]
