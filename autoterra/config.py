"""
Configuration constants.

Centralizes all magic numbers and configuration values used by the world
generator and the autotiler. Organized by functional area for easy maintenance.
"""

from autoterra.types import FloatRange, RandomSeed


class ConfigError(ValueError):
    """Raised when a generation parameter is out of its valid range.

    Configuration is validated when the object that owns it is constructed,
    so a bad range fails before any generation pass runs.
    """


# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = 42

# =============================================================================
# MAP
# =============================================================================

MAP_WIDTH = 20
MAP_HEIGHT = 20

# Pixel size of one cell. Only used to compute render positions.
CELL_SIZE = 32

# Cells whose blob height exceeds this value are covered by the patch.
# Earlier prototypes tried -1 and 5; 0 gives disks of roughly `radius`.
HEIGHT_THRESHOLD = 0.0

# =============================================================================
# NOISE
# =============================================================================

# Fractal sum parameters used when a pass asks for more than one octave
FBM_LACUNARITY = 2.0
FBM_GAIN = 0.5

# Largest noise seed drawn for a patch
MAX_NOISE_SEED = 2**31 - 1

# =============================================================================
# GENERATION PASSES
# =============================================================================
# Each pass places (COUNT_AXIS - 1) ** 2 patches on a jittered lattice.

# Continents: plain land carved out of the world ocean
CONTINENT_COUNT_AXIS = 3
CONTINENT_MAX_JITTER = 2
CONTINENT_RADIUS: FloatRange = (4.0, 6.0)
CONTINENT_FREQUENCY: FloatRange = (0.05, 0.15)
CONTINENT_AMPLITUDE: FloatRange = (2.0, 4.0)
CONTINENT_OCTAVES = 3

# Biome bands: desert laid over the continents
DESERT_COUNT_AXIS = 3
DESERT_MAX_JITTER = 3
DESERT_RADIUS: FloatRange = (1.5, 3.0)
DESERT_FREQUENCY: FloatRange = (0.2, 0.4)
DESERT_AMPLITUDE: FloatRange = (0.5, 1.5)

# Vegetation and relief
FOREST_COUNT_AXIS = 4
FOREST_MAX_JITTER = 2
FOREST_RADIUS: FloatRange = (1.5, 3.0)
FOREST_FREQUENCY: FloatRange = (0.2, 0.5)
FOREST_AMPLITUDE: FloatRange = (0.5, 1.5)

HILL_COUNT_AXIS = 3
HILL_MAX_JITTER = 4
HILL_RADIUS: FloatRange = (1.0, 2.0)
HILL_FREQUENCY: FloatRange = (0.3, 0.6)
HILL_AMPLITUDE: FloatRange = (0.5, 1.0)

MOUNTAIN_COUNT_AXIS = 2
MOUNTAIN_MAX_JITTER = 3
MOUNTAIN_RADIUS: FloatRange = (1.0, 2.0)
MOUNTAIN_FREQUENCY: FloatRange = (0.3, 0.6)
MOUNTAIN_AMPLITUDE: FloatRange = (0.3, 0.8)

# Specials: single-cell resources
SPECIAL_COUNT_AXIS = 3
SPECIAL_MAX_JITTER = 4
SPECIAL_RADIUS: FloatRange = (0.5, 1.0)
SPECIAL_FREQUENCY: FloatRange = (0.5, 1.0)
SPECIAL_AMPLITUDE: FloatRange = (0.0, 0.3)

# =============================================================================
# AUTOTILE
# =============================================================================

# Tilesets are laid out row-major, TILESET_WIDTH variants per row.
TILESET_WIDTH = 7
TILESET_HEIGHT = 7

# Variant used when no pattern rule matches (also the isolated-cell variant)
FALLBACK_VARIANT = 24
