"""
Cell classification for the world map.

Every cell carries up to three orthogonal classifications, one per `Layer`:

- `TerrainKind`: the ground itself, land or seabed. Always present after
  generation.
- `FeatureKind`: something covering the ground (water, vegetation, relief).
- `SpecialKind`: a resource icon drawn on top of everything else.

The three families are plain `Enum`s rather than `IntEnum`s so that members of
different families never compare equal, even when their values coincide.
`layer_of()` derives the layer a kind lives on.
"""

from __future__ import annotations

from enum import Enum, auto


class Layer(Enum):
    """Per-cell classification axes, in drawing order."""

    TERRAIN = auto()
    FEATURE = auto()
    SPECIAL = auto()


class TerrainKind(Enum):
    PLAIN = auto()
    DESERT = auto()
    # Seabed under open water. Every other terrain is land.
    SEA = auto()


class FeatureKind(Enum):
    OCEAN = auto()
    FOREST = auto()
    HILL = auto()
    MOUNTAIN = auto()


class SpecialKind(Enum):
    LUMBER = auto()
    CORN = auto()
    FISH = auto()


type Kind = TerrainKind | FeatureKind | SpecialKind


def layer_of(kind: Kind) -> Layer:
    """Return the layer on which ``kind`` is stored.

    Raises:
        TypeError: If ``kind`` is not a member of one of the kind families.
    """
    match kind:
        case TerrainKind():
            return Layer.TERRAIN
        case FeatureKind():
            return Layer.FEATURE
        case SpecialKind():
            return Layer.SPECIAL
        case _:
            raise TypeError(f"Not a map kind: {kind!r}")
