"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
transforms the GenerationContext in some way - filling the grid, stamping
patches of terrain, features or specials.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """Abstract base class for map generation layers.

    Layers are applied sequentially by the MapBuilder. Each layer receives a
    GenerationContext and modifies it in place.

    Subclasses must implement the apply() method to perform their specific
    generation logic.

    Attributes:
        domain: Name of the random stream this layer draws from. Two layers
            with the same domain share (and advance) one stream.
    """

    domain: str = "map.unnamed"

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        This method should modify the context in place. It may:
        - Write kinds to the grid (through ctx.compositor)
        - Draw random values from ctx.rng_for(self.domain)
        - Sample ctx.noise

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
