"""Patch layers.

A PatchLayer stamps one pass of noise-shaped blobs of a single kind. The world
pipeline is a sequence of these: continents, biome bands, vegetation and
relief, then specials. Because later passes overwrite earlier ones, the layer
order in the pipeline is part of the map's definition.
"""

from __future__ import annotations

import logging

from autoterra.environment.generators.patches import (
    PatchPassConfig,
    PatchSpec,
    generate_multiple_patches,
)
from autoterra.environment.generators.pipeline.context import GenerationContext
from autoterra.environment.generators.pipeline.layer import GenerationLayer
from autoterra.environment.kinds import Kind

logger = logging.getLogger(__name__)


class PatchLayer(GenerationLayer):
    """Stamps ``(count_axis - 1) ** 2`` patches of one kind onto the grid.

    Attributes:
        kind: Kind written by every patch of this pass.
        pass_config: Lattice size, jitter and shape ranges for the pass.
        domain: Random stream the pass draws from.
        patches: Patches applied by the most recent apply() call.
    """

    def __init__(self, kind: Kind, pass_config: PatchPassConfig, domain: str) -> None:
        self.kind = kind
        self.pass_config = pass_config
        self.domain = domain
        self.patches: list[PatchSpec] = []

    def apply(self, ctx: GenerationContext) -> None:
        """Place and stamp this pass's patches.

        Args:
            ctx: The generation context to modify.
        """
        written = ctx.compositor.written
        rejected = ctx.compositor.rejected

        self.patches = generate_multiple_patches(
            ctx.grid,
            self.kind,
            self.pass_config,
            ctx.rng_for(self.domain),
            ctx.noise,
            ctx.compositor,
            ctx.height_threshold,
        )

        logger.debug(
            "%s: %d patches of %s, %d cells written, %d rejected",
            self.domain,
            len(self.patches),
            self.kind.name,
            ctx.compositor.written - written,
            ctx.compositor.rejected - rejected,
        )
