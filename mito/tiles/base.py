"""Tile — the abstract occupant of one grid slot.

Concrete variants live in ``terrain.py`` (inert and resource tiles) and
``cells.py`` (living tiles).  Neighbour classification goes through the
class-level traits below and the protocols in ``traits.py`` rather than
concrete type checks, so the physics modules never import the variants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from mito.physics.diffusion import pull_water
from mito.physics.light import propagate_darkness
from mito.tiles.traits import HasInventory, Living

if TYPE_CHECKING:
    from numpy.random import Generator

    from mito.world.world import Position, World


@dataclass(eq=False)
class Tile:
    """Base class for every grid occupant.

    Tiles compare by identity.  A tile only remembers its own position;
    neighbours are looked up through the World on every step.

    Attributes:
        pos: Grid position.  Only changes when a cell relocates.
        darkness: Light-occlusion proxy (``inf`` means fully dark).
    """

    opaque: ClassVar[bool] = False
    anchoring: ClassVar[bool] = False

    pos: Position
    darkness: float = math.inf

    def placed_in(self, world: World) -> bool:
        """Return True if this tile still occupies its slot in ``world``."""
        return world.tile_at(self.pos.x, self.pos.y) is self

    def step(self, world: World, rng: Generator) -> None:
        """Advance this tile by one tick.

        Recomputes darkness and, for inventory tiles, pulls water from
        richer neighbours of the same kind.

        Args:
            world: The grid this tile lives in.
            rng: Seeded random generator.
        """
        neighbors = world.tile_neighbors(self.pos)
        if isinstance(self, Living):
            self.darkness = 0.0
        else:
            self.darkness = propagate_darkness(self, neighbors, world.height)
        if isinstance(self, HasInventory):
            pull_water(self, neighbors)
