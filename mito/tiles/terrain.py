"""Terrain tiles — everything on the grid that is not alive.

Air is the empty medium that leaves draw light and CO2 from.  Rock is an
opaque boundary.  Soil holds water and spreads it to adjacent soil, and
a Fountain is soil that refills itself.  DeadCell is what a cell leaves
behind when its energy runs out.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING, ClassVar

from mito.physics.light import map_range
from mito.tiles.base import Tile
from mito.tiles.inventory import Inventory

if TYPE_CHECKING:
    from numpy.random import Generator

    from mito.world.world import World

SOIL_MAX_WATER = 20


@dataclass(eq=False)
class Air(Tile):
    """Empty space.  Always fully lit; takes no part in diffusion.

    Attributes:
        sunlight_cached: Light reaching this tile (0.0-1.0).
    """

    darkness: float = 0.0
    sunlight_cached: float = 1.0

    def step(self, world: World, rng: Generator) -> None:
        """Air keeps its darkness at 0 and holds no resources."""

    def co2(self, height: int) -> float:
        """Return CO2 availability (0.0-1.0), richest at the top row.

        Falls linearly from 1.0 at row 0 through 0.5 at the midline.

        Args:
            height: World height in rows.
        """
        return min(1.0, max(0.0, map_range(self.pos.y, height / 2, 0, 0.5, 1.0)))

    def sunlight(self) -> float:
        """Return the cached sunlight level (0.0-1.0)."""
        return min(1.0, max(0.0, self.sunlight_cached))


@dataclass(eq=False)
class Rock(Tile):
    """Impassable, opaque, and the tile returned for off-grid lookups."""

    opaque: ClassVar[bool] = True
    anchoring: ClassVar[bool] = True


@dataclass(eq=False)
class DeadCell(Tile):
    """Remains of a starved cell.  Inert apart from darkness."""


@dataclass(eq=False)
class Soil(Tile):
    """Ground that stores water and shares it with adjacent soil.

    Attributes:
        inventory: Water store (no sugar in practice).
        water: Initial water, applied through ``Inventory.change``.
    """

    anchoring: ClassVar[bool] = True

    inventory: Inventory = field(default_factory=lambda: Inventory(SOIL_MAX_WATER))
    water: InitVar[float] = 0.0

    def __post_init__(self, water: float) -> None:
        """Fill the inventory with the requested starting water."""
        if water:
            self.inventory.change(water, 0)


@dataclass(eq=False)
class Fountain(Soil):
    """Soil that tops itself up by one unit of water every step."""

    def step(self, world: World, rng: Generator) -> None:
        """Behave like soil, then refill while there is room."""
        super().step(world, rng)
        if self.inventory.space() > 1:
            self.inventory.change(1, 0)
