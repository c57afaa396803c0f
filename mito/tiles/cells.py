"""Cells — the living tiles of a plant.

Every cell burns one unit of energy per step, refuels from sugar while
its metabolism says it is eating, borrows energy from richer neighbours,
sags under its own weight, and dies when its energy hits zero.

Specialisations add one resource rule on top of the base step:

- **Tissue** stores water and sugar for the rest of the plant.
- **Leaf** turns tissue water into sugar when it sits between air and
  tissue.
- **Root** pumps soil water into tissue when it sits between soil and
  tissue.
- **Seed** hoards every bit of sugar around it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mito.physics.droop import step_droop
from mito.physics.energy import (
    CELL_ENERGY_MAX,
    ENERGY_TO_SUGAR_RATIO,
    feed,
    share_energy,
)
from mito.tiles.base import Tile
from mito.tiles.inventory import Inventory
from mito.tiles.metabolism import Metabolism
from mito.tiles.terrain import Air, DeadCell, Soil
from mito.tiles.traits import HasInventory
from mito.world.direction import Direction

if TYPE_CHECKING:
    from numpy.random import Generator

    from mito.world.world import World

logger = logging.getLogger(__name__)

CELL_SUGAR_BUILD_COST = CELL_ENERGY_MAX / ENERGY_TO_SUGAR_RATIO
TISSUE_INVENTORY_CAPACITY = 10
SEED_INVENTORY_CAPACITY = 1000
LEAF_MAX_CHANCE = 0.01
ROOT_WATER_PER_STEP = 1

_UPKEEP = 1
_RELOCATE_THRESHOLD = 0.5


@dataclass(eq=False)
class Cell(Tile):
    """A living tile.

    Attributes:
        energy: Metabolic energy in ``[0, CELL_ENERGY_MAX]``.
        metabolism: Eating / not-eating cycle.
        droop_y: Accumulated downward sag; past 0.5 the cell drops a row.
    """

    darkness: float = 0.0
    energy: float = CELL_ENERGY_MAX
    metabolism: Metabolism = field(default_factory=Metabolism)
    droop_y: float = 0.0

    def step(self, world: World, rng: Generator) -> None:
        """Run upkeep, metabolism, energy flow, droop and death.

        Args:
            world: The grid this cell lives in.
            rng: Seeded random generator.
        """
        super().step(world, rng)
        self.energy = max(0, self.energy - _UPKEEP)

        neighbors = world.tile_neighbors(self.pos)
        self.metabolism.advance(self.energy, CELL_ENERGY_MAX)
        if self.metabolism.eating:
            feed(self, neighbors)
            if self.energy < CELL_ENERGY_MAX:
                share_energy(self, neighbors)

        step_droop(self, neighbors)
        if self.droop_y > _RELOCATE_THRESHOLD:
            self._fall(world)

        if self.energy <= 0:
            logger.debug("%s at %s starved", type(self).__name__, self.pos)
            world.set_tile_at(self.pos, DeadCell(self.pos))

    def _fall(self, world: World) -> None:
        """Drop one row, leaving air behind."""
        below = self.pos.offset(Direction.S)
        logger.debug(
            "%s drooped from %s to %s",
            type(self).__name__,
            self.pos,
            below,
        )
        world.set_tile_at(self.pos, Air(self.pos))
        self.pos = below
        self.droop_y = max(0.0, self.droop_y - 1)
        world.set_tile_at(self.pos, self)


@dataclass(eq=False)
class Tissue(Cell):
    """Structural cell that stores water and sugar for its neighbours."""

    inventory: Inventory = field(
        default_factory=lambda: Inventory(TISSUE_INVENTORY_CAPACITY),
    )


@dataclass(eq=False)
class Leaf(Cell):
    """Photosynthesising cell.

    A leaf works on (air, tissue) pairs on opposite sides of it: light
    and CO2 come from the air, water from the tissue, and the sugar it
    makes goes back into the tissue.

    Attributes:
        average_efficiency: Mean CO2 over last step's air/tissue pairs.
        average_speed: Mean sunlight over last step's air/tissue pairs.
    """

    average_efficiency: float = 0.0
    average_speed: float = 0.0

    def step(self, world: World, rng: Generator) -> None:
        """Base cell step, then at most one sugar synthesis."""
        super().step(world, rng)
        if not self.placed_in(world):
            return
        efficiency_sum = 0.0
        speed_sum = 0.0
        num_air = 0
        for direction, tile in world.tile_neighbors(self.pos).items():
            opposite = world.tile_at(
                self.pos.x - direction.dx,
                self.pos.y - direction.dy,
            )
            if not (isinstance(tile, Air) and isinstance(opposite, Tissue)):
                continue
            speed = tile.sunlight()
            efficiency = tile.co2(world.height)
            efficiency_sum += efficiency
            speed_sum += speed
            num_air += 1
            if efficiency > 0 and rng.random() < speed * LEAF_MAX_CHANCE:
                needed_water = 1 / efficiency
                if opposite.inventory.water >= needed_water:
                    opposite.inventory.change(-needed_water, 1)
                    break
        if num_air:
            self.average_efficiency = efficiency_sum / num_air
            self.average_speed = speed_sum / num_air
        else:
            self.average_efficiency = 0.0
            self.average_speed = 0.0


@dataclass(eq=False)
class Root(Cell):
    """Cell that pumps soil water into tissue on its opposite side."""

    def step(self, world: World, rng: Generator) -> None:
        """Base cell step, then one unit of water per soil/tissue pair."""
        super().step(world, rng)
        if not self.placed_in(world):
            return
        for direction, tile in world.tile_neighbors(self.pos).items():
            opposite = world.tile_at(
                self.pos.x - direction.dx,
                self.pos.y - direction.dy,
            )
            if isinstance(tile, Soil) and isinstance(opposite, Tissue):
                tile.inventory.give(opposite.inventory, ROOT_WATER_PER_STEP, 0)


@dataclass(eq=False)
class Seed(Cell):
    """Dormant cell that drains all sugar from neighbouring inventories."""

    inventory: Inventory = field(
        default_factory=lambda: Inventory(SEED_INVENTORY_CAPACITY),
    )

    def step(self, world: World, rng: Generator) -> None:
        """Base cell step, then take every neighbour's sugar."""
        super().step(world, rng)
        if not self.placed_in(world):
            return
        for neighbor in world.tile_neighbors(self.pos).values():
            if isinstance(neighbor, HasInventory):
                neighbor.inventory.give(self.inventory, 0, neighbor.inventory.sugar)
