"""SimulationEngine — the main tick loop.

Every tick each tile gets exactly one ``step()``.  Updates are applied
in place, with no double buffering, so the traversal order is part of
the result.  The order is fixed:

1. Snapshot the grid in row-major order (top row first, left to right).
2. Step each snapshotted tile that still occupies the slot at its
   current position.  Tiles overwritten earlier in the tick are skipped.
   Tiles created during the tick wait for the next one.  A cell that
   drooped into a lower row is stepped only once.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from mito.physics.energy import EnergyTransferError
from mito.simulation.config import SimulationConfig
from mito.tiles.traits import HasInventory, Living
from mito.world.world import World

logger = logging.getLogger(__name__)


@dataclass
class Census:
    """Aggregate state of the world at one tick.

    Attributes:
        tick: Tick the census was taken at.
        counts: Number of tiles per variant name.
        water: Total water over all inventories.
        sugar: Total sugar over all inventories.
        energy: Total energy over all living tiles.
    """

    tick: int
    counts: Counter[str] = field(default_factory=Counter)
    water: float = 0.0
    sugar: float = 0.0
    energy: float = 0.0


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        world: The tile arena.
        rng: Master seeded random generator.
        tick: Current tick count.
    """

    config: SimulationConfig
    world: World = field(init=False)
    rng: Generator = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build the world and RNG from config."""
        self.rng = np.random.default_rng(self.config.seed)
        if self.config.layout:
            self.world = World.from_layout(
                self.config.layout,
                soil_water=self.config.soil_water,
                sunlight=self.config.sunlight,
            )
        else:
            self.world = World(
                width=self.config.world_width,
                height=self.config.world_height,
            )
        logger.info(
            "built %dx%d world (seed=%d)",
            self.world.width,
            self.world.height,
            self.config.seed,
        )

    def step(self) -> None:
        """Advance the simulation by one tick.

        Raises:
            EnergyTransferError: If a tile broke an energy invariant.
                The tick is abandoned and the error propagates.
        """
        snapshot = list(self.world.tiles())
        try:
            for tile in snapshot:
                if tile.placed_in(self.world):
                    tile.step(self.world, self.rng)
        except EnergyTransferError:
            logger.exception("invariant violated during tick %d", self.tick)
            raise
        self.tick += 1

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def census(self) -> Census:
        """Count tiles per variant and total up resources."""
        census = Census(tick=self.tick)
        for tile in self.world.tiles():
            census.counts[type(tile).__name__] += 1
            if isinstance(tile, HasInventory):
                census.water += tile.inventory.water
                census.sugar += tile.inventory.sugar
            if isinstance(tile, Living):
                census.energy += tile.energy
        return census
