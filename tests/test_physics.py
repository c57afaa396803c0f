"""Tests for mito.physics — darkness, water diffusion, energy, droop."""

from __future__ import annotations

import math
from collections.abc import Callable

import pytest
from numpy.random import Generator

from mito.physics.diffusion import pull_water
from mito.physics.droop import step_droop
from mito.physics.energy import (
    CELL_ENERGY_MAX,
    EnergyTransferError,
    feed,
    share_energy,
)
from mito.physics.light import darkness_contribution, map_range
from mito.tiles.base import Tile
from mito.tiles.cells import Cell, Tissue
from mito.tiles.terrain import Air, Rock, Soil
from mito.world.direction import Direction
from mito.world.world import Position, World

_ORIGIN = Position(0, 0)


def surround(**around: Tile) -> dict[Direction, Tile]:
    """Neighbour map with the given tiles (by direction name), Air elsewhere."""
    return {d: around.get(d.name, Air(_ORIGIN)) for d in Direction}


class TestDarkness:
    """Tests for darkness propagation."""

    def test_map_range(self) -> None:
        assert map_range(5, 0, 10, 0, 1) == 0.5
        assert map_range(20, 0, 10, 0, 1) == 2.0
        assert map_range(20, 0, 10, 0, 1, clamp=True) == 1.0

    def test_contribution_floor_in_upper_half(self) -> None:
        assert darkness_contribution(0, 10) == pytest.approx(0.2)
        assert darkness_contribution(5, 10) == pytest.approx(0.2)

    def test_contribution_rises_toward_bottom(self) -> None:
        assert darkness_contribution(9, 10) == pytest.approx(0.84)

    def test_soil_under_air(self, scene: Callable[..., World], rng: Generator) -> None:
        world = scene(["...", ".~.", "..."])
        soil = world.tile_at(1, 1)
        soil.step(world, rng)
        assert soil.darkness == pytest.approx(0.2)

    def test_enclosed_soil_is_dark(
        self,
        scene: Callable[..., World],
        rng: Generator,
    ) -> None:
        world = scene(["###", "#~#", "###"])
        soil = world.tile_at(1, 1)
        soil.step(world, rng)
        assert math.isinf(soil.darkness)

    def test_darkness_accumulates_through_soil(
        self,
        scene: Callable[..., World],
        rng: Generator,
    ) -> None:
        world = scene(["...", "#~#", "#~#", "###"])
        upper, lower = world.tile_at(1, 1), world.tile_at(1, 2)
        upper.step(world, rng)
        lower.step(world, rng)
        assert upper.darkness == pytest.approx(0.2)
        assert lower.darkness == pytest.approx(0.2 + darkness_contribution(2, 4))

    def test_living_neighbor_lights_tile(
        self,
        scene: Callable[..., World],
        rng: Generator,
    ) -> None:
        world = scene(["#~C", "###"])
        soil = world.tile_at(1, 0)
        soil.step(world, rng)
        assert soil.darkness == 0.0

    def test_air_and_cells_stay_lit(
        self,
        scene: Callable[..., World],
        rng: Generator,
    ) -> None:
        world = scene(["#.#", "#C#", "###"])
        air, cell = world.tile_at(1, 0), world.tile_at(1, 1)
        cell.darkness = 3.0
        air.step(world, rng)
        cell.step(world, rng)
        assert air.darkness == 0.0
        assert cell.darkness == 0.0


class TestWaterDiffusion:
    """Tests for pull-only water diffusion."""

    def test_pull_from_single_rich_peer(self) -> None:
        tile = Soil(_ORIGIN)
        rich = Soil(_ORIGIN, water=10)
        neighbors = {d: Soil(_ORIGIN) for d in Direction}
        neighbors[Direction.N] = rich
        neighbors[Direction.SW] = Rock(_ORIGIN)
        received = pull_water(tile, neighbors)
        # 7 soil peers -> floor(10 / 8)
        assert received == 1
        assert tile.inventory.water == 1
        assert rich.inventory.water == 9

    def test_never_pushes_to_poorer(self) -> None:
        tile = Soil(_ORIGIN, water=10)
        poor = Soil(_ORIGIN)
        pull_water(tile, surround(N=poor))
        assert tile.inventory.water == 10
        assert poor.inventory.water == 0

    def test_ignores_other_kinds(self) -> None:
        tile = Tissue(_ORIGIN)
        soil = Soil(_ORIGIN, water=10)
        pull_water(tile, surround(N=soil))
        assert tile.inventory.water == 0
        assert soil.inventory.water == 10

    def test_grid_step_conserves_water(
        self,
        scene: Callable[..., World],
        rng: Generator,
    ) -> None:
        """One row-major sweep over a 3x3 soil patch with a wet centre."""
        world = scene(["~~~", "~~~", "~~~"])
        world.tile_at(1, 1).inventory.change(10, 0)
        for tile in list(world.tiles()):
            tile.step(world, rng)
        water = [t.inventory.water for t in world.tiles()]
        assert sum(water) == 10
        assert min(water) >= 0
        assert world.tile_at(1, 1).inventory.water < 10
        # corner (0, 0) has 3 peers: floor(10 / 4)
        assert world.tile_at(0, 0).inventory.water == 2


class TestEnergy:
    """Tests for sugar feeding and energy sharing."""

    def test_feed_from_tissue(self) -> None:
        cell = Cell(_ORIGIN, energy=1000)
        tissue = Tissue(_ORIGIN)
        tissue.inventory.change(0, 1.0)
        eaten = feed(cell, surround(N=tissue))
        assert eaten == pytest.approx(0.5)
        assert cell.energy == CELL_ENERGY_MAX
        assert tissue.inventory.sugar == pytest.approx(0.5)

    def test_feed_stops_at_first_short_source(self) -> None:
        cell = Cell(_ORIGIN, energy=0)
        first, second = Tissue(_ORIGIN), Tissue(_ORIGIN)
        first.inventory.change(0, 0.25)
        second.inventory.change(0, 1.0)
        feed(cell, surround(N=first, S=second))
        assert cell.energy == pytest.approx(500)
        assert first.inventory.sugar == 0
        assert second.inventory.sugar == 1.0

    def test_empty_soil_ends_the_scan(self) -> None:
        cell = Cell(_ORIGIN, energy=0)
        tissue = Tissue(_ORIGIN)
        tissue.inventory.change(0, 1.0)
        feed(cell, surround(N=Soil(_ORIGIN, water=5), S=tissue))
        assert cell.energy == 0
        assert tissue.inventory.sugar == 1.0

    def test_feed_from_own_inventory(self) -> None:
        tissue = Tissue(_ORIGIN, energy=1500)
        tissue.inventory.change(0, 2.0)
        feed(tissue, surround())
        assert tissue.energy == CELL_ENERGY_MAX
        assert tissue.inventory.sugar == pytest.approx(1.75)

    def test_share_takes_half_the_difference(self) -> None:
        cell = Cell(_ORIGIN, energy=100)
        north, south = Cell(_ORIGIN, energy=1000), Cell(_ORIGIN, energy=1000)
        received = share_energy(cell, surround(N=north, S=south))
        assert received == 450 + 225
        assert cell.energy == 775
        assert north.energy == 550
        assert south.energy == 775

    def test_share_ignores_poorer(self) -> None:
        cell = Cell(_ORIGIN, energy=500)
        poor = Cell(_ORIGIN, energy=100)
        assert share_energy(cell, surround(N=poor)) == 0
        assert poor.energy == 100

    def test_overfull_transfer_is_fatal(self) -> None:
        cell = Cell(_ORIGIN, energy=0)
        broken = Cell(_ORIGIN, energy=5000)
        with pytest.raises(EnergyTransferError):
            share_energy(cell, surround(N=broken))


class TestDroop:
    """Tests for droop and structural support."""

    def test_grounded_resets(self) -> None:
        cell = Cell(_ORIGIN, droop_y=0.4)
        step_droop(cell, surround(SE=Rock(_ORIGIN)))
        assert cell.droop_y == 0.0

    def test_soil_grounds_too(self) -> None:
        cell = Cell(_ORIGIN, droop_y=0.3)
        step_droop(cell, surround(S=Soil(_ORIGIN)))
        assert cell.droop_y == 0.0

    def test_freefall(self) -> None:
        cell = Cell(_ORIGIN)
        step_droop(cell, surround())
        assert cell.droop_y == pytest.approx(0.54)

    def test_capped_by_support(self) -> None:
        cell = Cell(_ORIGIN, droop_y=0.3)
        step_droop(cell, surround(S=Cell(_ORIGIN, droop_y=0.1)))
        assert cell.droop_y == pytest.approx(0.1)

    def test_lateral_average(self) -> None:
        cell = Cell(_ORIGIN)
        step_droop(cell, surround(W=Cell(_ORIGIN, droop_y=0.4)))
        assert cell.droop_y == pytest.approx(0.22)
