"""World grid — the arena every tile lives in.

The World is a fixed ``height x width`` array of slots, each holding
exactly one Tile.  Tiles never reference each other directly: they look
neighbours up by position on every step, and replacing a tile is a plain
slot overwrite that later lookups in the same tick observe immediately.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from mito.tiles.base import Tile
from mito.tiles.cells import Cell, Leaf, Root, Seed, Tissue
from mito.tiles.terrain import Air, DeadCell, Fountain, Rock, Soil
from mito.world.direction import Direction

# Characters accepted by ``World.from_layout``
LEGEND: dict[str, type[Tile]] = {
    ".": Air,
    "#": Rock,
    "~": Soil,
    "F": Fountain,
    "x": DeadCell,
    "C": Cell,
    "T": Tissue,
    "L": Leaf,
    "R": Root,
    "S": Seed,
}


class Position(NamedTuple):
    """Integer grid coordinate; rows grow downward."""

    x: int
    y: int

    def offset(self, direction: Direction) -> Position:
        """Return the neighbouring position in ``direction``."""
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass
class World:
    """A 2D arena of tiles.

    Attributes:
        width: Number of columns in the grid.
        height: Number of rows in the grid.
        slots: 2D list of tiles indexed as ``slots[y][x]``.
    """

    width: int
    height: int
    slots: list[list[Tile]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Fill the grid with air."""
        self.slots = [
            [Air(Position(x, y)) for x in range(self.width)]
            for y in range(self.height)
        ]

    @classmethod
    def from_layout(
        cls,
        rows: Sequence[str],
        *,
        soil_water: float = 0.0,
        sunlight: float = 1.0,
    ) -> World:
        """Build a world from an ASCII picture, one string per row.

        See ``LEGEND`` for the accepted characters.

        Args:
            rows: Equal-length row strings, top row first.
            soil_water: Starting water for every Soil and Fountain.
            sunlight: Cached sunlight for every Air tile.

        Returns:
            The populated World.

        Raises:
            ValueError: If the layout is empty, ragged, or contains an
                unknown character.
        """
        if not rows or not rows[0]:
            msg = "layout must have at least one non-empty row"
            raise ValueError(msg)
        width = len(rows[0])
        world = cls(width=width, height=len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                msg = f"layout row {y} has length {len(row)}, expected {width}"
                raise ValueError(msg)
            for x, char in enumerate(row):
                kind = LEGEND.get(char)
                if kind is None:
                    msg = f"unknown layout character {char!r} at ({x}, {y})"
                    raise ValueError(msg)
                pos = Position(x, y)
                if issubclass(kind, Soil):
                    tile: Tile = kind(pos, water=soil_water)
                elif kind is Air:
                    tile = Air(pos, sunlight_cached=sunlight)
                else:
                    tile = kind(pos)
                world.slots[y][x] = tile
        return world

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at ``(x, y)``.

        Off-grid coordinates resolve to a fresh boundary Rock, so edge
        tiles see a solid, opaque wall instead of an error.

        Args:
            x: Column index.
            y: Row index.
        """
        if not self.in_bounds(x, y):
            return Rock(Position(x, y))
        return self.slots[y][x]

    def tile_neighbors(self, pos: Position) -> dict[Direction, Tile]:
        """Return all eight neighbours of ``pos`` keyed by direction.

        Args:
            pos: Centre position.

        Returns:
            Mapping with exactly eight entries in ``Direction`` order.
        """
        return {d: self.tile_at(pos.x + d.dx, pos.y + d.dy) for d in Direction}

    def set_tile_at(self, pos: Position, tile: Tile) -> None:
        """Overwrite the slot at ``pos`` with ``tile``.

        Args:
            pos: Target position.
            tile: The new occupant.

        Raises:
            IndexError: If ``pos`` is off the grid.
        """
        if not self.in_bounds(pos.x, pos.y):
            msg = f"({pos.x}, {pos.y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        self.slots[pos.y][pos.x] = tile

    def tiles(self) -> Iterator[Tile]:
        """Yield every tile in row-major order (top row first)."""
        for row in self.slots:
            yield from row

    def darkness_grid(self) -> NDArray[np.float64]:
        """Return the darkness field as a ``(height, width)`` array."""
        return np.array(
            [[tile.darkness for tile in row] for row in self.slots],
            dtype=np.float64,
        )
