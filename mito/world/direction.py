"""Direction — the fixed table of eight neighbour offsets.

Rows grow downward, so ``S`` is ``(0, +1)``.  Every neighbour iteration
in the simulation walks ``Direction`` in declaration order, which makes
the order part of the determinism contract.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A unit offset toward one of the eight compass neighbours."""

    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)
    NE = (1, -1)
    NW = (-1, -1)
    SE = (1, 1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        """Column offset."""
        return self.value[0]

    @property
    def dy(self) -> int:
        """Row offset (positive is down)."""
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        """The mirrored direction, e.g. ``N`` for ``S``."""
        return Direction((-self.dx, -self.dy))


# Directions that can hold a tile up
BELOW: tuple[Direction, ...] = (Direction.S, Direction.SW, Direction.SE)
LATERAL: tuple[Direction, ...] = (Direction.W, Direction.E)
