"""Droop — a cheap stand-in for gravity and structural support.

Every living tile accumulates sag each step.  Sag is wiped out by solid
ground underneath, capped by whatever living tile holds it up, and
smoothed across side-by-side living tiles.  A tile with nothing below
and nothing beside it falls quickly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mito.tiles.traits import Living
from mito.world.direction import BELOW, LATERAL

if TYPE_CHECKING:
    from mito.tiles.base import Tile
    from mito.world.direction import Direction

DROOP_RATE = 0.04
FREEFALL_PENALTY = 0.5


def step_droop(cell: Living, neighbors: dict[Direction, Tile]) -> None:
    """Update ``cell.droop_y`` from the tiles around it.

    Args:
        cell: The living tile to update.
        neighbors: Its neighbours keyed by direction.
    """
    cell.droop_y += DROOP_RATE

    supported = False
    for direction in BELOW:
        below = neighbors[direction]
        if below.anchoring:
            cell.droop_y = 0.0
            return
        if isinstance(below, Living):
            cell.droop_y = min(cell.droop_y, below.droop_y)
            supported = True

    droop_sum = cell.droop_y
    count = 1
    for direction in LATERAL:
        side = neighbors[direction]
        if isinstance(side, Living):
            droop_sum += side.droop_y
            count += 1

    if not supported and count == 1:
        cell.droop_y += FREEFALL_PENALTY
    else:
        cell.droop_y = droop_sum / count
