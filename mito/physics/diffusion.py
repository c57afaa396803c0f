"""Water diffusion between neighbouring tiles of the same kind.

This is a pull-only rule: a tile takes water from richer neighbours and
never pushes water to poorer ones.  Each poorer tile does its own
pulling on its own step, so the grid equalises over several ticks.
Neighbour inventories are mutated in place (no double buffering).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mito.tiles.traits import HasInventory

if TYPE_CHECKING:
    from mito.tiles.base import Tile
    from mito.world.direction import Direction


def pull_water(tile: HasInventory, neighbors: dict[Direction, Tile]) -> float:
    """Pull water into ``tile`` from richer same-kind neighbours.

    For each neighbour of the same concrete type holding more water,
    ``floor(difference / (peers + 1))`` units move toward ``tile``.  The
    difference is re-read after every transfer.

    Args:
        tile: The tile doing the pulling.
        neighbors: Its neighbours keyed by direction.

    Returns:
        Total water received.
    """
    peers = [
        n
        for n in neighbors.values()
        if type(n) is type(tile) and isinstance(n, HasInventory)
    ]
    received = 0.0
    for peer in peers:
        if peer.inventory.water > tile.inventory.water:
            diff = math.floor(
                (peer.inventory.water - tile.inventory.water) / (len(peers) + 1),
            )
            moved, _ = peer.inventory.give(tile.inventory, diff, 0)
            received += moved
    return received
