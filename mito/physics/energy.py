"""Energy flow for living tiles: eating sugar and sharing energy.

Both rules run only while a cell is eating, read and write neighbour
state in place, and walk neighbours in ``Direction`` order followed by
the cell itself.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mito.tiles.traits import HasInventory, Living

if TYPE_CHECKING:
    from mito.tiles.base import Tile
    from mito.world.direction import Direction

CELL_ENERGY_MAX = 2000
ENERGY_TO_SUGAR_RATIO = 2000


class EnergyTransferError(RuntimeError):
    """An energy transfer broke the [0, CELL_ENERGY_MAX] bound.

    This signals a bug in the transfer arithmetic, not a runtime
    condition, and is never caught by the simulation.
    """


def feed(cell: Living, neighbors: dict[Direction, Tile]) -> float:
    """Convert sugar from neighbouring inventories into ``cell`` energy.

    Sources are the neighbours with an inventory, then the cell itself.
    The scan stops at the first source that cannot cover the whole
    remaining want, even if later sources hold sugar.

    Args:
        cell: The eating cell.
        neighbors: Its neighbours keyed by direction.

    Returns:
        Total sugar eaten.
    """
    eaten = 0.0
    for source in (*neighbors.values(), cell):
        if not isinstance(source, HasInventory):
            continue
        if cell.energy >= CELL_ENERGY_MAX:
            break
        wanted = (CELL_ENERGY_MAX - cell.energy) / ENERGY_TO_SUGAR_RATIO
        taken = min(wanted, source.inventory.sugar)
        source.inventory.change(0, -taken)
        cell.energy = min(
            CELL_ENERGY_MAX,
            cell.energy + taken * ENERGY_TO_SUGAR_RATIO,
        )
        eaten += taken
        if taken < wanted:
            break
    return eaten


def share_energy(cell: Living, neighbors: dict[Direction, Tile]) -> float:
    """Take half the energy difference from each richer living neighbour.

    Args:
        cell: The receiving cell.
        neighbors: Its neighbours keyed by direction.

    Returns:
        Total energy received.

    Raises:
        EnergyTransferError: If a transfer would leave the neighbour
            below zero or ``cell`` above ``CELL_ENERGY_MAX``.
    """
    received = 0
    for neighbor in (*neighbors.values(), cell):
        if not isinstance(neighbor, Living):
            continue
        if cell.energy >= CELL_ENERGY_MAX:
            break
        if neighbor.energy <= cell.energy:
            continue
        transfer = math.floor((neighbor.energy - cell.energy) / 2)
        if neighbor.energy - transfer < 0:
            msg = (
                f"energy transfer of {transfer} would leave neighbour "
                f"at {neighbor.energy - transfer}"
            )
            raise EnergyTransferError(msg)
        if cell.energy + transfer > CELL_ENERGY_MAX:
            msg = (
                f"energy transfer of {transfer} would raise cell "
                f"to {cell.energy + transfer}"
            )
            raise EnergyTransferError(msg)
        cell.energy += transfer
        neighbor.energy -= transfer
        received += transfer
    return received
