"""Darkness propagation across non-living tiles.

Darkness is a cheap stand-in for light: each terrain tile takes the
least dark of its neighbours plus a per-row contribution that steepens
toward the bottom of the world.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mito.tiles.traits import Living

if TYPE_CHECKING:
    from mito.tiles.base import Tile
    from mito.world.direction import Direction

_MIN_CONTRIBUTION = 0.2
_MAX_CONTRIBUTION = 1.0


def map_range(
    value: float,
    in_lo: float,
    in_hi: float,
    out_lo: float,
    out_hi: float,
    *,
    clamp: bool = False,
) -> float:
    """Linearly map ``value`` from ``[in_lo, in_hi]`` to ``[out_lo, out_hi]``.

    Args:
        value: Input value.
        in_lo: Input mapped to ``out_lo``.
        in_hi: Input mapped to ``out_hi``.
        out_lo: Output at ``in_lo``.
        out_hi: Output at ``in_hi``.
        clamp: Restrict the result to the output interval.

    Returns:
        The mapped value.
    """
    t = (value - in_lo) / (in_hi - in_lo)
    if clamp:
        t = min(1.0, max(0.0, t))
    return out_lo + t * (out_hi - out_lo)


def darkness_contribution(y: int, height: int) -> float:
    """Return how much darkness a tile at row ``y`` adds to its neighbours'.

    Rows in the upper half add the minimum; below the midline the
    contribution rises linearly to the maximum at the bottom edge.

    Args:
        y: Row of the tile.
        height: World height in rows.
    """
    return max(
        _MIN_CONTRIBUTION,
        map_range(
            y,
            height / 2,
            height,
            _MIN_CONTRIBUTION,
            _MAX_CONTRIBUTION,
            clamp=True,
        ),
    )


def propagate_darkness(
    tile: Tile,
    neighbors: dict[Direction, Tile],
    height: int,
) -> float:
    """Compute the new darkness of ``tile`` from its eight neighbours.

    An opaque neighbour contributes ``inf``.  Any living neighbour makes
    the tile fully lit (0).

    Args:
        tile: The tile being updated.
        neighbors: Its neighbours keyed by direction.
        height: World height, for the row contribution.

    Returns:
        The new darkness value.
    """
    contribution = darkness_contribution(tile.pos.y, height)
    darkness = math.inf
    for neighbor in neighbors.values():
        if isinstance(neighbor, Living):
            return 0.0
        if neighbor.opaque:
            continue
        darkness = min(darkness, neighbor.darkness + contribution)
    return darkness
