"""Inventory — a bounded store of water and sugar.

Both resources share one capacity.  Every operation keeps
``water >= 0``, ``sugar >= 0`` and ``water + sugar <= capacity``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Inventory:
    """Water and sugar held by a single tile.

    Attributes:
        capacity: Upper bound on ``water + sugar``.
        water: Current water amount.
        sugar: Current sugar amount.
    """

    capacity: float
    water: float = 0.0
    sugar: float = 0.0

    def space(self) -> float:
        """Return how much more resource fits."""
        return self.capacity - self.water - self.sugar

    def change(self, d_water: float, d_sugar: float) -> None:
        """Add (or remove, if negative) resources in place.

        Each resource is floored at zero.  Whatever would overflow the
        capacity is discarded, sugar first when sugar was being added,
        then water.

        Args:
            d_water: Water delta.
            d_sugar: Sugar delta.
        """
        water = max(0.0, self.water + d_water)
        sugar = max(0.0, self.sugar + d_sugar)
        excess = water + sugar - self.capacity
        if excess > 0:
            logger.debug(
                "inventory overflow: discarding %.3f of (%.3f, %.3f) change",
                excess,
                d_water,
                d_sugar,
            )
            if d_sugar > 0:
                cut = min(excess, d_sugar, sugar)
                sugar -= cut
                excess -= cut
            if excess > 0:
                water = max(0.0, water - excess)
        self.water = water
        self.sugar = sugar

    def give(
        self,
        other: Inventory,
        water: float,
        sugar: float,
    ) -> tuple[float, float]:
        """Move resources from this inventory into ``other``.

        The amounts are limited by what this inventory holds and by the
        space left in ``other`` (water is placed first).  Negative
        requests move nothing.

        Args:
            other: Receiving inventory.
            water: Requested water.
            sugar: Requested sugar.

        Returns:
            The ``(water, sugar)`` actually moved.
        """
        room = max(0.0, other.space())
        moved_water = min(max(0.0, water), self.water, room)
        moved_sugar = min(max(0.0, sugar), self.sugar, room - moved_water)
        if moved_water <= 0 and moved_sugar <= 0:
            return 0.0, 0.0
        self.change(-moved_water, -moved_sugar)
        other.change(moved_water, moved_sugar)
        return moved_water, moved_sugar
