"""Metabolism — the eating / not-eating cycle of a cell.

A cell only converts sugar into energy while it is eating.  Entry and
exit use different energy thresholds plus a minimum dwell time, so a
cell hovering around one threshold does not flip state every tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_MIN_DURATION = 25
_START_EATING_FRACTION = 0.5
_STOP_EATING_FRACTION = 0.8


class Appetite(Enum):
    """Which half of the cycle a cell is in."""

    NOT_EATING = auto()
    EATING = auto()


@dataclass
class Metabolism:
    """Hysteretic eating state of one cell.

    Attributes:
        state: Current appetite.
        duration: Steps spent in the current state.
    """

    state: Appetite = Appetite.NOT_EATING
    duration: int = 0

    @property
    def eating(self) -> bool:
        """True while the cell is converting sugar to energy."""
        return self.state is Appetite.EATING

    def advance(self, energy: float, energy_max: float) -> None:
        """Count one step in the current state, then maybe switch.

        - NOT_EATING -> EATING once energy drops below half and the cell
          has rested for more than 25 steps.
        - EATING -> NOT_EATING once energy is above 80% after more than
          25 steps, or as soon as energy is full.

        Switching resets ``duration`` to 0.

        Args:
            energy: The cell's current energy.
            energy_max: The cell's energy capacity.
        """
        self.duration += 1
        if self.state is Appetite.NOT_EATING:
            if energy < energy_max * _START_EATING_FRACTION and (
                self.duration > _MIN_DURATION
            ):
                self._switch(Appetite.EATING)
        elif (
            energy > energy_max * _STOP_EATING_FRACTION
            and self.duration > _MIN_DURATION
        ) or energy == energy_max:
            self._switch(Appetite.NOT_EATING)

    def _switch(self, state: Appetite) -> None:
        self.state = state
        self.duration = 0
