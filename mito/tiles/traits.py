"""Capability protocols shared by tiles and the physics rules.

A variant either implements a capability or it does not; callers check
once with ``isinstance`` instead of probing attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mito.tiles.inventory import Inventory


@runtime_checkable
class HasInventory(Protocol):
    """A tile carrying water and sugar."""

    inventory: Inventory


@runtime_checkable
class Living(Protocol):
    """A tile with metabolic energy that can droop."""

    energy: float
    droop_y: float
