"""Shared fixtures for the Mito test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
import pytest
from numpy.random import Generator

from mito.simulation.config import SimulationConfig
from mito.world.world import World


class FixedRoll:
    """Stand-in generator whose ``random()`` always returns ``value``."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_world() -> World:
    """A small 8x8 all-air world for fast tests."""
    return World(width=8, height=8)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def scene() -> Callable[..., World]:
    """Factory building a World from ASCII rows."""

    def build(rows: Sequence[str], **kwargs: float) -> World:
        return World.from_layout(rows, **kwargs)

    return build


@pytest.fixture
def roll() -> type[FixedRoll]:
    """Generator stand-in with a fixed ``random()`` result."""
    return FixedRoll
