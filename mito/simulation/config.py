"""Config — load simulation parameters from YAML files.

The scene (an ASCII layout) and the handful of tunables that are not
fixed physical constants live in YAML and are parsed into a typed
dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_width: Number of grid columns when no layout is given.
        world_height: Number of grid rows when no layout is given.
        layout: Scene rows (see ``mito.world.world.LEGEND``).  When
            present it defines the world size.
        soil_water: Starting water in every Soil and Fountain tile.
        sunlight: Sunlight level cached on every Air tile (0.0-1.0).
    """

    seed: int = 42
    world_width: int = 32
    world_height: int = 32
    layout: list[str] = field(default_factory=list)
    soil_water: float = 0.0
    sunlight: float = 1.0

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        layout = data.get("layout") or []
        if isinstance(layout, str):
            layout = layout.split()

        return cls(
            seed=data.get("seed", cls.seed),
            world_width=data.get("world_width", cls.world_width),
            world_height=data.get("world_height", cls.world_height),
            layout=[str(row) for row in layout],
            soil_water=data.get("soil_water", cls.soil_water),
            sunlight=data.get("sunlight", cls.sunlight),
        )
