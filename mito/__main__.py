"""Entry point for ``python -m mito``.

Loads a YAML config, builds a simulation engine from its layout, and
runs it headless, logging a census of the world as it goes.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from mito.simulation.config import SimulationConfig
from mito.simulation.engine import Census, SimulationEngine

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

logger = logging.getLogger("mito")


def _log_census(census: Census) -> None:
    kinds = ", ".join(f"{name}={n}" for name, n in sorted(census.counts.items()))
    logger.info(
        "tick %d: water=%.1f sugar=%.2f energy=%.0f [%s]",
        census.tick,
        census.water,
        census.sugar,
        census.energy,
        kinds,
    )


def main() -> None:
    """Parse CLI args, create engine, run the requested ticks."""
    parser = argparse.ArgumentParser(
        prog="mito",
        description="Mito - tile-based plant ecosystem simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=100,
        help="Number of ticks to simulate (default: 100)",
    )
    parser.add_argument(
        "--report-every",
        type=int,
        default=10,
        help="Log a census every N ticks, 0 to disable (default: 10)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    engine = SimulationEngine(config=config)

    _log_census(engine.census())
    for _ in range(args.ticks):
        engine.step()
        if args.report_every and engine.tick % args.report_every == 0:
            _log_census(engine.census())
    if not args.report_every or engine.tick % args.report_every:
        _log_census(engine.census())


if __name__ == "__main__":
    main()
