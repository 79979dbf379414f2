#!/usr/bin/env python3
"""
Projectile demo - Version 1.0

Fires a projectile through a constant gravity and wind and prints its
position every tick until it hits the ground.
"""
__version__ = "1.0"

import argparse
import logging
from typing import List, Optional

from simulation.constants import DEFAULT_MAX_TICKS, DEFAULT_SPEED
from simulation.projectile import default_environment, fly, launch

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the simulation."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--speed", type=float, default=DEFAULT_SPEED,
                        help="launch speed in units per tick")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="stop after this many ticks if the projectile has not landed")
    args = parser.parse_args(argv)
    if args.max_ticks <= 0:
        parser.error("--max-ticks must be positive")

    projectile = launch(args.speed)
    logger.info(f"Launching from {projectile.position} with velocity {projectile.velocity}")

    for count, projectile in fly(default_environment(), projectile, max_ticks=args.max_ticks):
        print(f"tick {count}: {projectile.position}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
