"""
Demo: watch a small universe die out.

Seeds a 3x3 universe with four live cells and prints every generation
until nothing is left alive:

    1 1 0        1 1 0
    0 1 0   ->   1 1 1   ->  ...
    0 0 1        0 0 0

The run is capped and stops on cycles, so swapping in a still life or an
oscillator still terminates.
"""

import logging

from lifesim.core import Universe
from lifesim.experiments import ProjectorConfig, UniverseProjector


def main():
    """Run the projector demo."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    universe = Universe(3, 3)
    universe.set_alive(0, 0)
    universe.set_alive(0, 1)
    universe.set_alive(1, 1)
    universe.set_alive(2, 2)

    config = ProjectorConfig.from_env()
    config.stop_on_cycle = True

    result = UniverseProjector(universe, config=config).time_travel()

    print(f"Stopped: {result.stop_reason.value} after {result.generations} generations")
    print(f"Population: {result.population}")

    return result


if __name__ == "__main__":
    main()
