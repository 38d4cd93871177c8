"""
Demo: a glider crossing a bounded universe.

The demo:
1. Places a glider in the top-left corner of a 24x24 universe
2. Runs it for 80 generations while recording the population
3. Shows snapshots at a few generations plus the population curve

There is no wraparound, so the glider eventually reaches the far corner
and collides with the edge instead of re-entering on the other side.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from lifesim.core import Universe
from lifesim.patterns import GLIDER, place_pattern
from lifesim.viz import plot_population, plot_universe, save_figure


def main():
    """Run the glider demo."""
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Glider Demo")
    print("=" * 60)

    universe = Universe(24, 24)
    place_pattern(universe, GLIDER, row=1, column=1)

    snapshot_at = {0, 20, 40, 80}
    n_generations = max(snapshot_at)

    fig, axes = plt.subplots(1, len(snapshot_at) + 1, figsize=(20, 4))
    panels = iter(axes)

    populations = [universe.population]
    for generation in range(n_generations + 1):
        if generation in snapshot_at:
            plot_universe(universe, ax=next(panels))
            print(f"   Generation {generation}: live cells {universe.live_cells()}")
        if generation < n_generations:
            universe.advance()
            populations.append(universe.population)

    plot_population(populations, ax=next(panels))
    fig.tight_layout()

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "glider.png"
    save_figure(fig, output_path)
    print(f"\n   Saved to: {output_path}")

    plt.show()

    return universe


if __name__ == "__main__":
    main()
