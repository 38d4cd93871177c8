"""
Analysis layer: quantities derived from watching a universe evolve.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- CycleDetector: notice when a generation repeats (still lifes, oscillators)
- population_history: live-cell counts over a run
"""

from lifesim.analysis.cycles import CycleDetector, population_history

__all__ = [
    "CycleDetector",
    "population_history",
]
