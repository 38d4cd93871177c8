"""
Experiment harness: drive a universe through many generations.

- UniverseProjector: text rendering plus the "run until extinct" loop
- ProjectorConfig: generation cap, cycle stop, output symbols
"""

from lifesim.experiments.projector import (
    UniverseProjector,
    ProjectorConfig,
    RunResult,
    StopReason,
)

__all__ = [
    "UniverseProjector",
    "ProjectorConfig",
    "RunResult",
    "StopReason",
]
