"""
UniverseProjector: renders a universe as text and drives it forward.

The engine only knows how to take one step. The projector owns the
looping policy: it advances until the universe is extinct, with an
optional generation cap and optional cycle detection, because a still
life or an oscillator never goes extinct on its own.

Output format, one line per row and a separator line per generation:

    1 1 0
    0 1 0
    0 0 0
"""

from __future__ import annotations
import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from lifesim.analysis.cycles import CycleDetector
from lifesim.core.rules import CellState

if TYPE_CHECKING:
    from lifesim.core.universe import Universe

logger = logging.getLogger(__name__)


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


class StopReason(Enum):
    """Why a run ended."""

    EXTINCT = "extinct"
    CYCLE = "cycle"
    GENERATION_CAP = "generation_cap"


@dataclass
class ProjectorConfig:
    """Configuration for the projector."""

    max_generations: int | None = 1000  # None runs until extinct
    stop_on_cycle: bool = False  # Stop when a generation repeats
    separator: str = ""  # Line written after each rendered generation
    alive_symbol: str = "1"
    dead_symbol: str = "0"

    def __post_init__(self):
        if self.max_generations is not None and self.max_generations < 0:
            raise ValueError(
                f"max_generations must be non-negative, got {self.max_generations}"
            )

    @classmethod
    def from_env(cls) -> ProjectorConfig:
        """Load settings from LIFESIM_* environment variables."""
        defaults = cls()

        raw_cap = os.getenv("LIFESIM_MAX_GENERATIONS")
        if raw_cap is None:
            max_generations = defaults.max_generations
        elif raw_cap.strip().lower() in ("", "none"):
            max_generations = None
        else:
            max_generations = int(raw_cap)

        return cls(
            max_generations=max_generations,
            stop_on_cycle=_parse_bool(
                "LIFESIM_STOP_ON_CYCLE",
                os.getenv("LIFESIM_STOP_ON_CYCLE", str(defaults.stop_on_cycle)),
            ),
            separator=os.getenv("LIFESIM_SEPARATOR", defaults.separator),
        )


@dataclass
class RunResult:
    """Outcome of a projector run."""

    generations: int  # Generations advanced during the run
    stop_reason: StopReason
    population: list[int] = field(default_factory=list)  # Seed first
    period: int | None = None  # Set when stopped by a cycle


class UniverseProjector:
    """Prints a universe generation by generation."""

    def __init__(
        self,
        universe: "Universe",
        config: ProjectorConfig | None = None,
        stream: TextIO | None = None,
    ):
        self.universe = universe
        self.config = config if config is not None else ProjectorConfig()
        self.stream = stream

    def _symbol(self, cell: CellState) -> str:
        if cell == CellState.ALIVE:
            return self.config.alive_symbol
        return self.config.dead_symbol

    def render_lines(self) -> list[str]:
        """Current generation as text, one line per row."""
        return [
            " ".join(self._symbol(cell) for cell in row)
            for row in self.universe.iter_rows()
        ]

    def render(self) -> None:
        """Write the current generation to the stream."""
        out = self.stream if self.stream is not None else sys.stdout
        for line in self.render_lines():
            out.write(line + "\n")

    def _write_separator(self) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(self.config.separator + "\n")

    def time_travel(self) -> RunResult:
        """
        Advance and render until the universe stops changing meaningfully.

        Each step advances one generation, renders it, then writes the
        separator line. The run stops when the universe is extinct, when
        ``max_generations`` steps have been taken, or (with
        ``stop_on_cycle``) when a generation repeats.

        Returns:
            RunResult describing how far the run got and why it stopped
        """
        universe = self.universe
        cap = self.config.max_generations
        detector = CycleDetector() if self.config.stop_on_cycle else None
        if detector is not None:
            detector.observe(universe)

        population = [universe.population]
        generations = 0
        stop_reason = StopReason.EXTINCT
        period = None

        while not universe.is_extinct():
            if cap is not None and generations >= cap:
                stop_reason = StopReason.GENERATION_CAP
                break

            universe.advance()
            generations += 1
            self.render()
            self._write_separator()
            population.append(universe.population)

            if detector is not None:
                period = detector.observe(universe)
                if period is not None:
                    stop_reason = StopReason.CYCLE
                    break

        logger.info(
            "Run stopped (%s) after %d generations, population %d",
            stop_reason.value,
            generations,
            universe.population,
        )
        return RunResult(
            generations=generations,
            stop_reason=stop_reason,
            population=population,
            period=period,
        )
