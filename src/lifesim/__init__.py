"""
lifesim: Conway's Game of Life on a bounded grid

A small engine for the classic B3/S23 cellular automaton.

Core concepts:
- A universe is a finite rows x columns grid of dead/alive cells
- Cells outside the grid are permanently dead (no wraparound)
- Each generation is computed entirely from the previous one
- Looping, rendering, and analysis live outside the engine

See DESIGN.md for how the pieces fit together.
"""

__version__ = "0.1.0"
