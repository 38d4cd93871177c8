"""Predefined Game of Life patterns."""

from __future__ import annotations

from lifesim.patterns.base import Pattern


# Still lifes (period 1)
BLOCK = Pattern.from_rows("block", "still_lifes", [
    "OO",
    "OO",
])

BEEHIVE = Pattern.from_rows("beehive", "still_lifes", [
    ".OO.",
    "O..O",
    ".OO.",
])

BOAT = Pattern.from_rows("boat", "still_lifes", [
    "OO.",
    "O.O",
    ".O.",
])

LOAF = Pattern.from_rows("loaf", "still_lifes", [
    ".OO.",
    "O..O",
    ".O.O",
    "..O.",
])


# Oscillators (period 2)
BLINKER = Pattern.from_rows("blinker", "oscillators", [
    "OOO",
])

TOAD = Pattern.from_rows("toad", "oscillators", [
    ".OOO",
    "OOO.",
])

BEACON = Pattern.from_rows("beacon", "oscillators", [
    "OO..",
    "OO..",
    "..OO",
    "..OO",
])


# Spaceships (period 4)
# Glider travels one cell down and one cell right every 4 generations
GLIDER = Pattern.from_rows("glider", "spaceships", [
    ".O.",
    "..O",
    "OOO",
])

LWSS = Pattern.from_rows("lwss", "spaceships", [
    ".O..O",
    "O....",
    "O...O",
    "OOOO.",
])


PATTERN_CATEGORIES = {
    "still_lifes": {p.name: p for p in (BLOCK, BEEHIVE, BOAT, LOAF)},
    "oscillators": {p.name: p for p in (BLINKER, TOAD, BEACON)},
    "spaceships": {p.name: p for p in (GLIDER, LWSS)},
}


def list_patterns() -> list[str]:
    """Names of all available patterns."""
    return [name for category in PATTERN_CATEGORIES.values() for name in category]


def get_pattern(name: str) -> Pattern:
    """Return the pattern with the given name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name]

    raise KeyError(f"Pattern '{name}' not found. Available patterns: {list_patterns()}")
