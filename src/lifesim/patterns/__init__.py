"""
Patterns: named configurations used to seed a universe.

- Still lifes: BLOCK, BEEHIVE, BOAT, LOAF
- Oscillators: BLINKER, TOAD, BEACON
- Spaceships: GLIDER, LWSS
"""

from lifesim.patterns.base import Pattern, place_pattern
from lifesim.patterns.library import (
    BLOCK,
    BEEHIVE,
    BOAT,
    LOAF,
    BLINKER,
    TOAD,
    BEACON,
    GLIDER,
    LWSS,
    PATTERN_CATEGORIES,
    get_pattern,
    list_patterns,
)

__all__ = [
    "Pattern",
    "place_pattern",
    "BLOCK",
    "BEEHIVE",
    "BOAT",
    "LOAF",
    "BLINKER",
    "TOAD",
    "BEACON",
    "GLIDER",
    "LWSS",
    "PATTERN_CATEGORIES",
    "get_pattern",
    "list_patterns",
]
