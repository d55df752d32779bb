"""Built-in Game of Life patterns."""
import numpy as np
from typing import Dict, List


def from_rows(rows: List[str], alive: str = '*') -> np.ndarray:
    """Build a boolean pattern from equal-length strings, one per row."""
    width = max(len(row) for row in rows)
    return np.array([[ch == alive for ch in row.ljust(width)] for row in rows], dtype=bool)


# Still lifes (period 1)
BLOCK = from_rows([
    "**",
    "**",
])

BEEHIVE = from_rows([
    ".**.",
    "*..*",
    ".**.",
])

BOAT = from_rows([
    "**.",
    "*.*",
    ".*.",
])

LOAF = from_rows([
    ".**.",
    "*..*",
    ".*.*",
    "..*.",
])


# Oscillators (period 2)
BLINKER = from_rows([
    "***",
])

TOAD = from_rows([
    ".***",
    "***.",
])

BEACON = from_rows([
    "**..",
    "**..",
    "..**",
    "..**",
])


# Oscillators (period 3)
PULSAR = from_rows([
    "..***...***..",
    ".............",
    "*....*.*....*",
    "*....*.*....*",
    "*....*.*....*",
    "..***...***..",
    ".............",
    "..***...***..",
    "*....*.*....*",
    "*....*.*....*",
    "*....*.*....*",
    ".............",
    "..***...***..",
])


# Spaceships (period 4)
GLIDER = from_rows([
    ".*.",
    "..*",
    "***",
])

LWSS = from_rows([
    ".*..*",
    "*....",
    "*...*",
    "****.",
])


# Gosper's glider gun, one glider every 30 generations
GLIDER_GUN = from_rows([
    "........................*...........",
    "......................*.*...........",
    "............**......**............**",
    "...........*...*....**............**",
    "**........*.....*...**..............",
    "**........*...*.**....*.*...........",
    "..........*.....*.......*...........",
    "...........*...*....................",
    "............**......................",
])


PATTERN_CATEGORIES: Dict[str, Dict[str, np.ndarray]] = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF,
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON,
    },
    'oscillators_p3': {
        'pulsar': PULSAR,
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS,
    },
    'guns': {
        'glider_gun': GLIDER_GUN,
    },
}


def pattern_names() -> List[str]:
    return [name for category in PATTERN_CATEGORIES.values() for name in category]


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the requested pattern array by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    raise ValueError(f"Pattern '{name}' not found. Available patterns: {pattern_names()}")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES
