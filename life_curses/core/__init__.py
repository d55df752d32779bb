"""Simulation core: grid storage, random source and the life board"""

from .grid import Grid
from .rng import RandomSource
from .board import LifeBoard, next_state, place_pattern, ALIVE_GLYPH, DEAD_GLYPH

__all__ = [
    'Grid',
    'RandomSource',
    'LifeBoard',
    'next_state',
    'place_pattern',
    'ALIVE_GLYPH',
    'DEAD_GLYPH',
]
