"""Conway's Game of Life on a hard-edged board, drawn in the terminal."""

from .config import LifeConfig, LifeConfigError
from .core import Grid, LifeBoard, RandomSource

__version__ = '0.1.0'

__all__ = [
    'Grid',
    'LifeBoard',
    'RandomSource',
    'LifeConfig',
    'LifeConfigError',
]
