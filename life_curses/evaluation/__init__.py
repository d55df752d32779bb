"""Board statistics and run summaries."""

from .metrics import (
    population,
    density,
    hamming_distance,
    find_period,
    summarize_run,
    RunTracker
)

__all__ = [
    'population',
    'density',
    'hamming_distance',
    'find_period',
    'summarize_run',
    'RunTracker'
]
