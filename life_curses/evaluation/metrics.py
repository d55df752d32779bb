"""Summary statistics for boards and trajectories."""
from collections import deque

import numpy as np


def population(state: np.ndarray) -> int:
    """Return the number of live cells."""
    return int(np.count_nonzero(state))


def density(state: np.ndarray) -> float:
    """Return the fraction of cells that are alive."""
    if state.size == 0:
        return 0.0
    return population(state) / state.size


def hamming_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Return the fraction of cells that differ between two states."""
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    return float(np.mean(a.astype(bool) != b.astype(bool)))


def find_period(trajectory: np.ndarray, max_period: int = 30) -> int:
    """
    Return the period of the final state of a trajectory.

    1 means a still life, 2 a blinker-style oscillator and so on. The
    search looks back at most max_period steps and returns -1 when the
    final state does not repeat within that window.
    """
    last = trajectory[-1]
    limit = min(max_period, len(trajectory) - 1)
    for period in range(1, limit + 1):
        if np.array_equal(trajectory[-1 - period], last):
            return period
    return -1


class RunTracker:
    """
    Running summary of a simulation, fed one state per generation.

    Only populations and the last max_period + 1 states are kept, so
    memory does not grow with the length of the run.
    """

    def __init__(self, max_period: int = 30):
        self.max_period = max_period
        self.recent = deque(maxlen=max_period + 1)
        self.states_seen = 0
        self.initial_population = 0
        self.peak_population = 0

    def update(self, state: np.ndarray) -> None:
        count = population(state)
        if self.states_seen == 0:
            self.initial_population = count
        self.peak_population = max(self.peak_population, count)
        self.recent.append(np.array(state, dtype=bool))
        self.states_seen += 1

    def summary(self) -> dict:
        if not self.recent:
            raise ValueError("No states recorded")
        last = self.recent[-1]
        return {
            'generations': self.states_seen - 1,
            'initial_population': self.initial_population,
            'final_population': population(last),
            'peak_population': self.peak_population,
            'final_density': density(last),
            'period': find_period(np.array(self.recent), self.max_period),
        }


def summarize_run(trajectory: np.ndarray, max_period: int = 30) -> dict:
    """Return population statistics and the settled period of a trajectory."""
    tracker = RunTracker(max_period)
    for state in trajectory:
        tracker.update(state)
    return tracker.summary()
