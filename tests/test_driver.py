import io

import numpy as np
import pytest

from life_curses import driver
from life_curses.cli import main
from life_curses.config import LifeConfig
from life_curses.core import LifeBoard, RandomSource
from life_curses.evaluation import summarize_run
from life_curses.driver import build_board, play_life, run, run_headless
from life_curses.utils.patterns import get_pattern
from life_curses.utils.rendering import CURSOR_HOME, TextSink


class InterruptAfter:
    """Sleep replacement that raises KeyboardInterrupt after a number of calls."""

    def __init__(self, calls):
        self.calls = calls
        self.delays = []

    def __call__(self, delay):
        self.delays.append(delay)
        if len(self.delays) >= self.calls:
            raise KeyboardInterrupt


def test_build_board_from_seed_is_deterministic():
    config = LifeConfig(width=20, height=8, seed=5)
    a = build_board(config)
    b = build_board(config)
    assert a.shape == (8, 20)
    assert np.array_equal(a.snapshot(), b.snapshot())


def test_build_board_from_pattern():
    board = build_board(LifeConfig(width=10, height=10, seed=1, pattern='block'))
    assert board.population == get_pattern('block').sum()
    assert board.get(4, 4) and board.get(5, 5)


def test_play_life_renders_then_advances_each_generation():
    board = LifeBoard(3, 3, rng=RandomSource(0), randomize=False)
    for row in range(3):
        board.set(1, row, True)
    stream = io.StringIO()
    delays = []

    done = play_life(board, TextSink(stream, ansi=False), 0.25, generations=3, sleep=delays.append)

    assert done == 3
    assert board.generation == 3
    assert delays == [0.25, 0.25, 0.25]
    frames = stream.getvalue().split('\n')[:-1]
    assert frames == [" * ", " * ", " * ",
                      "   ", "***", "   ",
                      " * ", " * ", " * "]


def test_play_life_without_bound_runs_until_interrupted():
    board = LifeBoard(5, 5, rng=RandomSource(3))
    sleep = InterruptAfter(7)
    with pytest.raises(KeyboardInterrupt):
        play_life(board, TextSink(io.StringIO()), 0.1, generations=None, sleep=sleep)
    assert board.generation == 7


def test_run_headless_matches_full_trajectory_summary():
    board = LifeBoard(6, 6, rng=RandomSource(2))
    reference = LifeBoard(6, 6, rng=RandomSource(2))
    summary = run_headless(board, 12, progress=False)
    assert summary == summarize_run(reference.trajectory(12))
    assert board.generation == 12


def test_headless_run_does_not_store_every_generation(capsys, monkeypatch):
    advance = LifeBoard.advance_generation

    def advance_then_stop(board):
        if board.generation >= 50:
            raise KeyboardInterrupt
        advance(board)

    monkeypatch.setattr(LifeBoard, "advance_generation", advance_then_stop)
    assert main(['--headless', '-g', '2000000000', '-w', '8', '-h', '8']) == 0
    out = capsys.readouterr().out
    assert "Generations: 50" in out


def test_run_headless_prints_summary(capsys):
    config = LifeConfig(width=8, height=8, generations=6, pattern='blinker', renderer='headless')
    assert run(config) == 6
    out = capsys.readouterr().out
    assert "Generations: 6" in out
    assert "Final population: 3" in out
    assert "Settled with period 2" in out


def test_run_plain_stops_cleanly_on_interrupt(capsys, monkeypatch):
    monkeypatch.setattr(driver.time, 'sleep', InterruptAfter(3))
    config = LifeConfig(width=4, height=2, delay_ms=1, generations=None, seed=8, renderer='plain')
    assert run(config) == 3
    assert capsys.readouterr().out.count(CURSOR_HOME) == 3
