"""Main simulation loop: render, advance, wait."""
import curses
import itertools
import logging
import time
from typing import Callable, Optional

from tqdm import tqdm

from .config import LifeConfig
from .core import LifeBoard, RandomSource
from .evaluation import RunTracker
from .utils.patterns import get_pattern
from .utils.rendering import CursesSink, RenderSink, TextSink

logger = logging.getLogger(__name__)


def build_board(config: LifeConfig) -> LifeBoard:
    """Create a board from a validated config, seeded from random soup or a pattern."""
    rng = RandomSource(config.seed)
    board = LifeBoard(config.width, config.height, rng=rng, randomize=config.pattern is None)
    if config.pattern is not None:
        board.place_pattern(get_pattern(config.pattern))
    logger.info("Built %dx%d board (seed %d, pattern %s, population %d)",
                board.columns, board.rows, rng.seed, config.pattern, board.population)
    return board


def play_life(board: LifeBoard,
              sink: RenderSink,
              delay: float,
              generations: Optional[int] = None,
              sleep: Optional[Callable[[float], None]] = None) -> int:
    """
    Draw and advance the board until the generation budget runs out.

    Args:
        board: Board to simulate
        sink: Destination for each frame
        delay: Seconds to wait after every generation
        generations: Number of generations, None to run until interrupted
        sleep: Wait function, time.sleep if None

    Returns:
        Number of generations advanced
    """
    if sleep is None:
        sleep = time.sleep
    steps = itertools.count() if generations is None else range(generations)
    completed = 0
    for _ in steps:
        board.render(sink)
        board.advance_generation()
        completed += 1
        sleep(delay)
    return completed


def run_headless(board: LifeBoard, generations: int, progress: bool = True,
                 max_period: int = 30) -> dict:
    """
    Advance without rendering and return a summary of the run.

    States are streamed through a RunTracker rather than stored, so long
    runs use constant memory. Interrupting stops early and summarizes the
    generations completed so far.
    """
    tracker = RunTracker(max_period)
    tracker.update(board.snapshot())
    try:
        for _ in tqdm(range(generations), desc="Simulating", disable=not progress):
            board.advance_generation()
            tracker.update(board.snapshot())
    except KeyboardInterrupt:
        logger.info("Interrupted at generation %d", board.generation)
    return tracker.summary()


def print_summary(summary: dict) -> None:
    print("=" * 60)
    print("Run summary")
    print("=" * 60)
    print(f"  Generations: {summary['generations']}")
    print(f"  Initial population: {summary['initial_population']}")
    print(f"  Final population: {summary['final_population']}")
    print(f"  Peak population: {summary['peak_population']}")
    print(f"  Final density: {summary['final_density']:.3f}")
    if summary['period'] > 0:
        print(f"  Settled with period {summary['period']}")
    else:
        print("  Still evolving")


def _play_in_curses(stdscr, board: LifeBoard, config: LifeConfig) -> int:
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    max_rows, max_cols = stdscr.getmaxyx()
    window = curses.newwin(min(config.height, max_rows), min(config.width, max_cols), 0, 0)
    return play_life(board, CursesSink(window), config.delay_seconds, config.generations)


def run(config: LifeConfig) -> int:
    """Run a validated config end to end and return the generations advanced."""
    board = build_board(config)
    logger.info("Starting %s run for %s generations", config.renderer,
                config.generations if config.generations is not None else "unbounded")
    start = time.time()
    try:
        if config.renderer == 'headless':
            print_summary(run_headless(board, config.generations))
        elif config.renderer == 'plain':
            play_life(board, TextSink(), config.delay_seconds, config.generations)
        else:
            curses.wrapper(_play_in_curses, board, config)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    logger.info("Stopped at generation %d after %.1fs", board.generation, time.time() - start)
    return board.generation
