"""Conway's Game of Life board with hard edges."""
import logging
from typing import List, Optional, Tuple

import numpy as np

from .grid import Grid
from .rng import RandomSource

logger = logging.getLogger(__name__)

ALIVE_GLYPH = '*'
DEAD_GLYPH = ' '

# Moore neighborhood as (dcol, drow) offsets.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dc, dr)
    for dc in (-1, 0, 1)
    for dr in (-1, 0, 1)
    if (dc, dr) != (0, 0)
)


def next_state(alive: bool, neighbors: int) -> bool:
    """B3/S23: survive on 2 or 3 neighbors, birth on exactly 3."""
    if alive:
        return neighbors == 2 or neighbors == 3
    return neighbors == 3


def place_pattern(grid_size: Tuple[int, int],
                  pattern: np.ndarray,
                  position: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """
    Place a pattern on an empty board, centered by default or at a given corner.

    Args:
        grid_size: Board shape as (height, width)
        pattern: 2D array, non-zero entries are alive
        position: Top-left (row, col) of the pattern, None to center

    Returns:
        Boolean array of shape grid_size. Parts of the pattern that fall
        off the board are dropped.
    """
    grid = np.zeros(grid_size, dtype=bool)
    pattern = np.asarray(pattern).astype(bool)
    ph, pw = pattern.shape
    h, w = grid_size
    if position is None:
        start_h = (h - ph) // 2
        start_w = (w - pw) // 2
    else:
        start_h, start_w = position

    # Clip on both sides so oversized patterns stay centered.
    src_h = max(0, -start_h)
    src_w = max(0, -start_w)
    start_h = max(0, start_h)
    start_w = max(0, start_w)
    end_h = min(start_h + ph - src_h, h)
    end_w = min(start_w + pw - src_w, w)
    if end_h <= start_h or end_w <= start_w:
        return grid

    grid[start_h:end_h, start_w:end_w] = \
        pattern[src_h:src_h + end_h - start_h, src_w:src_w + end_w - start_w]
    return grid


class LifeBoard:
    """
    Game of Life board with hard edges and double-buffered updates.

    Two grids are allocated up front. One is the current generation; the
    other only ever holds a generation under construction and is never
    handed out. Advancing fills the spare grid from the current one and
    then flips which slot is current.
    """

    def __init__(self, columns: int, rows: int,
                 rng: Optional[RandomSource] = None,
                 randomize: bool = True):
        """
        Create a board and seed it with random soup.

        Args:
            columns: Board width in cells
            rows: Board height in cells
            rng: Random source used for seeding, a clock-seeded one if None
            randomize: Seed the board on construction
        """
        self._buffers = (Grid(columns, rows), Grid(columns, rows))
        self._active = 0
        self.rng = rng if rng is not None else RandomSource()
        self.generation = 0
        if randomize:
            self.randomize_board()

    @property
    def columns(self) -> int:
        return self._current.width

    @property
    def rows(self) -> int:
        return self._current.height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._current.shape

    @property
    def population(self) -> int:
        return self._current.population

    @property
    def _current(self) -> Grid:
        return self._buffers[self._active]

    def get(self, col: int, row: int) -> bool:
        return self._current.get(col, row)

    def set(self, col: int, row: int, alive: bool) -> None:
        self._current.set(col, row, alive)

    def snapshot(self) -> np.ndarray:
        """Return a copy of the current generation as a (rows, columns) array."""
        return self._current.cells.copy()

    def seed(self, state: np.ndarray) -> None:
        """Replace the current generation with the given (rows, columns) array."""
        self._current.load(state)

    def place_pattern(self, pattern: np.ndarray,
                      position: Optional[Tuple[int, int]] = None) -> None:
        """Clear the board and stamp a pattern on it."""
        self.seed(place_pattern(self.shape, pattern, position))

    def clear_board(self) -> None:
        self._current.clear()

    def randomize_board(self) -> None:
        """Set each cell alive with probability 1/2, independently."""
        draws = self.rng.rand_array(2, self.shape)
        self._current.load(draws == 0)
        logger.debug("Randomized %dx%d board, population %d",
                     self.columns, self.rows, self.population)

    def count_neighbors(self, col: int, row: int) -> int:
        """Count live cells in the Moore neighborhood of (col, row).

        Positions off the board are not counted.
        """
        grid = self._current
        grid.check(col, row)
        count = 0
        for dc, dr in NEIGHBOR_OFFSETS:
            c = col + dc
            r = row + dr
            if 0 <= c < grid.width and 0 <= r < grid.height and grid.get(c, r):
                count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count live neighbors for every cell at once.

        Zero padding around the board stands in for the missing
        off-board neighbors.
        """
        h, w = self.shape
        padded = np.pad(self._current.cells.astype(np.uint8), 1)
        counts = np.zeros((h, w), dtype=np.uint8)
        for dc, dr in NEIGHBOR_OFFSETS:
            counts += padded[1 + dr:1 + dr + h, 1 + dc:1 + dc + w]
        return counts

    def advance_generation(self) -> None:
        """Compute the next generation from a snapshot of the current one."""
        state = self._current.cells
        neighbors = self.neighbor_counts()
        survive = state & ((neighbors == 2) | (neighbors == 3))
        birth = ~state & (neighbors == 3)

        spare = 1 - self._active
        self._buffers[spare].load(survive | birth)
        self._active = spare
        self.generation += 1
        logger.debug("Generation %d, population %d", self.generation, self.population)

    def trajectory(self, num_steps: int) -> np.ndarray:
        """Advance num_steps times and return every state, the current one first."""
        trajectory = np.zeros((num_steps + 1,) + self.shape, dtype=bool)
        trajectory[0] = self._current.cells
        for t in range(1, num_steps + 1):
            self.advance_generation()
            trajectory[t] = self._current.cells
        return trajectory

    def frame(self) -> List[str]:
        """Return the current generation as one glyph string per row."""
        glyphs = np.where(self._current.cells, ALIVE_GLYPH, DEAD_GLYPH)
        return [''.join(row) for row in glyphs]

    def render(self, sink) -> None:
        """Write every row to the sink, then send its cursor home."""
        for row, text in enumerate(self.frame()):
            sink.write_row(row, text)
        sink.reset_cursor()

    def __str__(self):
        return '\n'.join(self.frame())

    def __repr__(self):
        return (f"LifeBoard(columns={self.columns}, rows={self.rows}, "
                f"generation={self.generation}, population={self.population})")
