"""Dense fixed-size boolean grid."""
import numpy as np
from typing import Tuple


class Grid:
    """
    Rectangular container of alive/dead cells addressed by (col, row).

    Storage is a numpy boolean array of shape (height, width), so a cell
    at (col, row) lives at ``cells[row, col]``. Dimensions are fixed for
    the lifetime of the grid.
    """

    def __init__(self, width: int, height: int, fill: bool = False):
        """
        Create a grid with every cell set to ``fill``.

        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive
            fill: Initial state of every cell
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._cells = np.full((self._height, self._width), bool(fill), dtype=bool)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Array shape, (height, width)."""
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying (height, width) array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self._cells))

    def check(self, col: int, row: int) -> None:
        """Raise IndexError unless (col, row) is on the grid."""
        if not (0 <= col < self._width and 0 <= row < self._height):
            raise IndexError(
                f"Cell ({col}, {row}) outside {self._width}x{self._height} grid"
            )

    def get(self, col: int, row: int) -> bool:
        self.check(col, row)
        return bool(self._cells[row, col])

    def set(self, col: int, row: int, alive: bool) -> None:
        self.check(col, row)
        self._cells[row, col] = alive

    def clear(self) -> None:
        """Mark every cell dead."""
        self._cells.fill(False)

    def fill(self, alive: bool) -> None:
        self._cells.fill(bool(alive))

    def load(self, state: np.ndarray) -> None:
        """Overwrite every cell from an array of shape (height, width)."""
        state = np.asarray(state)
        if state.shape != self.shape:
            raise ValueError(f"Shape mismatch: expected {self.shape}, got {state.shape}")
        self._cells[...] = state.astype(bool)

    def copy(self) -> 'Grid':
        clone = Grid(self._width, self._height)
        clone._cells[...] = self._cells
        return clone

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self):
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"
