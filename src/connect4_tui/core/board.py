# src/connect4_tui/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from connect4_tui.config import ROWS, COLS
from connect4_tui.types import Cell, Column


@dataclass(slots=True)
class Board:
    """
    Columns of cells, each stored bottom-to-top.

    Pieces are only ever placed in the lowest empty slot, so the empty cells
    of a column are always contiguous at the top.
    """

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Board dimensions must be positive.")
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(self.rows)] for _ in range(self.cols)]

    def _check(self, col: Column) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        return c

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [column[:] for column in self.grid])

    def column(self, col: Column) -> Tuple[Cell, ...]:
        return tuple(self.grid[self._check(col)])

    def get(self, col: Column, row: int) -> Cell:
        return self.grid[self._check(col)][row]

    def height(self, col: Column) -> int:
        column = self.grid[self._check(col)]
        for r, cell in enumerate(column):
            if cell is Cell.EMPTY:
                return r
        return self.rows

    def is_column_full(self, col: Column) -> bool:
        return self.height(col) == self.rows

    def valid_columns(self) -> List[Column]:
        return [Column(c) for c in range(self.cols) if not self.is_column_full(Column(c))]

    def is_full(self) -> bool:
        return not self.valid_columns()

    def place(self, col: Column, cell: Cell) -> Optional[int]:
        """Put `cell` in the lowest empty slot; None if the column is full."""
        if cell is Cell.EMPTY:
            raise ValueError("Cannot place an empty cell.")
        c = self._check(col)
        r = self.height(Column(c))
        if r == self.rows:
            return None
        self.grid[c][r] = cell
        return r

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for c, column in enumerate(self.grid):
            for r, cell in enumerate(column):
                if cell is not Cell.EMPTY:
                    yield c, r, cell

    def clear(self) -> None:
        for column in self.grid:
            for r in range(self.rows):
                column[r] = Cell.EMPTY
