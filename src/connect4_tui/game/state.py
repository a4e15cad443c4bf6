# src/connect4_tui/game/state.py

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Optional, Tuple

from connect4_tui.core.board import Board
from connect4_tui.types import Cell, Column, Direction

logger = logging.getLogger(__name__)

TURN_ORDER: Tuple[Cell, Cell] = (Cell.PLAYER_A, Cell.PLAYER_B)


@dataclass(frozen=True, slots=True)
class FloatingPiece:
    column: Column
    color: Cell


@dataclass(slots=True)
class BoardState:
    """
    Board plus the piece currently being aimed.

    None of the operations raise for gameplay input: movement is clamped and
    dropping into a full column does nothing.
    """

    board: Board = field(default_factory=Board)
    column: Column = Column(-1)
    turn: int = 0  # index into TURN_ORDER

    def __post_init__(self) -> None:
        if self.column < 0:
            self.column = self.home_column
        self.column = self._clamp(int(self.column))

    @property
    def home_column(self) -> Column:
        return Column(self.board.cols // 2)

    @property
    def floating(self) -> FloatingPiece:
        return FloatingPiece(self.column, self.color_for_turn())

    def color_for_turn(self) -> Cell:
        return TURN_ORDER[self.turn]

    def _clamp(self, c: int) -> Column:
        return Column(max(0, min(self.board.cols - 1, c)))

    def move_floating(self, direction: Direction) -> None:
        self.column = self._clamp(int(self.column) + direction.value)

    def drop(self) -> Optional[int]:
        """Drop the floating piece; returns the landing row, or None if the column is full."""
        color = self.color_for_turn()
        row = self.board.place(self.column, color)
        logger.debug("drop %s into column %d -> row %s", color.name, self.column, row)

        if row is None:
            logger.info("column %d is full; drop ignored", self.column)
            return None

        self.column = self.home_column
        self.turn = 1 - self.turn
        return row

    def reset(self) -> None:
        self.board.clear()
        self.turn = 0
        self.column = self.home_column
        logger.info("new game")
