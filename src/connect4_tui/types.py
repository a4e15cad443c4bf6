# src/connect4_tui/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType

Column = NewType("Column", int)   # column index 0..6


class Cell(Enum):
    EMPTY = "empty"
    PLAYER_A = "player_a"
    PLAYER_B = "player_b"


class Direction(Enum):
    LEFT = -1
    RIGHT = 1


class ColorToken(Enum):
    PLAYER_A = "player_a"
    PLAYER_B = "player_b"
    ACCENT = "accent"
    BACKGROUND = "background"


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    LINE = "line"
    CIRCLE = "circle"


class Marker(Enum):
    BLOCK = "block"
    HALF_BLOCK = "half_block"
    DOT = "dot"
    BRAILLE = "braille"


def color_of(cell: Cell) -> ColorToken:
    if cell is Cell.PLAYER_A:
        return ColorToken.PLAYER_A
    if cell is Cell.PLAYER_B:
        return ColorToken.PLAYER_B
    raise ValueError("Empty cells have no color.")
