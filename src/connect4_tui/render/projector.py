# src/connect4_tui/render/projector.py

from __future__ import annotations
from typing import List

from connect4_tui.config import PIECE_RADIUS
from connect4_tui.core.geometry import Rect
from connect4_tui.game.state import BoardState
from connect4_tui.render.commands import DrawCommand, circle, line, rectangle
from connect4_tui.types import ColorToken, color_of


def project(state: BoardState, target: Rect) -> List[DrawCommand]:
    """
    Shapes for one frame, back to front, in logical coordinates
    (x in [0, cols], y in [0, rows], row 0 at the bottom).

    The floating piece sits half a row above the grid. Nothing is emitted
    when `target` is empty.
    """
    if target.is_empty:
        return []

    cols = state.board.cols
    rows = state.board.rows
    out: List[DrawCommand] = [rectangle(0.0, 0.0, float(cols), float(rows), ColorToken.BACKGROUND)]

    for c in range(cols + 1):
        out.append(line(float(c), 0.0, float(c), float(rows), ColorToken.ACCENT))
    for r in range(rows + 1):
        out.append(line(0.0, float(r), float(cols), float(r), ColorToken.ACCENT))

    for c, r, cell in state.board.cells():
        out.append(circle(c + 0.5, r + 0.5, PIECE_RADIUS, color_of(cell)))

    piece = state.floating
    out.append(circle(piece.column + 0.5, rows + 0.5, PIECE_RADIUS, color_of(piece.color)))
    return out
