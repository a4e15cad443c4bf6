# src/connect4_tui/render/commands.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from connect4_tui.types import ColorToken, ShapeKind


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """
    One shape in logical grid coordinates.

    RECTANGLE: (x, y, width, height), y is the bottom edge.
    LINE:      (x1, y1, x2, y2)
    CIRCLE:    (cx, cy), with `radius`
    """

    kind: ShapeKind
    coords: Tuple[float, ...]
    color: ColorToken
    radius: float = 0.0


def rectangle(x: float, y: float, w: float, h: float, color: ColorToken) -> DrawCommand:
    return DrawCommand(ShapeKind.RECTANGLE, (x, y, w, h), color)


def line(x1: float, y1: float, x2: float, y2: float, color: ColorToken) -> DrawCommand:
    return DrawCommand(ShapeKind.LINE, (x1, y1, x2, y2), color)


def circle(cx: float, cy: float, radius: float, color: ColorToken) -> DrawCommand:
    return DrawCommand(ShapeKind.CIRCLE, (cx, cy), color, radius)
