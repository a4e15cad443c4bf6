# src/connect4_tui/core/geometry.py

from __future__ import annotations
from dataclasses import dataclass
import math

EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: "Rect") -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


def _empty_at(rect: Rect) -> Rect:
    return Rect(rect.x, rect.y, 0, 0)


def fit(available: Rect, cols: int, rows: int, ratio_w_over_h: float) -> Rect:
    """
    Largest rectangle with the given width/height ratio that fits inside
    `available`, snapped so its width is a multiple of `cols` and its height
    a multiple of `rows`, then centered.

    Returns a zero-size rectangle at `available`'s origin when the grid
    cannot fit. Pure: the result depends on the arguments only.
    """
    if cols <= 0 or rows <= 0:
        raise ValueError("Grid dimensions must be positive.")
    if not ratio_w_over_h > 0:
        raise ValueError("Ratio must be positive.")

    if available.width <= 0 or available.height <= 0:
        return _empty_at(available)

    area_ratio = available.width / available.height
    if area_ratio > ratio_w_over_h:
        # height-limited
        target_h = float(available.height)
        target_w = ratio_w_over_h * target_h
    else:
        # width-limited (ties land here)
        target_w = float(available.width)
        target_h = target_w / ratio_w_over_h

    # Exact fits like 35 / (7 / 6) come out a hair under the integer.
    w = min(math.floor(target_w + EPSILON), available.width)
    h = min(math.floor(target_h + EPSILON), available.height)

    w -= w % cols
    h -= h % rows

    if w == 0 or h == 0:
        return _empty_at(available)

    x = available.x + (available.width - w) // 2
    y = available.y + (available.height - h) // 2
    return Rect(x, y, w, h)


def inset(rect: Rect, margin: int) -> Rect:
    """Shrink `rect` by `margin` on every side (empty if nothing is left)."""
    w = rect.width - 2 * margin
    h = rect.height - 2 * margin
    if w <= 0 or h <= 0:
        return Rect(rect.x + margin, rect.y + margin, 0, 0)
    return Rect(rect.x + margin, rect.y + margin, w, h)


def fit_ratio(cols: int, rows: int, cell_ratio: float) -> float:
    """Width/height ratio of the whole grid in terminal cells."""
    return (cols / rows) / cell_ratio
