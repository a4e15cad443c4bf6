# src/connect4_tui/render/canvas.py

from __future__ import annotations
import math
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from rich.style import Style
from rich.text import Text

from connect4_tui.core.geometry import Rect
from connect4_tui.render.commands import DrawCommand
from connect4_tui.types import ColorToken, Marker, ShapeKind

Pixel = Optional[ColorToken]

# sub-pixels per terminal cell (x, y)
RESOLUTION: Dict[Marker, Tuple[int, int]] = {
    Marker.BLOCK: (1, 1),
    Marker.DOT: (1, 1),
    Marker.HALF_BLOCK: (1, 2),
    Marker.BRAILLE: (2, 4),
}

# braille dot bit for sub-pixel (x, y), y counted from the top
BRAILLE_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

# which ink wins when several land in one braille cell
INK_PRIORITY = (ColorToken.PLAYER_A, ColorToken.PLAYER_B, ColorToken.ACCENT, ColorToken.BACKGROUND)


class Canvas:
    """
    Rasterizes draw commands into the terminal cells of `target`.

    Logical x spans `x_bounds` left to right, logical y spans `y_bounds`
    bottom to top. Rectangles paint the base layer; lines and circles paint
    the ink layer on top of it.
    """

    def __init__(
        self,
        target: Rect,
        x_bounds: Tuple[float, float],
        y_bounds: Tuple[float, float],
        marker: Marker = Marker.HALF_BLOCK,
    ) -> None:
        self.target = target
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.marker = marker

        sx, sy = RESOLUTION[marker]
        self.pw = max(0, target.width) * sx
        self.ph = max(0, target.height) * sy
        self.base: List[List[Pixel]] = [[None] * self.pw for _ in range(self.ph)]
        self.ink: List[List[Pixel]] = [[None] * self.pw for _ in range(self.ph)]

    # --- coordinate mapping ---

    def _to_logical(self, px: int, py: int) -> Tuple[float, float]:
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        lx = x0 + (px + 0.5) / self.pw * (x1 - x0)
        ly = y1 - (py + 0.5) / self.ph * (y1 - y0)
        return lx, ly

    def _to_pixel(self, lx: float, ly: float) -> Tuple[int, int]:
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        px = math.floor((lx - x0) / (x1 - x0) * self.pw)
        py = math.floor((y1 - ly) / (y1 - y0) * self.ph)
        return min(max(px, 0), self.pw - 1), min(max(py, 0), self.ph - 1)

    # --- shapes ---

    def draw(self, cmd: DrawCommand) -> None:
        if self.pw == 0 or self.ph == 0:
            return
        if cmd.kind is ShapeKind.RECTANGLE:
            self._rectangle(cmd)
        elif cmd.kind is ShapeKind.LINE:
            self._line(cmd)
        elif cmd.kind is ShapeKind.CIRCLE:
            self._circle(cmd)

    def draw_all(self, commands: Iterable[DrawCommand]) -> None:
        for cmd in commands:
            self.draw(cmd)

    def _rectangle(self, cmd: DrawCommand) -> None:
        x, y, w, h = cmd.coords
        for py in range(self.ph):
            for px in range(self.pw):
                lx, ly = self._to_logical(px, py)
                if x <= lx <= x + w and y <= ly <= y + h:
                    self.base[py][px] = cmd.color

    def _line(self, cmd: DrawCommand) -> None:
        x1, y1, x2, y2 = cmd.coords
        ax, ay = self._to_pixel(x1, y1)
        bx, by = self._to_pixel(x2, y2)
        steps = max(abs(bx - ax), abs(by - ay))
        if steps == 0:
            self.ink[ay][ax] = cmd.color
            return
        for i in range(steps + 1):
            px = round(ax + (bx - ax) * i / steps)
            py = round(ay + (by - ay) * i / steps)
            self.ink[py][px] = cmd.color

    def _circle(self, cmd: DrawCommand) -> None:
        cx, cy = cmd.coords
        r2 = cmd.radius * cmd.radius
        left, top = self._to_pixel(cx - cmd.radius, cy + cmd.radius)
        right, bottom = self._to_pixel(cx + cmd.radius, cy - cmd.radius)
        for py in range(top, bottom + 1):
            for px in range(left, right + 1):
                lx, ly = self._to_logical(px, py)
                if (lx - cx) ** 2 + (ly - cy) ** 2 <= r2:
                    self.ink[py][px] = cmd.color

    # --- output ---

    def _cell(self, col: int, row: int) -> Tuple[str, Pixel, Pixel]:
        """(glyph, foreground, background) for one terminal cell."""
        sx, sy = RESOLUTION[self.marker]
        ox, oy = col * sx, row * sy

        if self.marker is Marker.HALF_BLOCK:
            top = self.ink[oy][ox] or self.base[oy][ox]
            bottom = self.ink[oy + 1][ox] or self.base[oy + 1][ox]
            if top is None and bottom is None:
                return " ", None, None
            if top == bottom:
                return "█", top, None
            if top is None:
                return "▄", bottom, None
            return "▀", top, bottom

        if self.marker is Marker.BRAILLE:
            bits = 0
            inks = set()
            bg: Pixel = None
            for dy in range(sy):
                for dx in range(sx):
                    p = self.ink[oy + dy][ox + dx]
                    if p is not None:
                        bits |= BRAILLE_BITS[dy][dx]
                        inks.add(p)
                    bg = bg or self.base[oy + dy][ox + dx]
            if not bits:
                return " ", None, bg
            fg = next(t for t in INK_PRIORITY if t in inks)
            return chr(0x2800 + bits), fg, bg

        ink = self.ink[oy][ox]
        base = self.base[oy][ox]
        if ink is None:
            return " ", None, base
        if self.marker is Marker.DOT:
            return "•", ink, base
        return "█", ink, None

    def rows(self) -> List[List[Tuple[str, Pixel, Pixel]]]:
        return [
            [self._cell(col, row) for col in range(max(0, self.target.width))]
            for row in range(max(0, self.target.height))
        ]

    def to_text(self, palette: Mapping[ColorToken, str], frame: Optional[Rect] = None) -> Text:
        """
        Render as rich Text. With `frame`, the output covers the whole frame
        and the canvas is placed at `target`'s offset inside it.
        """
        frame = frame or self.target
        styles: Dict[Tuple[Pixel, Pixel], Style] = {}

        def style_for(fg: Pixel, bg: Pixel) -> Style:
            key = (fg, bg)
            if key not in styles:
                styles[key] = Style(
                    color=palette[fg] if fg else None,
                    bgcolor=palette[bg] if bg else None,
                )
            return styles[key]

        grid = self.rows()
        left_pad = self.target.x - frame.x
        top_pad = self.target.y - frame.y

        text = Text(no_wrap=True, overflow="crop")
        for y in range(frame.height):
            if y:
                text.append("\n")
            row = y - top_pad
            if not 0 <= row < len(grid):
                text.append(" " * frame.width)
                continue
            text.append(" " * left_pad)
            # runs of identical style keep the Text small
            run = ""
            run_style: Optional[Style] = None
            for glyph, fg, bg in grid[row]:
                st = style_for(fg, bg)
                if st != run_style and run:
                    text.append(run, run_style)
                    run = ""
                run_style = st
                run += glyph
            if run:
                text.append(run, run_style)
            text.append(" " * max(0, frame.right - self.target.right))
        return text
