# src/connect4_tui/ui/colors.py

from __future__ import annotations
from typing import Dict, Sequence

from connect4_tui.config import ACCENT_COLORS, BACKGROUND_COLOR, PLAYER_COLORS
from connect4_tui.types import Cell, ColorToken


def palette(accent_index: int = 0, accents: Sequence[str] = ACCENT_COLORS) -> Dict[ColorToken, str]:
    """Color token -> rich color name, with the accent picked from `accents`."""
    return {
        ColorToken.PLAYER_A: PLAYER_COLORS["player_a"],
        ColorToken.PLAYER_B: PLAYER_COLORS["player_b"],
        ColorToken.ACCENT: accents[accent_index % len(accents)],
        ColorToken.BACKGROUND: BACKGROUND_COLOR,
    }


def player_name(cell: Cell) -> str:
    return "Player A" if cell is Cell.PLAYER_A else "Player B"
