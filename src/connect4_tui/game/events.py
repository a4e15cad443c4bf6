# src/connect4_tui/game/events.py

from __future__ import annotations
from enum import Enum, auto
from typing import Dict, Optional


class InputEvent(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    DROP = auto()
    QUIT = auto()
    RECOLOR_ACCENT = auto()
    NEW_GAME = auto()
    CYCLE_MARKER = auto()


KEYMAP: Dict[str, InputEvent] = {
    "left": InputEvent.MOVE_LEFT,
    "a": InputEvent.MOVE_LEFT,
    "h": InputEvent.MOVE_LEFT,
    "right": InputEvent.MOVE_RIGHT,
    "d": InputEvent.MOVE_RIGHT,
    "l": InputEvent.MOVE_RIGHT,
    "space": InputEvent.DROP,
    "enter": InputEvent.DROP,
    "down": InputEvent.DROP,
    "s": InputEvent.DROP,
    "q": InputEvent.QUIT,
    "escape": InputEvent.QUIT,
    "ctrl+c": InputEvent.QUIT,
    "c": InputEvent.RECOLOR_ACCENT,
    "n": InputEvent.NEW_GAME,
    "m": InputEvent.CYCLE_MARKER,
}


def classify_key(key: str) -> Optional[InputEvent]:
    """Event for a key name, or None for keys the game does not use."""
    return KEYMAP.get(key.strip().lower())
