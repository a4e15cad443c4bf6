# src/connect4_tui/game/controller.py

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Callable, Dict, List, Optional, Tuple

from connect4_tui.config import CELL_RATIO, DEFAULT_MARKER, MARKER_ROTATE_SEC
from connect4_tui.core.geometry import Rect, fit, fit_ratio
from connect4_tui.game.events import InputEvent, classify_key
from connect4_tui.game.state import BoardState
from connect4_tui.render.commands import DrawCommand
from connect4_tui.render.projector import project
from connect4_tui.types import Direction, Marker
from connect4_tui.ui.colors import player_name
from connect4_tui.ui.effects import MarkerRotation, next_marker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UiState:
    """Transient front-end state; nothing here affects the game itself."""

    exit: bool = False
    accent_index: int = 0
    marker: Marker = Marker(DEFAULT_MARKER)
    status: str = ""
    last_target: Optional[Rect] = None


@dataclass
class GameController:
    """
    Routes input events to the board and front-end state, and lays out
    each frame.

    The board occupies `ROWS + 1` logical rows on screen: the extra row on
    top is where the floating piece is aimed.
    """

    state: BoardState = field(default_factory=BoardState)
    ui: UiState = field(default_factory=UiState)
    cell_ratio: float = CELL_RATIO
    rotation: MarkerRotation = field(default_factory=lambda: MarkerRotation(MARKER_ROTATE_SEC))

    def __post_init__(self) -> None:
        self._handlers: Dict[InputEvent, Callable[[], None]] = {
            InputEvent.MOVE_LEFT: self.on_move_left,
            InputEvent.MOVE_RIGHT: self.on_move_right,
            InputEvent.DROP: self.on_drop,
            InputEvent.QUIT: self.on_quit,
            InputEvent.RECOLOR_ACCENT: self.on_recolor_accent,
            InputEvent.NEW_GAME: self.on_new_game,
            InputEvent.CYCLE_MARKER: self.on_cycle_marker,
        }
        self._turn_status()

    def _turn_status(self) -> None:
        self.ui.status = f"{player_name(self.state.color_for_turn())} to move."

    # --- handlers ---

    def on_move_left(self) -> None:
        self.state.move_floating(Direction.LEFT)

    def on_move_right(self) -> None:
        self.state.move_floating(Direction.RIGHT)

    def on_drop(self) -> None:
        column = int(self.state.column)
        player = self.state.color_for_turn()
        if self.state.drop() is None:
            self.ui.status = f"Column {column + 1} is full."
            return
        if self.state.board.is_full():
            self.ui.status = f"{player_name(player)} dropped in column {column + 1} | Board is full, press n for a new game."
            return
        self.ui.status = (
            f"{player_name(player)} dropped in column {column + 1}"
            f" | Next: {player_name(self.state.color_for_turn())}"
        )

    def on_quit(self) -> None:
        logger.info("quit requested")
        self.ui.exit = True

    def on_recolor_accent(self) -> None:
        self.ui.accent_index += 1

    def on_new_game(self) -> None:
        self.state.reset()
        self._turn_status()

    def on_cycle_marker(self) -> None:
        self.ui.marker = next_marker(self.ui.marker)
        logger.debug("marker -> %s", self.ui.marker.value)

    def handle(self, event: Optional[InputEvent]) -> bool:
        """Dispatch one event. Returns False if it was ignored."""
        handler = self._handlers.get(event) if event is not None else None
        if handler is None:
            return False
        handler()
        return True

    def handle_key(self, key: str) -> bool:
        return self.handle(classify_key(key))

    def tick(self) -> bool:
        """Once per loop iteration; True if the marker rotated."""
        if self.rotation.due():
            self.on_cycle_marker()
            return True
        return False

    # --- layout ---

    @property
    def screen_rows(self) -> int:
        return self.state.board.rows + 1

    def layout(self, available: Rect) -> Rect:
        cols = self.state.board.cols
        target = fit(available, cols, self.screen_rows, fit_ratio(cols, self.screen_rows, self.cell_ratio))
        if target != self.ui.last_target:
            logger.debug("viewport %s -> %s", available, target)
        self.ui.last_target = target
        return target

    def frame(self, available: Rect) -> Tuple[Rect, List[DrawCommand]]:
        target = self.layout(available)
        return target, project(self.state, target)
