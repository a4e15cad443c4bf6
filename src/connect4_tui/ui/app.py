# src/connect4_tui/ui/app.py

from __future__ import annotations
from typing import Optional

from rich.console import RenderableType
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from connect4_tui.config import BOARD_MARGIN
from connect4_tui.core.geometry import Rect, inset
from connect4_tui.game.controller import GameController
from connect4_tui.render.canvas import Canvas
from connect4_tui.ui.colors import palette

TICK_SEC = 0.1
HELP = "[dim](←/→ aim, space drop, c color, m marker, n new, q quit)[/]"


class BoardView(Widget):
    """Re-fits and redraws the board for whatever size the widget has."""

    def __init__(self, controller: GameController, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller

    def render(self) -> RenderableType:
        size = self.content_size
        frame = Rect(0, 0, size.width, size.height)
        target, commands = self.controller.frame(inset(frame, BOARD_MARGIN))
        if target.is_empty:
            return Text("Terminal too small", style="bold red", justify="center")

        board = self.controller.state.board
        canvas = Canvas(
            target,
            x_bounds=(0.0, float(board.cols)),
            y_bounds=(0.0, float(self.controller.screen_rows)),
            marker=self.controller.ui.marker,
        )
        canvas.draw_all(commands)
        return canvas.to_text(palette(self.controller.ui.accent_index), frame=frame)


class Connect4App(App):
    CSS = """
    BoardView {
        height: 1fr;
    }
    #status {
        height: 1;
        dock: bottom;
        padding: 0 1;
    }
    """

    TITLE = "Connect 4"

    def __init__(self, controller: Optional[GameController] = None, show_status: bool = True) -> None:
        super().__init__()
        self.controller = controller or GameController()
        self.show_status = show_status

    def compose(self) -> ComposeResult:
        yield BoardView(self.controller, id="board")
        if self.show_status:
            yield Static(self._status_text(), id="status")

    def on_mount(self) -> None:
        if self.controller.rotation.enabled:
            self.set_interval(TICK_SEC, self._tick)

    def _tick(self) -> None:
        if self.controller.tick():
            self.query_one(BoardView).refresh()

    def _redraw(self) -> None:
        self.query_one(BoardView).refresh()
        if self.show_status:
            status = self.query_one("#status", Static)
            status.update(self._status_text())

    def on_key(self, event: events.Key) -> None:
        if not self.controller.handle_key(event.key):
            return
        event.stop()
        if self.controller.ui.exit:
            self.exit()
            return
        self._redraw()

    def _status_text(self) -> str:
        return f"{self.controller.ui.status}  {HELP}"
