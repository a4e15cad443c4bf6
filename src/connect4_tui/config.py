# src/connect4_tui/config.py

from __future__ import annotations

ROWS = 6
COLS = 7

# Terminal characters are roughly twice as tall as they are wide.
CELL_RATIO = 0.5

# Logical radius of a piece (cells are 1x1 in logical space)
PIECE_RADIUS = 0.4

# UI toggles
BOARD_MARGIN = 1  # cells kept free around the board
DEFAULT_MARKER = "half_block"
SHOW_STATUS = True

# Marker rotation (0 disables it)
MARKER_ROTATE_SEC = 0.0

# Colors (rich style names)
PLAYER_COLORS = {
    "player_a": "red",
    "player_b": "yellow",
}
BACKGROUND_COLOR = "grey15"
ACCENT_COLORS = ["blue", "cyan", "green", "magenta", "white"]

# Logging (the UI owns the terminal, so logs only go to a file)
LOG_LEVEL = "INFO"
LOG_FILE = None
