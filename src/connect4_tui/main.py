# src/connect4_tui/main.py

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from typing import Optional

from connect4_tui.config import CELL_RATIO, DEFAULT_MARKER, LOG_FILE, LOG_LEVEL, MARKER_ROTATE_SEC, SHOW_STATUS
from connect4_tui.game.controller import GameController, UiState
from connect4_tui.types import Marker
from connect4_tui.ui.effects import MarkerRotation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    marker: Marker = Marker(DEFAULT_MARKER)
    cell_ratio: float = CELL_RATIO
    rotate_sec: float = MARKER_ROTATE_SEC
    show_status: bool = SHOW_STATUS
    log_file: Optional[str] = LOG_FILE
    log_level: str = LOG_LEVEL


def _positive_float(raw: str) -> float:
    try:
        v = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")
    if not v > 0:
        raise argparse.ArgumentTypeError("must be greater than 0")
    return v


def _non_negative_float(raw: str) -> float:
    try:
        v = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")
    if v < 0:
        raise argparse.ArgumentTypeError("must be 0 or more")
    return v


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-player Connect 4 in the terminal.")
    ap.add_argument("--marker", type=str, default=DEFAULT_MARKER, choices=[m.value for m in Marker], help="How shapes are rasterized into characters")
    ap.add_argument("--cell-ratio", type=_positive_float, default=CELL_RATIO, help="Width/height of one terminal character")
    ap.add_argument("--rotate-markers", type=_non_negative_float, default=MARKER_ROTATE_SEC, metavar="SEC", help="Cycle the marker every SEC seconds (0 disables)")
    ap.add_argument("--no-status", action="store_true", help="Hide the status line")

    ap.add_argument("--log-file", type=str, default=LOG_FILE, help="Write logs to this file (logs are discarded otherwise)")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level for --log-file")

    return ap


def parse_settings(argv: list[str] | None = None) -> Settings:
    args = build_argparser().parse_args(argv)
    return Settings(
        marker=Marker(args.marker),
        cell_ratio=args.cell_ratio,
        rotate_sec=args.rotate_markers,
        show_status=not args.no_status,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def configure_logging(settings: Settings) -> None:
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        # The terminal belongs to the UI.
        logging.getLogger("connect4_tui").addHandler(logging.NullHandler())


def build_controller(settings: Settings) -> GameController:
    return GameController(
        ui=UiState(marker=settings.marker),
        cell_ratio=settings.cell_ratio,
        rotation=MarkerRotation(settings.rotate_sec),
    )


def main(argv: list[str] | None = None) -> int:
    settings = parse_settings(argv)
    configure_logging(settings)
    logger.info("starting with %s", settings)

    from connect4_tui.ui.app import Connect4App

    app = Connect4App(build_controller(settings), show_status=settings.show_status)
    app.run()

    logger.info("exited")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
