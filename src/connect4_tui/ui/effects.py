# src/connect4_tui/ui/effects.py

from __future__ import annotations
import time
from typing import Callable, Optional

from connect4_tui.types import Marker

MARKER_CYCLE = (Marker.HALF_BLOCK, Marker.BRAILLE, Marker.DOT, Marker.BLOCK)


def next_marker(marker: Marker) -> Marker:
    i = MARKER_CYCLE.index(marker)
    return MARKER_CYCLE[(i + 1) % len(MARKER_CYCLE)]


class MarkerRotation:
    """
    Rotates the canvas marker every `interval` seconds.

    `due()` is meant to be called once per loop tick; it compares the
    monotonic clock against the last rotation and never sleeps.
    """

    def __init__(self, interval: float, clock: Optional[Callable[[], float]] = None) -> None:
        self.interval = interval
        self.clock = clock or time.monotonic
        self.last = self.clock()

    @property
    def enabled(self) -> bool:
        return self.interval > 0

    def due(self) -> bool:
        if not self.enabled:
            return False
        now = self.clock()
        if now - self.last < self.interval:
            return False
        self.last = now
        return True
