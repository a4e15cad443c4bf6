"""Tests for BoardState: aiming, dropping and turn order."""

import logging
import random

from connect4_tui.game.state import BoardState, FloatingPiece
from connect4_tui.types import Cell, Column, Direction


def _assert_columns_contiguous(state: BoardState) -> None:
    for c in range(state.board.cols):
        column = state.board.column(Column(c))
        h = state.board.height(Column(c))
        assert all(cell is not Cell.EMPTY for cell in column[:h])
        assert all(cell is Cell.EMPTY for cell in column[h:])


def test_initial_state():
    state = BoardState()
    assert state.color_for_turn() is Cell.PLAYER_A
    assert state.floating == FloatingPiece(Column(3), Cell.PLAYER_A)


def test_move_floating_is_clamped():
    state = BoardState()
    for _ in range(10):
        state.move_floating(Direction.LEFT)
    assert state.column == 0
    for _ in range(10):
        state.move_floating(Direction.RIGHT)
    assert state.column == 6


def test_six_drops_alternate_then_seventh_is_noop():
    state = BoardState()
    rows = [state.drop() for _ in range(6)]
    assert rows == [0, 1, 2, 3, 4, 5]
    assert state.board.column(Column(3)) == (
        Cell.PLAYER_A,
        Cell.PLAYER_B,
        Cell.PLAYER_A,
        Cell.PLAYER_B,
        Cell.PLAYER_A,
        Cell.PLAYER_B,
    )

    grid_before = state.board.copy().grid
    color_before = state.color_for_turn()
    assert state.drop() is None
    assert state.board.grid == grid_before
    assert state.color_for_turn() is color_before


def test_drop_resets_aim_to_home_column():
    state = BoardState()
    state.move_floating(Direction.LEFT)
    state.move_floating(Direction.LEFT)
    assert state.drop() == 0
    assert state.board.get(Column(1), 0) is Cell.PLAYER_A
    assert state.floating == FloatingPiece(Column(3), Cell.PLAYER_B)


def test_aiming_at_full_column_is_allowed():
    state = BoardState()
    for _ in range(6):
        state.drop()
    state.move_floating(Direction.LEFT)
    state.move_floating(Direction.RIGHT)
    assert state.column == 3
    assert state.drop() is None
    assert state.column == 3


def test_random_play_keeps_invariants():
    rng = random.Random(7)
    state = BoardState()
    for _ in range(300):
        for _ in range(rng.randrange(7)):
            state.move_floating(rng.choice([Direction.LEFT, Direction.RIGHT]))
        before = state.color_for_turn()
        row = state.drop()
        if row is None:
            assert state.color_for_turn() is before
        else:
            assert state.color_for_turn() is not before
        _assert_columns_contiguous(state)


def test_reset():
    state = BoardState()
    state.move_floating(Direction.RIGHT)
    state.drop()
    state.reset()
    assert list(state.board.cells()) == []
    assert state.color_for_turn() is Cell.PLAYER_A
    assert state.column == 3


def test_out_of_range_start_column_is_clamped():
    state = BoardState(column=Column(9))
    assert state.column == 6
    assert state.drop() == 0
    assert state.board.get(Column(6), 0) is Cell.PLAYER_A


def test_drops_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="connect4_tui.game.state")
    state = BoardState()
    for _ in range(7):
        state.drop()

    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    info = [r for r in caplog.records if r.levelno == logging.INFO]
    assert len(debug) == 7
    assert [r.getMessage() for r in info] == ["column 3 is full; drop ignored"]
