"""Shared position builders for the test suites."""

from senet.core.board import BoardState
from senet.core.types import BOARD_SIZE, PIECES_PER_SIDE, Side


def make_state(white=(), black=(), white_turn=True, roll=0, conditions=None, dice=None):
    """Custom position. Pieces not placed count as borne off."""
    state = BoardState(dice=dice)
    state.board = [Side.EMPTY] * (BOARD_SIZE + 1)
    for sq in white:
        state.board[sq] = Side.WHITE
    for sq in black:
        state.board[sq] = Side.BLACK
    state.white_out = PIECES_PER_SIDE - len(white)
    state.black_out = PIECES_PER_SIDE - len(black)
    state.white_turn = white_turn
    state.last_roll = roll
    state.special_conditions = dict(conditions or {})
    return state


def assert_conserved(state):
    assert state.pieces_on_board(Side.WHITE) + state.white_out == PIECES_PER_SIDE
    assert state.pieces_on_board(Side.BLACK) + state.black_out == PIECES_PER_SIDE
