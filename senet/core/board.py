"""Senet board state: layout, move legality, house effects and duplication."""

import logging
from typing import Dict, List, Optional

from senet.core.dice import StickDice
from senet.core.evaluator import Evaluator
from senet.core.types import (
    ANY_ROLL,
    BOARD_SIZE,
    EXIT,
    HOUSE_OF_HAPPINESS,
    HOUSE_OF_HORUS,
    HOUSE_OF_RE_ATOUM,
    HOUSE_OF_REBIRTH,
    HOUSE_OF_THREE_TRUTHS,
    HOUSE_OF_WATER,
    PASS_MOVE,
    PIECES_PER_SIDE,
    IllegalMoveError,
    Move,
    Side,
)

logger = logging.getLogger(__name__)

_default_evaluator = Evaluator()


class BoardState:
    def __init__(self, dice: Optional[StickDice] = None, evaluator: Optional[Evaluator] = None):
        """Create the opening position: squares 1-14 alternate White/Black."""
        self.board: List[int] = [Side.EMPTY] * (BOARD_SIZE + 1)  # index 0 unused
        for sq in range(1, 15):
            self.board[sq] = Side.WHITE if sq % 2 == 1 else Side.BLACK
        self.white_turn = True
        self.last_roll = 0
        self.white_out = 0
        self.black_out = 0
        # square -> roll required to leave it (ANY_ROLL for any)
        self.special_conditions: Dict[int, int] = {}
        self.dice = dice or StickDice()
        self.evaluator = evaluator or _default_evaluator

    def copy(self) -> "BoardState":
        """Independent duplicate. The dice are shared, all game data is not."""
        clone = BoardState.__new__(BoardState)
        clone.board = list(self.board)
        clone.white_turn = self.white_turn
        clone.last_roll = self.last_roll
        clone.white_out = self.white_out
        clone.black_out = self.black_out
        clone.special_conditions = dict(self.special_conditions)
        clone.dice = self.dice
        clone.evaluator = self.evaluator
        return clone

    duplicate = copy

    # ── turn state ────────────────────────────────────────────────────────

    def roll_dice(self) -> int:
        self.last_roll = self.dice.roll()
        return self.last_roll

    def get_current_player(self) -> Side:
        return Side.WHITE if self.white_turn else Side.BLACK

    def get_opponent(self) -> Side:
        return Side.BLACK if self.white_turn else Side.WHITE

    def borne_off(self, side: Side) -> int:
        return self.white_out if side == Side.WHITE else self.black_out

    def pieces_on_board(self, side: Side) -> int:
        return sum(1 for sq in range(1, BOARD_SIZE + 1) if self.board[sq] == side)

    # ── moves ─────────────────────────────────────────────────────────────

    def get_possible_moves(self, roll: Optional[int] = None) -> List[Move]:
        """Legal moves for the side to move, ascending by source square."""
        if roll is None:
            roll = self.last_roll
        if roll <= 0:
            return []
        player = self.get_current_player()
        moves = []
        for src in range(1, BOARD_SIZE + 1):
            if self.board[src] == player and self.can_move(src, roll):
                dst = src + roll
                if dst > BOARD_SIZE:
                    dst = EXIT
                moves.append(Move(src, dst))
        return moves

    def can_move(self, src: int, roll: int) -> bool:
        # A house condition on the source square decides alone
        required = self.special_conditions.get(src)
        if required is not None:
            return required == ANY_ROLL or required == roll

        dst = src + roll

        # Nothing may jump past the house of happiness
        if src < HOUSE_OF_HAPPINESS and dst > HOUSE_OF_HAPPINESS:
            return False

        if dst > BOARD_SIZE:
            return self.can_exit(src, roll)

        return self.board[dst] != self.get_current_player()

    @staticmethod
    def can_exit(src: int, roll: int) -> bool:
        # overshooting the last square is allowed
        return roll >= (BOARD_SIZE + 1 - src)

    def apply_move(self, src: int, dst: int, validate: bool = True):
        """Play src->dst for the side to move and hand over the turn.

        (0, 0) is the pass move. With ``validate`` the move must be one of
        get_possible_moves(); IllegalMoveError is raised otherwise and the
        state is left untouched.
        """
        if (src, dst) == PASS_MOVE:
            self.white_turn = not self.white_turn
            return

        if validate and Move(src, dst) not in self.get_possible_moves():
            raise IllegalMoveError((src, dst), self.last_roll)

        player = self.board[src]

        if dst == EXIT:
            self.board[src] = Side.EMPTY
            if player == Side.WHITE:
                self.white_out += 1
            else:
                self.black_out += 1
        else:
            occupant = self.board[dst]
            if occupant != Side.EMPTY and occupant != player:
                # capture by displacement: the pieces trade places
                self.board[dst] = player
                self.board[src] = occupant
            else:
                self.board[dst] = player
                self.board[src] = Side.EMPTY
            self._check_special_square(dst, player)

        self.white_turn = not self.white_turn

    def pass_turn(self):
        self.apply_move(*PASS_MOVE)

    # ── houses ────────────────────────────────────────────────────────────

    def _check_special_square(self, square: int, player: int):
        if square == HOUSE_OF_REBIRTH:
            return
        if square == HOUSE_OF_WATER:
            self._move_to_rebirth(square, player)
        elif square == HOUSE_OF_THREE_TRUTHS:
            self.special_conditions[square] = 3
        elif square == HOUSE_OF_RE_ATOUM:
            self.special_conditions[square] = 2
        elif square == HOUSE_OF_HORUS:
            self.special_conditions[square] = ANY_ROLL

    def _move_to_rebirth(self, from_square: int, player: int):
        self.board[from_square] = Side.EMPTY
        for sq in range(HOUSE_OF_REBIRTH, BOARD_SIZE + 1):
            if self.board[sq] == Side.EMPTY:
                self.board[sq] = player
                return
        # Unreachable with 14 pieces, kept as the rules leave it
        logger.warning("No free square from %d for %s piece, piece removed",
                       HOUSE_OF_REBIRTH, Side(player).name)

    # ── evaluation / terminal ─────────────────────────────────────────────

    def evaluate(self) -> float:
        return self.evaluator.evaluate(self)

    def is_game_over(self) -> bool:
        return self.white_out == PIECES_PER_SIDE or self.black_out == PIECES_PER_SIDE

    def get_winner(self) -> Side:
        if self.white_out == PIECES_PER_SIDE:
            return Side.WHITE
        if self.black_out == PIECES_PER_SIDE:
            return Side.BLACK
        return Side.EMPTY

    def __repr__(self):
        cells = "".join(Side(c).symbol for c in self.board[1:])
        turn = "W" if self.white_turn else "B"
        return (f"BoardState({cells} turn={turn} roll={self.last_roll} "
                f"out={self.white_out}/{self.black_out})")
