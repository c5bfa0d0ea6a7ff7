"""Shared board constants, the side enum and the move tuple."""

from enum import IntEnum
from typing import NamedTuple

BOARD_SIZE = 30
PIECES_PER_SIDE = 7

# destination index for a piece leaving the board
EXIT = 0
# special condition value: any roll may move the piece off the square
ANY_ROLL = -1

HOUSE_OF_REBIRTH = 15
HOUSE_OF_HAPPINESS = 26
HOUSE_OF_WATER = 27
HOUSE_OF_THREE_TRUTHS = 28
HOUSE_OF_RE_ATOUM = 29
HOUSE_OF_HORUS = 30


class Side(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2

    def opponent(self) -> "Side":
        if self == Side.WHITE:
            return Side.BLACK
        if self == Side.BLACK:
            return Side.WHITE
        return Side.EMPTY

    @property
    def symbol(self) -> str:
        return {Side.WHITE: "W", Side.BLACK: "B"}.get(self, ".")


class Move(NamedTuple):
    src: int
    dst: int

    @property
    def exits(self) -> bool:
        return self.dst == EXIT and self.src != 0


# no-op move used to hand the turn over when nothing is legal
PASS_MOVE = Move(0, 0)


class IllegalMoveError(ValueError):
    """Raised when a move is applied that the current roll does not allow."""

    def __init__(self, move, roll: int):
        self.move = Move(*move)
        self.roll = roll
        super().__init__(f"Illegal move {self.move.src}->{self.move.dst} for roll {roll}")
