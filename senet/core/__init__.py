"""Core engine components: board state, stick dice, evaluator and search."""

from .types import Side, Move, IllegalMoveError, PASS_MOVE
from .dice import StickDice, ROLL_PROBABILITIES
from .board import BoardState
from .evaluator import Evaluator
from .search import SearchEngine, NodeType
