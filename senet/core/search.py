import logging
import math
import time
from enum import Enum
from typing import List, Optional, Tuple

from senet.core.board import BoardState
from senet.core.dice import ROLL_PROBABILITIES
from senet.core.evaluator import Evaluator
from senet.core.types import PASS_MOVE, Move
from senet.core.utils import format_move, format_search_info

logger = logging.getLogger(__name__)

INF = math.inf


class NodeType(Enum):
    MAX = "max"        # White (computer) to move
    MIN = "min"        # Black (human) to move
    CHANCE = "chance"  # stick throw


class SearchEngine:
    """Expectiminimax over the stick throw.

    Depth is spent on the MAX/MIN -> CHANCE edge only; a chance node hands
    its own depth to the MAX/MIN node below it, so one unit of depth covers
    a move and the throw that follows.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = 3, debug: bool = False):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth
        self.debug = debug
        self.nodes = 0
        self.best_value: Optional[float] = None

    def score_moves(self, state: BoardState, depth: Optional[int] = None) -> List[Tuple[Move, float]]:
        """Value every legal root move. Resets the node counter."""
        depth = self.max_depth if depth is None else depth
        self.nodes = 0
        scored = []
        for move in state.get_possible_moves():
            child = state.copy()
            child.apply_move(move.src, move.dst, validate=False)
            value = self.expectiminimax(child, depth - 1, NodeType.CHANCE)
            scored.append((move, value))
            self._log(logging.DEBUG, "move [%s] value: %.2f", format_move(move), value)
        return scored

    def find_best_move(self, state: BoardState, depth: Optional[int] = None) -> Optional[Move]:
        """Best move for the side to move, or None when it has to pass."""
        start = time.time()
        best_move = None
        best_value = -INF
        scored = self.score_moves(state, depth)
        for move, value in scored:
            # strict comparison: the lowest source square wins ties
            if value > best_value:
                best_value = value
                best_move = move

        self.best_value = best_value if best_move is not None else None
        self._log(logging.DEBUG, "%s", format_search_info(
            self.max_depth if depth is None else depth,
            self.best_value, self.nodes, time.time() - start, best_move))
        self._log(logging.DEBUG, "nodes visited: %d", self.nodes)
        return best_move

    def get_nodes_visited(self) -> int:
        return self.nodes

    def expectiminimax(self, state: BoardState, depth: int, node_type: NodeType) -> float:
        self.nodes += 1

        if depth <= 0 or state.is_game_over():
            return self.evaluator.evaluate(state)

        if node_type is NodeType.MAX:
            return self._max_value(state, depth)
        if node_type is NodeType.MIN:
            return self._min_value(state, depth)
        return self._chance_value(state, depth)

    def _max_value(self, state: BoardState, depth: int) -> float:
        best = -INF
        for child in self._successors(state):
            best = max(best, self.expectiminimax(child, depth - 1, NodeType.CHANCE))
        return best

    def _min_value(self, state: BoardState, depth: int) -> float:
        best = INF
        for child in self._successors(state):
            best = min(best, self.expectiminimax(child, depth - 1, NodeType.CHANCE))
        return best

    def _chance_value(self, state: BoardState, depth: int) -> float:
        expected = 0.0
        next_type = NodeType.MAX if state.white_turn else NodeType.MIN
        for steps, prob in ROLL_PROBABILITIES:
            child = state.copy()
            child.last_roll = steps
            expected += prob * self.expectiminimax(child, depth, next_type)
        return expected

    def _successors(self, state: BoardState):
        moves = state.get_possible_moves()
        if not moves:
            # a blocked side passes, same as at the table
            moves = [PASS_MOVE]
        for move in moves:
            child = state.copy()
            child.apply_move(move.src, move.dst, validate=False)
            yield child

    def _log(self, level: int, msg: str, *args):
        # debug mode promotes the search trace to INFO
        logger.log(logging.INFO if self.debug else level, msg, *args)
