import logging
from typing import List, Optional, Tuple

from senet.config import CONFIG
from senet.core.board import BoardState
from senet.core.dice import StickDice
from senet.core.evaluator import Evaluator
from senet.core.search import SearchEngine
from senet.core.types import Move, Side

logger = logging.getLogger(__name__)


class Engine:
    """One live game plus the computer opponent searching it."""

    def __init__(self, depth: Optional[int] = None, debug: Optional[bool] = None, seed: Optional[int] = None):
        self.dice = StickDice(seed=CONFIG.seed if seed is None else seed)
        self.evaluator = Evaluator()
        self.state = BoardState(dice=self.dice, evaluator=self.evaluator)
        self.search = SearchEngine(self.evaluator)
        self.set_search_depth(CONFIG.search.depth if depth is None else depth)
        self.set_debug(CONFIG.search.debug if debug is None else debug)

    def reset(self, seed: Optional[int] = None):
        if seed is not None:
            self.dice.seed(seed)
        self.state = BoardState(dice=self.dice, evaluator=self.evaluator)
        self.search.nodes = 0

    def set_search_depth(self, depth: int):
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise ValueError(f"search depth must be a positive integer, got {depth!r}")
        self.search.max_depth = depth

    def set_debug(self, debug: bool):
        self.search.debug = bool(debug)

    def roll_dice(self) -> int:
        return self.state.roll_dice()

    def get_possible_moves(self) -> List[Move]:
        return self.state.get_possible_moves()

    def apply_move(self, src: int, dst: int):
        self.state.apply_move(src, dst)

    def pass_turn(self):
        self.state.pass_turn()

    def find_best_move(self) -> Optional[Move]:
        return self.search.find_best_move(self.state)

    def play_computer_turn(self) -> Tuple[int, Optional[Move]]:
        """Throw, search and play for the side to move. None means it passed."""
        roll = self.roll_dice()
        move = self.find_best_move()
        if move is None:
            logger.debug("no legal move for %s with roll %d, passing",
                         self.state.get_current_player().name, roll)
            self.pass_turn()
        else:
            self.apply_move(move.src, move.dst)
        return roll, move

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def get_winner(self) -> Side:
        return self.state.get_winner()

    def get_current_player(self) -> Side:
        return self.state.get_current_player()

    def get_nodes_visited(self) -> int:
        return self.search.get_nodes_visited()
