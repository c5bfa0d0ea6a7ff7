from senet.config import CONFIG
from senet.core.types import BOARD_SIZE, Side


class Evaluator:
    def __init__(self, cfg=None):
        self.cfg = cfg or CONFIG.eval

    def evaluate(self, state) -> float:
        """Score the position, positive favouring the side to move."""
        board = state.board

        # Borne off pieces dominate everything else
        score = float((state.white_out - state.black_out) * self.cfg.borne_off_weight)

        # Progress: each piece is worth the index of its square
        for sq in range(1, BOARD_SIZE + 1):
            if board[sq] == Side.WHITE:
                score += sq
            elif board[sq] == Side.BLACK:
                score -= sq

        # Holding the houses
        for sq in self.cfg.special_squares:
            if board[sq] == Side.WHITE:
                score += self.cfg.special_square_bonus
            elif board[sq] == Side.BLACK:
                score -= self.cfg.special_square_bonus

        if not state.white_turn:
            return -score
        return score
