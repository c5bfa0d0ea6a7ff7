# senet/analyzer.py
from typing import Any, Dict, Iterable, List, Optional, Tuple

from senet.config import CONFIG
from senet.core.board import BoardState
from senet.core.types import PASS_MOVE, IllegalMoveError, Move
from senet.core.utils import format_move


class Analyzer:
    def __init__(self, search_engine, cfg=None):
        self.search_engine = search_engine
        self.cfg = cfg or CONFIG.analyzer

    def _label(self, delta: float, is_best: bool) -> str:
        if is_best or delta <= self.cfg.TH_BEST:
            return "Best move"
        if delta <= self.cfg.TH_EXCELLENT:
            return "Excellent"
        if delta <= self.cfg.TH_GOOD:
            return "Good"
        if delta <= self.cfg.TH_INACCURACY:
            return "Inaccuracy"
        if delta <= self.cfg.TH_MISTAKE:
            return "Mistake"
        return "Blunder"

    def classify_move(self, state: BoardState, move) -> Dict[str, Any]:
        """
        Grade one move against the search's own ranking of the position.
        - state: position BEFORE the move, with the roll already thrown
          (left unchanged).
        - move: (src, dst) the player chose; must be legal for the roll.
        Returns a dict with label, values and delta (best minus chosen, >= 0).
        """
        move = Move(*move)
        scored = self.search_engine.score_moves(state)
        if not scored:
            if move != PASS_MOVE:
                raise IllegalMoveError(move, state.last_roll)
            return {
                "move": format_move(move),
                "value": None,
                "best_move": format_move(None),
                "best_value": None,
                "delta_vs_best": 0.0,
                "label": "Forced pass",
                "player": state.get_current_player().name,
            }

        values = dict(scored)
        if move not in values:
            raise IllegalMoveError(move, state.last_roll)

        # first of the maxima, the same pick find_best_move makes
        best_move, best_value = scored[0]
        for m, v in scored[1:]:
            if v > best_value:
                best_move, best_value = m, v

        value = values[move]
        delta = best_value - value
        return {
            "move": format_move(move),
            "value": value,
            "best_move": format_move(best_move),
            "best_value": best_value,
            "delta_vs_best": delta,
            "label": self._label(delta, move == best_move),
            "player": state.get_current_player().name,
        }

    def analyze_game(self, turns: Iterable[Tuple[int, Optional[Tuple[int, int]]]]) -> List[Dict[str, Any]]:
        """
        Replay (roll, move) turns from the opening and grade each one.
        A move of None stands for a pass.
        """
        state = BoardState()
        report = []
        for roll, move in turns:
            state.last_roll = roll
            move = PASS_MOVE if move is None else Move(*move)
            info = self.classify_move(state, move)
            info["roll"] = roll
            report.append(info)
            state.apply_move(move.src, move.dst)
        return report
