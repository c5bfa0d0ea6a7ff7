from typing import Optional

from senet.core.types import EXIT, Move


def format_move(move: Optional[Move]) -> str:
    if move is None:
        return "-"
    if move.src == 0 and move.dst == 0:
        return "pass"
    dst = "off" if move.dst == EXIT else str(move.dst)
    return f"{move.src}->{dst}"


def format_search_info(depth, value, nodes, elapsed, best_move) -> str:
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    value_str = f"{value:.2f}" if value is not None else "none"
    return (f"info depth {depth} value {value_str} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} move {format_move(best_move)}")
