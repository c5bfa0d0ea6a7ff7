"""Text game: the human plays Black against the computer as White."""

import argparse
import logging
import time

from senet.config import CONFIG
from senet.core.board import BoardState
from senet.core.types import EXIT, Side
from senet.core.utils import format_move
from senet.main import Engine

logger = logging.getLogger(__name__)

HOUSES = {15, 26, 27, 28, 29, 30}

RULES = """
Rules:
  * Each side has 7 pieces (White: computer, Black: you)
  * Four sticks are thrown; 0 flat sides -> 5 steps, 1-4 -> that many
  * Bear all of your pieces off first to win

Houses:
  15: rebirth       26: happiness     27: water
  28: three truths  29: Re-Atoum      30: Horus
"""


def _square(state: BoardState, sq: int) -> str:
    symbol = Side(state.board[sq]).symbol
    if sq in HOUSES:
        return f"[{symbol}{sq}]"
    return f" {symbol}{sq} "


def render_board(state: BoardState) -> str:
    """Three rows in the order the pieces travel: 1->10, 20<-11, 21->30."""
    rows = [
        ("Row 1: ", range(1, 11)),
        ("Row 2: ", range(20, 10, -1)),
        ("Row 3: ", range(21, 31)),
    ]
    lines = ["", "=" * 50, "            Senet board", "=" * 50]
    for name, squares in rows:
        lines.append(name + " ".join(_square(state, sq) for sq in squares))
    lines.append("")
    lines.append(f"Turn: {'White' if state.white_turn else 'Black'}")
    lines.append(f"Roll: {state.last_roll}")
    lines.append(f"Borne off: W{state.white_out} B{state.black_out}")
    lines.append("=" * 50)
    return "\n".join(lines)


def ask_settings(engine: Engine):
    raw = input(f"Search depth (3-5 recommended) [{engine.search.max_depth}]: ").strip()
    if raw:
        try:
            engine.set_search_depth(int(raw))
        except ValueError:
            print(f"Invalid depth, keeping {engine.search.max_depth}.")
    answer = input("Enable debug mode? (y/n): ").strip().lower()
    engine.set_debug(answer.startswith("y"))


def computer_turn(engine: Engine, delay_ms: int = 0):
    print("\nComputer's turn (White)...")
    roll, move = engine.play_computer_turn()
    print(f"Roll: {roll} steps")
    if move is None:
        print("No possible moves. Turn passes.")
    else:
        print(f"Computer moves {format_move(move)}")
        if move.dst == EXIT:
            print("The computer bore off a piece!")
    if delay_ms > 0:
        time.sleep(delay_ms / 1000)


def player_turn(engine: Engine) -> bool:
    """Play the human's turn. Returns False when the player quits."""
    print("\nYour turn (Black)...")
    roll = engine.roll_dice()
    print(f"Your roll: {roll} steps")

    moves = engine.get_possible_moves()
    if not moves:
        print("No possible moves. Turn passes.")
        engine.pass_turn()
        return True

    print("Possible moves:")
    for move in moves:
        print(f"  {format_move(move)}")

    by_source = {move.src: move for move in moves}
    while True:
        raw = input("Source square (0 quits): ").strip()
        if not raw.isdigit():
            print("Enter a square number.")
            continue
        src = int(raw)
        if src == 0:
            print("Leaving the game...")
            return False
        move = by_source.get(src)
        if move is None:
            print("Invalid move, try again.")
            continue
        engine.apply_move(move.src, move.dst)
        if move.dst == EXIT:
            print("You bore off a piece!")
        return True


def end_game(engine: Engine):
    print("\n" + "*" * 50)
    print("            Game over!")
    print("*" * 50)
    print(render_board(engine.state))
    if engine.get_winner() == Side.WHITE:
        print("The computer wins!")
    else:
        print("You win!")
    print("\nSearch statistics:")
    print(f"Nodes visited: {engine.get_nodes_visited()}")


def run(engine: Engine, delay_ms: int = 0) -> Side:
    while not engine.is_game_over():
        print(render_board(engine.state))
        if engine.get_current_player() == Side.WHITE:
            computer_turn(engine, delay_ms)
        elif not player_turn(engine):
            return Side.EMPTY
    end_game(engine)
    return engine.get_winner()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Senet against the computer.")
    parser.add_argument("--depth", type=int, default=None, help="search depth, skips the prompt")
    parser.add_argument("--debug", action="store_true", help="log search values")
    parser.add_argument("--seed", type=int, default=None, help="seed for the stick throws")
    parser.add_argument("--no-delay", action="store_true", help="no pause after computer moves")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, CONFIG.log_level, logging.INFO),
                        format="%(levelname)s %(name)s: %(message)s")

    engine = Engine(seed=args.seed)
    print("=" * 60)
    print(f"           {CONFIG.ui.engine_name}")
    print("=" * 60)
    print(RULES)
    if args.depth is None:
        ask_settings(engine)
    else:
        engine.set_search_depth(args.depth)
        engine.set_debug(args.debug)
    print("\nLet's play!")

    run(engine, 0 if args.no_delay else CONFIG.ui.turn_delay_ms)


if __name__ == "__main__":
    main()
