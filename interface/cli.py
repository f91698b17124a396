import argparse
import logging
import sys
from typing import List, Optional

from ttt_engine.config import CONFIG
from ttt_engine.core.board import Board, Player
from ttt_engine.main import Engine, make_search, play
from ttt_engine.validation import InvalidPositionError, validate_position

logger = logging.getLogger(__name__)


def parse_cells(text: str) -> List[int]:
    """Parse "1,5,9" (or an empty string) into a list of cells."""
    text = text.strip()
    if not text:
        return []
    try:
        return [int(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated cells, got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-engine", description="Unbeatable tic-tac-toe engine")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    p.add_argument("--seed", type=int, default=None, help="Seed for the opening move")
    # --seed after the subcommand too; an absent one must not reset the top-level value
    seeded = argparse.ArgumentParser(add_help=False)
    seeded.add_argument("--seed", type=int, default=argparse.SUPPRESS, help="Seed for the opening move")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_move = sub.add_parser("move", parents=[seeded], help="Print the agent's next move for a position")
    p_move.add_argument("--agent", type=parse_cells, default=[], help='Agent cells, e.g. "1,2"')
    p_move.add_argument("--opponent", type=parse_cells, default=[], help='Opponent cells, e.g. "4,5"')
    p_move.add_argument("--agent-first", action="store_true", help="The agent made the first move")

    p_game = sub.add_parser("game", parents=[seeded], help="Play a game against the agent")
    p_game.add_argument("--play-as", choices=["X", "O"], default="X",
                        help="Your mark; X moves first, so O lets the agent open")
    return p


def run_move(args) -> int:
    try:
        agent, opponent = validate_position(args.agent, args.opponent)
    except InvalidPositionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    logger.debug("Position agent=%s opponent=%s agent_first=%s", agent, opponent, args.agent_first)
    board = Board(agent, opponent, args.agent_first)
    if board.agent_has_won() or board.opponent_has_won():
        winner = "agent" if board.agent_has_won() else "opponent"
        print(f"Game is already over: {winner} won")
        return 0
    move = play(agent, opponent, args.agent_first, search=make_search(args.seed))
    print(move)
    return 0


def read_human_move(game: Engine) -> int:
    while True:
        try:
            cell = int(input(f"Play {game.opponent_mark} at [1-9]: "))
        except ValueError:
            print("Please type a number 1..9.")
            continue
        if game.make_move(cell):
            return cell
        print("Illegal move. Try again.")


def run_game(args) -> int:
    game = Engine(agent_moves_first=(args.play_as == "O"), search=make_search(args.seed))
    print("Index map:\n1|2|3\n4|5|6\n7|8|9\n")

    while not game.is_over():
        if game.board.current_player() is Player.AGENT:
            cell = game.agent_move()
            print(f"Engine plays: {cell}")
        else:
            print(game.render())
            try:
                read_human_move(game)
            except (EOFError, KeyboardInterrupt):
                print("\nGame aborted.")
                return 1

    print(game.render())
    print(game.result())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else CONFIG.log_level,
                        format="[%(levelname)s] %(name)s: %(message)s")
    if args.cmd == "move":
        return run_move(args)
    return run_game(args)


if __name__ == "__main__":
    sys.exit(main())
