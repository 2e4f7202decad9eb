"""
Command-line entry point for text-mode Minesweeper.

Usage:
    sweeper [--debug] play SIZE [--mines N] [--seed S]
    sweeper [--debug] watch SIZE [--games G] [--delay D] [--seed S]
"""
import argparse
import logging
import sys
import time
from typing import Iterator, List, Optional, TextIO

from .agents import RandomAgent
from .board import BoardConfig
from .engine import Game, GameState, MoveResult
from .environment import MinesweeperEnv
from .errors import MinesweeperError
from .render import render_board

logger = logging.getLogger(__name__)

MIN_SIZE = 5
MAX_SIZE = 99

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


# ============================================================================
# Input Handling
# ============================================================================

def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens, reading a line at a time."""
    for line in iter(stream.readline, ""):
        yield from line.split()


def _read_coordinate(tokens: Iterator[str], size: int) -> Optional[int]:
    """
    Read one 1-indexed coordinate.

    Returns:
        The coordinate, or None when input ended, is not a number
        or falls outside [1, size] (0 included).
    """
    token = next(tokens, None)
    if token is None:
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if value <= 0 or value > size:
        return None
    return value


def parse_size(value: str) -> Optional[int]:
    """Parse a board size, returning None unless it is in range."""
    try:
        size = int(value)
    except ValueError:
        return None
    if size < MIN_SIZE or size > MAX_SIZE:
        return None
    return size


# ============================================================================
# Interactive Session
# ============================================================================

def play_session(
    game: Game,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> GameState:
    """
    Run the interactive prompt loop until the game ends or the player quits.

    Args:
        game: Game to play.
        stdin: Source of row/column input.
        stdout: Destination of board renders and messages.

    Returns:
        Final game state (PLAYING if the player quit).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    size = game.board.size
    tokens = read_tokens(stdin)

    while True:
        print(render_board(game.board, hidden=True), file=stdout)
        print(
            f"\nPick a row (1-{size}) and column (1-{size}) to play!\n"
            "Enter 0 to exit: ",
            end="",
            file=stdout,
        )
        stdout.flush()

        row = _read_coordinate(tokens, size)
        col = _read_coordinate(tokens, size) if row is not None else None
        if row is None or col is None:
            print("\nThanks for playing!", file=stdout)
            break

        print(f"Playing ({row}, {col})...\n", file=stdout)
        result = game.play_move(row - 1, col - 1)

        if result is MoveResult.HIT_MINE:
            print(render_board(game.board, hidden=False), file=stdout)
            print("\nBOOM! You hit a mine!", file=stdout)
            break
        if game.is_won:
            print(render_board(game.board, hidden=False), file=stdout)
            print("\nYou Win!", file=stdout)
            break

    logger.debug(
        "Session ended in state %s after %d moves", game.state.name, game.moves
    )
    return game.state


# ============================================================================
# Commands
# ============================================================================

def _usage_error(stdout: TextIO) -> int:
    print(f"Please enter a valid row size between {MIN_SIZE}-{MAX_SIZE}", file=stdout)
    print("Ex: sweeper play 10", file=stdout)
    return EXIT_FAILURE


def play(args: argparse.Namespace) -> int:
    """Play an interactive game."""
    size = parse_size(args.size)
    if size is None:
        return _usage_error(sys.stdout)

    try:
        game = Game.new(size, args.mines, seed=args.seed)
    except MinesweeperError as exc:
        print(f"Cannot start game: {exc}")
        return EXIT_FAILURE

    logger.debug("Row size: %d", size)
    play_session(game)
    return EXIT_SUCCESS


def watch(args: argparse.Namespace) -> int:
    """Watch the random agent play."""
    size = parse_size(args.size)
    if size is None:
        return _usage_error(sys.stdout)

    try:
        config = BoardConfig(size, args.mines)
    except MinesweeperError as exc:
        print(f"Cannot start game: {exc}")
        return EXIT_FAILURE

    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(size, seed=args.seed)
    wins = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        observation, _ = env.reset(seed=seed)
        agent.reset()
        done = False
        step = 0

        while not done:
            action = agent.select_action(observation, env.get_action_mask())
            row, col = agent.action_to_position(action)
            observation, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Last move: ({row + 1}, {col + 1})\n")
            print(env.render())
            if args.delay > 0:
                time.sleep(args.delay)

        if info["game_state"] == GameState.WON.name:
            wins += 1
            print("\n*** WIN! ***\n")
        else:
            print("\n*** LOST (hit mine) ***\n")

    print(f"=== Final: {wins}/{args.games} wins ===")
    return EXIT_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sweeper", description="Text-mode Minesweeper"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    play_parser.add_argument("size", help=f"Board size ({MIN_SIZE}-{MAX_SIZE})")
    play_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines (default: 10%% of cells)"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    watch_parser = subparsers.add_parser("watch", help="Watch a random agent play")
    watch_parser.add_argument("size", help=f"Board size ({MIN_SIZE}-{MAX_SIZE})")
    watch_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines (default: 10%% of cells)"
    )
    watch_parser.add_argument(
        "--games", type=int, default=1, help="Number of games"
    )
    watch_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )
    watch_parser.add_argument(
        "--seed", type=int, default=None, help="Base seed for boards and agent"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "watch":
        return watch(args)

    parser.print_help()
    return EXIT_FAILURE
