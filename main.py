"""
Main script for console TicTacToe.

This script ties together:
- Console input (board size, player names, moves)
- Logic (board, move validation, win checking)
- The game loop

Run this script to play TicTacToe against a friend!
"""

import sys
import argparse
from typing import Callable, Optional, Sequence

from tictactoe.board import Board
from tictactoe.config import GameConfig
from tictactoe.console import BoardSizeError, ConsoleInput, check_board_size
from tictactoe.game import GameLoop
from tictactoe.game_state import GameStatus, Player, Symbol


class TicTacToeApp:
    """
    One console game from setup to result.

    Game flow:
    1. Board size and player names are taken from flags or prompted for
    2. X and O take turns entering "row col"
    3. The game ends on a win, a draw, or when a player types 'q'
    """

    def __init__(
        self,
        size: int,
        player_x: str,
        player_o: str,
        console: ConsoleInput,
        debug: bool = GameConfig.DEBUG_MODE
    ):
        """
        Args:
            size: Board size, already checked.
            player_x: Name of the X player (moves first).
            player_o: Name of the O player.
            console: Where moves come from.
            debug: Print line counters after each move.
        """
        self.console = console
        self.board = Board(size)
        self.players = [
            Player(player_x, Symbol.X),
            Player(player_o, Symbol.O),
        ]
        self.game = GameLoop(
            self.board,
            self.players,
            console.read_move,
            output=console.output,
            debug=debug
        )

    def start(self) -> GameStatus:
        """Play the game and show the result."""
        out = self.console.output
        out("\n" + "=" * 60)
        out(f"   TicTacToe {self.board.size}x{self.board.size}")
        out(f"   {self.players[0]}  vs  {self.players[1]}")
        out("   Enter moves as 'row col', 'q' to quit")
        out("=" * 60)

        status = self.game.play()
        self._show_game_result()
        return status

    def _show_game_result(self):
        """Show the final game result."""
        out = self.console.output
        out("=" * 60)
        out("   GAME OVER!")
        out("=" * 60)

        if self.game.status == GameStatus.WON:
            out(f"\n🏆 {self.game.winner} wins after {len(self.game.moves)} moves!")
        elif self.game.status == GameStatus.DRAWN:
            out("\n🤝 It's a draw! Good game!")
        else:
            out(f"\nGame stopped after {len(self.game.moves)} moves.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        help="Board size n for an n x n board (prompted for if omitted)"
    )
    parser.add_argument(
        "--player-x",
        help="Name of the X player, who moves first (prompted for if omitted)"
    )
    parser.add_argument(
        "--player-o",
        help="Name of the O player (prompted for if omitted)"
    )
    parser.add_argument(
        "--no-size-check",
        action="store_true",
        help=f"Allow board sizes outside {GameConfig.MIN_BOARD_SIZE}-{GameConfig.MAX_BOARD_SIZE}"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print line counters after every move"
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print
) -> int:
    """
    Main entry point.

    Returns:
        Process exit code: 0 when the game finished, 1 on a bad board size.
    """
    args = build_parser().parse_args(argv)
    console = ConsoleInput(input_fn=input_fn, output=output)
    validate = not args.no_size_check

    try:
        if args.size is not None:
            size = check_board_size(args.size, validate)
        else:
            size = console.read_board_size(validate)

        player_x = args.player_x or console.read_player_name(Symbol.X)
        player_o = args.player_o or console.read_player_name(Symbol.O)

        app = TicTacToeApp(
            size,
            player_x,
            player_o,
            console,
            debug=args.debug or GameConfig.DEBUG_MODE
        )
        app.start()
    except BoardSizeError as e:
        output(f"ERROR: {e}")
        return 1
    except KeyboardInterrupt:
        output("\n\nGame interrupted by user.")
    finally:
        output("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
