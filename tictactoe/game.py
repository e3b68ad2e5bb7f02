"""
Game loop for console TicTacToe.
Alternates turns between two players until a win, a draw, or a quit.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from .board import Board
from .config import GameConfig
from .game_state import GameStatus, Move, MoveOutcome, Player, Symbol
from .move_validator import MoveValidator
from .win_checker import WinChecker

# Asks a player for (row, col); None means the player quit
MoveSource = Callable[[Player], Optional[Tuple[int, int]]]


class GameLoop:
    """
    Runs one game on one board.

    Game flow:
    1. Ask the active player for a move
    2. Place it on the board
    3. Invalid move -> same player tries again (not a turn)
    4. Win or draw -> game over, otherwise the other player moves
    """

    def __init__(
        self,
        board: Board,
        players: Sequence[Player],
        move_source: MoveSource,
        output: Callable[[str], None] = print,
        debug: bool = GameConfig.DEBUG_MODE
    ):
        """
        Args:
            board: The board to play on. The loop is its only writer.
            players: Exactly two players, one X and one O. X moves first.
            move_source: Called with the active player to get a move.
            output: Function used for all messages.
            debug: Print line counters after each accepted move.
        """
        if len(players) != 2:
            raise ValueError(f"TicTacToe needs exactly 2 players, got {len(players)}")
        if {p.symbol for p in players} != {Symbol.X, Symbol.O}:
            raise ValueError("One player must be X and the other O")

        self.board = board
        self.players: List[Player] = sorted(players, key=lambda p: p.symbol != Symbol.X)
        self._by_symbol = {p.symbol: p for p in self.players}
        self.move_source = move_source
        self.output = output
        self.debug = debug

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.status = GameStatus.AWAITING_MOVE
        self.winner: Optional[Player] = None
        self.moves: List[Move] = []
        self._current_symbol = Symbol.X

    @property
    def current_player(self) -> Player:
        """The player whose move is awaited."""
        return self._by_symbol[self._current_symbol]

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.AWAITING_MOVE

    def step(self) -> Optional[MoveOutcome]:
        """
        Handle one move request from the active player.

        Returns:
            The board's outcome for the move, or None if the player quit.
        """
        if self.is_over:
            raise RuntimeError("Game is already over!")

        player = self.current_player
        move = self.move_source(player)

        if move is None:
            self.status = GameStatus.QUIT
            self.output(f"\n{player.name} quit the game.")
            return None

        row, col = move
        outcome = self.board.place_move(row, col, player)

        if outcome == MoveOutcome.INVALID:
            result = self.validator.validate_move(self.board, row, col)
            self.output(f"Invalid move! {result.error_message} Try again.")
            return outcome

        self.moves.append(Move(
            player=player,
            row=row,
            col=col,
            move_number=len(self.moves) + 1
        ))
        self._show_board()

        if outcome == MoveOutcome.WIN:
            self.status = GameStatus.WON
            self.winner = player
            line = self.win_checker.get_winning_line(self.board)
            detail = f" (completed {line.describe()})" if line else ""
            self.output(f"{player.name} wins!{detail}")
        elif outcome == MoveOutcome.DRAW:
            self.status = GameStatus.DRAWN
            self.output("It's a draw!")
        else:
            self._current_symbol = self._current_symbol.opposite()

        return outcome

    def play(self) -> GameStatus:
        """
        Play until the game ends.

        Returns:
            The terminal status (WON, DRAWN or QUIT).
        """
        self._show_board()
        while not self.is_over:
            self.step()
        return self.status

    def _show_board(self):
        """Print the board, plus counters in debug mode."""
        self.output("\n" + self.board.render() + "\n")
        if self.debug:
            self.output(f"[debug] counters: {self.board.line_counters()}")
