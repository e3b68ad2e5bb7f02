"""
Test script for TicTacToe modules.
Run this to verify all components work before playing.

Usage:
    python test_modules.py
"""

import sys


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from tictactoe.config import GameConfig

    print(f"  Board sizes: {GameConfig.MIN_BOARD_SIZE}-{GameConfig.MAX_BOARD_SIZE}")
    print(f"  Default names: {GameConfig.DEFAULT_PLAYER_NAMES}")
    assert GameConfig.is_valid_board_size(GameConfig.DEFAULT_BOARD_SIZE)
    assert not GameConfig.is_valid_board_size(GameConfig.MAX_BOARD_SIZE + 1)
    print("  ✓ Game config OK")


def test_game_logic():
    """Test board, validator and win checker together."""
    print("\n=== Testing Game Logic ===")
    from tictactoe.board import Board
    from tictactoe.game_state import MoveOutcome, Player, Symbol
    from tictactoe.move_validator import MoveValidator
    from tictactoe.win_checker import WinChecker

    board = Board(3)
    x = Player("Player 1", Symbol.X)
    o = Player("Player 2", Symbol.O)

    outcome = board.place_move(1, 1, x)
    print(f"  Move (1,1): {outcome.value}")
    assert outcome == MoveOutcome.CONTINUE

    result = MoveValidator().validate_move(board, 1, 1)
    print(f"  Validate (1,1) again: valid={result.is_valid}")
    assert not result.is_valid

    for row, col, player in [(0, 0, o), (0, 2, x), (2, 2, o), (2, 0, x)]:
        outcome = board.place_move(row, col, player)

    print(f"  Last move (2,0): {outcome.value}")
    assert outcome == MoveOutcome.WIN

    line = WinChecker().get_winning_line(board)
    print(f"  Winning line: {line.describe()}")
    assert line.symbol == Symbol.X
    print("  ✓ Game logic OK")


def test_game_loop():
    """Test the game loop with scripted moves."""
    print("\n=== Testing Game Loop ===")
    from tictactoe.board import Board
    from tictactoe.game import GameLoop
    from tictactoe.game_state import GameStatus, Player, Symbol

    moves = iter([(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    game = GameLoop(
        Board(3),
        [Player("Player 1", Symbol.X), Player("Player 2", Symbol.O)],
        lambda player: next(moves, None),
        output=lambda message: None
    )

    status = game.play()
    print(f"  Status: {status.value}, winner: {game.winner}")
    assert status == GameStatus.WON
    print("  ✓ Game loop OK")


def test_summary_counts_module_checks(capsys):
    """The runner's summary reports every module check."""
    assert run_all_tests() == 0
    out = capsys.readouterr().out
    assert "3/3 module checks passed" in out
    assert "failing:" not in out


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   Console TicTacToe - module checks")
    print("=" * 60)

    tests = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "Game Loop": test_game_loop,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()
            results[name] = False

    failed = [name for name, passed in results.items() if not passed]

    print("\n" + "-" * 60)
    print(f"   {len(results) - len(failed)}/{len(results)} module checks passed")
    for name in failed:
        print(f"   failing: {name}")
    print("-" * 60)

    if failed:
        print("\nFix the failing modules before starting a game.\n")
        return 1
    print("\nBoard, rules and game loop look fine. Start a game with: python main.py\n")
    return 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
