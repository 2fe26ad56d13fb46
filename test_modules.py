"""
Smoke test script for the TicTacToe modules.
Run this to verify all components work before playing.
"""

import sys


def test_logic_config():
    """Test logic configuration."""
    from logic.config import LogicConfig

    assert LogicConfig.CELL_COUNT == 9
    assert LogicConfig.CENTER == 4
    assert LogicConfig.PERFECT_LEVEL == 4


def test_game_logic():
    """Test game logic components together."""
    from logic.game_state import GameState, Mark
    from logic.move_validator import MoveValidator
    from logic.win_checker import WinChecker
    from logic.ai_player import AIConfig, AIPlayer

    game = GameState(human_mark=Mark.NOUGHT)
    ai = AIPlayer(AIConfig.against(Mark.NOUGHT, 4))

    # AI opens
    cell = ai.next_move(game.board)
    assert game.make_move(cell)

    validator = MoveValidator()
    reply = game.board.available_cells()[0]
    assert validator.validate_move(game, reply).is_valid
    assert game.make_move(reply)

    checker = WinChecker()
    checker.update_game_state(game)
    assert not game.is_game_over
    assert checker.check_winner(game.board) is None


def test_console_config():
    """Test console configuration."""
    from console.config import ConsoleConfig

    assert ConsoleConfig.STARTING_DIFFICULTY == 0
    assert "1-9" in ConsoleConfig.MOVE_PROMPT
    assert ConsoleConfig.MOVE_REMINDER.splitlines()[:3] == ["7 8 9", "4 5 6", "1 2 3"]


def test_console_game():
    """Test one console game against a random AI, always playing the first free cell."""
    import random
    from console.game import ConsoleGame
    from logic.game_state import Mark

    output = []
    game = ConsoleGame(
        human_mark=Mark.CROSS,
        difficulty=0,
        rng=random.Random(1),
        input_func=lambda: str(game.game_state.board.available_cells()[0]),
        output_func=output.append
    )
    outcome = game.run()

    assert game.game_state.is_game_over
    assert game.game_state.outcome() == outcome


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Module Tests")
    print("=" * 60)

    tests = {
        "Logic Config": test_logic_config,
        "Game Logic": test_game_logic,
        "Console Config": test_console_config,
        "Console Game": test_console_game,
    }

    results = {}
    for name, test in tests.items():
        print(f"\n=== Testing {name} ===")
        try:
            test()
            results[name] = True
            print(f"  ✓ {name} OK")
        except Exception as e:
            results[name] = False
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()

    print("\n" + "=" * 60)
    print("   Test Results")
    print("=" * 60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
